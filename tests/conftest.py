"""
Pytest fixtures for the warranty kernel test suite.

Provides:
- Structured logging setup and capture
- The canonical dishwasher warranty used throughout the tests
"""

import json
import logging
from datetime import date
from decimal import Decimal
from io import StringIO

import pytest

from warranty_kernel.domain.contract import Contract
from warranty_kernel.domain.values import Claim, Product, TermsAndConditions
from warranty_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)


PURCHASE_DATE = date(2010, 5, 8)
COVERAGE_START = date(2010, 5, 8)
COVERAGE_END = date(2013, 5, 8)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG, handler=logging.NullHandler())
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture warranty_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, contract):
            contract.status = "ACTIVE"
            logs = captured_logs()
            assert any(r["message"] == "contract_status_changed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("warranty_kernel")
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def product() -> Product:
    return Product("dishwasher", "OEUOEU23", "Whirlpool", "7DP840CWDB0")


@pytest.fixture
def terms() -> TermsAndConditions:
    return TermsAndConditions(PURCHASE_DATE, COVERAGE_START, COVERAGE_END, 80)


@pytest.fixture
def contract(product, terms) -> Contract:
    return Contract(Decimal("100.0"), product, terms)


@pytest.fixture
def active_contract(contract) -> Contract:
    contract.status = "ACTIVE"
    return contract


@pytest.fixture
def make_claim():
    """Factory for claims, filed 2010-10-01 unless a date is given."""

    def _make(amount, date_filed: date = date(2010, 10, 1)) -> Claim:
        return Claim(Decimal(str(amount)), date_filed)

    return _make
