"""
Tests for structured JSON logging.

Verifies:
- One JSON object per record with the mandatory envelope
- LogContext propagation and restoration
- Structured exception fields from typed kernel errors
- Idempotent configuration
"""

import json
import logging
import sys
from datetime import date
from decimal import Decimal
from io import StringIO
from uuid import uuid4

from warranty_kernel.exceptions import ClaimExceedsLiabilityError
from warranty_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
)


def _format(record, **extra):
    for key, val in extra.items():
        setattr(record, key, val)
    return json.loads(StructuredFormatter().format(record))


def _record(msg="event_name", exc_info=None):
    return logging.LogRecord(
        "warranty_kernel.test", logging.INFO, __file__, 1, msg, (), exc_info
    )


class TestStructuredFormatter:

    def test_envelope(self):
        payload = _format(_record())
        assert payload["message"] == "event_name"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "warranty_kernel.test"
        assert "ts" in payload

    def test_extra_values_encoded(self):
        contract_id = uuid4()
        payload = _format(
            _record(),
            contract_id=contract_id,
            amount=Decimal("70.00"),
            date_filed=date(2010, 10, 1),
        )
        assert payload["contract_id"] == str(contract_id)
        assert payload["amount"] == "70.00"
        assert payload["date_filed"] == "2010-10-01"

    def test_context_fields_merged(self):
        with LogContext.bind(contract_id="c-1", actor_id="clerk"):
            payload = _format(_record())
        assert payload["contract_id"] == "c-1"
        assert payload["actor_id"] == "clerk"

    def test_typed_exception_fields(self):
        contract_id = uuid4()
        try:
            raise ClaimExceedsLiabilityError(contract_id, Decimal("90"), Decimal("80"))
        except ClaimExceedsLiabilityError:
            payload = _format(_record(exc_info=sys.exc_info()))

        assert payload["exc_type"] == "ClaimExceedsLiabilityError"
        assert payload["exc_code"] == "CLAIM_EXCEEDS_LIABILITY"
        assert payload["exc_contract_id"] == str(contract_id)
        assert payload["exc_limit_of_liability"] == "80"
        assert "traceback" in payload


class TestLogContext:

    def test_bind_skips_none_and_clear_resets(self):
        with LogContext.bind(correlation_id="req-1", actor_id=None):
            assert LogContext.get_all() == {"correlation_id": "req-1"}
            LogContext.clear()
            assert LogContext.get_all() == {}

    def test_bind_restores_previous(self):
        with LogContext.bind(contract_id="outer"):
            with LogContext.bind(contract_id="inner"):
                assert LogContext.get_all()["contract_id"] == "inner"
            assert LogContext.get_all()["contract_id"] == "outer"
        assert LogContext.get_all() == {}

    def test_only_bindable_fields_reach_payload(self):
        """Claims carry no identity, so there is no claim field to bind."""
        with LogContext.bind(contract_id="c-1", claim_id="x"):
            assert LogContext.get_all() == {"contract_id": "c-1"}


class TestConfigureLogging:

    def test_idempotent(self):
        """Session fixture already configured; a second call adds no handler."""
        root = logging.getLogger("warranty_kernel")
        handlers_before = list(root.handlers)
        configure_logging(stream=StringIO())
        assert root.handlers == handlers_before

    def test_get_logger_namespace(self):
        assert get_logger("domain.contract").name == "warranty_kernel.domain.contract"
