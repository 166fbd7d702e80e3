"""
Values -- Immutable, self-validating warranty value objects.

Responsibility:
    Provides the value records a warranty contract is built from: the
    covered Product, the TermsAndConditions governing coverage, and each
    Claim filed against it.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by ``warranty_kernel.domain.contract``.

Invariants enforced:
    - All monetary amounts are Decimal (never float); other numeric input
      is converted through ``str`` so 100.0 becomes Decimal("100.0").
    - Claim amounts are non-negative.
    - Liability threshold lies in (0, 100].
    - Coverage window is ordered: start <= end.

Failure modes:
    - InvalidAmountError for non-numeric or negative amounts.
    - InvalidLiabilityThresholdError for a threshold outside (0, 100].
    - InvalidCoverageWindowError when coverage starts after it ends.

Equality:
    All three types compare structurally, field by field (frozen
    dataclasses). Contrast ``Contract``, which compares by identity.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from warranty_kernel.domain.calendar import LeapDayPolicy, add_years
from warranty_kernel.exceptions import (
    InvalidAmountError,
    InvalidCoverageWindowError,
    InvalidLiabilityThresholdError,
)

_HUNDRED = Decimal("100")


def to_amount(value: Any, field_name: str = "amount") -> Decimal:
    """
    Coerce a numeric value to Decimal.

    Raises:
        InvalidAmountError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(field_name, value, "not a number")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise InvalidAmountError(field_name, value, "not a number") from e
    if not result.is_finite():
        raise InvalidAmountError(field_name, value, "not a finite number")
    return result


def to_non_negative_amount(value: Any, field_name: str = "amount") -> Decimal:
    """Coerce to Decimal and reject negatives."""
    result = to_amount(value, field_name)
    if result < 0:
        raise InvalidAmountError(field_name, value, "must not be negative")
    return result


@dataclass(frozen=True, slots=True)
class Product:
    """The covered product. Opaque to the kernel."""

    name: str
    identifier: str
    manufacturer: str
    model_number: str


@dataclass(frozen=True, slots=True)
class TermsAndConditions:
    """
    Purchase date, coverage window and liability threshold of a contract.

    Guarantees:
        - Immutable and hashable.
        - ``liability_percent_threshold`` is a Decimal in (0, 100].
        - ``coverage_start_date <= coverage_end_date``.
    """

    purchase_date: date
    coverage_start_date: date
    coverage_end_date: date
    liability_percent_threshold: Decimal

    def __post_init__(self) -> None:
        threshold = to_amount(
            self.liability_percent_threshold, "liability_percent_threshold"
        )
        if not (0 < threshold <= _HUNDRED):
            raise InvalidLiabilityThresholdError(self.liability_percent_threshold)
        object.__setattr__(self, "liability_percent_threshold", threshold)

        if self.coverage_start_date > self.coverage_end_date:
            raise InvalidCoverageWindowError(
                self.coverage_start_date, self.coverage_end_date
            )

    @property
    def liability_ratio(self) -> Decimal:
        """Threshold as a fraction of purchase price."""
        return self.liability_percent_threshold / _HUNDRED

    def covers(self, on_date: date) -> bool:
        """True if ``on_date`` falls inside the coverage window, both ends inclusive."""
        return self.coverage_start_date <= on_date <= self.coverage_end_date

    def extended(
        self,
        years: int = 1,
        leap_day_policy: LeapDayPolicy = LeapDayPolicy.CLAMP,
    ) -> TermsAndConditions:
        """
        Return a copy whose coverage ends ``years`` later.

        Postconditions:
            - Only ``coverage_end_date`` differs from ``self``.
        """
        return dataclasses.replace(
            self,
            coverage_end_date=add_years(
                self.coverage_end_date, years, leap_day_policy
            ),
        )


@dataclass(frozen=True, slots=True)
class Claim:
    """A single liability event filed against a contract."""

    amount: Decimal
    date_filed: date

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "amount", to_non_negative_amount(self.amount, "claim amount")
        )
