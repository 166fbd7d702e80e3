"""
Contract -- The warranty contract entity.

Responsibility:
    Owns a purchase price, the covered Product, its TermsAndConditions and
    the claims filed against it. Answers the two business questions asked
    of a warranty: is it in effect on a given date, and how much liability
    remains.

Architecture position:
    Kernel > Domain -- in-memory entity, zero I/O beyond logging.
    Depends on ``warranty_kernel.domain.values`` only.

Invariants enforced:
    - Identity: ``id`` is assigned once at construction; equality and hash
      use it alone. Two contracts built from identical inputs are unequal;
      a clone equals its source whatever else changes.
    - Liability is derived, never stored:
          limit_of_liability = purchase_price * threshold / 100 - claim_total()
      It may go negative; no clamping.
    - In effect requires BOTH status ACTIVE and a date inside the inclusive
      coverage window.

Failure modes:
    - InvalidAmountError for a non-numeric or negative purchase price.
    - ContractNotInEffectError / ClaimExceedsLiabilityError from
      ``file_claim`` only; ``add_claim`` and ``claims.append`` never check.
    - TypeError when a non-string status or non-Claim claim is supplied.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID, uuid4

from warranty_kernel.domain.calendar import LeapDayPolicy
from warranty_kernel.domain.values import (
    Claim,
    Product,
    TermsAndConditions,
    to_amount,
    to_non_negative_amount,
)
from warranty_kernel.exceptions import (
    ClaimExceedsLiabilityError,
    ContractNotInEffectError,
)
from warranty_kernel.logging_config import LogContext, get_logger

logger = get_logger("domain.contract")


class ContractStatus(str, Enum):
    """
    Known contract statuses.

    Members compare equal to their string values, so ``"ACTIVE"`` and
    ``ContractStatus.ACTIVE`` are interchangeable. The status setter is
    open: any string is stored as given.
    """

    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    CANCELLED = "CANCELLED"


@dataclass(frozen=True)
class ContractPolicy:
    """
    Leap-day handling for subscription extension, built from configuration by
    ``warranty_config.bridges.build_contract_policy``.
    """

    leap_day_policy: LeapDayPolicy = LeapDayPolicy.CLAMP


_DEFAULT_POLICY = ContractPolicy()


def _status_value(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if not isinstance(value, str):
        raise TypeError(f"status must be a string, got {type(value).__name__}")
    return value


class Contract:
    """
    A product warranty contract.

    Contract:
        Constructed from price, product and terms with no claims and status
        PENDING. Claims are appended over
        its lifetime; status is set externally.

    Guarantees:
        - ``limit_of_liability`` and ``claim_total()`` reflect the claims
          list at the moment of the call.
        - ``extend_annual_subscription`` replaces the terms with a new value;
          the previous TermsAndConditions instance is untouched.
    """

    def __init__(
        self,
        purchase_price: Decimal | int | float | str,
        product: Product,
        terms_and_conditions: TermsAndConditions,
        *,
        policy: ContractPolicy | None = None,
    ):
        self._policy = policy or _DEFAULT_POLICY
        self._id: UUID = uuid4()
        self._purchase_price = to_non_negative_amount(purchase_price, "purchase_price")
        self._covered_product = product
        self._terms_and_conditions = terms_and_conditions
        self._status: str = ContractStatus.PENDING.value
        self.claims: list[Claim] = []

        logger.info(
            "contract_created",
            extra={
                "contract_id": str(self._id),
                "purchase_price": self._purchase_price,
                "product_identifier": product.identifier,
                "status": self._status,
            },
        )

    # -- identity -----------------------------------------------------------

    @property
    def id(self) -> UUID:
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Contract):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __copy__(self) -> Contract:
        twin = object.__new__(type(self))
        twin.__dict__.update(self.__dict__)
        # Same id, own claims list.
        twin.claims = list(self.claims)
        return twin

    def clone(self) -> Contract:
        """Snapshot sharing this contract's identity."""
        twin = copy.copy(self)
        logger.debug("contract_cloned", extra={"contract_id": str(self._id)})
        return twin

    def __repr__(self) -> str:
        return (
            f"Contract(id={self._id}, purchase_price={self._purchase_price}, "
            f"status={self._status!r}, claims={len(self.claims)})"
        )

    # -- state --------------------------------------------------------------

    @property
    def purchase_price(self) -> Decimal:
        return self._purchase_price

    @property
    def covered_product(self) -> Product:
        return self._covered_product

    @property
    def terms_and_conditions(self) -> TermsAndConditions:
        return self._terms_and_conditions

    @property
    def policy(self) -> ContractPolicy:
        return self._policy

    @property
    def status(self) -> str:
        return self._status

    @status.setter
    def status(self, value: str) -> None:
        new_status = _status_value(value)
        old_status, self._status = self._status, new_status
        if old_status != new_status:
            logger.info(
                "contract_status_changed",
                extra={
                    "contract_id": str(self._id),
                    "from_status": old_status,
                    "to_status": new_status,
                },
            )

    def in_effect_for(self, on_date: date) -> bool:
        """True iff status is ACTIVE and ``on_date`` is inside the coverage window."""
        if self._status != ContractStatus.ACTIVE:
            return False
        return self._terms_and_conditions.covers(on_date)

    # -- claims and liability ---------------------------------------------

    def add_claim(self, claim: Claim) -> None:
        """Append a claim without any checks."""
        if not isinstance(claim, Claim):
            raise TypeError(f"Expected Claim, got {type(claim).__name__}")
        self.claims.append(claim)
        logger.info(
            "claim_added",
            extra={
                "contract_id": str(self._id),
                "amount": claim.amount,
                "date_filed": claim.date_filed,
                "claim_count": len(self.claims),
            },
        )

    def file_claim(self, claim: Claim) -> None:
        """
        Append a claim after checking coverage and remaining liability.

        Raises:
            ContractNotInEffectError: Not in effect on ``claim.date_filed``.
            ClaimExceedsLiabilityError: Amount not below the remaining limit.
        """
        with LogContext.bind(contract_id=str(self._id)):
            if not self.in_effect_for(claim.date_filed):
                logger.warning(
                    "claim_rejected",
                    extra={"reason": ContractNotInEffectError.code},
                )
                raise ContractNotInEffectError(
                    self._id, self._status, claim.date_filed
                )

            limit = self.limit_of_liability
            if not self.within_limit_of_liability(claim.amount):
                logger.warning(
                    "claim_rejected",
                    extra={
                        "reason": ClaimExceedsLiabilityError.code,
                        "amount": claim.amount,
                        "limit_of_liability": limit,
                    },
                )
                raise ClaimExceedsLiabilityError(self._id, claim.amount, limit)

            self.add_claim(claim)
            logger.info(
                "claim_filed",
                extra={"remaining_liability": self.limit_of_liability},
            )

    def claim_total(self) -> Decimal:
        return sum((claim.amount for claim in self.claims), Decimal("0"))

    @property
    def base_liability(self) -> Decimal:
        """Liability cap before any claims."""
        return self._purchase_price * self._terms_and_conditions.liability_ratio

    @property
    def limit_of_liability(self) -> Decimal:
        return self.base_liability - self.claim_total()

    def within_limit_of_liability(self, amount: Decimal | int | float | str) -> bool:
        """True iff ``amount`` is strictly below the remaining limit."""
        return to_amount(amount) < self.limit_of_liability

    # -- terms --------------------------------------------------------------

    def extend_annual_subscription(self) -> None:
        """Push the coverage end date out by exactly one year."""
        previous = self._terms_and_conditions
        self._terms_and_conditions = previous.extended(
            years=1, leap_day_policy=self._policy.leap_day_policy
        )
        logger.info(
            "annual_subscription_extended",
            extra={
                "contract_id": str(self._id),
                "previous_coverage_end_date": previous.coverage_end_date,
                "coverage_end_date": self._terms_and_conditions.coverage_end_date,
            },
        )
