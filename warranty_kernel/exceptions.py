"""
Typed Exception Hierarchy for the Warranty Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers must be able to catch errors by type and read structured data off
them, never by parsing message strings:

    try:
        contract.file_claim(claim)
    except ClaimExceedsLiabilityError as e:
        notify_customer(remaining=e.limit_of_liability)
    except ContractNotInEffectError as e:
        log.warning("claim_outside_coverage", extra={"status": e.status})

Every exception has a CODE class attribute (machine-readable, API-safe) and
keeps its context as attributes.

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    WarrantyKernelError (base)
    |
    +-- ValidationError
    |   +-- InvalidAmountError
    |   +-- InvalidLiabilityThresholdError
    |   +-- InvalidCoverageWindowError
    |
    +-- ClaimError
        +-- ContractNotInEffectError
        +-- ClaimExceedsLiabilityError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category    | Code                         | When Raised
------------|------------------------------|-------------------------------------
Validation  | INVALID_AMOUNT               | Non-numeric or negative money value
            | INVALID_LIABILITY_THRESHOLD  | Threshold outside (0, 100]
            | INVALID_COVERAGE_WINDOW      | Coverage starts after it ends
------------|------------------------------|-------------------------------------
Claim       | CONTRACT_NOT_IN_EFFECT       | Filing against an inactive contract
            | CLAIM_EXCEEDS_LIABILITY      | Amount not below remaining limit
"""

from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID


class WarrantyKernelError(Exception):
    """
    Base exception for all warranty kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "WARRANTY_KERNEL_ERROR"


# Validation exceptions


class ValidationError(WarrantyKernelError):
    """Base exception for rejected construction inputs."""

    code: str = "VALIDATION_ERROR"


class InvalidAmountError(ValidationError):
    """A monetary value is not a number or is negative."""

    code: str = "INVALID_AMOUNT"

    def __init__(self, field_name: str, amount: Any, reason: str):
        self.field_name = field_name
        self.amount = amount
        self.reason = reason
        super().__init__(f"Invalid {field_name} {amount!r}: {reason}")


class InvalidLiabilityThresholdError(ValidationError):
    """Liability percentage threshold is outside (0, 100]."""

    code: str = "INVALID_LIABILITY_THRESHOLD"

    def __init__(self, threshold: Any):
        self.threshold = threshold
        super().__init__(
            f"Liability percent threshold must be in (0, 100], got {threshold!r}"
        )


class InvalidCoverageWindowError(ValidationError):
    """Coverage start date falls after the coverage end date."""

    code: str = "INVALID_COVERAGE_WINDOW"

    def __init__(self, coverage_start_date: date, coverage_end_date: date):
        self.coverage_start_date = coverage_start_date
        self.coverage_end_date = coverage_end_date
        super().__init__(
            f"Coverage start {coverage_start_date.isoformat()} is after "
            f"coverage end {coverage_end_date.isoformat()}"
        )


# Claim exceptions


class ClaimError(WarrantyKernelError):
    """Base exception for claim filing errors."""

    code: str = "CLAIM_ERROR"


class ContractNotInEffectError(ClaimError):
    """Claim filed on a date the contract does not cover."""

    code: str = "CONTRACT_NOT_IN_EFFECT"

    def __init__(self, contract_id: UUID, status: str, on_date: date):
        self.contract_id = contract_id
        self.status = status
        self.on_date = on_date
        super().__init__(
            f"Contract {contract_id} (status {status}) is not in effect "
            f"on {on_date.isoformat()}"
        )


class ClaimExceedsLiabilityError(ClaimError):
    """Claim amount is not strictly below the remaining limit of liability."""

    code: str = "CLAIM_EXCEEDS_LIABILITY"

    def __init__(
        self, contract_id: UUID, amount: Decimal, limit_of_liability: Decimal
    ):
        self.contract_id = contract_id
        self.amount = amount
        self.limit_of_liability = limit_of_liability
        super().__init__(
            f"Claim of {amount} against contract {contract_id} exceeds "
            f"remaining limit of liability {limit_of_liability}"
        )
