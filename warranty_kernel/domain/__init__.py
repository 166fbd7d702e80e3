"""
Pure domain layer.

Value records (Product, TermsAndConditions, Claim) compare by value;
the Contract entity compares by identity. No database, no clock, no I/O.
"""

from warranty_kernel.domain.calendar import LeapDayPolicy, add_years
from warranty_kernel.domain.contract import Contract, ContractPolicy, ContractStatus
from warranty_kernel.domain.values import Claim, Product, TermsAndConditions

__all__ = [
    # Value records
    "Product",
    "TermsAndConditions",
    "Claim",
    # Entity
    "Contract",
    "ContractPolicy",
    "ContractStatus",
    # Calendar
    "LeapDayPolicy",
    "add_years",
]
