"""
Warranty Kernel

In-memory business rules for product warranty contracts:
- Identity-bearing contracts over structurally-compared value records
- Coverage activation gated by status and an inclusive date window
- Remaining liability derived live from purchase price and claims
- Annual extension of coverage with explicit leap-day handling
"""

__version__ = "0.1.0"
