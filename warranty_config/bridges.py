"""
Config → Kernel Bridges.

Converts a loaded ``WarrantyConfig`` into kernel inputs. Lives in
warranty_config because the kernel must NEVER import warranty_config.

Usage:
    from warranty_config import get_active_config
    from warranty_config.bridges import build_contract_policy

    policy = build_contract_policy(get_active_config())
    contract = Contract(price, product, terms, policy=policy)
"""

from __future__ import annotations

from warranty_config.schema import WarrantyConfig
from warranty_kernel.domain.calendar import LeapDayPolicy
from warranty_kernel.domain.contract import ContractPolicy


def build_contract_policy(config: WarrantyConfig) -> ContractPolicy:
    return ContractPolicy(
        leap_day_policy=LeapDayPolicy(config.leap_day_policy),
    )
