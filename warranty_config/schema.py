"""
Warranty Configuration Schema.

Defines the structure and defaults for warranty contract settings. Actual
values are loaded from YAML at runtime (see ``warranty_config.loader``).
"""

from dataclasses import dataclass, fields
from typing import Any, Self

from warranty_kernel.logging_config import get_logger

logger = get_logger("config.schema")


VALID_LEAP_DAY_POLICIES = {"clamp", "roll_forward"}


@dataclass(frozen=True)
class WarrantyConfig:
    """
    Configuration schema for warranty contracts.

    Override at instantiation or from YAML:

        config = WarrantyConfig(
            leap_day_policy="roll_forward",
        )
    """

    # Where Feb 29 lands when an annual extension reaches a non-leap year
    leap_day_policy: str = "clamp"

    def __post_init__(self) -> None:
        if self.leap_day_policy not in VALID_LEAP_DAY_POLICIES:
            raise ValueError(
                f"leap_day_policy must be one of {sorted(VALID_LEAP_DAY_POLICIES)}, "
                f"got '{self.leap_day_policy}'"
            )

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with default warranty settings."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create config from a dictionary (e.g., parsed YAML)."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown warranty config keys: {unknown}")
        logger.debug(
            "warranty_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)
