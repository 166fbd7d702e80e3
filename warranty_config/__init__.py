"""
warranty_config — single public entrypoint for warranty configuration.

Responsibility:
    Provides the ONLY way to obtain configuration at runtime through
    ``get_active_config()``.  YAML loading is internal tooling.

Architecture position:
    Sits above ``warranty_kernel``.  The kernel MUST NEVER import from
    ``warranty_config``; ``warranty_config.bridges`` translates config into
    kernel-compatible inputs.

Failure modes:
    - ``FileNotFoundError`` -- the requested config file does not exist.
    - ``yaml.YAMLError`` -- the file is not valid YAML.
    - ``ValueError`` -- schema validation failures.
"""

from __future__ import annotations

from pathlib import Path

from warranty_config.loader import load_config
from warranty_config.schema import WarrantyConfig
from warranty_kernel.logging_config import get_logger

_logger = get_logger("config")

# Default configuration set
DEFAULT_CONFIG_PATH = Path(__file__).parent / "sets" / "default.yaml"


def get_active_config(config_path: Path | None = None) -> WarrantyConfig:
    """The ONLY public configuration entrypoint.

    Emits a ``warranty_config_loaded`` log entry on every successful call.
    """
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    config = load_config(path)
    _logger.info(
        "warranty_config_loaded",
        extra={
            "config_path": str(path),
            "leap_day_policy": config.leap_day_policy,
        },
    )
    return config


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "WarrantyConfig",
    "get_active_config",
]
