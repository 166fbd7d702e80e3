"""
Configuration Loader (``warranty_config.loader``).

Responsibility
--------------
Loads a YAML configuration file and parses it into a typed
``WarrantyConfig``.  Runtime callers go through
``warranty_config.get_active_config()`` rather than this module.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Top level not a mapping, unknown keys or invalid values  -> ``ValueError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from warranty_config.schema import WarrantyConfig


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Postconditions:
        - Returns a ``dict`` (possibly empty if the YAML is empty).
    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


def parse_config(data: dict[str, Any]) -> WarrantyConfig:
    """Parse the ``contracts`` section of a config document."""
    section = data.get("contracts") or {}
    if not isinstance(section, dict):
        raise ValueError("'contracts' section must be a mapping")
    return WarrantyConfig.from_dict(section)


def load_config(path: Path) -> WarrantyConfig:
    return parse_config(load_yaml_file(path))
