"""Configuration handling for pub-license-audit."""
from __future__ import annotations

from pub_license_audit.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from pub_license_audit.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from pub_license_audit.models.config import PolicyConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "PolicyConfig",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
