"""
ftf Config - Configuration management.
"""

from ftf.config.loader import (
    apply_config,
    default_config_path,
    example_config,
    load_config,
    load_config_from_string,
    save_config,
)
from ftf.config.models import FtfConfig, GlobalConfig, RuleConfig

__all__ = [
    "FtfConfig",
    "GlobalConfig",
    "RuleConfig",
    "apply_config",
    "default_config_path",
    "example_config",
    "load_config",
    "load_config_from_string",
    "save_config",
]
