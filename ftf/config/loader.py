"""
ftf Config - Loader.

Loads the YAML configuration file and applies its overrides to rules
before they are registered.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from ftf.config.models import FtfConfig
from ftf.core.exceptions import ConfigError
from ftf.rules.base import PriorityOverride, Rule

CONFIG_ENV_VAR = "FTF_CONFIG"
CONFIG_FILENAME = "config.yaml"

EXAMPLE_CONFIG = """\
# ftf configuration

global:
  # Ask which correction to use when several are available
  interactive: true

  # Show debug information
  debug: false

  # Threads used to evaluate rules (omit for automatic)
  # max_workers: 4

  # Maximum number of corrections offered
  # limit: 5

# Override rules by name
rules:
  git_branch_delete:
    # Disable this rule
    enabled: false

  git_push_set_upstream:
    # Override the priority (lower = higher priority)
    priority: 300

  mkdir_p:
    enabled: true
    priority: 150
"""


def default_config_path() -> Path:
    """
    Get the default config file path.

    $FTF_CONFIG wins, then $XDG_CONFIG_HOME/ftf/config.yaml, then
    ~/.config/ftf/config.yaml.
    """
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "ftf" / CONFIG_FILENAME


def load_config_from_string(content: str, source: str = "<string>") -> FtfConfig:
    """
    Parse and validate YAML configuration.

    Raises:
        ConfigError: If the YAML is invalid or doesn't match the schema.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {source}: {e}", {"source": source}) from e

    if data is None:
        return FtfConfig()
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid config in {source}: expected a mapping, got {type(data).__name__}",
            {"source": source},
        )

    try:
        return FtfConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {source}: {e}", {"source": source}) from e


def load_config(path: Path | str | None = None) -> FtfConfig:
    """
    Load configuration from a file.

    Args:
        path: Config file (default location if None)

    Returns:
        The configuration; defaults when the file doesn't exist.

    Raises:
        ConfigError: If the file can't be read or is invalid.
    """
    config_path = Path(path) if path is not None else default_config_path()

    if not config_path.exists():
        logger.debug(f"📁 No config file at {config_path}, using defaults")
        return FtfConfig()

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}", {"source": str(config_path)}) from e

    config = load_config_from_string(content, source=str(config_path))
    logger.debug(f"📁 Loaded config from {config_path} ({len(config.rules)} rule override(s))")
    return config


def save_config(config: FtfConfig, path: Path | str | None = None) -> Path:
    """
    Save configuration as YAML, creating parent directories.

    Returns:
        Path to the saved file.
    """
    config_path = Path(path) if path is not None else default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True, exclude_none=True)
    content = "# ftf configuration\n\n"
    content += yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    config_path.write_text(content, encoding="utf-8")
    logger.info(f"💾 Saved config to: {config_path}")
    return config_path


def example_config() -> str:
    """Get a documented example configuration."""
    return EXAMPLE_CONFIG


def apply_config(rules: Iterable[Rule], config: FtfConfig) -> list[Rule]:
    """
    Filter rules and apply priority overrides before registration.

    A rule is kept when the config enables it, or when the config is silent
    and the rule is enabled by default.

    Args:
        rules: Candidate rules, in order
        config: Loaded configuration

    Returns:
        Kept rules, in their original order.
    """
    selected: list[Rule] = []
    for rule in rules:
        if not config.is_rule_enabled(rule.name, default=rule.enabled_by_default):
            logger.debug(f"🔧 Rule disabled by config: {rule.name}")
            continue

        priority = config.get_rule_priority(rule.name)
        if priority is not None and priority != rule.priority:
            logger.debug(f"🔧 Rule {rule.name}: priority {rule.priority} -> {priority}")
            rule = PriorityOverride(rule, priority)

        selected.append(rule)
    return selected
