"""
ftf Config - Configuration models.

Pydantic models for type-safe configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GlobalConfig(BaseModel):
    """Global settings."""

    interactive: bool = Field(
        default=True, description="Ask which correction to use when several are found"
    )
    debug: bool = Field(default=False, description="Show debug logs")
    max_workers: int | None = Field(
        default=None, ge=1, description="Threads used to evaluate rules (None = automatic)"
    )
    limit: int | None = Field(
        default=None, ge=1, description="Maximum number of corrections offered"
    )


class RuleConfig(BaseModel):
    """Per-rule overrides."""

    enabled: bool | None = Field(
        default=None, description="Enable or disable the rule (None keeps the rule's default)"
    )
    priority: int | None = Field(
        default=None, description="Override the rule's priority (lower = higher priority)"
    )


class FtfConfig(BaseModel):
    """
    Complete ftf configuration.

    Example YAML:
        global:
          interactive: true
        rules:
          git_branch_delete:
            enabled: false
          mkdir_p:
            priority: 150
    """

    model_config = ConfigDict(populate_by_name=True)

    global_: GlobalConfig = Field(default_factory=GlobalConfig, alias="global")
    rules: dict[str, RuleConfig] = Field(default_factory=dict)

    def is_rule_enabled(self, rule_name: str, default: bool = True) -> bool:
        """Check if a rule is enabled, falling back to `default` when not configured."""
        rule_config = self.rules.get(rule_name)
        if rule_config is None or rule_config.enabled is None:
            return default
        return rule_config.enabled

    def get_rule_priority(self, rule_name: str) -> int | None:
        """Get the priority override for a rule, if any."""
        rule_config = self.rules.get(rule_name)
        return rule_config.priority if rule_config else None
