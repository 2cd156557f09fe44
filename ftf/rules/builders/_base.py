"""
Shared builder plumbing.

Every builder carries a rule name, a priority and the two flags every rule
exposes; the concrete builders add their own matching specification.
"""

from __future__ import annotations

from typing import Self

from ftf.core.types import DEFAULT_PRIORITY
from ftf.rules.base import Rule


class RuleBuilder:
    """Fluent base for the rule builders."""

    builder_name = "RuleBuilder"

    def __init__(self, name: str) -> None:
        self.name = name
        self._priority = DEFAULT_PRIORITY
        self._requires_output = True
        self._enabled_by_default = True

    def priority(self, priority: int) -> Self:
        """Set the priority (lower = higher priority)."""
        self._priority = priority
        return self

    def requires_output(self, required: bool = True) -> Self:
        """Declare whether the rule needs the command's output to apply."""
        self._requires_output = required
        return self

    def enabled_by_default(self, enabled: bool = True) -> Self:
        """Declare whether the rule is active without configuration."""
        self._enabled_by_default = enabled
        return self

    def _rule_options(self) -> dict:
        return {
            "name": self.name,
            "priority": self._priority,
            "requires_output": self._requires_output,
            "enabled_by_default": self._enabled_by_default,
        }


class BuiltRule(Rule):
    """Rule produced by a builder; its settings are fixed at construction."""

    def __init__(
        self,
        name: str,
        priority: int = DEFAULT_PRIORITY,
        requires_output: bool = True,
        enabled_by_default: bool = True,
    ) -> None:
        self.name = name
        self.priority = priority
        self.requires_output = requires_output
        self.enabled_by_default = enabled_by_default
