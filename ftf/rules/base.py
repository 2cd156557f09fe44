"""
Base Rule - Abstract base class for every correction strategy.

A rule recognises a failure pattern and proposes fixes. Rules must not
mutate the command or themselves while matching, so the corrector can
evaluate them from several threads at once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ftf.core.types import DEFAULT_PRIORITY, Command, CorrectedCommand


class Rule(ABC):
    """
    Abstract base class for correction rules.

    Subclasses set the class attributes (or assign them per instance) and
    implement `matches` and `get_new_commands`.

    Attributes:
        name: Identifier used by configuration overrides and diagnostics
        priority: Base rank of the rule's suggestions (lower = preferred)
        requires_output: Skip the rule when the command produced no output
        enabled_by_default: Whether the rule is active without configuration
    """

    name: str = ""
    priority: int = DEFAULT_PRIORITY
    requires_output: bool = True
    enabled_by_default: bool = True

    @abstractmethod
    def matches(self, command: Command) -> bool:
        """Return True if this rule recognises the failure."""
        pass

    @abstractmethod
    def get_new_commands(self, command: Command) -> Sequence[str]:
        """Return corrected scripts for a matching command, preferred first."""
        pass

    def get_corrected_commands(self, command: Command) -> list[CorrectedCommand]:
        """
        Wrap `get_new_commands` results into ranked corrections.

        The i-th suggestion (0-based) gets priority (i + 1) * self.priority,
        so a rule's later suggestions always rank below its first one.
        """
        return [
            CorrectedCommand(script, (index + 1) * self.priority)
            for index, script in enumerate(self.get_new_commands(command))
        ]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r} priority={self.priority}>"


class PriorityOverride(Rule):
    """
    A rule reporting another priority for a wrapped rule.

    Used by configuration overrides; matching and suggestions are delegated
    unchanged.
    """

    def __init__(self, rule: Rule, priority: int) -> None:
        self.rule = rule
        self.name = rule.name
        self.priority = priority
        self.requires_output = rule.requires_output
        self.enabled_by_default = rule.enabled_by_default

    def matches(self, command: Command) -> bool:
        return self.rule.matches(command)

    def get_new_commands(self, command: Command) -> Sequence[str]:
        return self.rule.get_new_commands(command)
