"""
Simple rule builder for rules with literal substring matching and replacement.
"""

from __future__ import annotations

from loguru import logger

from ftf.core.types import Command
from ftf.rules.builders._base import BuiltRule, RuleBuilder


class SimpleRule(BuiltRule):
    """Matches on substrings of the script/output and rewrites the script literally."""

    def __init__(
        self,
        match_command: str | None = None,
        match_output: str | None = None,
        replacement: tuple[str, str] | None = None,
        **options,
    ) -> None:
        super().__init__(**options)
        self.match_command = match_command
        self.match_output = match_output
        self.replacement = replacement

    def matches(self, command: Command) -> bool:
        # An unset pattern is no constraint
        if self.match_command is not None and self.match_command not in command.script:
            return False
        if self.match_output is not None and self.match_output not in command.output:
            return False
        return True

    def get_new_commands(self, command: Command) -> list[str]:
        if self.replacement is None:
            return []

        old, new = self.replacement
        if not old:
            # Empty needle means "prepend once", not "insert between every character"
            return [new + command.script]
        return [command.script.replace(old, new)]


class SimpleRuleBuilder(RuleBuilder):
    """
    Builder for literal substring rules.

    Construction cannot fail: unset patterns match everything and a rule
    without a replacement pair matches but proposes nothing.

    Example:
        >>> rule = (
        ...     SimpleRuleBuilder("git_branch_delete")
        ...     .match_command("git branch -d")
        ...     .match_output("If you are sure")
        ...     .replace("-d", "-D")
        ... )
    """

    builder_name = "SimpleRuleBuilder"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._match_command: str | None = None
        self._match_output: str | None = None

    def match_command(self, pattern: str) -> SimpleRuleBuilder:
        """Set the substring the script must contain."""
        self._match_command = pattern
        return self

    def match_output(self, pattern: str) -> SimpleRuleBuilder:
        """Set the substring the output must contain."""
        self._match_output = pattern
        return self

    def replace(self, old: str, new: str) -> SimpleRule:
        """Build the rule, replacing every occurrence of `old` with `new`."""
        return self._build((old, new))

    def build(self) -> SimpleRule:
        """Build the rule without a replacement pair."""
        return self._build(None)

    def _build(self, replacement: tuple[str, str] | None) -> SimpleRule:
        rule = SimpleRule(
            match_command=self._match_command,
            match_output=self._match_output,
            replacement=replacement,
            **self._rule_options(),
        )
        logger.debug(f"🔧 Built simple rule: {self.name}")
        return rule
