"""
Regex-based rule builder for pattern matching and replacement with capture groups.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from loguru import logger

from ftf.core.exceptions import (
    InvalidPatternError,
    MissingPatternError,
    MissingReplacementError,
)
from ftf.core.types import Command
from ftf.rules.builders._base import BuiltRule, RuleBuilder

# (original script, match of the script or output pattern) -> corrected scripts
ReplacementFn = Callable[[str, re.Match[str]], Sequence[str]]


class RegexRule(BuiltRule):
    """Matches with regular expressions and builds corrections from capture groups."""

    def __init__(
        self,
        replacement_fn: ReplacementFn,
        command_pattern: re.Pattern[str] | None = None,
        output_pattern: re.Pattern[str] | None = None,
        **options,
    ) -> None:
        super().__init__(**options)
        self.command_pattern = command_pattern
        self.output_pattern = output_pattern
        self.replacement_fn = replacement_fn

    def matches(self, command: Command) -> bool:
        if self.command_pattern is not None and not self.command_pattern.search(command.script):
            return False
        if self.output_pattern is not None and not self.output_pattern.search(command.output):
            return False
        return True

    def get_new_commands(self, command: Command) -> list[str]:
        if self.command_pattern is not None:
            match = self.command_pattern.search(command.script)
            if match:
                return list(self.replacement_fn(command.script, match))

        if self.output_pattern is not None:
            match = self.output_pattern.search(command.output)
            if match:
                return list(self.replacement_fn(command.script, match))

        return []


def _template_replacement(
    template: str, command_pattern: re.Pattern[str] | None
) -> ReplacementFn:
    """
    Build a replacement function from a `$0`, `$1`... template.

    Placeholders refer to groups of the command pattern only. A template
    left unchanged by substitution yields the original script.
    """

    def replacement(script: str, match: re.Match[str]) -> list[str]:
        result = template
        if command_pattern is not None and match.re is command_pattern:
            groups = [match.group(0), *match.groups()]
            # Highest index first so "$1" never eats the front of "$10"
            for index in range(len(groups) - 1, -1, -1):
                if groups[index] is not None:
                    result = result.replace(f"${index}", groups[index])

        if result == template:
            return [script]
        return [result]

    return replacement


class RegexRuleBuilder(RuleBuilder):
    """
    Builder for regular expression rules.

    Patterns are compiled as soon as they are set, so a bad pattern fails
    at the call that supplied it.

    Example:
        >>> rule = (
        ...     RegexRuleBuilder("git_push_branch")
        ...     .match_command_regex(r"git push ([a-z]+)$")
        ...     .replace_with(lambda script, m: [f"git push -u origin {m.group(1)}"])
        ...     .build()
        ... )

    Raises:
        InvalidPatternError: From match_*_regex, on a pattern that doesn't compile
        MissingPatternError: From build, when no pattern was set
        MissingReplacementError: From build, when no replacement function was set
    """

    builder_name = "RegexRuleBuilder"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._command_pattern: re.Pattern[str] | None = None
        self._output_pattern: re.Pattern[str] | None = None
        self._replacement_fn: ReplacementFn | None = None

    def _compile(self, pattern: str | re.Pattern[str]) -> re.Pattern[str]:
        if isinstance(pattern, re.Pattern):
            return pattern
        try:
            return re.compile(pattern)
        except re.error as e:
            logger.warning(f"⚠️ Invalid pattern '{pattern}' in rule '{self.name}': {e}")
            raise InvalidPatternError(self.name, pattern, str(e)) from e

    def match_command_regex(self, pattern: str | re.Pattern[str]) -> RegexRuleBuilder:
        """Set the pattern searched for in the script."""
        self._command_pattern = self._compile(pattern)
        return self

    def match_output_regex(self, pattern: str | re.Pattern[str]) -> RegexRuleBuilder:
        """Set the pattern searched for in the output."""
        self._output_pattern = self._compile(pattern)
        return self

    def replace_with(self, fn: ReplacementFn) -> RegexRuleBuilder:
        """
        Set the function generating corrections.

        The function receives the original script and the match of the
        command pattern, or of the output pattern when no command pattern
        is set.
        """
        self._replacement_fn = fn
        return self

    def build(self) -> RegexRule:
        """Build the rule."""
        if self._command_pattern is None and self._output_pattern is None:
            logger.warning(f"⚠️ Rule '{self.name}' has no command or output pattern")
            raise MissingPatternError(self.builder_name, self.name)

        if self._replacement_fn is None:
            logger.warning(f"⚠️ Rule '{self.name}' has no replacement function")
            raise MissingReplacementError(self.builder_name, self.name, "replacement function")

        rule = RegexRule(
            replacement_fn=self._replacement_fn,
            command_pattern=self._command_pattern,
            output_pattern=self._output_pattern,
            **self._rule_options(),
        )
        logger.debug(f"🔧 Built regex rule: {self.name}")
        return rule

    def replace_simple(self, template: str) -> RegexRule:
        """
        Build the rule with a template replacement.

        `$0` is the whole command match, `$1`... its groups.
        """
        return self.replace_with(_template_replacement(template, self._command_pattern)).build()
