"""
Tests for RegexRuleBuilder.

Tests pattern compilation, capture-group replacements and build errors.
"""

from __future__ import annotations

import re

import pytest

from ftf.core.exceptions import (
    InvalidPatternError,
    MissingPatternError,
    MissingReplacementError,
    RuleBuildError,
)
from ftf.core.types import Command, CorrectedCommand
from ftf.rules.builders import RegexRule, RegexRuleBuilder


class TestRegexRuleBuilder:
    """Tests for building regex rules."""

    def test_capture_group_replacement(self):
        """Test a replacement function using a command capture group."""
        rule = (
            RegexRuleBuilder("git_push_branch")
            .match_command_regex(r"git push ([a-z]+)$")
            .priority(100)
            .replace_with(lambda script, m: [f"git push -u origin {m.group(1)}"])
            .build()
        )

        assert isinstance(rule, RegexRule)
        command = Command("git push main", "fatal: no upstream")
        assert rule.matches(command)
        assert rule.get_corrected_commands(command) == [
            CorrectedCommand("git push -u origin main", 100)
        ]

    def test_no_match(self):
        """Test that a non-matching script is rejected."""
        rule = (
            RegexRuleBuilder("git_push_branch")
            .match_command_regex(r"git push ([a-z]+)$")
            .replace_with(lambda script, m: [m.group(1)])
            .build()
        )

        assert not rule.matches(Command("git push Main", "err"))
        assert rule.get_new_commands(Command("git pull", "err")) == []

    def test_search_not_anchored(self):
        """Test that patterns are searched anywhere in the text."""
        rule = (
            RegexRuleBuilder("t")
            .match_command_regex(r"push")
            .replace_with(lambda script, m: [script])
            .build()
        )

        assert rule.matches(Command("git push origin", "err"))

    def test_both_patterns_required(self):
        """Test that both set patterns must match."""
        rule = (
            RegexRuleBuilder("t")
            .match_command_regex(r"^rm ")
            .match_output_regex(r"Is a directory")
            .replace_with(lambda script, m: [script.replace("rm ", "rm -r ", 1)])
            .build()
        )

        assert rule.matches(Command("rm build", "rm: cannot remove 'build': Is a directory"))
        assert not rule.matches(Command("rm build", "rm: cannot remove 'build': busy"))
        assert not rule.matches(Command("ls build", "Is a directory"))

    def test_output_match_passed_when_no_command_pattern(self):
        """Test that the output match feeds the replacement function."""
        rule = (
            RegexRuleBuilder("git_branch")
            .match_output_regex(r"pathspec '([^']+)' did not match")
            .replace_with(lambda script, m: [f"git checkout -b {m.group(1)}"])
            .build()
        )

        command = Command("git checkout feat", "error: pathspec 'feat' did not match any file(s)")
        assert rule.get_new_commands(command) == ["git checkout -b feat"]

    def test_falls_back_to_output_match(self):
        """Test that the output pattern is tried when the command pattern fails."""
        rule = (
            RegexRuleBuilder("t")
            .match_command_regex(r"^foo")
            .match_output_regex(r"bar(\d)")
            .replace_with(lambda script, m: [m.group(0)])
            .build()
        )

        assert rule.get_new_commands(Command("zzz", "bar1")) == ["bar1"]

    def test_multiple_suggestions_ranked(self):
        """Test that later suggestions of one rule rank lower."""
        rule = (
            RegexRuleBuilder("t")
            .match_command_regex(r"^git (\w+)")
            .priority(50)
            .replace_with(lambda script, m: [f"git {m.group(1)} -v", f"git {m.group(1)} -q"])
            .build()
        )

        corrections = rule.get_corrected_commands(Command("git fetch", "err"))
        assert [c.priority for c in corrections] == [50, 100]

    def test_precompiled_pattern(self):
        """Test that a compiled pattern is accepted as is."""
        pattern = re.compile(r"GIT", re.IGNORECASE)
        rule = (
            RegexRuleBuilder("t")
            .match_command_regex(pattern)
            .replace_with(lambda script, m: [script.lower()])
            .build()
        )

        assert rule.command_pattern is pattern
        assert rule.matches(Command("git status", "err"))


class TestRegexRuleBuilderErrors:
    """Tests for construction failures."""

    def test_invalid_pattern(self):
        """Test that a bad pattern fails immediately."""
        with pytest.raises(InvalidPatternError) as exc_info:
            RegexRuleBuilder("broken").match_command_regex(r"git push (")

        assert exc_info.value.pattern == r"git push ("
        assert exc_info.value.rule_name == "broken"
        assert exc_info.value.reason

    def test_invalid_output_pattern(self):
        """Test that a bad output pattern fails immediately."""
        with pytest.raises(InvalidPatternError):
            RegexRuleBuilder("broken").match_output_regex(r"[unclosed")

    def test_missing_pattern(self):
        """Test build without any pattern."""
        builder = RegexRuleBuilder("t").replace_with(lambda script, m: [script])

        with pytest.raises(MissingPatternError) as exc_info:
            builder.build()

        assert "at least one pattern" in str(exc_info.value)
        assert exc_info.value.details["rule"] == "t"

    def test_missing_replacement(self):
        """Test build without a replacement function."""
        with pytest.raises(MissingReplacementError) as exc_info:
            RegexRuleBuilder("t").match_command_regex(r"x").build()

        assert "replacement function" in str(exc_info.value)

    def test_missing_pattern_reported_first(self):
        """Test that the pattern check comes before the replacement check."""
        with pytest.raises(MissingPatternError):
            RegexRuleBuilder("t").build()

    def test_errors_share_base(self):
        """Test that builder errors derive from RuleBuildError."""
        assert issubclass(MissingPatternError, RuleBuildError)
        assert issubclass(MissingReplacementError, RuleBuildError)
        assert issubclass(InvalidPatternError, RuleBuildError)


class TestReplaceSimple:
    """Tests for template replacements."""

    def test_group_placeholder(self):
        """Test $1 substitution."""
        rule = RegexRuleBuilder("t").match_command_regex(r"git (\w+)").replace_simple(
            "git $1 --verbose"
        )

        assert rule.get_new_commands(Command("git status", "err")) == ["git status --verbose"]

    def test_whole_match_placeholder(self):
        """Test $0 substitution."""
        rule = RegexRuleBuilder("t").match_command_regex(r"^apt .*").replace_simple("sudo $0")

        assert rule.get_new_commands(Command("apt install vim", "err")) == [
            "sudo apt install vim"
        ]

    def test_two_digit_group(self):
        """Test that $10 is not read as $1 followed by 0."""
        pattern = " ".join(["(\\w)"] * 10)
        rule = RegexRuleBuilder("t").match_command_regex(pattern).replace_simple("$10-$1")

        assert rule.get_new_commands(Command("a b c d e f g h i j", "err")) == ["j-a"]

    def test_unchanged_template_returns_script(self):
        """Test that a template without effective placeholders yields the original script."""
        rule = RegexRuleBuilder("t").match_command_regex(r"git").replace_simple("git status")

        assert rule.get_new_commands(Command("git stats", "err")) == ["git stats"]

    def test_output_only_rule_returns_script(self):
        """Test that placeholders are not filled from the output pattern."""
        rule = RegexRuleBuilder("t").match_output_regex(r"(missing)").replace_simple("fix $1")

        assert rule.get_new_commands(Command("cmd", "missing")) == ["cmd"]

    def test_missing_pattern(self):
        """Test that replace_simple still validates the builder."""
        with pytest.raises(MissingPatternError):
            RegexRuleBuilder("t").replace_simple("$0")
