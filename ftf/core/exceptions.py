"""
Core Exceptions - Unified error hierarchy for ftf.

Rule construction failures are raised by the builders and never reach
evaluation: a rule that exists is a valid rule.
"""


class FtfError(Exception):
    """Base exception for all ftf errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | {self.details}"
        return self.message


# =============================================================================
# Rule Construction Errors
# =============================================================================

class RuleBuildError(FtfError):
    """A rule builder was asked to build an invalid rule."""

    def __init__(self, rule_name: str, message: str, details: dict | None = None):
        super().__init__(message, {**(details or {}), "rule": rule_name})
        self.rule_name = rule_name


class MissingPatternError(RuleBuildError):
    """Neither a command nor an output pattern was set."""

    def __init__(self, builder: str, rule_name: str):
        super().__init__(
            rule_name,
            f"{builder}: at least one pattern (command or output) must be set",
        )
        self.builder = builder


class MissingReplacementError(RuleBuildError):
    """No replacement (string or function) was set."""

    def __init__(self, builder: str, rule_name: str, what: str = "replacement"):
        super().__init__(rule_name, f"{builder}: {what} must be set")
        self.builder = builder


class InvalidPatternError(RuleBuildError):
    """A pattern is not a valid regular expression."""

    def __init__(self, rule_name: str, pattern: str, reason: str):
        super().__init__(
            rule_name,
            f"Invalid regular expression '{pattern}': {reason}",
            {"pattern": pattern},
        )
        self.pattern = pattern
        self.reason = reason


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(FtfError):
    """Configuration file could not be read or validated."""
    pass


# =============================================================================
# Shell Errors
# =============================================================================

class ShellError(FtfError):
    """The shell process could not be run."""

    def __init__(self, command: str, reason: str):
        super().__init__(
            f"Failed to run '{command}': {reason}",
            {"command": command, "reason": reason}
        )
        self.command = command
        self.reason = reason
