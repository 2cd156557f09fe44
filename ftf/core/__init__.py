"""
ftf Core - Value types and error hierarchy.
"""

from ftf.core.exceptions import (
    ConfigError,
    FtfError,
    InvalidPatternError,
    MissingPatternError,
    MissingReplacementError,
    RuleBuildError,
    ShellError,
)
from ftf.core.types import DEFAULT_PRIORITY, Command, CorrectedCommand

__all__ = [
    "Command",
    "ConfigError",
    "CorrectedCommand",
    "DEFAULT_PRIORITY",
    "FtfError",
    "InvalidPatternError",
    "MissingPatternError",
    "MissingReplacementError",
    "RuleBuildError",
    "ShellError",
]
