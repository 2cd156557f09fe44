"""
Filesystem command correction rules (mkdir, rm, cp, mv).
"""

import posixpath
import re

from ftf.rules.base import Rule
from ftf.rules.builders import RegexRuleBuilder, SimpleRuleBuilder


def filesystem_rules() -> list[Rule]:
    """All filesystem rules."""
    return [
        create_mkdir_p(),
        create_rm_recursive(),
        create_cp_recursive(),
        create_mv_to_directory(),
    ]


def create_mkdir_p() -> Rule:
    """Create missing parent directories."""
    return (
        SimpleRuleBuilder("mkdir_p")
        .match_command("mkdir ")
        .match_output("No such file or directory")
        .priority(100)
        .replace("mkdir ", "mkdir -p ")
    )


def create_rm_recursive() -> Rule:
    return (
        SimpleRuleBuilder("rm_recursive")
        .match_command("rm ")
        .match_output("Is a directory")
        .priority(200)
        .replace("rm ", "rm -r ")
    )


def create_cp_recursive() -> Rule:
    return (
        SimpleRuleBuilder("cp_recursive")
        .match_command("cp ")
        .match_output("Is a directory")
        .priority(300)
        .replace("cp ", "cp -r ")
    )


def _mkdir_then_move(script: str, match: re.Match[str]) -> list[str]:
    directory = posixpath.dirname(match.group("dest"))
    if not directory:
        return []
    return [f"mkdir -p {directory} && {script}"]


def create_mv_to_directory() -> Rule:
    """Create the destination directory before moving into it."""
    return (
        RegexRuleBuilder("mv_to_directory")
        .match_command_regex(r"^mv\s+(?:-\S+\s+)*\S+\s+(?P<dest>\S+)$")
        .match_output_regex(r"No such file or directory")
        .priority(400)
        .replace_with(_mkdir_then_move)
        .build()
    )
