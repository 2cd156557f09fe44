"""
Permission-related command correction rules (sudo, chmod).
"""

from ftf.rules.base import Rule
from ftf.rules.builders import RegexRuleBuilder, SimpleRuleBuilder


def permission_rules() -> list[Rule]:
    """All permission rules."""
    return [
        create_sudo_permission_denied(),
        create_sudo_apt(),
        create_chmod_execute(),
        create_chmod_recursive(),
    ]


def create_sudo_permission_denied() -> Rule:
    """Retry with sudo when permission was denied."""
    return (
        SimpleRuleBuilder("sudo_permission_denied")
        .match_output("Permission denied")
        .priority(100)
        .replace("", "sudo ")
    )


def create_sudo_apt() -> Rule:
    return (
        SimpleRuleBuilder("sudo_apt")
        .match_command("apt ")
        .match_output("E: Could not open lock file")
        .priority(200)
        .replace("apt ", "sudo apt ")
    )


def create_chmod_execute() -> Rule:
    """Make a local script executable, then run it."""
    return (
        RegexRuleBuilder("chmod_execute")
        .match_command_regex(r"^(\./\S+)")
        .match_output_regex(r"Permission denied")
        .priority(300)
        .replace_with(lambda script, match: [f"chmod +x {match.group(1)} && {script}"])
        .build()
    )


def create_chmod_recursive() -> Rule:
    return (
        SimpleRuleBuilder("chmod_recursive")
        .match_command("chmod ")
        .match_output("No such file or directory")
        .priority(400)
        .replace("chmod ", "chmod -R ")
    )
