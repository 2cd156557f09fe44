"""
Fixed-command hints for well-known error messages.

The script is compared fuzzily so that typos and extra arguments still
match. The output is only checked for the exact message: fuzzy scores are
unbounded and grow with the length of the text, so any long output holding
the message's letters in order would otherwise pass.
"""

from ftf.core.types import Command
from ftf.rules.base import Rule
from ftf.rules.builders import FuzzyRule, FuzzyRuleBuilder


class MessageGatedRule(Rule):
    """A fuzzy rule that only fires when the output contains `message`."""

    def __init__(self, rule: FuzzyRule, message: str) -> None:
        self.rule = rule
        self.message = message
        self.name = rule.name
        self.priority = rule.priority
        self.requires_output = True
        self.enabled_by_default = rule.enabled_by_default

    def matches(self, command: Command) -> bool:
        return self.message in command.output and self.rule.matches(command)

    def get_new_commands(self, command: Command) -> list[str]:
        return self.rule.get_new_commands(command)


def hint_rules() -> list[Rule]:
    """All hint rules."""
    return [
        create_git_init(),
        create_docker_daemon(),
        create_pip_upgrade(),
    ]


def _hint(name: str, command: str, message: str, replacement: str, priority: int) -> Rule:
    rule = (
        FuzzyRuleBuilder(name)
        .match_command(command)
        .threshold(60)
        .priority(priority)
        .replace(replacement)
        .build()
    )
    return MessageGatedRule(rule, message)


def create_git_init() -> Rule:
    """Initialise a repository when git runs outside of one."""
    return _hint("git_not_a_repository", "git", "not a git repository", "git init", 900)


def create_docker_daemon() -> Rule:
    return _hint(
        "docker_daemon_not_running",
        "docker",
        "Cannot connect to the Docker daemon",
        "sudo systemctl start docker",
        900,
    )


def create_pip_upgrade() -> Rule:
    return _hint(
        "pip_upgrade",
        "pip",
        "You should consider upgrading via",
        "pip install --upgrade pip",
        1000,
    )
