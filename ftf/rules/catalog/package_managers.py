"""
Package manager command correction rules.
"""

from ftf.rules.base import Rule
from ftf.rules.builders import SimpleRuleBuilder


def package_manager_rules() -> list[Rule]:
    """All package manager rules."""
    return [
        create_apt_autoremove(),
        create_apt_get_search(),
        create_apt_install_builddeps(),
    ]


def create_apt_autoremove() -> Rule:
    return (
        SimpleRuleBuilder("apt_autoremove")
        .match_command("apt remove")
        .match_output("WARNING: The following")
        .priority(600)
        .replace("apt remove", "apt autoremove")
    )


def create_apt_get_search() -> Rule:
    return (
        SimpleRuleBuilder("apt_get_search")
        .match_command("apt search")
        .match_output("E: Invalid operation")
        .priority(500)
        .replace("apt search", "apt-cache search")
    )


def create_apt_install_builddeps() -> Rule:
    return (
        SimpleRuleBuilder("apt_install_builddeps")
        .match_command("apt install")
        .match_output("error: you need to be root")
        .priority(700)
        .replace("apt install", "apt install build-essential")
    )
