"""
Built-in rule catalog.

The rules are plain data fed to the builders; `all_rules` returns a fresh
set in a fixed order.
"""

from ftf.rules.base import Rule
from ftf.rules.catalog.filesystem import filesystem_rules
from ftf.rules.catalog.git import git_branch_rules, git_push_pull_rules, git_rules, git_staging_rules
from ftf.rules.catalog.hints import hint_rules
from ftf.rules.catalog.package_managers import package_manager_rules
from ftf.rules.catalog.permissions import permission_rules


def all_rules() -> list[Rule]:
    """Every built-in rule."""
    return (
        git_rules()
        + filesystem_rules()
        + permission_rules()
        + package_manager_rules()
        + hint_rules()
    )


__all__ = [
    "all_rules",
    "filesystem_rules",
    "git_branch_rules",
    "git_push_pull_rules",
    "git_rules",
    "git_staging_rules",
    "hint_rules",
    "package_manager_rules",
    "permission_rules",
]
