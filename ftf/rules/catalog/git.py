"""
Git-related command correction rules.

Covers common git mistakes:
- Branch operations (delete, checkout of a missing branch, listing)
- Push/pull operations
- Staging and committing
"""

from ftf.rules.base import Rule
from ftf.rules.builders import RegexRuleBuilder, SimpleRuleBuilder


def git_branch_rules() -> list[Rule]:
    """Branch operation rules."""
    return [
        create_git_branch_delete(),
        create_git_branch_exists(),
        create_git_branch_0flag(),
    ]


def git_push_pull_rules() -> list[Rule]:
    """Push/pull operation rules."""
    return [
        create_git_push_set_upstream(),
        create_git_pull_rebase(),
        create_git_push_force(),
    ]


def git_staging_rules() -> list[Rule]:
    """Staging and commit rules."""
    return [
        create_git_add_all(),
        create_git_commit_amend(),
    ]


def git_rules() -> list[Rule]:
    """All git rules."""
    return git_branch_rules() + git_push_pull_rules() + git_staging_rules()


def create_git_branch_delete() -> Rule:
    """Force delete when the branch has unmerged commits."""
    return (
        SimpleRuleBuilder("git_branch_delete")
        .match_command("git branch -d")
        .match_output("error: The branch")
        .priority(500)
        .replace("git branch -d", "git branch -D")
    )


def create_git_branch_exists() -> Rule:
    """Create the branch when checking out one that doesn't exist."""
    return (
        RegexRuleBuilder("git_branch_exists")
        .match_command_regex(r"git checkout ([\w./-]+)")
        .match_output_regex(r"error: pathspec '([^']+)' did not match")
        .replace_with(lambda script, match: [f"git checkout -b {match.group(1)}"])
        .build()
    )


def create_git_branch_0flag() -> Rule:
    return (
        SimpleRuleBuilder("git_branch_0flag")
        .match_command("git branch")
        .match_output("fatal: bad revision")
        .priority(400)
        .replace("git branch", "git branch -a")
    )


def create_git_push_set_upstream() -> Rule:
    """Set upstream on first push."""
    return (
        SimpleRuleBuilder("git_push_set_upstream")
        .match_command("git push")
        .match_output("fatal: The current branch")
        .priority(600)
        .replace("git push", "git push -u origin")
    )


def create_git_pull_rebase() -> Rule:
    return (
        SimpleRuleBuilder("git_pull_rebase")
        .match_command("git pull")
        .match_output("Please specify which branch you want to merge with")
        .priority(500)
        .replace("git pull", "git pull --rebase origin")
    )


def create_git_push_force() -> Rule:
    """Push with lease when the remote rejected a non fast-forward."""
    return (
        SimpleRuleBuilder("git_push_force")
        .match_command("git push")
        .match_output("rejected")
        .priority(700)
        .replace("git push", "git push --force-with-lease")
    )


def create_git_add_all() -> Rule:
    return (
        SimpleRuleBuilder("git_add_all")
        .match_command("git commit")
        .match_output("no changes added to commit")
        .priority(800)
        .replace("git commit", "git add -A && git commit")
    )


def create_git_commit_amend() -> Rule:
    return (
        SimpleRuleBuilder("git_commit_amend")
        .match_command("git commit")
        .match_output("nothing to commit")
        .priority(550)
        .replace("git commit", "git commit --amend --no-edit")
    )
