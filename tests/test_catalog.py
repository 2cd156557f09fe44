"""
Tests for the built-in rule catalog.

Runs realistic failures through a corrector holding every built-in rule.
"""

from __future__ import annotations

import pytest

from ftf.core.types import Command
from ftf.corrector import Corrector
from ftf.rules.base import Rule
from ftf.rules.catalog import (
    all_rules,
    filesystem_rules,
    git_branch_rules,
    git_push_pull_rules,
    git_rules,
    git_staging_rules,
    hint_rules,
    package_manager_rules,
    permission_rules,
)
from ftf.rules.catalog.hints import create_git_init
from ftf.rules.registry import RuleRegistry


@pytest.fixture
def corrector() -> Corrector:
    return Corrector(RuleRegistry(all_rules()))


def _scripts(corrector: Corrector, script: str, output: str) -> list[str]:
    return [c.script for c in corrector.get_corrections(Command(script, output, 1))]


class TestCatalogStructure:
    """Tests for catalog composition."""

    def test_all_rules_are_rules(self):
        """Test that every entry is a Rule."""
        assert all(isinstance(rule, Rule) for rule in all_rules())

    def test_names_unique(self):
        """Test that rule names are unique."""
        names = [rule.name for rule in all_rules()]

        assert len(names) == len(set(names))

    def test_groups_compose(self):
        """Test that all_rules is the union of the groups."""
        git = git_branch_rules() + git_push_pull_rules() + git_staging_rules()
        assert [r.name for r in git_rules()] == [r.name for r in git]

        expected = (
            git_rules()
            + filesystem_rules()
            + permission_rules()
            + package_manager_rules()
            + hint_rules()
        )
        assert [r.name for r in all_rules()] == [r.name for r in expected]

    def test_fresh_instances(self):
        """Test that each call builds new rules."""
        assert all_rules()[0] is not all_rules()[0]


class TestGitRules:
    """Tests for git corrections."""

    def test_branch_delete(self, corrector):
        output = "error: The branch 'feature' is not fully merged.\nIf you are sure you want to delete it, run 'git branch -D feature'."

        assert _scripts(corrector, "git branch -d feature", output)[0] == "git branch -D feature"

    def test_branch_exists(self, corrector):
        """Test creating the branch a checkout couldn't find."""
        output = "error: pathspec 'feature' did not match any file(s) known to git"

        assert _scripts(corrector, "git checkout feature", output) == ["git checkout -b feature"]

    def test_push_set_upstream(self, corrector):
        output = "fatal: The current branch main has no upstream branch."

        best = corrector.get_best_correction(Command("git push", output, 128))
        assert best.script == "git push -u origin"
        assert best.priority == 600

    def test_push_force(self, corrector):
        output = " ! [rejected]        main -> main (fetch first)"

        assert "git push --force-with-lease" in _scripts(corrector, "git push", output)

    def test_add_all(self, corrector):
        output = 'no changes added to commit (use "git add" and/or "git commit -a")'

        assert _scripts(corrector, "git commit -m wip", output)[0] == "git add -A && git commit -m wip"

    def test_not_a_repository(self, corrector):
        """Test the fuzzy hint for git outside a repository."""
        output = "fatal: not a git repository (or any of the parent directories): .git"

        best = corrector.get_best_correction(Command("git status", output, 128))
        assert best.script == "git init"
        assert best.priority == 900


class TestFilesystemRules:
    """Tests for filesystem corrections."""

    def test_mkdir_single_candidate(self, corrector):
        """Test that a missing-parent mkdir has exactly one fix."""
        corrections = corrector.get_corrections(
            Command("mkdir a/b", "mkdir: cannot create directory 'a/b': No such file or directory")
        )

        assert [(c.script, c.priority) for c in corrections] == [("mkdir -p a/b", 100)]

    def test_rm_directory(self, corrector):
        output = "rm: cannot remove 'build': Is a directory"

        assert _scripts(corrector, "rm build", output) == ["rm -r build"]

    def test_cp_directory(self, corrector):
        output = "cp: -r not specified; omitting directory 'src': Is a directory"

        assert _scripts(corrector, "cp src dst", output) == ["cp -r src dst"]

    def test_mv_to_missing_directory(self, corrector):
        """Test creating the destination's parent before moving."""
        script = "mv file.txt build/out/file.txt"
        output = "mv: cannot move 'file.txt' to 'build/out/file.txt': No such file or directory"

        assert _scripts(corrector, script, output) == [
            "mkdir -p build/out && mv file.txt build/out/file.txt"
        ]

    def test_mv_without_directory(self, corrector):
        """Test that a destination without a parent gets no fix."""
        output = "mv: cannot stat 'missing.txt': No such file or directory"

        assert _scripts(corrector, "mv missing.txt dest.txt", output) == []


class TestPermissionRules:
    """Tests for permission corrections."""

    def test_sudo(self, corrector):
        output = "cat: /etc/shadow: Permission denied"

        assert _scripts(corrector, "cat /etc/shadow", output) == ["sudo cat /etc/shadow"]

    def test_local_script(self, corrector):
        """Test that sudo ranks above making the script executable."""
        output = "bash: ./run.sh: Permission denied"

        assert _scripts(corrector, "./run.sh", output) == [
            "sudo ./run.sh",
            "chmod +x ./run.sh && ./run.sh",
        ]

    def test_sudo_apt(self, corrector):
        output = "E: Could not open lock file /var/lib/dpkg/lock-frontend - open (13: Permission denied)"

        scripts = _scripts(corrector, "apt install vim", output)
        assert scripts[0] == "sudo apt install vim"
        assert "sudo apt install vim" in scripts


class TestPackageManagerRules:
    """Tests for package manager corrections."""

    def test_apt_search(self, corrector):
        output = "E: Invalid operation search"

        assert _scripts(corrector, "apt search vim", output) == ["apt-cache search vim"]


class TestHintRules:
    """Tests for fuzzy hints."""

    def test_docker_daemon(self, corrector):
        output = (
            "Cannot connect to the Docker daemon at unix:///var/run/docker.sock. "
            "Is the docker daemon running?"
        )

        assert _scripts(corrector, "docker ps", output) == ["sudo systemctl start docker"]

    def test_pip_upgrade(self, corrector):
        output = (
            "WARNING: You are using pip version 21.0; however, version 23.0 is available.\n"
            "You should consider upgrading via the 'python -m pip install --upgrade pip' command."
        )

        assert _scripts(corrector, "pip install requests", output) == ["pip install --upgrade pip"]

    def test_no_hint_for_unrelated(self, corrector):
        assert _scripts(corrector, "ls", "ls: cannot access 'x'") == []

    def test_no_git_init_for_long_unrelated_output(self, corrector):
        """Test that long git output holding the message's letters in order doesn't suggest git init."""
        output = (
            "warning: in the working copy of 'src/big_file.txt', LF will be replaced "
            "by CRLF the next time git touches it\n"
        ) * 3

        assert "git init" not in _scripts(corrector, "git add .", output)

    def test_message_required_verbatim(self):
        """Test that the hint's output check is a substring check, not a fuzzy one."""
        rule = create_git_init()

        assert rule.matches(Command("git status", "fatal: not a git repository", 128))
        assert not rule.matches(Command("git status", "fatal: not a git  repository", 128))
        assert not rule.matches(Command("ls", "fatal: not a git repository", 128))
