"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import sys
from collections.abc import Iterator

import pytest
from loguru import logger

from ftf.core.types import Command
from ftf.rules.builders import SimpleRuleBuilder
from ftf.rules.registry import RuleRegistry


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Restore loguru's default sink after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> None:
    """Keep the user's real config file out of every test."""
    monkeypatch.setenv("FTF_CONFIG", str(tmp_path / "missing-config.yaml"))


@pytest.fixture
def mkdir_command() -> Command:
    """A mkdir failing because the parent directory is missing."""
    return Command(
        script="mkdir a/b",
        output="mkdir: cannot create directory 'a/b': No such file or directory",
        exit_code=1,
    )


@pytest.fixture
def mkdir_registry() -> RuleRegistry:
    """Registry with a mkdir rule and a sudo rule."""
    registry = RuleRegistry()
    registry.add_rule(
        SimpleRuleBuilder("mkdir_p")
        .match_command("mkdir")
        .match_output("No such file or directory")
        .priority(100)
        .replace("mkdir ", "mkdir -p ")
    )
    registry.add_rule(
        SimpleRuleBuilder("sudo")
        .match_output("Permission denied")
        .priority(200)
        .replace("", "sudo ")
    )
    return registry
