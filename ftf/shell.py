"""
Shell abstraction for running corrected commands.

Keeps the correction engine independent of the shell that actually runs
the chosen correction.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ftf.core.exceptions import ShellError
from ftf.utils.logger import log_prefix


@dataclass(frozen=True)
class ShellOutput:
    """Result of executing a command in the shell."""

    command: str
    stdout: str
    stderr: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """Combined stdout and stderr, as a Command expects it."""
        return self.stdout + self.stderr


class Shell(ABC):
    """
    Abstract base class for shells.

    Subclasses run commands and expose the working directory, environment
    and history of the user's session.
    """

    name: str = ""

    @abstractmethod
    def execute(self, command: str, timeout: float | None = None) -> ShellOutput:
        """Run a command and capture its output."""
        pass

    @abstractmethod
    def cwd(self) -> Path:
        """Current working directory."""
        pass

    @abstractmethod
    def set_cwd(self, path: Path | str) -> None:
        """Set the working directory for subsequent commands."""
        pass

    @abstractmethod
    def env(self, key: str) -> str | None:
        """Get an environment variable."""
        pass

    @abstractmethod
    def set_env(self, key: str, value: str) -> None:
        """Set an environment variable for subsequent commands."""
        pass

    def history(self) -> list[str]:
        """Shell history, most recent first (empty if unavailable)."""
        return []

    @abstractmethod
    def command_exists(self, command: str) -> bool:
        """Check if a command is on PATH."""
        pass


class BashShell(Shell):
    """Bash implementation running commands with `bash -c`."""

    name = "bash"

    def __init__(self, cwd: Path | str | None = None, env: dict[str, str] | None = None) -> None:
        self._cwd = Path(cwd) if cwd is not None else Path.cwd()
        self._env = dict(env) if env is not None else dict(os.environ)

    def execute(self, command: str, timeout: float | None = None) -> ShellOutput:
        """
        Run a command and capture its output.

        Raises:
            ShellError: If bash can't be started or the command times out.
        """
        logger.debug(f"{log_prefix('🐚')} Executing: {command}")
        try:
            result = subprocess.run(
                ["bash", "-c", command],
                cwd=self._cwd,
                env=self._env,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise ShellError(command, f"timed out after {timeout}s") from e
        except OSError as e:
            raise ShellError(command, str(e)) from e

        return ShellOutput(
            command=command,
            stdout=result.stdout,
            stderr=result.stderr,
            exit_code=result.returncode,
        )

    def cwd(self) -> Path:
        return self._cwd

    def set_cwd(self, path: Path | str) -> None:
        path = Path(path)
        if not path.is_dir():
            raise ShellError(f"cd {path}", "no such directory")
        self._cwd = path

    def env(self, key: str) -> str | None:
        return self._env.get(key)

    def set_env(self, key: str, value: str) -> None:
        self._env[key] = value

    def history(self) -> list[str]:
        """Read $HISTFILE, or ~/.bash_history, most recent first."""
        hist_file = self.env("HISTFILE")
        if not hist_file:
            home = self.env("HOME") or str(Path.home())
            hist_file = str(Path(home) / ".bash_history")

        try:
            lines = Path(hist_file).read_text(encoding="utf-8", errors="replace").splitlines()
        except OSError:
            return []
        return [line for line in reversed(lines) if line.strip()]

    def command_exists(self, command: str) -> bool:
        return shutil.which(command, path=self.env("PATH")) is not None


ALIAS_TEMPLATE = """\
{name}() {{
    local previous output exit_code correction
    previous="$(fc -ln -1 | sed 's/^[[:space:]]*//')"
    output="$(eval "$previous" 2>&1)"
    exit_code=$?
    correction="$(command ftf fix --command "$previous" --output "$output" --exit-code "$exit_code" "$@")" || return 1
    history -s "$correction"
    eval "$correction"
}}
"""


def alias_script(name: str = "ftf") -> str:
    """
    Render the bash function wiring ftf into an interactive shell.

    The function re-runs the previous command to capture its output and
    exit code, asks ftf for a correction and evaluates it.
    """
    return ALIAS_TEMPLATE.format(name=name)
