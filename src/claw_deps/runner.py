"""Subprocess execution for package-manager tools.

Audit and outdated commands exit non-zero to signal findings, so a failed
invocation is never raised to the caller. Whatever output was captured is
returned, tagged with a state describing how the command ended.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60


class CommandState(Enum):
    """How a command invocation ended."""

    OK = "ok"
    NONZERO = "nonzero"
    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    ERROR = "error"


@dataclass(frozen=True)
class CommandOutput:
    """Captured output of one command."""

    stdout: str = ""
    stderr: str = ""
    returncode: int | None = None
    state: CommandState = CommandState.OK

    @property
    def text(self) -> str:
        """Standard output, or standard error when stdout is empty."""
        return self.stdout or self.stderr

    @property
    def combined(self) -> str:
        """Both streams, for tools that report progress on stderr."""
        if self.stdout and self.stderr:
            return f"{self.stdout.rstrip()}\n{self.stderr}"
        return self.stdout or self.stderr

    @property
    def available(self) -> bool:
        """False when the executable could not be found."""
        return self.state != CommandState.NOT_FOUND


def _decode(stream: str | bytes | None) -> str:
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return stream


def run_command(
    command: Sequence[str],
    cwd: Path | str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> CommandOutput:
    """Run a command and capture its output without raising.

    Args:
        command: Command to run as a list of arguments (no shell).
        cwd: Working directory for the command.
        timeout: Seconds before the child is killed.

    Returns:
        CommandOutput with whatever was captured. Missing executables,
        timeouts and OS errors yield empty or partial output.
    """
    logger.debug("Running %s in %s", " ".join(command), cwd)
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            cwd=cwd,
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        logger.warning("Command not found: %s", command[0] if command else "command")
        return CommandOutput(state=CommandState.NOT_FOUND)
    except subprocess.TimeoutExpired as e:
        logger.warning("%s timed out after %ss", command[0], timeout)
        return CommandOutput(
            stdout=_decode(e.stdout),
            stderr=_decode(e.stderr),
            state=CommandState.TIMEOUT,
        )
    except OSError as e:
        logger.warning("Could not run %s: %s", command[0], e)
        return CommandOutput(state=CommandState.ERROR)

    state = CommandState.OK if result.returncode == 0 else CommandState.NONZERO
    if state is CommandState.NONZERO:
        logger.debug("%s exited with %s", command[0], result.returncode)
    return CommandOutput(
        stdout=result.stdout or "",
        stderr=result.stderr or "",
        returncode=result.returncode,
        state=state,
    )
