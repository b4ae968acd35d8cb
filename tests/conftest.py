"""Pytest configuration for claw-deps tests."""

from __future__ import annotations

from collections.abc import Sequence
from unittest.mock import patch

import pytest

from claw_deps.runner import CommandOutput, CommandState


class FakeTools:
    """Canned package-manager output keyed by command tuple.

    Commands without a canned answer behave like a missing executable.
    """

    def __init__(self) -> None:
        self.outputs: dict[tuple[str, ...], CommandOutput] = {}
        self.calls: list[tuple[str, ...]] = []

    def set(
        self,
        command: Sequence[str],
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> None:
        state = CommandState.OK if returncode == 0 else CommandState.NONZERO
        self.outputs[tuple(command)] = CommandOutput(
            stdout=stdout, stderr=stderr, returncode=returncode, state=state
        )

    def __call__(self, command, cwd=None, timeout=None) -> CommandOutput:
        key = tuple(command)
        self.calls.append(key)
        return self.outputs.get(key, CommandOutput(state=CommandState.NOT_FOUND))


@pytest.fixture
def fake_tools():
    """Patch the adapters' command runner with canned outputs."""
    tools = FakeTools()
    with patch("claw_deps.adapters.base.run_command", side_effect=tools):
        yield tools
