"""Shared test fixtures and utilities."""

import io

import pytest
from click.testing import CliRunner
from rich.console import Console

from tickwatch.utils.runner import ExecutionResult


@pytest.fixture
def runner():
    """Click CLI test runner.

    Example:
        def test_command(runner):
            result = runner.invoke(main, ['2', 'date'])
            assert result.exit_code == 0
    """
    return CliRunner()


@pytest.fixture
def console():
    """Rich console that writes plain text into a StringIO.

    Read what was drawn with ``console.file.getvalue()``.
    """
    return Console(file=io.StringIO(), width=200)


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class ScriptedCancellation:
    """Cancellation stub driven by a FakeClock.

    Each ``wait`` records its timeout and lets that much fake time pass, until
    ``ticks`` waits have completed; after that every ``wait`` reports
    cancellation.
    """

    def __init__(self, clock, ticks):
        self.clock = clock
        self.ticks = ticks
        self.timeouts = []

    def wait(self, timeout=None):
        self.timeouts.append(timeout)
        if self.ticks <= 0:
            return True
        self.clock.advance(timeout)
        self.ticks -= 1
        return False


@pytest.fixture
def fake_clock():
    return FakeClock()


def make_result(output=b"", exit_code=0, error=None, command="echo test"):
    """Factory for ExecutionResult objects."""
    if error is not None:
        exit_code = None
    return ExecutionResult(command=command, output=output, exit_code=exit_code, error=error)
