"""Refresh loop: run a command every interval and redraw the terminal."""

import enum
import time

from rich.console import Console

from tickwatch.utils.platform import detect_platform
from tickwatch.utils.runner import run_command
from tickwatch.utils.signals import SignalCancellation
from tickwatch.utils.terminal import clear_screen, render_result
from tickwatch.utils.ticker import Ticker


class LoopState(enum.Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class RefreshLoop:
    """Periodically run one shell command and show its latest output.

    Each cycle runs the command to completion, then clears the screen and
    prints the captured output. Clearing only after the output is ready keeps
    the display from flashing blank while a slow command runs. Commands never
    overlap: a command that outlasts the interval swallows the ticks it spans.

    Args:
        command: Shell command string.
        interval: Seconds between ticks (must be > 0).
        platform: Platform from ``detect_platform`` (default: detected).
        console: Rich Console to draw on (default: creates new one).
        runner: Callable ``(command, platform) -> ExecutionResult``
            (default: run_command).
        clearer: Callable ``(platform, stream) -> None`` (default: clear_screen).
    """

    def __init__(
        self,
        command,
        interval,
        platform=None,
        console=None,
        runner=None,
        clearer=None,
    ):
        if not command:
            raise ValueError("command must not be empty")
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")

        self.command = command
        self.interval = interval
        self.platform = platform if platform is not None else detect_platform()
        self.console = console if console is not None else Console()
        self.state = LoopState.RUNNING
        self.cycles = 0
        self._runner = runner or run_command
        self._clearer = clearer or clear_screen

    def run_cycle(self):
        """Run the command once and redraw the screen with its result."""
        result = self._runner(self.command, self.platform)
        self._clearer(self.platform, self.console.file)
        render_result(result, self.console)
        self.cycles += 1
        return result

    def run(self, cancellation, clock=time.monotonic) -> None:
        """Cycle until ``cancellation`` fires, then clear and print a notice.

        Cancellation is only checked between cycles; a command that is
        already running is allowed to finish and its output is shown first.

        Args:
            cancellation: Object with ``wait(timeout) -> bool``, such as
                ``SignalCancellation`` or ``threading.Event``.
            clock: Monotonic time source for the ticker.
        """
        if self.state is LoopState.TERMINATED:
            raise RuntimeError("Refresh loop has already terminated")

        with Ticker(self.interval, clock=clock) as ticker:
            while ticker.wait(cancellation):
                self.run_cycle()

        self._terminate()

    def _terminate(self) -> None:
        self._clearer(self.platform, self.console.file)
        self.console.print("\n[dim]Watch stopped[/dim]")
        self.state = LoopState.TERMINATED


def watch_loop(command, interval, platform=None, console=None):
    """Run ``command`` every ``interval`` seconds until SIGINT or SIGTERM.

    Owns the signal subscription for the lifetime of the loop and restores the
    previous handlers on every exit path.

    Args:
        command: Shell command string.
        interval: Refresh interval in seconds (must be > 0).
        platform: Optional platform (default: detected from the environment).
        console: Optional Rich Console instance (default: creates new one).

    Returns:
        The terminated RefreshLoop.
    """
    loop = RefreshLoop(command, interval, platform=platform, console=console)
    with SignalCancellation() as cancellation:
        loop.run(cancellation)
    return loop
