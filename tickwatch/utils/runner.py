"""Run the watched command through the platform shell."""

import subprocess
from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one command invocation.

    Attributes:
        command: The shell command string that was run.
        output: Combined stdout and stderr, in write order.
        exit_code: Exit status, or None if the command never started.
        error: Launch failure (e.g. interpreter missing), or None.
    """

    command: str
    output: bytes = b""
    exit_code: int | None = None
    error: OSError | None = None

    @property
    def failed(self) -> bool:
        """True if the command could not start or exited non-zero."""
        return self.error is not None or bool(self.exit_code)


def run_command(command: str, platform) -> ExecutionResult:
    """Run ``command`` to completion and capture everything it writes.

    Blocks for as long as the command runs; there is no timeout. stderr is
    merged into the stdout pipe so both streams keep their relative order.
    stdin is the null device, so commands cannot wait for keyboard input.
    """
    argv = platform.shell_argv(command)
    try:
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as e:
        return ExecutionResult(command=command, error=e)

    return ExecutionResult(
        command=command,
        output=completed.stdout or b"",
        exit_code=completed.returncode,
    )
