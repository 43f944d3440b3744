"""Terminal helpers: clearing the screen and rendering command results."""

import subprocess

from rich.console import Console
from rich.markup import escape

from tickwatch.utils.runner import ExecutionResult


def clear_screen(platform, stream=None) -> None:
    """Clear the visible terminal, best effort.

    Clearing is cosmetic, so a missing ``clear`` binary or a failing one is
    ignored, and its stderr is discarded. ``stream`` is flushed first so
    nothing buffered lands after the clear sequence.
    """
    if stream is not None:
        stream.flush()
    try:
        subprocess.run(
            platform.clear_argv(),
            stdin=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        pass


def write_verbatim(data: bytes, stream) -> None:
    """Write raw command output, escape sequences included.

    Text streams that expose an underlying binary buffer get the bytes
    untouched; anything else gets a lossy UTF-8 decode.
    """
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        buffer.write(data)
        buffer.flush()
    else:
        stream.write(data.decode("utf-8", errors="replace"))
        stream.flush()


def render_result(result: ExecutionResult, console: Console) -> None:
    """Print one cycle's output followed by any failure annotation."""
    write_verbatim(result.output, console.file)
    if not result.failed:
        return

    if result.error is not None:
        console.print(
            f"\n[red]Error running command: {escape(str(result.error))}[/red]",
            highlight=False,
            soft_wrap=True,
        )
    else:
        console.print(
            f"\n[yellow]--- Command exited with non-zero status: {result.exit_code} ---[/yellow]",
            highlight=False,
            soft_wrap=True,
        )
