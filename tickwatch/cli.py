"""Main CLI entry point for tickwatch."""

import sys
import time

import click
from rich.console import Console

from tickwatch.config import load_config
from tickwatch.utils.error import InvalidArguments, handle_startup_error
from tickwatch.utils.exit_codes import SUCCESS
from tickwatch.utils.platform import detect_platform
from tickwatch.utils.watch import watch_loop

console = Console()

# Everything after the interval belongs to the watched command, flags included
CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(version="1.0.0")
@click.argument("interval", required=False)
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
@handle_startup_error
def main(interval, command):
    """Run COMMAND every INTERVAL seconds and show its latest output.

    The screen is cleared only after the command finishes, so the display
    never flashes blank. Press Ctrl+C to stop.

    Examples:
        tickwatch 2 ls -l --color=always
        tickwatch 0.5 date
    """
    if interval is None or not command:
        raise InvalidArguments("")

    config = load_config(interval, command)

    # Signals are not subscribed yet, so Ctrl+C still arrives as KeyboardInterrupt
    try:
        time.sleep(config.startup_delay)
    except KeyboardInterrupt:
        console.print("\n[dim]Watch stopped[/dim]")
        sys.exit(SUCCESS)

    watch_loop(
        config.command,
        config.interval,
        platform=detect_platform(),
        console=console,
    )
    sys.exit(SUCCESS)


if __name__ == "__main__":
    main()
