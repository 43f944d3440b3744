"""Startup error handling for the tickwatch CLI."""

import sys
from functools import wraps

from rich.console import Console
from rich.markup import escape

from tickwatch.utils.exit_codes import USAGE_ERROR

console = Console()

USAGE = """Usage: tickwatch <interval_seconds> <command_to_run>
Example: tickwatch 2 ls -l --color=always
         tickwatch 1 date"""


class InvalidArguments(Exception):
    """Raised when the interval or command given on the command line is unusable."""


def print_usage() -> None:
    """Print the usage text to standard output."""
    console.print(USAGE, markup=False, highlight=False)


def handle_startup_error(func):
    """Decorator that turns startup validation failures into exit code 1."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except InvalidArguments as e:
            message = str(e)
            if message:
                console.print(
                    f"[red]Error: {escape(message)}[/red]", highlight=False, soft_wrap=True
                )
            print_usage()
            sys.exit(USAGE_ERROR)

    return wrapper
