"""Host platform conventions for running commands and clearing the screen."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PosixPlatform:
    """Unix-like hosts: commands go through ``sh -c`` and ``clear`` wipes the screen."""

    shell: str = "sh"
    clear_command: str = "clear"

    def shell_argv(self, command: str) -> list[str]:
        return [self.shell, "-c", command]

    def clear_argv(self) -> list[str]:
        return [self.clear_command]


@dataclass(frozen=True)
class WindowsPlatform:
    """Windows hosts: commands and ``cls`` go through ``cmd /c``."""

    shell: str = "cmd"

    def shell_argv(self, command: str) -> list[str]:
        return [self.shell, "/c", command]

    def clear_argv(self) -> list[str]:
        return [self.shell, "/c", "cls"]


def detect_platform(environ=None):
    """Pick the platform once at startup.

    Windows sets ``OS=Windows_NT`` in every process environment; anything else
    is treated as POSIX.
    """
    if environ is None:
        environ = os.environ
    if environ.get("OS") == "Windows_NT":
        return WindowsPlatform()
    return PosixPlatform()
