"""Configuration for a tickwatch run."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tickwatch.utils.error import InvalidArguments


class WatchConfig(BaseSettings):
    """Validated startup settings.

    The interval and command come from the command line. Everything else may
    be set through ``TICKWATCH_*`` environment variables.
    """

    interval: float = Field(..., gt=0, allow_inf_nan=False)
    command: str = Field(..., min_length=1)

    # Pause before the first cycle so any startup message stays readable
    startup_delay: float = Field(default=1.0, ge=0, allow_inf_nan=False)

    model_config = SettingsConfigDict(
        env_prefix="TICKWATCH_",
        extra="ignore",
    )

    @field_validator("command")
    @classmethod
    def reject_blank_command(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("command must not be blank")
        return v


def _describe(error: ValidationError) -> str:
    """Turn the first validation failure into a one-line message."""
    first = error.errors()[0]
    field = first["loc"][0] if first["loc"] else ""
    if field == "interval":
        return f"Invalid interval provided. It must be a positive number: {first['msg']}"
    if field == "command":
        return f"Invalid command provided: {first['msg']}"
    return f"Configuration error ({field}): {first['msg']}"


def load_config(interval: str, command_args) -> WatchConfig:
    """Build the run configuration from raw command-line values.

    Args:
        interval: Interval in seconds, as typed by the user.
        command_args: Remaining command-line tokens. They are joined with
            single spaces into one shell command string.

    Raises:
        InvalidArguments: If the interval or command is unusable.
    """
    command = " ".join(command_args)
    try:
        return WatchConfig(interval=interval, command=command)
    except ValidationError as e:
        raise InvalidArguments(_describe(e)) from e
