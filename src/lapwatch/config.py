"""Environment-driven stopwatch settings."""

import os
from collections.abc import Mapping

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from lapwatch.core import Stopwatch

ENV_PREFIX = "LAPWATCH_"

# Setting name -> environment variable
ENV_VARS = {
    "enabled": f"{ENV_PREFIX}ENABLED",
    "echo": f"{ENV_PREFIX}ECHO",
    "color": f"{ENV_PREFIX}COLOR",
}


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


class StopwatchSettings(BaseModel):
    """Flags for building a Stopwatch."""

    enabled: bool = Field(default=True, description="Measure and report time")
    echo: bool = Field(default=False, description="Print each tick's label")
    color: bool = Field(default=True, description="Highlight report lines")


def load_settings(environ: Mapping[str, str] | None = None) -> StopwatchSettings:
    """Read stopwatch settings from the environment.

    When environ is omitted, a .env file is loaded first and the process
    environment is used. Empty values count as unset. NO_COLOR turns color
    off regardless of LAPWATCH_COLOR.

    Raises:
        ConfigError: If a variable cannot be parsed as a boolean
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {}
    for name, var in ENV_VARS.items():
        raw = environ.get(var, "").strip()
        if raw:
            values[name] = raw

    try:
        settings = StopwatchSettings(**values)
    except ValidationError as e:
        bad = [ENV_VARS[str(err["loc"][0])] for err in e.errors() if err["loc"]]
        raise ConfigError(f"Invalid boolean in {', '.join(bad)}") from e

    if environ.get("NO_COLOR"):
        settings = settings.model_copy(update={"color": False})
    return settings


def stopwatch_from_env(environ: Mapping[str, str] | None = None, **kwargs) -> Stopwatch:
    """Build a Stopwatch from environment settings.

    Extra keyword arguments (clock, stream) go to the Stopwatch constructor.
    """
    settings = load_settings(environ)
    return Stopwatch(settings.enabled, settings.echo, color=settings.color, **kwargs)
