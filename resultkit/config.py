"""Runtime settings read from the environment (and a local .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .comprehension import do_map
from .result import Result, failure, success

LOG_LEVEL_VAR = "RESULTKIT_LOG_LEVEL"
TRACEBACK_VAR = "RESULTKIT_TRACEBACK"

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    show_traceback: bool = False

    @classmethod
    def from_env(cls) -> Result[Settings]:
        """Build settings from RESULTKIT_* variables, loading .env first."""
        load_dotenv(find_dotenv(usecwd=True))
        return do_map(
            lambda: _parse_level(os.getenv(LOG_LEVEL_VAR)),
            lambda level: _parse_flag(TRACEBACK_VAR, os.getenv(TRACEBACK_VAR)),
            lambda level, show_traceback: cls(
                log_level=level, show_traceback=show_traceback
            ),
        )


def _parse_level(raw: str | None) -> Result[str]:
    match (raw or "").strip().upper():
        case "":
            return success("WARNING")
        case level if level in _LEVELS:
            return success(level)
        case _:
            return failure(
                f"{LOG_LEVEL_VAR} must be one of {', '.join(_LEVELS)}, got {raw!r}"
            )


def _parse_flag(name: str, raw: str | None) -> Result[bool]:
    match (raw or "").strip().lower():
        case "":
            return success(False)
        case flag if flag in _TRUE:
            return success(True)
        case flag if flag in _FALSE:
            return success(False)
        case _:
            return failure(f"{name} must be a boolean flag, got {raw!r}")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
