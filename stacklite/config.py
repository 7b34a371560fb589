from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_DEFAULT_SOURCE_NAME = "<stdin>"


@dataclass(frozen=True)
class StackliteSettings:
    log_level: str
    source_name: str


def _dotenv_path() -> str | None:
    # A `.env` next to the `stacklite/` package wins over one found from CWD.
    beside_package = Path(__file__).resolve().parents[1] / ".env"
    if beside_package.is_file():
        return str(beside_package)
    return find_dotenv(usecwd=True) or None


def _log_level_from_env() -> str:
    raw = (os.getenv("STACKLITE_LOG_LEVEL") or "WARNING").strip().upper()
    if raw not in _LOG_LEVELS:
        raise ValueError(f"STACKLITE_LOG_LEVEL must be one of {sorted(_LOG_LEVELS)}: {raw!r}")
    return raw


def load_settings() -> StackliteSettings:
    """Read settings from the environment after applying any `.env` file.

    Variables already set in the environment take precedence over `.env`.
    """
    dotenv_path = _dotenv_path()
    if dotenv_path is not None:
        load_dotenv(dotenv_path)
    source_name = (os.getenv("STACKLITE_SOURCE_NAME") or "").strip()
    return StackliteSettings(
        log_level=_log_level_from_env(),
        source_name=source_name or _DEFAULT_SOURCE_NAME,
    )
