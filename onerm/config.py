from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import dotenv


def log_level() -> str:
    """Package log level name (ONERM_LOG_LEVEL), upper-cased.

    Raises ValueError for a name the logging module does not know.
    """
    raw = os.environ.get("ONERM_LOG_LEVEL", "INFO")
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"ONERM_LOG_LEVEL must be a logging level name, got {raw!r}")
    return level


def log_file() -> str | None:
    return os.environ.get("ONERM_LOG_FILE") or None


def _numeric_env(name: str, default: str, cast):
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def display_precision() -> int:
    """Decimal places used when rounding table output (ONERM_PRECISION)."""
    return _numeric_env("ONERM_PRECISION", "1", int)


def training_max_pct() -> float:
    """Fraction of 1RM used as training max (ONERM_TRAINING_MAX_PCT)."""
    return _numeric_env("ONERM_TRAINING_MAX_PCT", "0.9", float)


@dataclass
class Settings:
    log_level: str
    log_file: str | None
    precision: int
    training_max_pct: float


def load_settings(env_file: str | None = None) -> Settings:
    """Load a .env file (if present) into the environment and read settings.

    Variables already set in the environment win over the .env file. The
    package logger is reconfigured with the resulting level and log file.
    """
    from .logger import setup_logger

    dotenv.load_dotenv(env_file)
    settings = Settings(
        log_level=log_level(),
        log_file=log_file(),
        precision=display_precision(),
        training_max_pct=training_max_pct(),
    )
    setup_logger(level=settings.log_level, log_file=settings.log_file)
    return settings
