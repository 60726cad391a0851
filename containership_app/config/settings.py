"""
Basic settings and logging configuration for containership_app.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    log_level: int = logging.INFO
    # Optional log file; console only when None
    log_file: Path | None = None

    @classmethod
    def default(cls) -> "Settings":
        return cls()


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
    )

    logging.getLogger(__name__).info(
        "Logging initialized at %s", logging.getLevelName(settings.log_level)
    )
