"""Logging setup for applications embedding the engine."""

import logging
from typing import Optional

from finance_engine.config.settings import EngineSettings, get_settings


def configure_logging(settings: Optional[EngineSettings] = None) -> None:
    """Apply the configured level and format to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format,
    )
    logging.getLogger("finance_engine").setLevel(settings.log_level)
