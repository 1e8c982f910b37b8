"""App-level logging policy over engine logging API."""

from __future__ import annotations

import logging
import os

from engine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> EngineLoggingConfig:
    """Resolve logging pipeline settings from env vars."""
    level_name = os.getenv("BOWLING_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).strip().upper()
    console_format = os.getenv("LOG_FORMAT", "text").strip().lower() or "text"
    file_path = os.getenv("BOWLING_LOG_FILE", "").strip() or None
    return EngineLoggingConfig(
        level_name=level_name or "INFO",
        console_format=console_format,
        file_path=file_path,
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging via engine logging API."""
    config = build_logging_config()
    configure_logging(config)
    if config.file_path:
        logging.getLogger(__name__).info("logging_file=%s", config.file_path)
