"""Logging configuration for the translation tooling."""

from __future__ import annotations

import logging
import logging.handlers
import sys
from datetime import datetime
from pathlib import Path

# Log levels for different components
LOGGING_CONFIG = {
    "zeitkapsl_i18n": logging.INFO,
    "zeitkapsl_i18n.core": logging.INFO,
    "zeitkapsl_i18n.infra": logging.INFO,
    "zeitkapsl_i18n.features": logging.INFO,

    # Reduce noise from libraries
    "openai": logging.WARNING,
    "httpx": logging.WARNING,
    "httpcore": logging.WARNING,
    "asyncio": logging.ERROR,
}


class LevelColorFormatter(logging.Formatter):
    """Colours the level name of console records when the stream is a terminal."""

    # ANSI SGR codes per level
    PALETTE = {
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def __init__(self, fmt: str, datefmt: str | None = None, use_color: bool = True) -> None:
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def formatMessage(self, record: logging.LogRecord) -> str:
        text = super().formatMessage(record)
        code = self.PALETTE.get(record.levelno)
        if not self.use_color or code is None:
            return text
        return text.replace(record.levelname, f"\033[{code}m{record.levelname}\033[0m", 1)


def setup_logging(log_file: bool = False, debug: bool = False, log_dir: Path | None = None) -> None:
    """Configure console (and optionally file) logging."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    root_logger.handlers.clear()

    # Console goes to stderr so command output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(
        LevelColorFormatter(
            "%(asctime)s %(levelname)-8s %(name)s - %(message)s",
            datefmt="%H:%M:%S",
            use_color=sys.stderr.isatty(),
        )
    )
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = log_dir or Path("logs")
        log_dir.mkdir(parents=True, exist_ok=True)
        log_filename = log_dir / f"i18n_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_filename,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        root_logger.addHandler(file_handler)

    for logger_name, level in LOGGING_CONFIG.items():
        logging.getLogger(logger_name).setLevel(logging.DEBUG if debug else level)

    logging.getLogger(__name__).debug(
        "Logging configured (console=%s, file=%s)",
        "DEBUG" if debug else "INFO",
        "ENABLED" if log_file else "DISABLED",
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with proper configuration."""
    return logging.getLogger(name)
