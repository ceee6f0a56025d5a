"""
Shared logging configuration for the Alpha Hunter pipeline.

Usage:
    from alpha_hunter.logging_config import get_logger, configure_logging

    # In the entry point (e.g., main()):
    configure_logging(level=logging.DEBUG, log_file=Path("logs/alpha_hunter.log"))

    # In any module:
    logger = get_logger(__name__)
    logger.info("Parsed %d projects", count)
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .config.settings import LOG_CONFIG


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Use __name__ for module-level loggers."""
    return logging.getLogger(name)


def resolve_level(level: Union[int, str]) -> int:
    """Accept either a logging constant or a name like "debug"."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_logging(
    level: Union[int, str] = LOG_CONFIG["level"],
    log_file: Optional[Path] = None,
    quiet: bool = False,
) -> None:
    """
    Configure the root logger with console and optional file handlers.

    Args:
        level: Logging level or level name (default from LOG_LEVEL env).
        log_file: If provided, also write logs to this file.
        quiet: If True, console only shows WARNING and above (file gets `level` and above).
    """
    level = resolve_level(level)
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    # Console handler (stderr)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.WARNING if quiet else level)
    console.setFormatter(
        logging.Formatter(LOG_CONFIG["format"], datefmt=LOG_CONFIG["console_datefmt"])
    )
    root.addHandler(console)

    # File handler (optional)
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(
            logging.Formatter(LOG_CONFIG["format"], datefmt=LOG_CONFIG["file_datefmt"])
        )
        root.addHandler(fh)
