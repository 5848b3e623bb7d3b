"""
Centralized logging configuration for spirited.

The library itself only ever calls get_logger(); nothing is printed unless
the embedding application calls setup_logging() or configures the standard
logging module on its own. Includes colored console output for debug mode.
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union


_VERBOSE: bool = False

_env_verbose = os.getenv("SPIRITED_VERBOSE")
if _env_verbose is not None:
    if str(_env_verbose).strip().lower() in ("1", "true", "on", "yes"):
        _VERBOSE = True

_LOG_FORMAT = '%(asctime)s - %(name)-30s - %(levelname)-8s - %(message)s'

# Library default: stay silent unless the application configures handlers
logging.getLogger("spirited").addHandler(logging.NullHandler())


class ColoredFormatter(logging.Formatter):
    """Formatter that adds colors to console output."""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',       # Cyan
        'INFO': '\033[32m',        # Green
        'WARNING': '\033[33m',     # Yellow
        'ERROR': '\033[31m',       # Red
        'CRITICAL': '\033[35m',    # Magenta
    }
    RESET = '\033[0m'
    BOLD = '\033[1m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{self.BOLD}{color}{record.levelname}{self.RESET}"
        try:
            message = super().format(record)
        finally:
            record.levelname = original_levelname
        return f"{color}{message}{self.RESET}"


def setup_logging(debug: bool = False, verbose: bool = False,
                  log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configure logging for the spirited package.

    Args:
        debug: If True, set log level to DEBUG and enable console output.
        verbose: When True, per-tick diagnostics are logged as well. Verbose
            mode also implies debug-level logging.
        log_file: Optional path for a rotating log file (1MB, 5 backups).

    Returns:
        The configured ``spirited`` package logger.
    """
    global _VERBOSE

    debug_enabled = debug or verbose
    level = logging.DEBUG if debug_enabled else logging.INFO

    package_logger = logging.getLogger("spirited")
    package_logger.setLevel(level)

    # Drop handlers from a previous setup_logging() call, keep the NullHandler
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=1 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        file_handler.setLevel(level)
        package_logger.addHandler(file_handler)

    if debug_enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        if sys.stdout.isatty():
            console_handler.setFormatter(ColoredFormatter(_LOG_FORMAT, datefmt='%H:%M:%S'))
        else:
            console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt='%H:%M:%S'))
        console_handler.setLevel(level)
        package_logger.addHandler(console_handler)

    _VERBOSE = bool(verbose)

    package_logger.info(
        "spirited logging initialized (debug=%s, verbose=%s)",
        debug_enabled,
        _VERBOSE,
    )
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def is_verbose_logging() -> bool:
    """Return True when verbose (per-tick) debug logging is enabled globally."""

    return _VERBOSE
