"""
Logging Configuration for the executor encoder

Provides:
- Timestamps and log levels
- Console handler (stderr, so stdout stays clean for CLI output)
- Optional rotating file handler
- Detailed format with file/line for debugging
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Log formats
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
    detailed: bool = False,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Setup a logger with console and optional file handlers.

    Args:
        name: Logger name (typically the package name)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name; no file handler when omitted
        console: Whether to log to the console
        detailed: Whether to use detailed format (includes file/line)
        log_dir: Directory for log_file (defaults to ./logs)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger("executor_encoder", level=logging.DEBUG)
        >>> logger.debug("Queued call")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    log_format = DETAILED_FORMAT if detailed else SIMPLE_FORMAT
    formatter = logging.Formatter(log_format, datefmt=DATE_FORMAT)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file is not None:
        directory = Path(log_dir) if log_dir is not None else Path.cwd() / "logs"
        directory.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            directory / log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_cli_logger(debug: bool = False, level: Optional[int] = None) -> logging.Logger:
    """Get the package logger configured for CLI use."""
    if level is None:
        level = logging.DEBUG if debug else logging.WARNING
    logger = setup_logger("executor_encoder", level=level, detailed=debug)
    # setup_logger keeps existing handlers; still honour the requested level
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
