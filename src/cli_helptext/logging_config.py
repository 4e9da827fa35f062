#!/usr/bin/env python3
"""
Logging configuration for cli-helptext.

All package loggers hang off a single ``cli_helptext`` root logger, configured
once with a stderr handler and an optional rotating log file.
"""
from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional, Union

from .constants import (
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_LEVEL,
    LOG_FILE_BACKUP_COUNT,
    MAX_LOG_FILE_SIZE,
)

ROOT_LOGGER_NAME = "cli_helptext"


def _coerce_level(level: Union[str, int]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper())
    return level


class HelpTextLogger:
    """Centralized logger configuration for cli-helptext."""

    _configured = False
    _loggers: Dict[str, logging.Logger] = {}

    @classmethod
    def setup_logging(
        cls,
        level: Union[str, int] = DEFAULT_LOG_LEVEL,
        log_file: Optional[Union[str, Path]] = None,
        console_output: bool = True,
        format_string: Optional[str] = None,
        max_file_size: int = MAX_LOG_FILE_SIZE * 1024 * 1024,  # Convert MB to bytes
        backup_count: int = LOG_FILE_BACKUP_COUNT,
        force: bool = False,
    ) -> None:
        """
        Configure logging for cli-helptext.

        Args:
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Path to log file (None to disable file logging)
            console_output: Whether to output logs to stderr
            format_string: Custom format string for log messages
            max_file_size: Maximum size of log file before rotation (bytes)
            backup_count: Number of backup log files to keep
            force: Reconfigure even if logging was already set up
        """
        if cls._configured and not force:
            return

        level = _coerce_level(level)

        if format_string is None:
            format_string = DEFAULT_LOG_FORMAT

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)
        root_logger.handlers.clear()

        if console_output:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(format_string))
            root_logger.addHandler(console_handler)

        # File handler with rotation
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                log_path,
                maxBytes=max_file_size,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(format_string))
            root_logger.addHandler(file_handler)

        # Prevent propagation to avoid duplicate messages
        root_logger.propagate = False

        cls._configured = True

        cls.get_logger("logging_config").debug(
            "Logging configured - Level: %s, Console: %s, File: %s",
            logging.getLevelName(level),
            console_output,
            log_file,
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get a logger instance for the given module name.

        Args:
            name: Logger name (typically __name__ from the calling module)

        Returns:
            Configured logger instance
        """
        if not cls._configured:
            cls.setup_logging()

        if not name.startswith(ROOT_LOGGER_NAME):
            logger_name = f"{ROOT_LOGGER_NAME}.{name}"
        else:
            logger_name = name

        if logger_name not in cls._loggers:
            cls._loggers[logger_name] = logging.getLogger(logger_name)

        return cls._loggers[logger_name]

    @classmethod
    def set_level(cls, level: Union[str, int]) -> None:
        """
        Change the logging level for all cli-helptext loggers.

        Args:
            level: New logging level
        """
        level = _coerce_level(level)

        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)

        for handler in root_logger.handlers:
            handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Example:
        logger = get_logger(__name__)
        logger.debug("Rendering help for %s", path)
    """
    return HelpTextLogger.get_logger(name)


def setup_logging(
    level: Union[str, int] = DEFAULT_LOG_LEVEL,
    log_file: Optional[Union[str, Path]] = None,
    **kwargs,
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level
        log_file: Optional log file path
        **kwargs: Additional arguments passed to HelpTextLogger.setup_logging
    """
    HelpTextLogger.setup_logging(level=level, log_file=log_file, **kwargs)


__all__ = [
    "HelpTextLogger",
    "get_logger",
    "setup_logging",
]
