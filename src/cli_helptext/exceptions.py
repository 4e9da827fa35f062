#!/usr/bin/env python3
"""
Exception hierarchy for help text rendering.

Path resolution is the only failure a well-formed render can hit; the other
exceptions cover startup (template compilation, configuration) and loading
command trees from documents.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class HelpTextError(Exception):
    """
    Base exception for all cli-helptext operations.

    All cli-helptext specific exceptions inherit from this class so callers
    can handle them with a single ``except`` clause.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# ──────────────────────────────────────────────────────────────────────────────
# Rendering Errors
# ──────────────────────────────────────────────────────────────────────────────


class CommandNotFoundError(HelpTextError):
    """Raised when a command path does not resolve against the command tree."""

    def __init__(
        self,
        path: Sequence[str],
        missing: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        self.path = list(path)
        self.missing = missing

        details = {"path": " ".join(self.path)}
        if missing:
            details["missing"] = missing

        super().__init__("Command not found", details, cause)


class TemplateCompileError(HelpTextError):
    """Raised when a help template fails to compile during initialization."""

    def __init__(
        self,
        message: str,
        template_name: Optional[str] = None,
        line_number: Optional[int] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if template_name:
            details["template"] = template_name
        if line_number:
            details["line_number"] = str(line_number)

        super().__init__(message, details, cause)
        self.template_name = template_name
        self.line_number = line_number


# ──────────────────────────────────────────────────────────────────────────────
# Configuration and Loading Errors
# ──────────────────────────────────────────────────────────────────────────────


class ConfigurationError(HelpTextError):
    """Raised when there's an issue with configuration."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = config_value

        super().__init__(message, details, cause)
        self.config_key = config_key
        self.config_value = config_value


class FileOperationError(HelpTextError):
    """Raised when file operations fail."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        operation: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if file_path:
            details["file_path"] = file_path
        if operation:
            details["operation"] = operation

        super().__init__(message, details, cause)
        self.file_path = file_path
        self.operation = operation


class TreeFormatError(HelpTextError):
    """Raised when a command tree document is malformed."""

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        details = {}
        if file_path:
            details["file_path"] = file_path

        super().__init__(message, details, cause)
        self.file_path = file_path


# ──────────────────────────────────────────────────────────────────────────────
# Utility Functions
# ──────────────────────────────────────────────────────────────────────────────


def wrap_exception(
    exc: Exception,
    message: Optional[str] = None,
    exception_class: type[HelpTextError] = HelpTextError,
    **kwargs,
) -> HelpTextError:
    """
    Wrap a generic exception in a cli-helptext specific exception.

    Args:
        exc: The original exception to wrap
        message: Optional custom message (uses original message if not provided)
        exception_class: The cli-helptext exception class to use
        **kwargs: Additional arguments for the exception class

    Returns:
        A cli-helptext specific exception wrapping the original
    """
    if isinstance(exc, HelpTextError):
        return exc

    error_message = message or str(exc)
    return exception_class(error_message, cause=exc, **kwargs)


__all__ = [
    # Base exception
    "HelpTextError",
    # Rendering
    "CommandNotFoundError",
    "TemplateCompileError",
    # Configuration and Loading
    "ConfigurationError",
    "FileOperationError",
    "TreeFormatError",
    # Utility functions
    "wrap_exception",
]
