"""
Common exception classes for simpler-command.

This module defines the exception hierarchy raised by the library. Expected,
per-call failures are never raised from here directly; they are collected in a
command's error collection and only escalated through ``CommandFailure`` when
a caller forces the result out of a failed command.
"""

from __future__ import annotations

from typing import Any


class SimplerCommandError(Exception):
    """Base exception class for all simpler-command errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        for key, value in (kwargs or {}).items():
            setattr(self, key, value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "message": self.message,
                "type": self.__class__.__name__,
                "details": self.details,
            }
        }


class CommandNotImplementedError(SimplerCommandError, NotImplementedError):
    """Raised when a command type never defined the work it performs."""

    def __init__(
        self,
        message: str = "Command does not implement run()",
        details: dict[str, Any] | None = None,
        command_name: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)
        self.command_name = command_name


class CommandFailure(SimplerCommandError):
    """Raised when the result of a failed command is requested."""

    def __init__(
        self,
        message: str = "Command failed",
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)

    @property
    def errors(self) -> dict[str, list[str]]:
        """Field to messages projection of the errors that caused the failure."""
        return dict(self.details.get("errors", {}))


class ScaffoldError(SimplerCommandError):
    """Raised when a command skeleton cannot be generated."""

    def __init__(
        self,
        message: str = "Scaffolding failed",
        details: dict[str, Any] | None = None,
        path: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)
        self.path = path


class ConfigurationError(SimplerCommandError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, details, **kwargs)
