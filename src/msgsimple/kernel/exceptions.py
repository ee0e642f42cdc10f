"""Exception hierarchy for msgsimple.

All package exceptions inherit from MsgSimpleException so callers can catch
every msgsimple error with one handler.

Categories:
- ValidationException: invalid input handed to a builder or constructor
- ResourceLoadException: a message file could not be read
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class MsgSimpleException(Exception):
    """Base exception for all msgsimple errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "cfg.map.nullKey").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Validation Exceptions
# =============================================================================


class ValidationException(MsgSimpleException):
    """Input validation failures."""


class InvalidArgumentException(ValidationException):
    """A required argument is absent or invalid."""


# =============================================================================
# Resource Exceptions
# =============================================================================


class ResourceLoadException(MsgSimpleException):
    """A message resource could not be read or parsed."""
