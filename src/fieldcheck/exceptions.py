"""
fieldcheck exception hierarchy.

A failed check is never an exception: it is recorded on the
:class:`~fieldcheck.context.Validation` context. The exceptions below
signal misuse of the library and provide ``to_dict()`` for API-friendly
error responses.
"""

from __future__ import annotations

from typing import Any


class FieldCheckError(Exception):
    """Base exception for all fieldcheck errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidatorConfigurationError(FieldCheckError, ValueError):
    """
    A built-in validator was constructed with invalid configuration.

    Example error message::

        Invalid Range configuration: __root__: Value error, min (5) must not exceed max (2)
    """

    def __init__(self, validator: str, errors: list[str]) -> None:
        self.validator = validator
        self.errors = errors
        super().__init__(f"Invalid {validator} configuration: {'; '.join(errors)}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATOR_CONFIGURATION_ERROR",
            "validator": self.validator,
            "errors": list(self.errors),
        }


class ValidationFailedError(FieldCheckError):
    """Raised by ``Validation.raise_if_errors()`` when errors were recorded."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__(
            f"Validation failed with {len(messages)} error(s): {'; '.join(messages)}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_FAILED",
            "messages": list(self.messages),
        }
