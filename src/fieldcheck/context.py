"""
Validation context.

Accumulates :class:`~fieldcheck.result.ValidationError` records in the
order checks fail. Independent fields are validated with repeated
``apply`` calls; several checks on one field are chained with ``check``,
which stops at the first failure.

Usage::

    v = Validation()
    v.check(form.name, Required(), MaxSize(64)).message("Name is invalid")
    v.check(form.age, Min(18), Max(130))
    v.email(form.email)

    if v.has_errors():
        print(v)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from typing import Any

from .exceptions import ValidationFailedError
from .kinds import ValidatorKind
from .ports import IValidator
from .result import ValidationError, ValidationResult
from .validators import (
    Email,
    Length,
    Match,
    Max,
    MaxSize,
    Min,
    MinSize,
    Range,
    Required,
)
from .validators.base import Bound


class Validation:
    """Mutable accumulator of validation errors for one validation pass.

    Not thread-safe; guard with a lock if shared between threads.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.errors: list[ValidationError] = []
        self._logger = logger or logging.getLogger("fieldcheck.context")

    # -- core ----------------------------------------------------------------

    def apply(self, validator: IValidator, value: Any) -> ValidationResult:
        """
        Run one validator against *value*.

        On failure a new error carrying the validator's default message is
        appended to :attr:`errors` and the returned result references it.
        """
        if validator.is_satisfied(value):
            return ValidationResult.success()

        kind = getattr(validator, "name", None)
        error = ValidationError(
            message=validator.default_message(),
            validator=kind if isinstance(kind, ValidatorKind) else None,
        )
        self._record(error, type(validator).__name__)
        return ValidationResult.failure(error)

    def check(self, value: Any, *validators: IValidator) -> ValidationResult:
        """
        Run *validators* against *value* in order, stopping at the first failure.

        Returns the failing result, or the result of the last validator when
        all pass. With no validators nothing is recorded and a success
        result is returned.
        """
        result = ValidationResult.success()
        for validator in validators:
            result = self.apply(validator, value)
            if not result.ok:
                break
        return result

    def error(self, message: str, *args: Any) -> ValidationResult:
        """Record a custom failure; *args* are interpolated printf-style."""
        error = ValidationError()
        result = ValidationResult.failure(error).message(message, *args)
        self._record(error, "error")
        return result

    def _record(self, error: ValidationError, source: str) -> None:
        self.errors.append(error)
        self._logger.debug("Validation failed (%s): %s", source, error.message)

    # -- shortcuts -----------------------------------------------------------

    def required(self, value: Any) -> ValidationResult:
        return self.apply(Required(), value)

    def min(self, n: Any, minimum: Bound) -> ValidationResult:
        return self.apply(Min(minimum), n)

    def max(self, n: Any, maximum: Bound) -> ValidationResult:
        return self.apply(Max(maximum), n)

    def range(self, n: Any, minimum: Bound, maximum: Bound) -> ValidationResult:
        return self.apply(Range(minimum, maximum), n)

    def min_size(self, value: Any, minimum: int) -> ValidationResult:
        return self.apply(MinSize(minimum), value)

    def max_size(self, value: Any, maximum: int) -> ValidationResult:
        return self.apply(MaxSize(maximum), value)

    def length(self, value: Any, n: int) -> ValidationResult:
        return self.apply(Length(n), value)

    def match(self, value: Any, pattern: re.Pattern[str] | str) -> ValidationResult:
        return self.apply(Match(pattern), value)

    def email(self, value: Any) -> ValidationResult:
        return self.apply(Email(), value)

    # -- aggregate queries ---------------------------------------------------

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @property
    def is_valid(self) -> bool:
        return not self.has_errors()

    def clear(self) -> None:
        """Drop all recorded errors.

        Results returned earlier keep their error objects, which are no
        longer reachable from this context.
        """
        if self.errors:
            self._logger.debug("Clearing %d validation error(s)", len(self.errors))
        self.errors = []

    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    def raise_if_errors(self) -> None:
        """Raise :class:`ValidationFailedError` if any error was recorded."""
        if self.errors:
            raise ValidationFailedError(self.messages())

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ValidationError]:
        return iter(self.errors)

    def __str__(self) -> str:
        return "".join(f"{error}\n" for error in self.errors)

    def __bool__(self) -> bool:
        return self.is_valid
