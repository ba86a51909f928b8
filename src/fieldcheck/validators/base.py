"""
Validator base class.

Built-in validators are immutable pydantic models: their configuration is
checked once on construction and they compare and hash by value, so one
instance can be shared across fields and contexts.

New validators are added by subclassing :class:`Validator`, or by any
object satisfying :class:`~fieldcheck.ports.IValidator`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from decimal import Decimal
from fractions import Fraction
from numbers import Real
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainValidator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidatorConfigurationError
from ..kinds import ValidatorKind


def _check_bound(value: Any) -> Any:
    """Accept a finite real number as-is, keeping its exact type."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValueError(f"bound must be a real number, got {type(value).__name__}")
    if isinstance(value, Decimal):
        finite = value.is_finite()
    elif isinstance(value, float):
        finite = math.isfinite(value)
    else:
        finite = True
    if not finite:
        raise ValueError(f"bound must be finite, got {value}")
    return value


Bound = Annotated[int | float | Decimal | Fraction, PlainValidator(_check_bound)]


class Validator(BaseModel, ABC):
    """
    Strategy interface for a single field check.

    Each validator is an isolated class with an ``is_satisfied`` predicate
    and a ``default_message`` used when the predicate fails.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except PydanticValidationError as exc:
            errors = []
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ())) or "__root__"
                errors.append(f"{loc}: {error.get('msg', 'invalid value')}")
            raise ValidatorConfigurationError(type(self).__name__, errors) from exc

    @property
    @abstractmethod
    def name(self) -> ValidatorKind:
        """The kind of check this validator performs."""
        ...

    @abstractmethod
    def is_satisfied(self, value: Any) -> bool:
        """
        Evaluate the check against a concrete value.

        Args:
            value: The field value supplied by the caller.

        Returns:
            True if the value passes the check.
        """
        ...

    @abstractmethod
    def default_message(self) -> str:
        """Human-readable failure message."""
        ...
