"""Numeric bound checks: min, max, range (all inclusive)."""

from __future__ import annotations

from typing import Any

from pydantic import model_validator

from ..kinds import ValidatorKind
from .base import Bound, Validator


class Min(Validator):
    min: Bound

    def __init__(self, min: Bound, **data: Any) -> None:
        super().__init__(min=min, **data)

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.MIN

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value >= self.min)

    def default_message(self) -> str:
        return f"Minimum is {self.min}"


class Max(Validator):
    max: Bound

    def __init__(self, max: Bound, **data: Any) -> None:
        super().__init__(max=max, **data)

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.MAX

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return False
        return bool(value <= self.max)

    def default_message(self) -> str:
        return f"Maximum is {self.max}"


class Range(Validator):
    """
    Composite of :class:`Min` and :class:`Max`.

    Accepts either bounds or components::

        Range(2, 5) == Range(Min(2), Max(5))

    The message always names both bounds, whichever one failed.
    """

    min: Min
    max: Max

    def __init__(self, min: Min | Bound, max: Max | Bound, **data: Any) -> None:
        if not isinstance(min, Min):
            min = Min(min)
        if not isinstance(max, Max):
            max = Max(max)
        super().__init__(min=min, max=max, **data)

    @model_validator(mode="after")
    def _check_bounds(self) -> Range:
        if self.min.min > self.max.max:
            raise ValueError(
                f"min ({self.min.min}) must not exceed max ({self.max.max})"
            )
        return self

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.RANGE

    def is_satisfied(self, value: Any) -> bool:
        return self.min.is_satisfied(value) and self.max.is_satisfied(value)

    def default_message(self) -> str:
        return f"Range is {self.min.min} to {self.max.max}"
