"""Size checks on anything supporting ``len()``: min_size, max_size, length."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from pydantic import NonNegativeInt

from ..kinds import ValidatorKind
from .base import Validator


class MinSize(Validator):
    min: NonNegativeInt

    def __init__(self, min: int, **data: Any) -> None:
        super().__init__(min=min, **data)

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.MIN_SIZE

    def is_satisfied(self, value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        return len(value) >= self.min

    def default_message(self) -> str:
        return f"Minimum size is {self.min}"


class MaxSize(Validator):
    max: NonNegativeInt

    def __init__(self, max: int, **data: Any) -> None:
        super().__init__(max=max, **data)

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.MAX_SIZE

    def is_satisfied(self, value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        return len(value) <= self.max

    def default_message(self) -> str:
        return f"Maximum size is {self.max}"


class Length(Validator):
    length: NonNegativeInt

    def __init__(self, length: int, **data: Any) -> None:
        super().__init__(length=length, **data)

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.LENGTH

    def is_satisfied(self, value: Any) -> bool:
        if not isinstance(value, Sized):
            return False
        return len(value) == self.length

    def default_message(self) -> str:
        return f"Required length is {self.length}"
