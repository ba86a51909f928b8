"""Presence check: required."""

from __future__ import annotations

from collections.abc import Sized
from typing import Any

from ..kinds import ValidatorKind
from .base import Validator


class Required(Validator):
    """False for None, empty strings and empty collections.

    Numbers and booleans always count as present, ``0`` and ``False``
    included.
    """

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.REQUIRED

    def is_satisfied(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, Sized):
            return len(value) > 0
        return True

    def default_message(self) -> str:
        return "Required"
