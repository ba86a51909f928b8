"""Pattern checks: match, email."""

from __future__ import annotations

import re
from typing import Any

from ..kinds import ValidatorKind
from .base import Validator

EMAIL_PATTERN = re.compile(
    r"^[\w!#$%&'*+/=?^_`{|}~-]+(?:\.[\w!#$%&'*+/=?^_`{|}~-]+)*"
    r"@(?:\w(?:[\w-]*\w)?\.)+[a-zA-Z0-9](?:[\w-]*\w)?$"
)


class Match(Validator):
    """Unanchored search; anchor the pattern to match the whole value."""

    pattern: re.Pattern[str]

    def __init__(self, pattern: re.Pattern[str] | str, **data: Any) -> None:
        super().__init__(pattern=pattern, **data)

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.MATCH

    def is_satisfied(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return self.pattern.search(value) is not None

    def default_message(self) -> str:
        return f"Must match {self.pattern.pattern}"


class Email(Validator):
    match: Match

    def __init__(
        self, pattern: re.Pattern[str] | str | None = None, **data: Any
    ) -> None:
        match = Match(EMAIL_PATTERN if pattern is None else pattern)
        super().__init__(match=match, **data)

    @property
    def name(self) -> ValidatorKind:
        return ValidatorKind.EMAIL

    def is_satisfied(self, value: Any) -> bool:
        return self.match.is_satisfied(value)

    def default_message(self) -> str:
        return "Must be a valid email address"
