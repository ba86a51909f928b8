"""ValidationError and ValidationResult — per-check outcomes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .kinds import ValidatorKind


@dataclass
class ValidationError:
    """A recorded check failure.

    Owned by the :class:`~fieldcheck.context.Validation` that recorded it;
    the :class:`ValidationResult` of the same call holds the same object,
    so a message override is visible from both.
    """

    message: str = ""
    validator: ValidatorKind | None = None

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "validator": self.validator.value if self.validator else None,
        }


@dataclass
class ValidationResult:
    """Outcome of a single ``apply``/``check`` call.

    Usage::

        validation.check(name, Required()).message("Name is required")
        validation.min(age, 18).message("Must be at least %d years old", 18)
    """

    ok: bool
    error: ValidationError | None = None

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, error: ValidationError) -> ValidationResult:
        return cls(ok=False, error=error)

    # ── Message override ─────────────────────────────────────────

    def message(self, message: str, *args: Any) -> ValidationResult:
        """Replace the error message in place and return ``self``.

        Without *args* the message is stored verbatim. With *args* it is
        interpolated printf-style; a single mapping argument fills named
        placeholders. No-op on a successful result.
        """
        if self.error is None:
            return self
        if not args:
            self.error.message = message
        elif len(args) == 1 and isinstance(args[0], Mapping):
            self.error.message = message % args[0]
        else:
            self.error.message = message % args
        return self

    def __bool__(self) -> bool:
        return self.ok
