"""IValidator — the validator capability protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IValidator(Protocol):
    """Protocol for field validators.

    Anything exposing these two methods can be passed to
    :meth:`~fieldcheck.context.Validation.apply` and
    :meth:`~fieldcheck.context.Validation.check`. Implementations must be
    free of side effects so one instance can be reused across contexts.
    """

    def is_satisfied(self, value: Any) -> bool:
        """Return True if *value* passes the check."""
        ...

    def default_message(self) -> str:
        """Return the failure message, with the configuration already substituted."""
        ...
