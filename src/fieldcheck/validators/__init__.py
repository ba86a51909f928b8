"""
Built-in validators.

Usage::

    from fieldcheck.validators import Min, Max, Required

    validation.check(age, Required(), Min(18), Max(130))
"""

from __future__ import annotations

from .base import Validator
from .numeric import Max, Min, Range
from .pattern import EMAIL_PATTERN, Email, Match
from .required import Required
from .size import Length, MaxSize, MinSize

__all__ = [
    "Validator",
    # Presence
    "Required",
    # Numeric
    "Min",
    "Max",
    "Range",
    # Size
    "MinSize",
    "MaxSize",
    "Length",
    # Pattern
    "Match",
    "Email",
    "EMAIL_PATTERN",
]
