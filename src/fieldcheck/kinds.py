from enum import Enum


class ValidatorKind(str, Enum):
    """Names of the built-in validators."""

    # Presence
    REQUIRED = "required"

    # Numeric bounds
    MIN = "min"
    MAX = "max"
    RANGE = "range"

    # Size / length
    MIN_SIZE = "min_size"
    MAX_SIZE = "max_size"
    LENGTH = "length"

    # Patterns
    MATCH = "match"
    EMAIL = "email"
