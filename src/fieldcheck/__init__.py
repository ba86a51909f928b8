from .context import Validation
from .exceptions import (
    FieldCheckError,
    ValidationFailedError,
    ValidatorConfigurationError,
)
from .kinds import ValidatorKind
from .ports import IValidator
from .result import ValidationError, ValidationResult
from .validators import (
    EMAIL_PATTERN,
    Email,
    Length,
    Match,
    Max,
    MaxSize,
    Min,
    MinSize,
    Range,
    Required,
    Validator,
)

__all__ = [
    # Context
    "Validation",
    "ValidationResult",
    "ValidationError",
    # Validator capability
    "IValidator",
    "Validator",
    "ValidatorKind",
    # Built-in validators
    "Required",
    "Min",
    "Max",
    "Range",
    "MinSize",
    "MaxSize",
    "Length",
    "Match",
    "Email",
    "EMAIL_PATTERN",
    # Exceptions
    "FieldCheckError",
    "ValidatorConfigurationError",
    "ValidationFailedError",
]
