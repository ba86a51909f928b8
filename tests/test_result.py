"""Tests for ValidationResult message overrides and ValidationError."""

from __future__ import annotations

from fieldcheck import (
    Max,
    Min,
    Required,
    Validation,
    ValidationError,
    ValidationResult,
    ValidatorKind,
)


def test_override_visible_through_result_and_context() -> None:
    validation = Validation()

    result = validation.check("", Required()).message("Name is required")

    assert result.error is not None
    assert result.error.message == "Name is required"
    assert validation.errors[0].message == "Name is required"


def test_override_returns_same_result() -> None:
    result = Validation().apply(Min(2), 1)

    assert result.message("too small") is result


def test_override_on_success_is_noop() -> None:
    validation = Validation()

    result = validation.check(3, Min(2), Max(5)).message("never shown")

    assert result.ok is True
    assert result.error is None
    assert validation.errors == []


def test_positional_interpolation() -> None:
    validation = Validation()

    validation.min(1, 2).message("Value %d is below %d", 1, 2)

    assert validation.messages() == ["Value 1 is below 2"]


def test_mapping_interpolation() -> None:
    validation = Validation()

    validation.required(None).message("%(field)s is required", {"field": "Email"})

    assert validation.messages() == ["Email is required"]


def test_verbatim_without_args() -> None:
    validation = Validation()

    validation.max(150, 100).message("Discount must be under 100%")

    assert validation.messages() == ["Discount must be under 100%"]


def test_override_can_be_repeated() -> None:
    validation = Validation()
    result = validation.required("")

    result.message("first")
    result.message("second")

    assert validation.messages() == ["second"]


def test_factories() -> None:
    error = ValidationError("boom")

    assert ValidationResult.success() == ValidationResult(ok=True, error=None)
    assert ValidationResult.failure(error).error is error
    assert bool(ValidationResult.success()) is True
    assert bool(ValidationResult.failure(error)) is False


def test_error_str_and_dict() -> None:
    error = ValidationError("Minimum is 2", validator=ValidatorKind.MIN)

    assert str(error) == "Minimum is 2"
    assert error.to_dict() == {"message": "Minimum is 2", "validator": "min"}


def test_custom_error_dict_has_no_validator() -> None:
    error = ValidationError("custom")

    assert error.to_dict() == {"message": "custom", "validator": None}
