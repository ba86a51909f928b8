"""Shared fixtures for fieldcheck tests."""

from __future__ import annotations

import pytest

from fieldcheck import Validation


@pytest.fixture
def validation() -> Validation:
    """Fresh, empty validation context."""
    return Validation()
