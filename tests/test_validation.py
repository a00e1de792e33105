"""Tests for ValidationResult."""

from __future__ import annotations

import pytest

from supplier_admin.primitives.exceptions import ValidationError
from supplier_admin.validation.result import ValidationResult


class TestValidationResult:
    def test_success(self) -> None:
        result = ValidationResult.success()

        assert result.is_valid
        assert result
        assert result.message == "Configuration is valid"

    def test_add_error_and_message(self) -> None:
        result = ValidationResult.success()
        result.add_error("host", "is required")
        result.add_error("host", "must be a hostname")

        assert not result
        assert result.errors == {"host": ["is required", "must be a hostname"]}
        assert result.message == "2 validation issue(s) found"

    def test_merge_combines_without_mutating(self) -> None:
        left = ValidationResult.failure({"a": ["x"]})
        right = ValidationResult.failure({"a": ["y"], "b": ["z"]})

        merged = left.merge(right)

        assert merged.errors == {"a": ["x", "y"], "b": ["z"]}
        assert left.errors == {"a": ["x"]}

    def test_raise_if_invalid(self) -> None:
        ValidationResult.success().raise_if_invalid()

        with pytest.raises(ValidationError) as exc_info:
            ValidationResult.failure({"port": ["out of range"]}).raise_if_invalid()
        assert exc_info.value.errors == {"port": ["out of range"]}
