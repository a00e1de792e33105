"""Validation helpers."""

from __future__ import annotations

from .result import ValidationResult

__all__ = ["ValidationResult"]
