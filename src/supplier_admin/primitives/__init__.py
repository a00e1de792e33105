"""Primitives: exceptions, ID generation."""

from __future__ import annotations

from .exceptions import (
    DomainError,
    EntityNotFoundError,
    ExecutorNotFoundError,
    HandlerError,
    HistoryScopeError,
    InvariantViolationError,
    NotFoundError,
    SupplierAdminError,
    ValidationError,
)
from .id_generator import IIDGenerator, SequentialIDGenerator, UUID4Generator

__all__ = [
    "DomainError",
    "EntityNotFoundError",
    "ExecutorNotFoundError",
    "HandlerError",
    "HistoryScopeError",
    "IIDGenerator",
    "InvariantViolationError",
    "NotFoundError",
    "SequentialIDGenerator",
    "SupplierAdminError",
    "UUID4Generator",
    "ValidationError",
]
