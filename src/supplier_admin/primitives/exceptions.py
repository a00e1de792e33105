"""Domain and application exceptions for supplier-admin."""

from __future__ import annotations


class SupplierAdminError(Exception):
    """Root exception for the entire supplier-admin package."""


class DomainError(SupplierAdminError):
    """Base class for all domain-related errors."""


class NotFoundError(DomainError):
    """Raised when a supplier, order or other resource is not found."""


class EntityNotFoundError(NotFoundError):
    """Raised when a specific entity cannot be found by ID."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id={entity_id!r} not found")


class InvariantViolationError(DomainError):
    """Raised when a domain invariant is violated."""


class ValidationError(SupplierAdminError):
    """Raised when input validation fails.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class HandlerError(SupplierAdminError):
    """Base class for undo/redo executor errors (registration, lookup)."""


class ExecutorNotFoundError(HandlerError):
    """Raised when no executor is registered for an action type."""

    def __init__(self, action_type: str) -> None:
        self.action_type = action_type
        super().__init__(f"No executor registered for action type '{action_type}'")


class HistoryScopeError(SupplierAdminError):
    """Raised when a component needing action history is built without one."""
