"""In-memory adapters."""

from __future__ import annotations

from .repository import InMemoryPurchaseOrderRepository, InMemorySupplierRepository

__all__ = ["InMemoryPurchaseOrderRepository", "InMemorySupplierRepository"]
