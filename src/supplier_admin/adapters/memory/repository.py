"""In-memory repositories — dict-backed, single-process."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar

from ...domain.orders import PurchaseOrder
from ...domain.supplier import SupplierRecord
from ...ports.repository import IPurchaseOrderRepository, ISupplierRepository


class _Identified(Protocol):
    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=_Identified)


class _InMemoryStore(Generic[T]):
    """Insertion-ordered dict keyed by each item's ``id``."""

    def __init__(self) -> None:
        self._store: dict[str, T] = {}

    async def add(self, item: T) -> str:
        self._store[item.id] = item
        return item.id

    async def get(self, item_id: str) -> T | None:
        return self._store.get(item_id)

    async def delete(self, item_id: str) -> str:
        self._store.pop(item_id, None)
        return item_id

    async def list_all(self, item_ids: list[str] | None = None) -> list[T]:
        if item_ids is None:
            return list(self._store.values())
        wanted = set(item_ids)
        return [item for item_id, item in self._store.items() if item_id in wanted]

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


class InMemorySupplierRepository(_InMemoryStore[SupplierRecord], ISupplierRepository):
    """In-memory implementation of ``ISupplierRepository``."""


class InMemoryPurchaseOrderRepository(
    _InMemoryStore[PurchaseOrder], IPurchaseOrderRepository
):
    """In-memory implementation of ``IPurchaseOrderRepository``."""

    async def list_for_supplier(self, supplier_id: str) -> list[PurchaseOrder]:
        return [
            order for order in self._store.values() if order.supplier_id == supplier_id
        ]
