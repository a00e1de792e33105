"""Repository protocols for suppliers and purchase orders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.orders import PurchaseOrder
    from ..domain.supplier import SupplierRecord


@runtime_checkable
class ISupplierRepository(Protocol):
    """
    Store of supplier records keyed by ``id``.

    ``add`` inserts or replaces. ``delete`` of an unknown id is a no-op
    that still returns the id.
    """

    async def add(self, supplier: SupplierRecord) -> str: ...

    async def get(self, supplier_id: str) -> SupplierRecord | None: ...

    async def delete(self, supplier_id: str) -> str: ...

    async def list_all(
        self, supplier_ids: list[str] | None = None
    ) -> list[SupplierRecord]: ...


@runtime_checkable
class IPurchaseOrderRepository(Protocol):
    """Store of purchase orders keyed by ``id``."""

    async def add(self, order: PurchaseOrder) -> str: ...

    async def get(self, order_id: str) -> PurchaseOrder | None: ...

    async def delete(self, order_id: str) -> str: ...

    async def list_all(
        self, order_ids: list[str] | None = None
    ) -> list[PurchaseOrder]: ...

    async def list_for_supplier(self, supplier_id: str) -> list[PurchaseOrder]: ...
