"""Tests for the in-memory supplier and purchase-order repositories."""

from __future__ import annotations

import pytest

from supplier_admin.adapters.memory import (
    InMemoryPurchaseOrderRepository,
    InMemorySupplierRepository,
)
from supplier_admin.domain.orders import OrderItem, PurchaseOrder
from supplier_admin.ports.repository import (
    IPurchaseOrderRepository,
    ISupplierRepository,
)


def make_order(order_id: str, supplier_id: str) -> PurchaseOrder:
    return PurchaseOrder(
        id=order_id,
        order_number=f"PO-{order_id}",
        supplier_id=supplier_id,
        items=[OrderItem(product="Bolts", quantity=10, unit_price=0.5)],
    )


@pytest.mark.asyncio
class TestInMemorySupplierRepository:
    """CRUD behaviour of the dict-backed supplier store."""

    @pytest.fixture
    def repo(self) -> InMemorySupplierRepository:
        return InMemorySupplierRepository()

    async def test_satisfies_port(self, repo: InMemorySupplierRepository) -> None:
        assert isinstance(repo, ISupplierRepository)

    async def test_add_and_get(self, repo: InMemorySupplierRepository, s1) -> None:
        """Add stores the record and returns its ID."""
        assert await repo.add(s1) == "s1"
        assert await repo.get("s1") == s1
        assert len(repo) == 1

    async def test_add_replaces(self, repo: InMemorySupplierRepository, s1) -> None:
        await repo.add(s1)
        await repo.add(s1.with_changes({"name": "Renamed"}))

        assert len(repo) == 1
        assert (await repo.get("s1")).name == "Renamed"

    async def test_get_missing(self, repo: InMemorySupplierRepository) -> None:
        assert await repo.get("nope") is None

    async def test_delete(self, repo: InMemorySupplierRepository, s1) -> None:
        """Delete removes the record; unknown IDs are ignored."""
        await repo.add(s1)

        assert await repo.delete("s1") == "s1"
        assert await repo.delete("s1") == "s1"
        assert len(repo) == 0

    async def test_list_all_with_ids(
        self, repo: InMemorySupplierRepository, s1, s2
    ) -> None:
        await repo.add(s1)
        await repo.add(s2)

        assert await repo.list_all() == [s1, s2]
        assert await repo.list_all(["s2", "unknown"]) == [s2]

    async def test_clear(self, repo: InMemorySupplierRepository, s1) -> None:
        await repo.add(s1)
        repo.clear()
        assert len(repo) == 0


@pytest.mark.asyncio
class TestInMemoryPurchaseOrderRepository:
    async def test_list_for_supplier(self) -> None:
        repo = InMemoryPurchaseOrderRepository()
        assert isinstance(repo, IPurchaseOrderRepository)
        await repo.add(make_order("o1", "s1"))
        await repo.add(make_order("o2", "s2"))
        await repo.add(make_order("o3", "s1"))

        found = await repo.list_for_supplier("s1")

        assert [order.id for order in found] == ["o1", "o3"]
