"""Shared fixtures for supplier-admin tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from supplier_admin.adapters.memory import (
    InMemoryPurchaseOrderRepository,
    InMemorySupplierRepository,
)
from supplier_admin.domain.supplier import SupplierRecord, SupplierStatus
from supplier_admin.history import ActionHistoryStore, HistoryConfig
from supplier_admin.primitives.id_generator import SequentialIDGenerator


def _make_supplier(
    supplier_id: str = "s1", name: str = "Acme", **fields: object
) -> SupplierRecord:
    return SupplierRecord(id=supplier_id, name=name, **fields)


@pytest.fixture
def make_supplier() -> Callable[..., SupplierRecord]:
    return _make_supplier


@pytest.fixture
def history() -> ActionHistoryStore:
    return ActionHistoryStore(
        HistoryConfig(), id_generator=SequentialIDGenerator(prefix="h")
    )


@pytest.fixture
def supplier_repo() -> InMemorySupplierRepository:
    return InMemorySupplierRepository()


@pytest.fixture
def order_repo() -> InMemoryPurchaseOrderRepository:
    return InMemoryPurchaseOrderRepository()


@pytest.fixture
def s1() -> SupplierRecord:
    return _make_supplier("s1", "Acme", status=SupplierStatus.ACTIVE)


@pytest.fixture
def s2() -> SupplierRecord:
    return _make_supplier("s2", "Globex", status=SupplierStatus.PENDING)
