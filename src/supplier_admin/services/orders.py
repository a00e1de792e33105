"""PurchaseOrderService — placing and tracking orders with suppliers.

Order numbers follow ``PO-{date}-{seq:3}``: the order date as YYYYMMDD and
a zero-padded sequence that restarts every day.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from ..domain.orders import OrderItem, OrderStatus, PurchaseOrder
from ..primitives.exceptions import EntityNotFoundError, InvariantViolationError
from ..primitives.id_generator import IIDGenerator, UUID4Generator

if TYPE_CHECKING:
    from ..ports.repository import IPurchaseOrderRepository, ISupplierRepository

logger = logging.getLogger("supplier_admin.orders")

ORDER_NUMBER_PREFIX = "PO"
SEQUENCE_DIGITS = 3


def _build_order_number(order_date: datetime, seq: int) -> str:
    return f"{ORDER_NUMBER_PREFIX}-{order_date:%Y%m%d}-{seq:0{SEQUENCE_DIGITS}d}"


def _to_items(items: Iterable[OrderItem | Mapping[str, Any]]) -> list[OrderItem]:
    return [
        item if isinstance(item, OrderItem) else OrderItem.model_validate(item)
        for item in items
    ]


class PurchaseOrderService:
    def __init__(
        self,
        orders: IPurchaseOrderRepository,
        suppliers: ISupplierRepository,
        *,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._orders = orders
        self._suppliers = suppliers
        self._id_generator = id_generator or UUID4Generator()

    async def create_order(
        self,
        supplier_id: str,
        items: Iterable[OrderItem | Mapping[str, Any]],
        order_date: datetime | None = None,
        notes: str = "",
    ) -> PurchaseOrder:
        if await self._suppliers.get(supplier_id) is None:
            raise EntityNotFoundError("Supplier", supplier_id)

        order_date = order_date or datetime.now(timezone.utc)
        order = PurchaseOrder(
            id=self._id_generator.next_id(),
            order_number=await self._next_order_number(order_date),
            supplier_id=supplier_id,
            order_date=order_date,
            items=_to_items(items),
            notes=notes,
        )
        await self._orders.add(order)
        logger.info(
            "Created order %s for supplier %s (total %.2f)",
            order.order_number,
            supplier_id,
            order.total,
        )
        return order

    async def update_status(
        self, order_id: str, status: OrderStatus | str
    ) -> PurchaseOrder:
        """Move an order to *status*. Delivered and cancelled orders are final."""
        order = await self._require(order_id)
        new_status = OrderStatus(status)
        if order.status is new_status:
            return order
        if order.is_terminal:
            raise InvariantViolationError(
                f"Order {order.order_number} is {order.status.value} "
                "and can no longer change status"
            )

        changes: dict[str, Any] = {"status": new_status}
        if new_status is OrderStatus.DELIVERED:
            changes["delivered_at"] = datetime.now(timezone.utc)
        updated = order.model_copy(update=changes)
        await self._orders.add(updated)
        logger.info(
            "Order %s status %s -> %s",
            order.order_number,
            order.status.value,
            new_status.value,
        )
        return updated

    async def update_items(
        self, order_id: str, items: Iterable[OrderItem | Mapping[str, Any]]
    ) -> PurchaseOrder:
        order = await self._require(order_id)
        if order.status is not OrderStatus.PENDING:
            raise InvariantViolationError(
                f"Items of order {order.order_number} can only change while pending"
            )
        updated = PurchaseOrder.model_validate(
            {**order.model_dump(), "items": _to_items(items)}
        )
        await self._orders.add(updated)
        return updated

    async def get(self, order_id: str) -> PurchaseOrder | None:
        return await self._orders.get(order_id)

    async def list_for_supplier(self, supplier_id: str) -> list[PurchaseOrder]:
        """Orders placed with *supplier_id*, newest first."""
        orders = await self._orders.list_for_supplier(supplier_id)
        return sorted(orders, key=lambda order: order.order_date, reverse=True)

    async def _next_order_number(self, order_date: datetime) -> str:
        prefix = _build_order_number(order_date, 0)[: -SEQUENCE_DIGITS]
        taken = [
            order.order_number
            for order in await self._orders.list_all()
            if order.order_number.startswith(prefix)
        ]
        return _build_order_number(order_date, len(taken) + 1)

    async def _require(self, order_id: str) -> PurchaseOrder:
        order = await self._orders.get(order_id)
        if order is None:
            raise EntityNotFoundError("PurchaseOrder", order_id)
        return order
