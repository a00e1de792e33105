"""Purchase orders placed with suppliers."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .value_object import ValueObject


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


TERMINAL_ORDER_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})


class OrderItem(ValueObject):
    product: str = Field(min_length=1)
    quantity: int = Field(gt=0)
    unit_price: float = Field(ge=0)

    @property
    def subtotal(self) -> float:
        return round(self.quantity * self.unit_price, 2)


class PurchaseOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    order_number: str
    supplier_id: str
    order_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    items: list[OrderItem] = Field(min_length=1)
    status: OrderStatus = OrderStatus.PENDING
    delivered_at: datetime | None = None
    notes: str = ""

    @field_validator("order_date", "delivered_at")
    @classmethod
    def _as_utc(cls, value: datetime | None) -> datetime | None:
        # Naive datetimes are taken to be UTC.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @property
    def total(self) -> float:
        return round(sum(item.subtotal for item in self.items), 2)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_ORDER_STATUSES

    @property
    def delivery_days(self) -> float | None:
        """Days between ordering and delivery, once delivered."""
        if self.delivered_at is None:
            return None
        return (self.delivered_at - self.order_date).total_seconds() / 86400
