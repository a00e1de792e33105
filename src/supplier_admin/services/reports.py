"""Supplier performance reports and the commission they earn."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from ..domain.orders import OrderStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..domain.orders import PurchaseOrder
    from ..domain.supplier import SupplierRecord

# Partial credit band for the "Good" rating.
QUALITY_TOLERANCE = 0.9
DELIVERY_TOLERANCE = 1.1


class ReportSettings(BaseModel):
    """Rates are fractions (0.025 == 2.5%); thresholds are 0..1 and days."""

    model_config = ConfigDict(frozen=True)

    base_commission_rate: float = Field(default=0.025, ge=0)
    performance_bonus: float = Field(default=0.2, ge=0)
    quality_threshold: float = Field(default=0.95, ge=0, le=1)
    delivery_time_threshold: float = Field(default=3, ge=0)


class PerformanceRating(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"


class SupplierPerformance(BaseModel):
    model_config = ConfigDict(frozen=True)

    supplier_id: str
    name: str
    order_volume: int = Field(default=0, ge=0)
    total_revenue: float = Field(default=0.0, ge=0)
    avg_delivery_time: float | None = Field(default=None, ge=0)
    quality_score: float = Field(default=0.0, ge=0, le=1)


class SupplierReportItem(SupplierPerformance):
    base_commission: float
    performance_bonus: float
    total_commission: float
    rating: PerformanceRating


def rate_performance(
    performance: SupplierPerformance, settings: ReportSettings
) -> PerformanceRating:
    """Rate quality and delivery time against *settings*.

    Without any delivered order the delivery threshold counts as not met.
    """
    delivery = performance.avg_delivery_time
    quality_met = performance.quality_score >= settings.quality_threshold
    delivery_met = delivery is not None and delivery <= settings.delivery_time_threshold
    if quality_met and delivery_met:
        return PerformanceRating.EXCELLENT
    if performance.quality_score >= settings.quality_threshold * QUALITY_TOLERANCE or (
        delivery is not None
        and delivery <= settings.delivery_time_threshold * DELIVERY_TOLERANCE
    ):
        return PerformanceRating.GOOD
    return PerformanceRating.NEEDS_IMPROVEMENT


def build_report_item(
    performance: SupplierPerformance, settings: ReportSettings | None = None
) -> SupplierReportItem:
    """Commission for one supplier.

    The bonus is a share of the base commission, paid only when quality and
    delivery time both meet their thresholds.
    """
    settings = settings or ReportSettings()
    rating = rate_performance(performance, settings)
    base = round(performance.total_revenue * settings.base_commission_rate, 2)
    bonus = 0.0
    if rating is PerformanceRating.EXCELLENT:
        bonus = round(base * settings.performance_bonus, 2)
    return SupplierReportItem(
        **performance.model_dump(),
        base_commission=base,
        performance_bonus=bonus,
        total_commission=round(base + bonus, 2),
        rating=rating,
    )


def build_report(
    performances: Iterable[SupplierPerformance],
    settings: ReportSettings | None = None,
) -> list[SupplierReportItem]:
    """Report rows for every supplier, highest total commission first."""
    items = [build_report_item(performance, settings) for performance in performances]
    return sorted(items, key=lambda item: item.total_commission, reverse=True)


def performance_from_orders(
    supplier: SupplierRecord,
    orders: Iterable[PurchaseOrder],
    quality_score: float,
) -> SupplierPerformance:
    """Derive volume, revenue and delivery time from a supplier's orders.

    Cancelled orders are ignored; delivery time averages delivered orders only
    and is ``None`` when nothing has been delivered yet.
    """
    counted = [
        order
        for order in orders
        if order.supplier_id == supplier.id
        and order.status is not OrderStatus.CANCELLED
    ]
    delivery_days = [
        days for days in (order.delivery_days for order in counted) if days is not None
    ]
    avg_delivery = (
        round(sum(delivery_days) / len(delivery_days), 1) if delivery_days else None
    )
    return SupplierPerformance(
        supplier_id=supplier.id,
        name=supplier.name,
        order_volume=len(counted),
        total_revenue=round(sum(order.total for order in counted), 2),
        avg_delivery_time=avg_delivery,
        quality_score=quality_score,
    )
