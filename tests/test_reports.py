"""Tests for supplier performance ratings and commission reports."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from supplier_admin.domain.orders import OrderItem, OrderStatus, PurchaseOrder
from supplier_admin.services.reports import (
    PerformanceRating,
    ReportSettings,
    SupplierPerformance,
    build_report,
    build_report_item,
    performance_from_orders,
)

ORDERED = datetime(2026, 2, 1, tzinfo=timezone.utc)


def perf(
    supplier_id: str, revenue: float, quality: float, delivery: float
) -> SupplierPerformance:
    return SupplierPerformance(
        supplier_id=supplier_id,
        name=supplier_id.upper(),
        order_volume=10,
        total_revenue=revenue,
        avg_delivery_time=delivery,
        quality_score=quality,
    )


def order(order_id: str, supplier_id: str, amount: float, **fields) -> PurchaseOrder:
    return PurchaseOrder(
        id=order_id,
        order_number=f"PO-{order_id}",
        supplier_id=supplier_id,
        order_date=ORDERED,
        items=[OrderItem(product="Widget", quantity=1, unit_price=amount)],
        **fields,
    )


class TestReportItem:
    def test_excellent_earns_bonus(self) -> None:
        item = build_report_item(perf("a", 45600, 0.96, 2.8))

        assert item.rating is PerformanceRating.EXCELLENT
        assert item.base_commission == 1140.0
        assert item.performance_bonus == 228.0
        assert item.total_commission == 1368.0

    @pytest.mark.parametrize(
        ("quality", "delivery", "rating"),
        [
            (0.90, 5.0, PerformanceRating.GOOD),
            (0.70, 3.2, PerformanceRating.GOOD),
            (0.70, 5.0, PerformanceRating.NEEDS_IMPROVEMENT),
        ],
    )
    def test_no_bonus_below_excellent(
        self, quality: float, delivery: float, rating: PerformanceRating
    ) -> None:
        item = build_report_item(perf("a", 10000, quality, delivery))

        assert item.rating is rating
        assert item.performance_bonus == 0.0
        assert item.total_commission == 250.0

    def test_custom_settings(self) -> None:
        settings = ReportSettings(base_commission_rate=0.05, performance_bonus=0.5)

        item = build_report_item(perf("a", 1000, 1.0, 1), settings)

        assert item.total_commission == 75.0


class TestBuildReport:
    def test_sorted_by_total_commission(self) -> None:
        report = build_report(
            [
                perf("low", 1000, 0.5, 9),
                perf("high", 50000, 0.99, 1),
                perf("mid", 9000, 0.9, 4),
            ]
        )
        assert [item.supplier_id for item in report] == ["high", "mid", "low"]

    def test_empty(self) -> None:
        assert build_report([]) == []


class TestPerformanceFromOrders:
    def test_derives_figures(self, s1) -> None:
        orders = [
            order(
                "1",
                "s1",
                100,
                status=OrderStatus.DELIVERED,
                delivered_at=ORDERED + timedelta(days=2),
            ),
            order(
                "2",
                "s1",
                50.5,
                status=OrderStatus.DELIVERED,
                delivered_at=ORDERED + timedelta(days=3),
            ),
            order("3", "s1", 20, status=OrderStatus.SHIPPED),
            order("4", "s1", 999, status=OrderStatus.CANCELLED),
            order("5", "other", 500),
        ]

        performance = performance_from_orders(s1, orders, quality_score=0.97)

        assert performance.name == "Acme"
        assert performance.order_volume == 3
        assert performance.total_revenue == 170.5
        assert performance.avg_delivery_time == 2.5
        assert performance.quality_score == 0.97

    def test_no_orders(self, s1) -> None:
        performance = performance_from_orders(s1, [], quality_score=0.5)

        assert performance.order_volume == 0
        assert performance.avg_delivery_time is None

    def test_undelivered_orders_earn_no_bonus(self, s1) -> None:
        """Nothing delivered yet means the delivery threshold is not met."""
        orders = [order("1", "s1", 1000, status=OrderStatus.PENDING)]

        performance = performance_from_orders(s1, orders, quality_score=0.99)
        item = build_report_item(performance)

        assert performance.avg_delivery_time is None
        assert item.rating is PerformanceRating.GOOD
        assert item.performance_bonus == 0.0
        assert item.total_commission == 25.0
