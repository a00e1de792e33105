"""Application services built on the domain, ports and history log."""

from __future__ import annotations

from .connections import (
    ConnectionEvent,
    ConnectionEventStatus,
    ConnectionEventType,
    ConnectionService,
    ConnectionStatus,
)
from .orders import PurchaseOrderService
from .reports import (
    PerformanceRating,
    ReportSettings,
    SupplierPerformance,
    SupplierReportItem,
    build_report,
    build_report_item,
    performance_from_orders,
    rate_performance,
)
from .suppliers import SupplierService

__all__ = [
    "ConnectionEvent",
    "ConnectionEventStatus",
    "ConnectionEventType",
    "ConnectionService",
    "ConnectionStatus",
    "PerformanceRating",
    "PurchaseOrderService",
    "ReportSettings",
    "SupplierPerformance",
    "SupplierReportItem",
    "SupplierService",
    "build_report",
    "build_report_item",
    "performance_from_orders",
    "rate_performance",
]
