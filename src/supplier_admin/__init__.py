"""supplier-admin — supplier management domain with undo/redo history.

Supplier records, purchase orders, commission and connection
configuration, performance reports, and a bounded action history that
UI flows use to offer undo/redo.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryPurchaseOrderRepository, InMemorySupplierRepository

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    Action,
    BankingDetails,
    BulkUpdate,
    ChangeStatus,
    Commission,
    CommissionTier,
    CommissionType,
    ConnectionConfig,
    ConnectionCredentials,
    ConnectionState,
    ConnectionType,
    CreateSupplier,
    DeleteSupplier,
    OrderItem,
    OrderStatus,
    PerformanceMetrics,
    PurchaseOrder,
    SupplierRecord,
    SupplierStatus,
    SupplierType,
    SyncFrequency,
    SyncSettings,
    UpdateSupplier,
    parse_action,
)

# ── History ──────────────────────────────────────────────────────
from .history import ActionHistoryStore, HistoryConfig, HistoryEntry, HistoryScope

# ── Ports ────────────────────────────────────────────────────────
from .ports import (
    IActionExecutor,
    IActionExecutorRegistry,
    IPurchaseOrderRepository,
    ISupplierRepository,
)

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    DomainError,
    EntityNotFoundError,
    ExecutorNotFoundError,
    HistoryScopeError,
    InvariantViolationError,
    NotFoundError,
    SupplierAdminError,
    ValidationError,
)

# ── Services ─────────────────────────────────────────────────────
from .services import (
    ConnectionService,
    PurchaseOrderService,
    ReportSettings,
    SupplierPerformance,
    SupplierService,
    build_report,
)

# ── Undo ─────────────────────────────────────────────────────────
from .undo import ActionExecutorRegistry, UndoService, build_supplier_executor_registry
from .validation import ValidationResult

__all__ = [
    # Adapters
    "InMemoryPurchaseOrderRepository",
    "InMemorySupplierRepository",
    # Domain
    "Action",
    "BankingDetails",
    "BulkUpdate",
    "ChangeStatus",
    "Commission",
    "CommissionTier",
    "CommissionType",
    "ConnectionConfig",
    "ConnectionCredentials",
    "ConnectionState",
    "ConnectionType",
    "CreateSupplier",
    "DeleteSupplier",
    "OrderItem",
    "OrderStatus",
    "PerformanceMetrics",
    "PurchaseOrder",
    "SupplierRecord",
    "SupplierStatus",
    "SupplierType",
    "SyncFrequency",
    "SyncSettings",
    "UpdateSupplier",
    "parse_action",
    # History
    "ActionHistoryStore",
    "HistoryConfig",
    "HistoryEntry",
    "HistoryScope",
    # Ports
    "IActionExecutor",
    "IActionExecutorRegistry",
    "IPurchaseOrderRepository",
    "ISupplierRepository",
    # Primitives
    "DomainError",
    "EntityNotFoundError",
    "ExecutorNotFoundError",
    "HistoryScopeError",
    "InvariantViolationError",
    "NotFoundError",
    "SupplierAdminError",
    "ValidationError",
    # Services
    "ConnectionService",
    "PurchaseOrderService",
    "ReportSettings",
    "SupplierPerformance",
    "SupplierService",
    "build_report",
    # Undo
    "ActionExecutorRegistry",
    "UndoService",
    "build_supplier_executor_registry",
    # Validation
    "ValidationResult",
]
