"""Domain layer: supplier records, actions, commissions, connections, orders."""

from __future__ import annotations

from .actions import (
    Action,
    BaseAction,
    BulkUpdate,
    ChangeStatus,
    CreateSupplier,
    DeleteSupplier,
    UpdateSupplier,
    parse_action,
)
from .commission import (
    Commission,
    CommissionTier,
    CommissionType,
    PerformanceMetrics,
    suggest_next_tier,
)
from .connection import (
    ConflictResolution,
    ConnectionConfig,
    ConnectionCredentials,
    ConnectionState,
    ConnectionType,
    SyncFrequency,
    SyncOptions,
    SyncSettings,
    validate_connection_config,
)
from .field_mapping import (
    DEFAULT_FIELD_MAPPING,
    SUPPLIER_FIELDS,
    apply_field_mapping,
    unmapped_fields,
    validate_field_mapping,
)
from .orders import OrderItem, OrderStatus, PurchaseOrder
from .supplier import (
    MUTABLE_FIELDS,
    BankingDetails,
    SupplierChanges,
    SupplierRecord,
    SupplierStatus,
    SupplierType,
)
from .value_object import ValueObject

__all__ = [
    "DEFAULT_FIELD_MAPPING",
    "MUTABLE_FIELDS",
    "SUPPLIER_FIELDS",
    "Action",
    "BankingDetails",
    "BaseAction",
    "BulkUpdate",
    "ChangeStatus",
    "Commission",
    "CommissionTier",
    "CommissionType",
    "ConflictResolution",
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
    "SupplierChanges",
    "SupplierRecord",
    "SupplierStatus",
    "SupplierType",
    "SyncFrequency",
    "SyncOptions",
    "SyncSettings",
    "UpdateSupplier",
    "ValueObject",
    "apply_field_mapping",
    "parse_action",
    "suggest_next_tier",
    "unmapped_fields",
    "validate_connection_config",
    "validate_field_mapping",
]
