"""Undo/Redo execution — applying what the history log hands back."""

from .executors import (
    BulkUpdateExecutor,
    ChangeStatusExecutor,
    CreateSupplierExecutor,
    DeleteSupplierExecutor,
    UpdateSupplierExecutor,
    build_supplier_executor_registry,
)
from .registry import ActionExecutorRegistry
from .service import UndoService

__all__ = [
    "ActionExecutorRegistry",
    "BulkUpdateExecutor",
    "ChangeStatusExecutor",
    "CreateSupplierExecutor",
    "DeleteSupplierExecutor",
    "UndoService",
    "UpdateSupplierExecutor",
    "build_supplier_executor_registry",
]
