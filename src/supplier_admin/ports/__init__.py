"""Ports — protocols implemented by adapters and executors."""

from __future__ import annotations

from .executor import IActionExecutor, IActionExecutorRegistry
from .repository import IPurchaseOrderRepository, ISupplierRepository

__all__ = [
    "IActionExecutor",
    "IActionExecutorRegistry",
    "IPurchaseOrderRepository",
    "ISupplierRepository",
]
