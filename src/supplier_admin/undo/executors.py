"""Executors that reverse and re-apply supplier actions against a repository."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from ..domain.actions import (
    BulkUpdate,
    ChangeStatus,
    CreateSupplier,
    DeleteSupplier,
    UpdateSupplier,
)
from ..ports.executor import IActionExecutor
from ..primitives.exceptions import EntityNotFoundError
from .registry import ActionExecutorRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ..domain.actions import BaseAction
    from ..domain.supplier import SupplierRecord
    from ..ports.repository import ISupplierRepository

logger = logging.getLogger("supplier_admin.undo")


class _SupplierExecutor:
    action_class: ClassVar[type[BaseAction]]

    def __init__(self, repository: ISupplierRepository) -> None:
        self._repository = repository

    async def _apply(
        self, supplier_id: str, changes: Mapping[str, Any]
    ) -> SupplierRecord:
        current = await self._repository.get(supplier_id)
        if current is None:
            raise EntityNotFoundError("Supplier", supplier_id)
        updated = current.with_changes(changes)
        await self._repository.add(updated)
        return updated


class CreateSupplierExecutor(_SupplierExecutor, IActionExecutor[CreateSupplier]):
    """Undo removes the created supplier; redo adds it back."""

    action_class = CreateSupplier

    async def undo(self, action: CreateSupplier) -> None:
        await self._repository.delete(action.supplier.id)

    async def redo(self, action: CreateSupplier) -> None:
        await self._repository.add(action.supplier)


class UpdateSupplierExecutor(_SupplierExecutor, IActionExecutor[UpdateSupplier]):
    action_class = UpdateSupplier

    async def undo(self, action: UpdateSupplier) -> None:
        await self._apply(action.id, action.before)

    async def redo(self, action: UpdateSupplier) -> None:
        await self._apply(action.id, action.after)


class DeleteSupplierExecutor(_SupplierExecutor, IActionExecutor[DeleteSupplier]):
    """Undo restores the deleted snapshot as it was."""

    action_class = DeleteSupplier

    async def undo(self, action: DeleteSupplier) -> None:
        await self._repository.add(action.supplier)

    async def redo(self, action: DeleteSupplier) -> None:
        await self._repository.delete(action.supplier.id)


class ChangeStatusExecutor(_SupplierExecutor, IActionExecutor[ChangeStatus]):
    action_class = ChangeStatus

    async def undo(self, action: ChangeStatus) -> None:
        await self._apply(action.supplier_id, {"status": action.before})

    async def redo(self, action: ChangeStatus) -> None:
        await self._apply(action.supplier_id, {"status": action.after})


class BulkUpdateExecutor(_SupplierExecutor, IActionExecutor[BulkUpdate]):
    """Undo restores each supplier's prior values; redo reapplies the change."""

    action_class = BulkUpdate

    async def undo(self, action: BulkUpdate) -> None:
        await self._require_all(action.ids)
        for supplier_id in action.ids:
            await self._apply(supplier_id, action.before.get(supplier_id, {}))

    async def redo(self, action: BulkUpdate) -> None:
        await self._require_all(action.ids)
        for supplier_id in action.ids:
            await self._apply(supplier_id, action.after)

    async def _require_all(self, supplier_ids: Sequence[str]) -> None:
        records = await self._repository.list_all(list(supplier_ids))
        found = {record.id for record in records}
        for supplier_id in supplier_ids:
            if supplier_id not in found:
                raise EntityNotFoundError("Supplier", supplier_id)


_SUPPLIER_EXECUTORS: tuple[type[_SupplierExecutor], ...] = (
    CreateSupplierExecutor,
    UpdateSupplierExecutor,
    DeleteSupplierExecutor,
    ChangeStatusExecutor,
    BulkUpdateExecutor,
)


def build_supplier_executor_registry(
    repository: ISupplierRepository,
    registry: ActionExecutorRegistry | None = None,
) -> ActionExecutorRegistry:
    """Register a repository-backed executor for every supplier action.

    Variants that *registry* already handles keep their executor, so a
    caller can override single actions and take the defaults for the rest.
    """
    if registry is None:
        registry = ActionExecutorRegistry()
    for executor_cls in _SUPPLIER_EXECUTORS:
        action_class = executor_cls.action_class
        if action_class in registry:
            logger.debug("Keeping custom executor for %s", action_class.__name__)
            continue
        registry.register(executor_cls(repository))  # type: ignore[arg-type]
    return registry
