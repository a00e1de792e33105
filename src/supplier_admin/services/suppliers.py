"""SupplierService — supplier CRUD that records every change in the history log."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..domain.actions import (
    BulkUpdate,
    ChangeStatus,
    CreateSupplier,
    DeleteSupplier,
    UpdateSupplier,
)
from ..domain.supplier import SupplierRecord, SupplierStatus, SupplierType
from ..history.scope import require_history
from ..primitives.exceptions import (
    EntityNotFoundError,
    InvariantViolationError,
    ValidationError,
)
from ..primitives.id_generator import IIDGenerator, UUID4Generator

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ..domain.commission import Commission
    from ..domain.supplier import BankingDetails, SupplierChanges
    from ..history.store import ActionHistoryStore
    from ..ports.repository import ISupplierRepository

logger = logging.getLogger("supplier_admin.suppliers")

_SEARCH_FIELDS = ("name", "code", "contact_person", "email")


class SupplierService:
    """Supplier mutations and queries.

    Every mutation is written to the repository first; only once that
    succeeds is the matching action tracked, so the history never holds an
    action that did not happen. Changes that would not alter anything are
    not tracked.
    """

    def __init__(
        self,
        repository: ISupplierRepository,
        history: ActionHistoryStore | None,
        *,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._repository = repository
        self._history = require_history(history)
        self._id_generator = id_generator or UUID4Generator()

    # ── Mutations ────────────────────────────────────────────────

    async def create(self, data: Mapping[str, Any]) -> SupplierRecord:
        payload = dict(data)
        payload.setdefault("id", self._id_generator.next_id())
        if await self._repository.get(payload["id"]) is not None:
            raise InvariantViolationError(
                f"Supplier with id={payload['id']!r} already exists"
            )
        supplier = SupplierRecord.model_validate(payload)

        await self._repository.add(supplier)
        self._history.track(
            CreateSupplier(supplier=supplier), f"Added supplier {supplier.name}"
        )
        logger.info("Created supplier %s (%s)", supplier.id, supplier.name)
        return supplier

    async def update(
        self, supplier_id: str, changes: SupplierChanges
    ) -> SupplierRecord:
        current = await self._require(supplier_id)
        updated = current.with_changes(changes)
        # Compare after validation so "active" and SupplierStatus.ACTIVE match.
        effective = current.diff(updated.pick(set(changes)))
        if not effective:
            logger.debug("Update of supplier %s changed nothing", supplier_id)
            return current

        await self._repository.add(updated)
        self._history.track(
            UpdateSupplier(
                id=supplier_id,
                before=current.pick(set(effective)),
                after=effective,
            ),
            f"Updated supplier {updated.name}",
        )
        logger.info("Updated supplier %s: %s", supplier_id, sorted(effective))
        return updated

    async def delete(self, supplier_id: str) -> SupplierRecord:
        supplier = await self._require(supplier_id)

        await self._repository.delete(supplier_id)
        self._history.track(
            DeleteSupplier(supplier=supplier), f"Deleted supplier {supplier.name}"
        )
        logger.info("Deleted supplier %s (%s)", supplier_id, supplier.name)
        return supplier

    async def change_status(
        self, supplier_id: str, status: SupplierStatus | str
    ) -> SupplierRecord:
        current = await self._require(supplier_id)
        new_status = SupplierStatus(status)
        if current.status is new_status:
            return current

        updated = current.with_changes({"status": new_status})
        await self._repository.add(updated)
        self._history.track(
            ChangeStatus(
                supplier_id=supplier_id, before=current.status, after=new_status
            ),
            f"Changed {updated.name} status to {new_status.value}",
        )
        logger.info(
            "Supplier %s status %s -> %s",
            supplier_id,
            current.status.value,
            new_status.value,
        )
        return updated

    async def bulk_update(
        self, supplier_ids: list[str], changes: SupplierChanges
    ) -> list[SupplierRecord]:
        """Apply the same *changes* to every supplier in *supplier_ids*.

        All suppliers are checked, and every new record validated, before
        anything is written. Only suppliers the change actually alters are
        written and recorded; if none are, nothing is tracked.
        """
        if not supplier_ids:
            raise ValidationError({"ids": ["at least one supplier is required"]})
        ids = list(dict.fromkeys(supplier_ids))
        found = {record.id: record for record in await self._repository.list_all(ids)}
        missing = [supplier_id for supplier_id in ids if supplier_id not in found]
        if missing:
            raise EntityNotFoundError("Supplier", missing[0])

        candidates = {
            supplier_id: found[supplier_id].with_changes(changes) for supplier_id in ids
        }
        # Validated values, so "blocked" and SupplierStatus.BLOCKED compare equal.
        after = candidates[ids[0]].pick(set(changes))
        changed = [supplier_id for supplier_id in ids if found[supplier_id].diff(after)]
        if not changed:
            logger.debug("Bulk update of %d suppliers changed nothing", len(ids))
            return [found[supplier_id] for supplier_id in ids]

        for supplier_id in changed:
            await self._repository.add(candidates[supplier_id])
        self._history.track(
            BulkUpdate(
                ids=changed,
                before={
                    supplier_id: found[supplier_id].pick(set(after))
                    for supplier_id in changed
                },
                after=after,
            ),
            f"Updated {len(changed)} supplier{'' if len(changed) == 1 else 's'}",
        )
        logger.info("Bulk updated %d suppliers: %s", len(changed), sorted(after))
        return [
            candidates[supplier_id] if supplier_id in changed else found[supplier_id]
            for supplier_id in ids
        ]

    async def update_commission(
        self, supplier_id: str, commission: Commission | None
    ) -> SupplierRecord:
        return await self.update(supplier_id, {"commission": commission})

    async def update_banking_details(
        self, supplier_id: str, banking_details: BankingDetails | None
    ) -> SupplierRecord:
        return await self.update(supplier_id, {"banking_details": banking_details})

    # ── Queries ──────────────────────────────────────────────────

    async def get(self, supplier_id: str) -> SupplierRecord | None:
        return await self._repository.get(supplier_id)

    async def list_all(self) -> list[SupplierRecord]:
        return await self._repository.list_all()

    async def search(self, query: str) -> list[SupplierRecord]:
        """Case-insensitive substring match on name, code, contact and email."""
        needle = query.strip().lower()
        suppliers = await self._repository.list_all()
        if not needle:
            return suppliers
        return [
            supplier
            for supplier in suppliers
            if any(needle in getattr(supplier, name).lower() for name in _SEARCH_FIELDS)
        ]

    async def filter_by_status(
        self, status: SupplierStatus | str
    ) -> list[SupplierRecord]:
        wanted = SupplierStatus(status)
        return [s for s in await self._repository.list_all() if s.status is wanted]

    async def filter_by_type(self, type_: SupplierType | str) -> list[SupplierRecord]:
        wanted = SupplierType(type_)
        return [s for s in await self._repository.list_all() if s.type is wanted]

    async def _require(self, supplier_id: str) -> SupplierRecord:
        supplier = await self._repository.get(supplier_id)
        if supplier is None:
            raise EntityNotFoundError("Supplier", supplier_id)
        return supplier
