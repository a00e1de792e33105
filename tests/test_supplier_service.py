"""Tests for SupplierService — mutations, history tracking and queries."""

from __future__ import annotations

import pytest
import pytest_asyncio

from supplier_admin.domain.actions import (
    BulkUpdate,
    ChangeStatus,
    CreateSupplier,
    DeleteSupplier,
    UpdateSupplier,
)
from supplier_admin.domain.commission import Commission, CommissionType
from supplier_admin.domain.supplier import BankingDetails, SupplierStatus, SupplierType
from supplier_admin.history import ActionHistoryStore
from supplier_admin.primitives.exceptions import (
    EntityNotFoundError,
    HistoryScopeError,
    InvariantViolationError,
    ValidationError,
)
from supplier_admin.primitives.id_generator import SequentialIDGenerator
from supplier_admin.services.suppliers import SupplierService


@pytest.fixture
def service(supplier_repo, history) -> SupplierService:
    return SupplierService(
        supplier_repo, history, id_generator=SequentialIDGenerator(prefix="sup-")
    )


class TestConstruction:
    def test_requires_history(self, supplier_repo) -> None:
        """Building the service without a history store fails fast."""
        with pytest.raises(HistoryScopeError):
            SupplierService(supplier_repo, None)


@pytest.mark.asyncio
class TestMutations:
    async def test_create_tracks_action(
        self, service: SupplierService, supplier_repo, history: ActionHistoryStore
    ) -> None:
        """Creating stores the record and tracks a create action."""
        supplier = await service.create({"name": "Acme", "type": "manufacturer"})

        assert supplier.id == "sup-1"
        assert supplier.type is SupplierType.MANUFACTURER
        assert await supplier_repo.get("sup-1") == supplier
        assert history.entries[-1].action == CreateSupplier(supplier=supplier)
        assert history.get_undo_description() == "Added supplier Acme"

    async def test_create_duplicate_id_fails(
        self, service: SupplierService, history: ActionHistoryStore
    ) -> None:
        await service.create({"id": "dup", "name": "One"})
        with pytest.raises(InvariantViolationError):
            await service.create({"id": "dup", "name": "Two"})
        assert len(history) == 1

    async def test_invalid_create_tracks_nothing(
        self, service: SupplierService, history: ActionHistoryStore
    ) -> None:
        """A rejected record never reaches the history."""
        with pytest.raises(ValueError):
            await service.create({"name": ""})
        assert len(history) == 0

    async def test_update_records_before_and_after(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        """before holds the previous values of exactly the changed fields."""
        await supplier_repo.add(s1)

        updated = await service.update("s1", {"name": "Acme Ltd", "email": "a@b.c"})

        assert updated.name == "Acme Ltd"
        action = history.entries[-1].action
        assert action == UpdateSupplier(
            id="s1",
            before={"email": "", "name": "Acme"},
            after={"email": "a@b.c", "name": "Acme Ltd"},
        )
        assert history.entries[-1].description == "Updated supplier Acme Ltd"

    async def test_update_without_effect_is_not_tracked(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        await supplier_repo.add(s1)

        result = await service.update("s1", {"name": "Acme", "status": "active"})

        assert result is s1
        assert len(history) == 0

    async def test_update_unknown_supplier(self, service: SupplierService) -> None:
        with pytest.raises(EntityNotFoundError):
            await service.update("missing", {"name": "x"})

    async def test_update_immutable_field_rejected(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        await supplier_repo.add(s1)
        with pytest.raises(ValidationError):
            await service.update("s1", {"created_at": None})
        assert len(history) == 0

    async def test_delete_tracks_snapshot(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        await supplier_repo.add(s1)

        await service.delete("s1")

        assert await supplier_repo.get("s1") is None
        assert history.entries[-1].action == DeleteSupplier(supplier=s1)

    async def test_change_status(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        await supplier_repo.add(s1)

        updated = await service.change_status("s1", "blocked")

        assert updated.status is SupplierStatus.BLOCKED
        assert history.entries[-1].action == ChangeStatus(
            supplier_id="s1", before="active", after="blocked"
        )
        assert history.entries[-1].description == "Changed Acme status to blocked"

    async def test_same_status_is_noop(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        await supplier_repo.add(s1)
        await service.change_status("s1", SupplierStatus.ACTIVE)
        assert len(history) == 0

    async def test_bulk_update(
        self, service: SupplierService, supplier_repo, history, s1, s2
    ) -> None:
        """Each supplier's own prior values land in before."""
        await supplier_repo.add(s1)
        await supplier_repo.add(s2)

        updated = await service.bulk_update(["s1", "s2"], {"status": "inactive"})

        assert {r.status for r in updated} == {SupplierStatus.INACTIVE}
        action = history.entries[-1].action
        assert isinstance(action, BulkUpdate)
        assert action.before == {
            "s1": {"status": SupplierStatus.ACTIVE},
            "s2": {"status": SupplierStatus.PENDING},
        }
        assert action.after == {"status": SupplierStatus.INACTIVE}
        assert history.entries[-1].description == "Updated 2 suppliers"

    async def test_bulk_update_checks_all_before_writing(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        await supplier_repo.add(s1)

        with pytest.raises(EntityNotFoundError):
            await service.bulk_update(["s1", "ghost"], {"notes": "x"})

        assert (await supplier_repo.get("s1")).notes == ""
        assert len(history) == 0

    async def test_bulk_update_skips_unchanged(
        self, service: SupplierService, supplier_repo, history, make_supplier
    ) -> None:
        """Only suppliers the change alters are written and recorded."""
        await supplier_repo.add(make_supplier("s1", "Acme", email="a@x.io"))
        await supplier_repo.add(make_supplier("s2", "Globex"))

        await service.bulk_update(["s1", "s2"], {"email": "a@x.io"})

        entry = history.entries[-1]
        assert entry.action.ids == ("s2",)
        assert entry.action.before == {"s2": {"email": ""}}
        assert entry.description == "Updated 1 supplier"

    async def test_bulk_update_that_changes_nothing_is_not_tracked(
        self, service: SupplierService, supplier_repo, history, make_supplier
    ) -> None:
        await supplier_repo.add(make_supplier("s1", "Acme", email="a@x.io"))

        unchanged = await service.bulk_update(["s1"], {"email": "a@x.io"})
        await service.bulk_update(["s1"], {})

        assert [record.email for record in unchanged] == ["a@x.io"]
        assert len(history) == 0

    async def test_bulk_update_needs_ids(self, service: SupplierService) -> None:
        with pytest.raises(ValidationError):
            await service.bulk_update([], {"notes": "x"})

    async def test_update_commission_and_banking(
        self, service: SupplierService, supplier_repo, history, s1
    ) -> None:
        await supplier_repo.add(s1)
        commission = Commission(type=CommissionType.PERCENTAGE, rate=4)

        await service.update_commission("s1", commission)
        updated = await service.update_banking_details(
            "s1", BankingDetails(bank_name="First Bank")
        )

        assert updated.commission == commission
        assert updated.banking_details.bank_name == "First Bank"
        assert len(history) == 2


@pytest.mark.asyncio
class TestQueries:
    @pytest_asyncio.fixture
    async def seeded(
        self, service: SupplierService, supplier_repo, make_supplier
    ) -> SupplierService:
        for record in (
            make_supplier("a", "Acme Tools", type="manufacturer", email="x@acme.io"),
            make_supplier("b", "Blue Freight", status="inactive"),
            make_supplier("c", "Crate Co", contact_person="Ada Acme"),
        ):
            await supplier_repo.add(record)
        return service

    async def test_search_is_case_insensitive(self, seeded: SupplierService) -> None:
        found = await seeded.search("ACME")
        assert {s.id for s in found} == {"a", "c"}

    async def test_empty_search_returns_all(self, seeded: SupplierService) -> None:
        assert len(await seeded.search("  ")) == 3

    async def test_filter_by_status(self, seeded: SupplierService) -> None:
        found = await seeded.filter_by_status("inactive")
        assert [s.id for s in found] == ["b"]

    async def test_filter_by_type(self, seeded: SupplierService) -> None:
        found = await seeded.filter_by_type(SupplierType.MANUFACTURER)
        assert [s.id for s in found] == ["a"]
