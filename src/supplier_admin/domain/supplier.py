"""SupplierRecord — the supplier entity and its partial-change type."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..primitives.exceptions import ValidationError
from .commission import Commission
from .value_object import ValueObject


class SupplierStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    BLOCKED = "blocked"


class SupplierType(str, Enum):
    MANUFACTURER = "manufacturer"
    DISTRIBUTOR = "distributor"
    WHOLESALER = "wholesaler"
    RETAILER = "retailer"
    SERVICE_PROVIDER = "service_provider"


class BankingDetails(ValueObject):
    account_name: str = ""
    account_number: str = ""
    bank_name: str = ""
    branch_code: str = ""
    swift_code: str = ""
    iban: str = ""
    bank_address: str = ""


# A partial SupplierRecord: field name -> new value.
SupplierChanges = dict[str, Any]


class SupplierRecord(BaseModel):
    """Immutable snapshot of a supplier.

    Records are never mutated in place; :meth:`with_changes` returns a new,
    re-validated record. This keeps snapshots held by history entries
    stable after later edits.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    code: str = ""
    type: SupplierType = SupplierType.DISTRIBUTOR
    status: SupplierStatus = SupplierStatus.ACTIVE
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    website: str = ""
    tax_id: str = ""
    payment_terms: str = ""
    credit_limit: float | None = Field(default=None, ge=0)
    year_established: int | None = None
    notes: str = ""
    banking_details: BankingDetails | None = None
    commission: Commission | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("supplier name must not be blank")
        return value

    def with_changes(self, changes: Mapping[str, Any]) -> SupplierRecord:
        """Return a validated copy with *changes* applied and ``updated_at`` bumped."""
        invalid = invalid_change_keys(changes)
        if invalid:
            raise ValidationError(
                {name: ["is not a mutable supplier field"] for name in invalid}
            )
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        data["updated_at"] = datetime.now(timezone.utc)
        return type(self).model_validate(data)

    def pick(self, fields: list[str] | set[str]) -> SupplierChanges:
        """Current values of *fields*, e.g. the ``before`` side of an update."""
        return {name: getattr(self, name) for name in sorted(fields)}

    def diff(self, changes: Mapping[str, Any]) -> SupplierChanges:
        """The subset of *changes* that would actually alter this record."""
        return {
            name: value
            for name, value in changes.items()
            if getattr(self, name, None) != value
        }


IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})
MUTABLE_FIELDS = frozenset(SupplierRecord.model_fields) - IMMUTABLE_FIELDS


def invalid_change_keys(changes: Mapping[str, Any]) -> list[str]:
    """Keys of *changes* that are not mutable SupplierRecord fields."""
    return sorted(key for key in changes if key not in MUTABLE_FIELDS)
