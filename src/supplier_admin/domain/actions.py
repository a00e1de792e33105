"""Action — reversible supplier operations recorded in the history log.

Each variant is its own frozen model tagged by a literal ``type`` field, so
the fields a variant needs are enforced at construction and a plain mapping
(for example a UI payload) can be parsed back into the right class::

    action = parse_action({"type": "change_status", "supplier_id": "s1",
                           "before": "active", "after": "blocked"})
    assert isinstance(action, ChangeStatus)

Partial records (``before`` / ``after``) are stored as read-only mappings:
an action kept in the history must not change after it was tracked.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    TypeAdapter,
)

from .supplier import SupplierRecord, SupplierStatus, invalid_change_keys


def _check_changes(changes: Mapping[str, Any]) -> Mapping[str, Any]:
    invalid = invalid_change_keys(changes)
    if invalid:
        raise ValueError(f"not mutable supplier field(s): {', '.join(invalid)}")
    return MappingProxyType(dict(changes))


def _freeze(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    return value


_as_dict = PlainSerializer(_thaw, return_type=dict[str, Any])

CheckedChanges = Annotated[Mapping[str, Any], AfterValidator(_check_changes), _as_dict]
ChangesById = Annotated[Mapping[str, CheckedChanges], AfterValidator(_freeze), _as_dict]


class BaseAction(BaseModel):
    model_config = ConfigDict(frozen=True)


class CreateSupplier(BaseAction):
    type: Literal["create_supplier"] = "create_supplier"
    supplier: SupplierRecord


class UpdateSupplier(BaseAction):
    type: Literal["update_supplier"] = "update_supplier"
    id: str
    before: CheckedChanges
    after: CheckedChanges


class DeleteSupplier(BaseAction):
    type: Literal["delete_supplier"] = "delete_supplier"
    supplier: SupplierRecord


class ChangeStatus(BaseAction):
    type: Literal["change_status"] = "change_status"
    supplier_id: str
    before: SupplierStatus
    after: SupplierStatus


class BulkUpdate(BaseAction):
    type: Literal["bulk_update"] = "bulk_update"
    ids: tuple[str, ...]
    before: ChangesById
    after: CheckedChanges


Action = Annotated[
    Union[CreateSupplier, UpdateSupplier, DeleteSupplier, ChangeStatus, BulkUpdate],
    Field(discriminator="type"),
]

_action_adapter: TypeAdapter[Action] = TypeAdapter(Action)


def parse_action(data: Mapping[str, Any]) -> Action:
    """Build the matching :data:`Action` variant from a plain mapping."""
    return _action_adapter.validate_python(dict(data))
