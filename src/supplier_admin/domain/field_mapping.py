"""Mapping between local supplier fields and an external system's fields."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..validation.result import ValidationResult

# Local supplier fields that can be fed from an external system.
SUPPLIER_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "type",
    "email",
    "phone",
    "address",
    "website",
    "tax_id",
    "payment_terms",
    "credit_limit",
    "contact_person",
    "status",
    "year_established",
)

DEFAULT_FIELD_MAPPING: dict[str, str] = {
    "id": "supplier_id",
    "name": "company_name",
    "email": "contact_email",
    "phone": "contact_phone",
    "address": "business_address",
    "website": "website_url",
}


def validate_field_mapping(mapping: Mapping[str, str]) -> ValidationResult:
    """Check that *mapping* targets known local fields, each external field once."""
    result = ValidationResult.success()
    seen: dict[str, str] = {}
    for local_field, external_field in mapping.items():
        key = f"field_mapping.{local_field}"
        if local_field not in SUPPLIER_FIELDS:
            result.add_error(key, "is not a supplier field")
        if not external_field.strip():
            result.add_error(key, "external field name is required")
            continue
        if external_field in seen:
            result.add_error(
                key, f"external field '{external_field}' already mapped to "
                f"'{seen[external_field]}'"
            )
        else:
            seen[external_field] = local_field
    return result


def apply_field_mapping(
    record: Mapping[str, Any], mapping: Mapping[str, str]
) -> dict[str, Any]:
    """Translate an external *record* into local supplier field names.

    External fields absent from *record* are skipped, not set to ``None``.
    """
    return {
        local_field: record[external_field]
        for local_field, external_field in mapping.items()
        if external_field in record
    }


def unmapped_fields(mapping: Mapping[str, str]) -> list[str]:
    """Supplier fields that *mapping* does not cover yet, in display order."""
    return [name for name in SUPPLIER_FIELDS if name not in mapping]
