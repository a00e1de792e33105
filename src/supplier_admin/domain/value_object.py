"""Immutable settings objects attached to suppliers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from typing_extensions import Self


class ValueObject(BaseModel):
    """Base class for commission, banking and connection settings.

    Instances are frozen and compared by value. Use :meth:`replace` to
    derive a changed copy; unlike ``model_copy`` it re-runs validation.
    """

    model_config = ConfigDict(frozen=True)

    def replace(self, **changes: Any) -> Self:
        return self.model_validate({**self.model_dump(), **changes})

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        # Nested dicts/lists are unhashable, the JSON form is not.
        return hash((type(self).__name__, self.model_dump_json()))
