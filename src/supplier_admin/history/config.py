"""HistoryConfig — sizing for an ActionHistoryStore."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_HISTORY_ITEMS = 50


class HistoryConfig(BaseModel):
    """Configuration for the action history log."""

    model_config = ConfigDict(frozen=True)

    max_history_items: int = Field(default=DEFAULT_MAX_HISTORY_ITEMS, ge=1)
