"""HistoryEntry — one logged, described action."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from ..domain.actions import Action


class HistoryEntry(BaseModel):
    """Immutable record of an action at the time it was tracked."""

    model_config = ConfigDict(frozen=True)

    id: str
    timestamp: datetime
    action: Action
    description: str
