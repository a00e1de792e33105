"""Action history — linear undo/redo log for supplier actions."""

from __future__ import annotations

from .config import DEFAULT_MAX_HISTORY_ITEMS, HistoryConfig
from .entry import HistoryEntry
from .scope import HistoryScope, require_history
from .store import ActionHistoryStore

__all__ = [
    "DEFAULT_MAX_HISTORY_ITEMS",
    "ActionHistoryStore",
    "HistoryConfig",
    "HistoryEntry",
    "HistoryScope",
    "require_history",
]
