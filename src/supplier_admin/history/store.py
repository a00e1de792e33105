"""ActionHistoryStore — bounded, linear undo/redo log of supplier actions."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from ..primitives.id_generator import IIDGenerator, UUID4Generator
from .config import HistoryConfig
from .entry import HistoryEntry

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..domain.actions import Action

logger = logging.getLogger("supplier_admin.history")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ActionHistoryStore:
    """Ordered log of tracked actions with a cursor for undo/redo.

    ``cursor`` is the index of the most recently applied, not yet undone
    entry; ``-1`` means nothing is applied. Entries after the cursor form the
    redo branch, which is discarded as soon as a new action is tracked.

    The store only navigates. Applying or reversing an action is the job of
    whoever receives it from :meth:`undo` / :meth:`redo`.

    Usage::

        history = ActionHistoryStore(HistoryConfig(max_history_items=20))
        history.track(CreateSupplier(supplier=record), "Added supplier Acme")

        action = history.undo()   # caller reverses it
        action = history.redo()   # caller re-applies it
    """

    def __init__(
        self,
        config: HistoryConfig | None = None,
        *,
        id_generator: IIDGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._config = config or HistoryConfig()
        self._id_generator = id_generator or UUID4Generator()
        self._clock = clock or _utcnow
        self._entries: list[HistoryEntry] = []
        self._cursor = -1
        # entries and cursor change together
        self._lock = threading.RLock()

    # ── Recording ────────────────────────────────────────────────

    def track(self, action: Action, description: str) -> HistoryEntry:
        """Record *action* as the newest applied entry."""
        entry = HistoryEntry(
            id=self._id_generator.next_id(),
            timestamp=self._clock(),
            action=action,
            description=description,
        )
        with self._lock:
            discarded = len(self._entries) - 1 - self._cursor
            if discarded:
                del self._entries[self._cursor + 1 :]
                logger.debug("Discarded %d redo entries", discarded)

            self._entries.append(entry)
            self._cursor = len(self._entries) - 1

            overflow = len(self._entries) - self._config.max_history_items
            if overflow > 0:
                del self._entries[:overflow]
                self._cursor -= overflow
                logger.debug("Evicted %d oldest history entries", overflow)

        logger.debug("Tracked %s: %s", action.type, description)
        return entry

    # ── Navigation ───────────────────────────────────────────────

    def undo(self) -> Action | None:
        """Step back one entry and return its action, or ``None``."""
        with self._lock:
            if self._cursor < 0:
                return None
            action = self._entries[self._cursor].action
            self._cursor -= 1
        return action

    def redo(self) -> Action | None:
        """Step forward one entry and return its action, or ``None``."""
        with self._lock:
            if self._cursor >= len(self._entries) - 1:
                return None
            self._cursor += 1
            return self._entries[self._cursor].action

    @property
    def can_undo(self) -> bool:
        return self._cursor >= 0

    @property
    def can_redo(self) -> bool:
        with self._lock:
            return self._cursor < len(self._entries) - 1

    def peek_undo(self) -> HistoryEntry | None:
        """The entry the next :meth:`undo` would return, without moving."""
        with self._lock:
            if self._cursor < 0:
                return None
            return self._entries[self._cursor]

    def peek_redo(self) -> HistoryEntry | None:
        """The entry the next :meth:`redo` would return, without moving."""
        with self._lock:
            if self._cursor >= len(self._entries) - 1:
                return None
            return self._entries[self._cursor + 1]

    def get_undo_description(self) -> str | None:
        entry = self.peek_undo()
        return entry.description if entry is not None else None

    def get_redo_description(self) -> str | None:
        entry = self.peek_redo()
        return entry.description if entry is not None else None

    def clear_history(self) -> None:
        """Drop every entry. Cannot be undone."""
        with self._lock:
            self._entries.clear()
            self._cursor = -1
        logger.debug("History cleared")

    # ── Inspection ───────────────────────────────────────────────

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        with self._lock:
            return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def max_history_items(self) -> int:
        return self._config.max_history_items

    def __len__(self) -> int:
        return len(self._entries)
