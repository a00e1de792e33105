"""Explicit ownership of an ActionHistoryStore by one editing flow."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..primitives.exceptions import HistoryScopeError
from .store import ActionHistoryStore

if TYPE_CHECKING:
    from types import TracebackType

    from ..primitives.id_generator import IIDGenerator
    from .config import HistoryConfig

logger = logging.getLogger("supplier_admin.history")


class HistoryScope:
    """Creates a fresh store on entry and discards its contents on exit.

    Usage::

        with HistoryScope(HistoryConfig(max_history_items=20)) as history:
            service = SupplierService(repository, history)
            ...
        # history is empty again; nothing is persisted
    """

    def __init__(
        self,
        config: HistoryConfig | None = None,
        *,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self._config = config
        self._id_generator = id_generator
        self._store: ActionHistoryStore | None = None

    @property
    def store(self) -> ActionHistoryStore:
        return require_history(self._store)

    def __enter__(self) -> ActionHistoryStore:
        self._store = ActionHistoryStore(
            self._config, id_generator=self._id_generator
        )
        return self._store

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._store is not None:
            logger.debug("Closing history scope with %d entries", len(self._store))
            self._store.clear_history()
            self._store = None


def require_history(history: ActionHistoryStore | None) -> ActionHistoryStore:
    """Return *history*, or raise if a component was built without one."""
    if history is None:
        raise HistoryScopeError(
            "An ActionHistoryStore is required; create one with HistoryScope "
            "and pass it explicitly"
        )
    return history
