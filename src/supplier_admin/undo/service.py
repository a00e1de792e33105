"""UndoService — drives undo/redo by pairing the history log with executors."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..history.scope import require_history
from ..primitives.exceptions import ExecutorNotFoundError

if TYPE_CHECKING:
    from ..domain.actions import Action
    from ..history.entry import HistoryEntry
    from ..history.store import ActionHistoryStore
    from ..ports.executor import IActionExecutor, IActionExecutorRegistry

logger = logging.getLogger("supplier_admin.undo")


class UndoService:
    """Undo/redo that actually changes state.

    For each request:
    1. Peek at the entry the history cursor would move over
    2. Look up the executor registered for the action's class
    3. Run the executor's ``undo()`` / ``redo()``
    4. Only after it succeeds, move the history cursor

    A failing executor leaves the cursor where it was, so the same step can
    be retried.

    Usage::

        service = UndoService(history, build_supplier_executor_registry(repo))

        if history.can_undo:
            await service.undo()   # returns the reversed Action
    """

    def __init__(
        self,
        history: ActionHistoryStore | None,
        registry: IActionExecutorRegistry,
    ) -> None:
        self._history = require_history(history)
        self._registry = registry

    async def undo(self) -> Action | None:
        """Reverse the most recent applied action.

        Returns:
            The reversed action, or ``None`` if there was nothing to undo.

        Raises:
            ExecutorNotFoundError: If no executor handles the action type.
        """
        entry = self._history.peek_undo()
        if entry is None:
            return None
        executor = self._executor_for(entry)

        try:
            await executor.undo(entry.action)
        except Exception:
            logger.exception("Failed to undo '%s'", entry.description)
            raise

        action = self._history.undo()
        logger.info("Undid %s: %s", entry.action.type, entry.description)
        return action

    async def redo(self) -> Action | None:
        """Re-apply the most recently undone action.

        Returns:
            The re-applied action, or ``None`` if there was nothing to redo.

        Raises:
            ExecutorNotFoundError: If no executor handles the action type.
        """
        entry = self._history.peek_redo()
        if entry is None:
            return None
        executor = self._executor_for(entry)

        try:
            await executor.redo(entry.action)
        except Exception:
            logger.exception("Failed to redo '%s'", entry.description)
            raise

        action = self._history.redo()
        logger.info("Redid %s: %s", entry.action.type, entry.description)
        return action

    @property
    def undo_label(self) -> str | None:
        description = self._history.get_undo_description()
        return f"Undo: {description}" if description is not None else None

    @property
    def redo_label(self) -> str | None:
        description = self._history.get_redo_description()
        return f"Redo: {description}" if description is not None else None

    def _executor_for(self, entry: HistoryEntry) -> IActionExecutor[Any]:
        executor = self._registry.executor_for(entry.action)
        if executor is None:
            action_type = entry.action.type
            logger.warning("No executor registered for action type '%s'", action_type)
            raise ExecutorNotFoundError(action_type)
        return executor
