"""ActionExecutorRegistry — one executor per Action variant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..ports.executor import IActionExecutor, IActionExecutorRegistry
from ..primitives.exceptions import HandlerError

if TYPE_CHECKING:
    from ..domain.actions import Action, BaseAction

logger = logging.getLogger("supplier_admin.undo")


class ActionExecutorRegistry(IActionExecutorRegistry):
    """Executors keyed by the model class of the action they handle.

    Lookup dispatches on ``type(action)``, so an action rebuilt with
    :func:`~supplier_admin.domain.actions.parse_action` reaches the same
    executor as the instance that was originally tracked. Each variant has
    at most one executor.
    """

    def __init__(self) -> None:
        self._executors: dict[type[BaseAction], IActionExecutor[Any]] = {}

    def register(self, executor: IActionExecutor[Any]) -> None:
        """Register *executor* for its ``action_class``.

        Raises:
            HandlerError: If that variant already has an executor.
        """
        action_class = executor.action_class
        existing = self._executors.get(action_class)
        if existing is not None:
            raise HandlerError(
                f"{action_class.__name__} is already handled by "
                f"{type(existing).__name__}"
            )
        self._executors[action_class] = executor
        logger.debug("%s handles %s", type(executor).__name__, action_class.__name__)

    def executor_for(self, action: Action) -> IActionExecutor[Any] | None:
        return self._executors.get(type(action))

    def __contains__(self, action_class: object) -> bool:
        return action_class in self._executors
