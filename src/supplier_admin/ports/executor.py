"""IActionExecutor / IActionExecutorRegistry — the undo/redo execution seam."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from ..domain.actions import BaseAction

if TYPE_CHECKING:
    from ..domain.actions import Action

T = TypeVar("T", bound=BaseAction)


@runtime_checkable
class IActionExecutor(Protocol[T]):
    """
    Port for reversing and re-applying one :data:`Action` variant.

    The history store hands actions back without applying them; an
    executor is what actually changes state for instances of
    ``action_class``.
    """

    @property
    def action_class(self) -> type[T]:
        """The Action variant this executor handles."""
        ...

    async def undo(self, action: T) -> None:
        """Reverse the effect of *action*."""
        ...

    async def redo(self, action: T) -> None:
        """Re-apply *action* after it was undone."""
        ...


@runtime_checkable
class IActionExecutorRegistry(Protocol):
    """Port for finding the executor of a concrete action."""

    def register(self, executor: IActionExecutor[Any]) -> None: ...

    def executor_for(self, action: Action) -> IActionExecutor[Any] | None: ...

    def __contains__(self, action_class: object) -> bool: ...
