"""Menu data model: control signals, item actions and the item registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterator, List, Union

from menutree.menu.exceptions import InvalidActionError


class ControlSignal(Enum):
    """Result of invoking an item action."""

    QUIT = "quit"  # unwind this menu back to its caller
    RETURN = "return"  # redisplay the current menu
    PAUSE = "pause"  # pause, then redisplay


class ExitReason(Enum):
    """Why a menu loop ended."""

    SELECTED = "selected"  # item 0 was chosen
    QUIT = "quit"  # another item's action returned QUIT
    BAD_INPUT = "bad_input"  # the presenter declined to continue after bad input


class Action(ABC):
    """Something invokable that yields exactly one ControlSignal."""

    @abstractmethod
    def invoke(self) -> ControlSignal:
        raise NotImplementedError

    def __call__(self) -> ControlSignal:
        return self.invoke()


@dataclass(frozen=True)
class BoundAction(Action):
    """Calls ``method`` on ``target``.

    ``method`` is either an unbound function taking the target as its only
    argument (``Handler.save``) or the name of a method on the target
    (``"save"``). The target is borrowed: the action keeps it reachable but
    never tears it down.
    """

    method: Union[Callable[[Any], ControlSignal], str]
    target: Any

    def invoke(self) -> ControlSignal:
        if isinstance(self.method, str):
            return getattr(self.target, self.method)()
        return self.method(self.target)


@dataclass(frozen=True)
class FreeAction(Action):
    """Calls a zero-argument callable (function, lambda, closure, bound method)."""

    func: Callable[[], ControlSignal]

    def invoke(self) -> ControlSignal:
        return self.func()


@dataclass
class MenuItem:
    label: str
    action: Action


def make_action(label: str, func, target=None) -> Action:
    """Wrap ``func`` (and optionally ``target``) in the matching Action variant."""
    if isinstance(func, Action):
        return func
    if target is not None:
        if isinstance(func, str):
            if not callable(getattr(target, func, None)):
                raise InvalidActionError(label, func)
        elif not callable(func):
            raise InvalidActionError(label, func)
        return BoundAction(method=func, target=target)
    if not callable(func):
        raise InvalidActionError(label, func)
    return FreeAction(func=func)


@dataclass
class ItemRegistry:
    """Append-only, index-stable list of menu items.

    Entries are never removed or reordered, so an index handed out once keeps
    pointing at the same item for the registry's lifetime.
    """

    _entries: List[MenuItem] = field(default_factory=list)

    def push(self, label: str, action: Action) -> None:
        self._entries.append(MenuItem(label=label, action=action))

    def size(self) -> int:
        return len(self._entries)

    def empty(self) -> bool:
        return not self._entries

    def labels(self) -> list[str]:
        return [item.label for item in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> MenuItem:
        # No wrap-around for negative indices.
        if not 0 <= index < len(self._entries):
            raise IndexError(
                f"Menu item index {index} out of range (size {len(self._entries)})"
            )
        return self._entries[index]
