"""Hook interface between the menu engine and whatever draws it.

A presenter renders items and the breadcrumb trail and reads selections.
One presenter instance can serve every menu in a tree, so hooks that depend
on a specific menu receive it as an argument.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from menutree.menu.engine import MenuEngine

# Returned by user_input() for anything that is not a valid index.
INVALID_INDEX = sys.maxsize


class MenuPresenter(ABC):
    @abstractmethod
    def display_item(self, index: int, label: str, width: int) -> None:
        """Render one item; ``width`` is the column count reserved for ``index``."""

    @abstractmethod
    def user_input(self) -> int:
        """Block until the user picks something.

        Must return INVALID_INDEX (or any value not below the menu size) for
        malformed input instead of raising.
        """

    @abstractmethod
    def on_pause(self) -> None:
        """Hold the screen until the user acknowledges."""

    @abstractmethod
    def on_bad_input(self, bad_index: int) -> bool:
        """Report an out-of-range selection. Return True to keep the menu open."""

    def on_init_menu(self, menu: MenuEngine) -> None:
        pass

    def on_start_menu(self, menu: MenuEngine) -> None:
        pass

    def on_exit_menu(self, menu: MenuEngine) -> None:
        pass

    def on_before_breadcrumb(self) -> None:
        pass

    def on_after_breadcrumb(self) -> None:
        pass

    def on_breadcrumb(self, menu: MenuEngine) -> bool:
        """Render ``menu``'s place in the trail. Return False if nothing was drawn."""
        return False

    def on_breadcrumb_sep(self, separator: str) -> None:
        pass
