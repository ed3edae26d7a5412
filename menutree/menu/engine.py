"""Menu engine: item storage, the display/dispatch loop and breadcrumbs."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Iterator, List, Optional

from menutree.logging import LoggerFactory
from menutree.menu.exceptions import MenuCycleError
from menutree.menu.model import (
    Action,
    BoundAction,
    ControlSignal,
    ExitReason,
    ItemRegistry,
    MenuItem,
    make_action,
)
from menutree.menu.presenter import MenuPresenter

DEFAULT_EXIT_TEXT = "Exit"
DEFAULT_BREADCRUMB_SEPARATOR = " >> "
DEFAULT_INDEX_WIDTH = 2

log = LoggerFactory.for_menu()
render_log = log.bind(tags=["menu", "render"])


class MenuEngine:
    """A numbered menu.

    Item 0 is created here and always exits the menu. Items are appended with
    :meth:`push` and never removed. :meth:`run` blocks until the menu exits;
    running a child menu from an item action nests loops on the call stack.

    The parent link is weak: a parent must outlive its children, which it
    does naturally when the child is reachable only through the parent's
    items (see :meth:`push_submenu`).
    """

    def __init__(
        self,
        presenter: MenuPresenter,
        title: Optional[str] = None,
        *,
        exit_text: str = DEFAULT_EXIT_TEXT,
        parent: Optional[MenuEngine] = None,
    ) -> None:
        self._presenter = presenter
        self.title = title
        self._items = ItemRegistry()
        self._parent_ref: Optional[weakref.ReferenceType[MenuEngine]] = None
        self._separator: Optional[str] = None
        self._initialized = False
        self.width = DEFAULT_INDEX_WIDTH
        self.set_exit_text(exit_text)
        if parent is not None:
            self.set_parent(parent)

    def __repr__(self) -> str:
        return f"MenuEngine(title={self.title!r}, size={self.menu_size()})"

    def __len__(self) -> int:
        return self.menu_size()

    @property
    def presenter(self) -> MenuPresenter:
        return self._presenter

    @property
    def items(self) -> ItemRegistry:
        return self._items

    @property
    def initialized(self) -> bool:
        return self._initialized

    def menu_size(self) -> int:
        return self._items.size()

    def menu_exit(self) -> ControlSignal:
        return ControlSignal.QUIT

    # ------------------------------------------------------------------
    # Construction API
    # ------------------------------------------------------------------

    def push(
        self,
        label: str,
        func: Callable[..., Any] | str | Action,
        target: Any = None,
    ) -> None:
        """Append an item.

        ``push(label, func)`` wraps a zero-argument callable.
        ``push(label, method, target)`` calls ``method`` on ``target``, where
        ``method`` is an unbound function or a method name.
        """
        self._items.push(label, make_action(label, func, target))

    def push_submenu(
        self, label: str, child: MenuEngine, *, propagate_quit: bool = False
    ) -> None:
        """Append an item that runs ``child`` and returns here afterwards.

        With ``propagate_quit`` a QUIT raised inside the child also closes
        this menu; leaving the child through its own exit item never does.
        """
        child.set_parent(self)

        def run_child() -> ControlSignal:
            reason = child.run()
            if propagate_quit and reason is ExitReason.QUIT:
                return ControlSignal.QUIT
            return ControlSignal.RETURN

        self.push(label, run_child)

    def set_exit_text(self, text: str) -> None:
        if not self._items.empty():
            self._items[0].label = text
            return
        self._items.push(text, BoundAction(method=MenuEngine.menu_exit, target=self))

    @property
    def parent(self) -> Optional[MenuEngine]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def set_parent(self, parent: Optional[MenuEngine]) -> None:
        if parent is None:
            self._parent_ref = None
            return
        node: Optional[MenuEngine] = parent
        while node is not None:
            if node is self:
                raise MenuCycleError(self, parent)
            node = node.parent
        self._parent_ref = weakref.ref(parent)

    def ancestors(self) -> List[MenuEngine]:
        """Menus from the root down to (and including) this one."""
        chain: List[MenuEngine] = []
        node: Optional[MenuEngine] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    @property
    def breadcrumb_separator(self) -> str:
        if self._separator is None:
            return DEFAULT_BREADCRUMB_SEPARATOR
        return self._separator

    def set_breadcrumb_separator(self, separator: str) -> None:
        self._separator = separator

    def has_breadcrumb_separator(self) -> bool:
        return self._separator is not None

    def init_menu(self) -> None:
        """One-time setup; runs automatically on the first :meth:`run`."""
        if self._initialized:
            return
        self.width = max(self.width, len(str(self.menu_size() + 1)))
        self._initialized = True
        self._presenter.on_init_menu(self)
        if self._separator is None:
            self._separator = DEFAULT_BREADCRUMB_SEPARATOR

    # ------------------------------------------------------------------
    # Breadcrumb
    # ------------------------------------------------------------------

    def breadcrumb(self) -> bool:
        """Render the trail up to this menu; returns whether this menu drew itself.

        A separator goes after an ancestor only when that ancestor drew
        something, so untitled menus drop out of the trail cleanly.
        """
        parent = self.parent
        if parent is not None and parent.breadcrumb():
            self._presenter.on_breadcrumb_sep(self.breadcrumb_separator)
        return self._presenter.on_breadcrumb(self)

    def _render_breadcrumb(self) -> None:
        self._presenter.on_before_breadcrumb()
        self.breadcrumb()
        self._presenter.on_after_breadcrumb()

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def _visible_order(self) -> Iterator[int]:
        # Exit item is listed last.
        yield from range(1, self.menu_size())
        yield 0

    def _render_items(self) -> None:
        for index in self._visible_order():
            item: MenuItem = self._items[index]
            render_log.trace(f"Rendering item {index}: {item.label}")
            self._presenter.display_item(index, item.label, self.width)

    def _invoke(self, index: int) -> ControlSignal:
        item = self._items[index]
        log.debug(f"Menu {self.title!r}: invoking item {index} ({item.label!r})")
        signal = item.action.invoke()
        if signal is None:
            return ControlSignal.RETURN
        if not isinstance(signal, ControlSignal):
            raise TypeError(
                f"Action for menu item {item.label!r} returned {signal!r}, "
                "expected a ControlSignal"
            )
        return signal

    def run(self) -> ExitReason:
        """Display the menu until it exits and report why it did."""
        self.init_menu()
        presenter = self._presenter
        log.debug(f"Menu {self.title!r} started ({self.menu_size()} items)")
        reason = ExitReason.SELECTED
        selection = -1
        while selection != 0:
            presenter.on_start_menu(self)
            self._render_breadcrumb()
            self._render_items()

            selection = presenter.user_input()

            if 0 <= selection < self.menu_size():
                signal = self._invoke(selection)
                if signal is ControlSignal.QUIT:
                    presenter.on_exit_menu(self)
                    reason = ExitReason.SELECTED if selection == 0 else ExitReason.QUIT
                    selection = 0
                elif signal is ControlSignal.PAUSE:
                    presenter.on_pause()
            else:
                log.debug(f"Menu {self.title!r}: bad selection {selection}")
                if not presenter.on_bad_input(selection):
                    presenter.on_exit_menu(self)
                    reason = ExitReason.BAD_INPUT
                    break
                presenter.on_pause()
                selection = -1

        log.debug(f"Menu {self.title!r} exited ({reason.value})")
        return reason

    display = run
