from menutree.menu.engine import (
    DEFAULT_BREADCRUMB_SEPARATOR,
    DEFAULT_EXIT_TEXT,
    MenuEngine,
)
from menutree.menu.exceptions import InvalidActionError, MenuCycleError, MenuError
from menutree.menu.model import (
    Action,
    BoundAction,
    ControlSignal,
    ExitReason,
    FreeAction,
    ItemRegistry,
    MenuItem,
)
from menutree.menu.presenter import INVALID_INDEX, MenuPresenter

__all__ = [
    "DEFAULT_BREADCRUMB_SEPARATOR",
    "DEFAULT_EXIT_TEXT",
    "INVALID_INDEX",
    "Action",
    "BoundAction",
    "ControlSignal",
    "ExitReason",
    "FreeAction",
    "InvalidActionError",
    "ItemRegistry",
    "MenuCycleError",
    "MenuEngine",
    "MenuError",
    "MenuItem",
    "MenuPresenter",
]
