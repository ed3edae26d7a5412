from menutree.__version__ import __version__
from menutree.menu import (
    INVALID_INDEX,
    BoundAction,
    ControlSignal,
    ExitReason,
    FreeAction,
    MenuEngine,
    MenuPresenter,
)

__all__ = [
    "INVALID_INDEX",
    "BoundAction",
    "ControlSignal",
    "ExitReason",
    "FreeAction",
    "MenuEngine",
    "MenuPresenter",
    "__version__",
]
