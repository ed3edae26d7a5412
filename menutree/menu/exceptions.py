"""Custom exceptions for menu construction.

Running a menu never raises these: invalid selections are an ordinary
branch of the loop and presenter failures propagate untouched. They only
guard the construction API.

Exception Hierarchy:
    MenuError (base)
        ├── MenuCycleError
        └── InvalidActionError

Usage:
    from menutree.menu.exceptions import MenuCycleError

    try:
        child.set_parent(grandchild)
    except MenuCycleError as error:
        log.warning(str(error))
"""


class MenuError(Exception):
    """Base exception for all menu construction errors."""



class MenuCycleError(MenuError):
    """Parent link would make a menu its own ancestor."""

    def __init__(self, menu, parent):
        self.menu = menu
        self.parent = parent
        super().__init__(
            f"Cannot set parent of {menu!r} to {parent!r}: "
            "the menu would become its own ancestor"
        )


class InvalidActionError(MenuError):
    """Item action is not callable."""

    def __init__(self, label: str, action):
        self.label = label
        self.action = action
        super().__init__(
            f"Action for menu item {label!r} is not callable: {action!r}"
        )
