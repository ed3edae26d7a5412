"""Plain-text terminal presenter.

Renders a menu as numbered lines and reads the selection as a typed number:

    Location: Main >> Settings

     1. Colors
     2. Sounds
     0. Back
    choice:
"""

from __future__ import annotations

import os
import subprocess
import sys
from enum import Enum
from typing import TYPE_CHECKING, Optional, TextIO

from menutree.config import settings
from menutree.logging import LoggerFactory
from menutree.menu.presenter import INVALID_INDEX, MenuPresenter

if TYPE_CHECKING:
    from menutree.menu.engine import MenuEngine

log = LoggerFactory.for_ui()


class Prompt(Enum):
    PAUSE = "pause"
    CHOICE = "choice"
    INVALID = "invalid"
    LOCATION = "location"


class ConsolePresenter(MenuPresenter):
    def __init__(
        self,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        choice: str = settings.DEFAULT_CHOICE_PROMPT,
        pause: str = settings.DEFAULT_PAUSE_PROMPT,
        invalid: str = settings.DEFAULT_INVALID_PROMPT,
        location: str = settings.DEFAULT_LOCATION_PROMPT,
        separator: Optional[str] = None,
        clear_on_start: bool = False,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self.texts = {
            Prompt.CHOICE: choice,
            Prompt.PAUSE: pause,
            Prompt.INVALID: invalid,
            Prompt.LOCATION: location,
        }
        self.separator = separator
        self.clear_on_start = clear_on_start

    @classmethod
    def from_settings(cls, **kwargs) -> ConsolePresenter:
        """Build a presenter from the loaded settings store; kwargs win."""
        options = {
            "choice": settings.get_text("choice_prompt"),
            "pause": settings.get_text("pause_prompt"),
            "invalid": settings.get_text("invalid_prompt"),
            "location": settings.get_text("location_prompt"),
            "separator": settings.get_text("breadcrumb_separator"),
            "clear_on_start": settings.get_bool("clear_screen"),
        }
        options.update(kwargs)
        return cls(**options)

    # Streams are looked up late so pytest's capsys and monkeypatching work.
    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def set_text(self, where: Prompt, text: str) -> None:
        self.texts[where] = text

    def text(self, where: Prompt) -> str:
        return self.texts[where]

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input while waiting for a menu selection")
        return line.rstrip("\r\n")

    # ------------------------------------------------------------------
    # MenuPresenter hooks
    # ------------------------------------------------------------------

    def on_init_menu(self, menu: MenuEngine) -> None:
        if self.separator is not None and not menu.has_breadcrumb_separator():
            menu.set_breadcrumb_separator(self.separator)

    def on_start_menu(self, menu: MenuEngine) -> None:
        if self.clear_on_start:
            self.clear_screen()

    def display_item(self, index: int, label: str, width: int) -> None:
        self._write(f"{index:>{width}}. {label}\n")

    def user_input(self) -> int:
        self._write(self.texts[Prompt.CHOICE])
        raw = self._read_line().strip()
        try:
            value = int(raw)
        except ValueError:
            log.debug(f"Unparseable selection {raw!r}")
            return INVALID_INDEX
        if value < 0:
            return INVALID_INDEX
        return value

    def on_pause(self) -> None:
        self._write(self.texts[Prompt.PAUSE])
        self._read_line()

    def on_bad_input(self, bad_index: int) -> bool:
        self._write(f"{self.texts[Prompt.INVALID]}\n")
        return True

    def on_before_breadcrumb(self) -> None:
        self._write(self.texts[Prompt.LOCATION])

    def on_after_breadcrumb(self) -> None:
        self._write("\n\n")

    def on_breadcrumb(self, menu: MenuEngine) -> bool:
        if not menu.title:
            return False
        self._write(menu.title)
        return True

    def on_breadcrumb_sep(self, separator: str) -> None:
        self._write(separator)

    @staticmethod
    def clear_screen() -> None:
        command = "cls" if os.name == "nt" else "clear"
        subprocess.run(command, shell=True, check=False)
