"""
Pytest configuration and shared fixtures for menutree tests.

This module provides a scripted presenter that records every hook call so
tests can assert on the exact order the engine drives the presentation.
"""

from typing import List

import pytest

from menutree.menu import INVALID_INDEX, MenuPresenter


class RecordingPresenter(MenuPresenter):
    """Presenter fake: plays back ``inputs`` and records hook calls."""

    def __init__(self, inputs=None, bad_input_results=None, titled=True):
        self.inputs: List[int] = list(inputs or [])
        self.bad_input_results: List[bool] = list(bad_input_results or [])
        self.titled = titled
        self.calls: List[tuple] = []

    def display_item(self, index, label, width):
        self.calls.append(("item", index, label))

    def user_input(self):
        self.calls.append(("input",))
        if not self.inputs:
            raise EOFError("script exhausted")
        return self.inputs.pop(0)

    def on_pause(self):
        self.calls.append(("pause",))

    def on_bad_input(self, bad_index):
        self.calls.append(("bad_input", bad_index))
        if self.bad_input_results:
            return self.bad_input_results.pop(0)
        return True

    def on_init_menu(self, menu):
        self.calls.append(("init", menu.title))

    def on_start_menu(self, menu):
        self.calls.append(("start", menu.title))

    def on_exit_menu(self, menu):
        self.calls.append(("exit", menu.title))

    def on_before_breadcrumb(self):
        self.calls.append(("before",))

    def on_after_breadcrumb(self):
        self.calls.append(("after",))

    def on_breadcrumb(self, menu):
        if not self.titled or menu.title is None:
            return False
        self.calls.append(("crumb", menu.title))
        return True

    def on_breadcrumb_sep(self, separator):
        self.calls.append(("sep", separator))

    def named(self, name: str) -> List[tuple]:
        return [call for call in self.calls if call[0] == name]

    def frames(self) -> List[List[tuple]]:
        """Calls split per loop iteration (each starts with a "start" hook)."""
        frames: List[List[tuple]] = []
        for call in self.calls:
            if call[0] == "start":
                frames.append([])
            if frames:
                frames[-1].append(call)
        return frames


@pytest.fixture
def presenter_factory():
    def factory(inputs=None, bad_input_results=None, titled=True):
        return RecordingPresenter(
            inputs=inputs, bad_input_results=bad_input_results, titled=titled
        )

    return factory


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def invalid_index() -> int:
    return INVALID_INDEX


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings store at a temporary file for every test."""
    from menutree.config import settings

    path = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "SETTINGS_PATH", path)
    monkeypatch.setattr(settings.settings_store, "values", dict(settings.DEFAULT_SETTINGS))
    yield path
