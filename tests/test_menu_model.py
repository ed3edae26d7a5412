"""Tests for menu actions and the item registry."""

import pytest

from menutree.menu.exceptions import InvalidActionError
from menutree.menu.model import (
    Action,
    BoundAction,
    ControlSignal,
    FreeAction,
    ItemRegistry,
    make_action,
)


class Handler:
    def __init__(self):
        self.calls = 0

    def handle(self):
        self.calls += 1
        return ControlSignal.PAUSE


class TestActions:
    def test_bound_action_calls_method_on_target(self):
        handler = Handler()
        action = BoundAction(method=Handler.handle, target=handler)

        assert action.invoke() is ControlSignal.PAUSE
        assert handler.calls == 1

    def test_bound_action_by_method_name(self):
        handler = Handler()
        action = BoundAction(method="handle", target=handler)

        assert action.invoke() is ControlSignal.PAUSE
        assert handler.calls == 1

    def test_bound_action_keeps_same_target(self):
        handler = Handler()
        action = BoundAction(method=Handler.handle, target=handler)

        action.invoke()
        action.invoke()
        action()

        assert handler.calls == 3
        assert action.target is handler

    def test_free_action_calls_closure(self):
        seen = []
        action = FreeAction(func=lambda: seen.append(1) or ControlSignal.RETURN)

        assert action() is ControlSignal.RETURN
        assert action.invoke() is ControlSignal.RETURN
        assert seen == [1, 1]

    def test_make_action_picks_variant(self):
        handler = Handler()

        assert isinstance(make_action("a", Handler.handle, handler), BoundAction)
        assert isinstance(make_action("b", "handle", handler), BoundAction)
        assert isinstance(make_action("c", lambda: ControlSignal.QUIT), FreeAction)

    def test_make_action_passes_actions_through(self):
        action = FreeAction(func=lambda: ControlSignal.QUIT)

        assert make_action("a", action) is action

    def test_make_action_rejects_non_callable(self):
        with pytest.raises(InvalidActionError, match="not callable"):
            make_action("broken", 42)

    def test_make_action_rejects_unknown_method_name(self):
        with pytest.raises(InvalidActionError):
            make_action("broken", "missing", Handler())

    def test_action_is_abstract(self):
        with pytest.raises(TypeError):
            Action()


class TestItemRegistry:
    def test_push_appends_in_order(self):
        registry = ItemRegistry()
        noop = FreeAction(func=lambda: ControlSignal.RETURN)

        registry.push("Exit", noop)
        registry.push("Foo", noop)
        registry.push("Bar", noop)

        assert registry.size() == 3
        assert len(registry) == 3
        assert registry.labels() == ["Exit", "Foo", "Bar"]
        assert [item.label for item in registry] == ["Exit", "Foo", "Bar"]

    def test_indexing_returns_label_and_action(self):
        registry = ItemRegistry()
        action = FreeAction(func=lambda: ControlSignal.RETURN)
        registry.push("Foo", action)

        item = registry[0]

        assert item.label == "Foo"
        assert item.action is action

    def test_indices_stay_stable_after_more_pushes(self):
        registry = ItemRegistry()
        first = FreeAction(func=lambda: ControlSignal.QUIT)
        registry.push("Exit", first)
        for n in range(20):
            registry.push(f"Item {n}", FreeAction(func=lambda: ControlSignal.RETURN))

        assert registry[0].label == "Exit"
        assert registry[0].action is first
        assert registry[5].label == "Item 4"

    @pytest.mark.parametrize("index", [-1, 1, 99])
    def test_out_of_range_access_raises(self, index):
        registry = ItemRegistry()
        registry.push("Exit", FreeAction(func=lambda: ControlSignal.QUIT))

        with pytest.raises(IndexError):
            registry[index]

    def test_empty(self):
        registry = ItemRegistry()

        assert registry.empty()
        registry.push("Exit", FreeAction(func=lambda: ControlSignal.QUIT))
        assert not registry.empty()
