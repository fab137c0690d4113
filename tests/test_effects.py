"""Tests for @effect."""

import pytest

from textual_toggle import ToggleState, effect, use_toggle
from textual_toggle.effects import get_effect_targets


class BaseMockWidget:
    """Base mock widget with post_message."""

    def post_message(self, message):
        pass


class TestEffect:
    """Tests for @effect decorator."""

    def test_marks_method(self):
        class Widget:
            @effect("power")
            def on_power_change(self, old, new):
                pass

        assert get_effect_targets(Widget.on_power_change) == ("power",)

    def test_stacked_decorators(self):
        class Widget:
            @effect("power")
            @effect("light", "fan")
            def on_change(self, old, new):
                pass

        assert set(get_effect_targets(Widget.on_change)) == {"power", "light", "fan"}

    def test_effect_requires_target(self):
        with pytest.raises(ValueError, match="requires at least one target"):

            @effect()
            def no_target(self, old, new):
                pass


class TestEffectConnection:
    """Tests for effect connection to toggles."""

    def test_connects_named_toggle(self):
        changes = []

        class MockWidget(BaseMockWidget):
            @effect("power")
            def on_power_change(self, old, new):
                changes.append((old, new))

        handle = use_toggle(MockWidget(), name="power")

        handle.toggle()
        handle.reset()

        assert changes == [
            (ToggleState(on=False), ToggleState(on=True)),
            (ToggleState(on=True), ToggleState(on=False)),
        ]

    def test_not_connected_without_name(self):
        changes = []

        class MockWidget(BaseMockWidget):
            @effect("power")
            def on_power_change(self, old, new):
                changes.append((old, new))

        handle = use_toggle(MockWidget())
        handle.toggle()

        assert changes == []

    def test_controlled_toggle_does_not_commit(self):
        changes = []

        class MockWidget(BaseMockWidget):
            @effect("power")
            def on_power_change(self, old, new):
                changes.append((old, new))

        handle = use_toggle(MockWidget(), name="power", on=True, read_only=True)
        handle.toggle()

        assert changes == []
