"""
Control Props - Demonstrates controlled and uncontrolled toggles.

Shows:
- use_toggle: Toggle state owned by the widget or by its parent
- get_toggler_props: Binding a presentational Switch
- on_change: The parent decides the real value of controlled toggles
- A click limit that lives in the parent, not in the toggle
"""

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.widgets import Button, Label, Rule, Static

from textual_toggle import StateChanged, ToggleAction, use_toggle


# --- Presentation ---


class Switch(Static):
    """A switch that renders whatever pressed state it is given."""

    DEFAULT_CSS = """
    Switch {
        width: 10;
        height: 3;
        margin: 1;
        content-align: center middle;
        border: round $secondary;
    }

    Switch.-on {
        background: $success;
    }
    """

    def __init__(self, *, aria_pressed: bool = False, on_click=None, id: str | None = None) -> None:
        super().__init__(id=id)
        self._click_handler = on_click
        self.pressed = aria_pressed

    def bind_props(self, *, aria_pressed: bool, on_click=None, **_props) -> None:
        self.pressed = aria_pressed
        self._click_handler = on_click
        self.set_class(aria_pressed, "-on")
        self.refresh()

    def on_mount(self) -> None:
        self.set_class(self.pressed, "-on")

    def render(self) -> str:
        return "ON" if self.pressed else "OFF"

    def on_click(self, event: events.Click) -> None:
        if self._click_handler is not None:
            self._click_handler(event)


# --- Toggle component ---


class Toggle(Container):
    """A Switch driven by use_toggle."""

    DEFAULT_CSS = """
    Toggle {
        width: auto;
        height: auto;
    }
    """

    def __init__(
        self,
        *,
        on: bool | None = None,
        on_change=None,
        read_only: bool = False,
        initial_on: bool = False,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.toggler = use_toggle(
            self,
            on=on,
            on_change=on_change,
            read_only=read_only,
            initial_on=initial_on,
        )

    def compose(self) -> ComposeResult:
        yield Switch(**self.toggler.get_toggler_props())

    def rerender(self, **config) -> None:
        """Re-evaluate with the parent's current inputs."""
        self.toggler.evaluate(**config)
        self._sync()

    def on_state_changed(self, event: StateChanged) -> None:
        self._sync()

    def _sync(self) -> None:
        self.query_one(Switch).bind_props(**self.toggler.get_toggler_props())


# --- App ---


class ControlProps(App):
    """Two toggles sharing one value, plus an uncontrolled toggle."""

    CSS = """
    Screen {
        align: center middle;
    }

    #click-count {
        margin: 1;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.both_on = False
        self.times_clicked = 0

    def compose(self) -> ComposeResult:
        yield Horizontal(
            Toggle(on=self.both_on, on_change=self.handle_toggle_change, classes="both"),
            Toggle(on=self.both_on, on_change=self.handle_toggle_change, classes="both"),
        )
        yield Static("Click count: 0", id="click-count")
        yield Button("Reset", id="reset")
        yield Rule()
        yield Label("Uncontrolled Toggle:")
        yield Toggle(
            on_change=lambda state, action: self.log.info(
                "Uncontrolled Toggle on_change", state, action
            )
        )

    def handle_toggle_change(self, state, action) -> None:
        if action.type == ToggleAction.TOGGLE and self.times_clicked > 4:
            return
        self.both_on = state.on
        self.times_clicked += 1
        self.rerender()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "reset":
            self.both_on = False
            self.times_clicked = 0
            self.rerender()

    def rerender(self) -> None:
        for toggle in self.query(".both").results(Toggle):
            toggle.rerender(on=self.both_on, on_change=self.handle_toggle_change)

        counter = self.query_one("#click-count", Static)
        if self.times_clicked > 4:
            counter.update("Whoa, you clicked too much!")
        else:
            counter.update(f"Click count: {self.times_clicked}")


if __name__ == "__main__":
    ControlProps().run()
