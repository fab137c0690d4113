"""
Textual Toggle - controllable on/off state for Textual widgets.

A toggle either owns its state (uncontrolled) or follows a value supplied by
its owner (controlled). Both modes share one reducer, and every dispatch
reports the would-be next state to on_change so controlled owners can decide
the real value themselves.

Key Features:
- use_toggle: Acquire a toggle bound to a widget
- toggle_reducer: The built-in (state, action) -> state reducer
- get_toggler_props / get_resetter_props: Ready-to-bind trigger attributes
- Misuse warnings for mode switches and frozen controlled values
- @effect: Decorator to watch committed changes

Example:
    ```python
    from textual.app import App, ComposeResult
    from textual.widgets import Button
    from textual_toggle import use_toggle

    class Lamp(App):
        def compose(self) -> ComposeResult:
            self.power = use_toggle(self, on_change=self.on_power_change)
            yield Button("Power", id="power")

        def on_power_change(self, state, action) -> None:
            self.log(f"{action.type} -> {state.on}")

        def on_button_pressed(self, event: Button.Pressed) -> None:
            self.power.get_toggler_props()["on_click"](event)
    ```
"""

from .state import (
    StateChanged,
    ToggleState,
)

from .reducer import (
    Action,
    ToggleAction,
    UnsupportedActionError,
    toggle_reducer,
)

from .config import (
    ToggleConfig,
    diagnostics_enabled,
)

from .resolver import (
    Resolution,
    resolve_mode,
)

from .diagnostics import (
    ControlledSwitchWatchdog,
    ReadOnlyWatchdog,
    ToggleMisuseWarning,
)

from .props import (
    call_all,
)

from .hooks import (
    ToggleHandle,
    use_toggle,
)

from .effects import (
    effect,
)

from .types import (
    ChangeHandler,
    DiagnosticSink,
    EventHandler,
    Reducer,
)

__version__ = "0.1.0a1"

__all__ = [
    # State
    "StateChanged",
    "ToggleState",
    # Reducer
    "Action",
    "ToggleAction",
    "UnsupportedActionError",
    "toggle_reducer",
    # Config
    "ToggleConfig",
    "diagnostics_enabled",
    # Mode resolution
    "Resolution",
    "resolve_mode",
    # Diagnostics
    "ControlledSwitchWatchdog",
    "ReadOnlyWatchdog",
    "ToggleMisuseWarning",
    # Props
    "call_all",
    # Hooks
    "ToggleHandle",
    "use_toggle",
    # Effects
    "effect",
    # Types
    "ChangeHandler",
    "DiagnosticSink",
    "EventHandler",
    "Reducer",
]
