"""The use_toggle hook and its handle."""

from __future__ import annotations

import logging
from typing import Any, Callable
from weakref import WeakSet

from textual.widget import Widget

from .config import ToggleConfig, diagnostics_enabled
from .diagnostics import ControlledSwitchWatchdog, ReadOnlyWatchdog
from .effects import connect_effects
from .props import resetter_props, toggler_props
from .reducer import Action, ToggleAction, toggle_reducer
from .resolver import Resolution, resolve_mode
from .state import StateChanged, ToggleState
from .types import ChangeHandler, DiagnosticSink, EventHandler, Reducer

logger = logging.getLogger(__name__)

# Frames between a watchdog's observe() and the code that called
# use_toggle() or evaluate().
_DIAGNOSTIC_STACKLEVEL = 3


class ToggleHandle:
    """
    Handle returned by use_toggle().

    The effective value is re-derived from the latest configuration on every
    read, so a controlled value always wins over the internal state. The
    internal state is only ever written by dispatch().

    Attributes:
        on: The effective value.
        is_controlled: Whether the latest configuration supplies ``on``.
        initial_state: The state captured at acquisition, restored by reset().
        state: The internal state (read-only).
    """

    __slots__ = (
        "_value",
        "_subscribers",
        "_watchers",
        "_config",
        "_initial_state",
        "_switch_watchdog",
        "_read_only_watchdog",
        "_name",
    )

    def __init__(
        self,
        config: ToggleConfig,
        *,
        name: str | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._value = ToggleState(on=config.initial_on)
        self._subscribers: WeakSet[Widget] = WeakSet()
        self._watchers: list[Callable[[ToggleState, ToggleState], None]] = []
        self._config = config
        self._initial_state = self._value
        self._switch_watchdog = ControlledSwitchWatchdog(config.on, sink=sink)
        self._read_only_watchdog = ReadOnlyWatchdog(sink=sink)
        self._name = name

    @property
    def on(self) -> bool:
        """Get the effective value."""
        return self._resolve().effective_value

    @property
    def is_controlled(self) -> bool:
        return self._resolve().is_controlled

    @property
    def initial_state(self) -> ToggleState:
        return self._initial_state

    @property
    def state(self) -> ToggleState:
        """Get the internal state. Ignored for display while controlled."""
        return self._value

    @property
    def config(self) -> ToggleConfig:
        """Get the configuration of the latest evaluation."""
        return self._config

    @property
    def name(self) -> str | None:
        return self._name

    def watch(self, callback: Callable[[ToggleState, ToggleState], None]) -> None:
        """
        Call ``callback(old, new)`` whenever dispatch commits a change.

        Controlled toggles never commit, so watchers only see uncontrolled
        changes.
        """
        self._watchers.append(callback)

    def evaluate(self, config: ToggleConfig | None = None, **fields: Any) -> ToggleHandle:
        """
        Re-evaluate the toggle with new configuration.

        Call this whenever the owner's inputs change. The configuration is
        replaced as a whole, like props on a re-render; ``initial_on`` is
        accepted but never changes the captured initial state.

        Args:
            config: A complete configuration.
            **fields: ToggleConfig fields, used when config is not given.

        Returns:
            This handle.
        """
        if config is not None and fields:
            raise TypeError("evaluate() takes either a ToggleConfig or fields, not both")
        self._config = config if config is not None else ToggleConfig(**fields)
        logger.debug("Evaluated toggle %r with %r", self._name, self._config)
        self._run_diagnostics()
        return self

    def dispatch(self, action: Action) -> None:
        """
        Route an action through the reducer.

        When uncontrolled, the reducer's result is committed to the internal
        state first. Then on_change, if set, receives the next state computed
        from the effective value, in either mode.
        """
        config = self._config
        current = self._value
        is_controlled, effective_value = resolve_mode(config, current)
        logger.debug(
            "Dispatching %s to toggle %r (controlled=%s, on=%s)",
            action.type,
            self._name,
            is_controlled,
            effective_value,
        )

        if not is_controlled:
            self._commit(config.reducer(current, action))

        if config.on_change is not None:
            next_state = config.reducer(
                current.model_copy(update={"on": effective_value}), action
            )
            config.on_change(next_state, action)

    def toggle(self) -> None:
        self.dispatch(Action(ToggleAction.TOGGLE))

    def reset(self) -> None:
        """Dispatch a reset back to the state captured at acquisition."""
        self.dispatch(Action(ToggleAction.RESET, self._initial_state))

    def get_toggler_props(
        self, *, on_click: EventHandler | None = None, **props: Any
    ) -> dict[str, Any]:
        """
        Attributes for a toggler trigger.

        Returns ``aria_pressed`` set to the effective value and an
        ``on_click`` that runs the caller's handler, then toggle(). Extra
        attributes are applied last.
        """
        return toggler_props(self.on, self.toggle, on_click=on_click, **props)

    def get_resetter_props(
        self, *, on_click: EventHandler | None = None, **props: Any
    ) -> dict[str, Any]:
        """Attributes for a resetter trigger: ``on_click`` runs the caller's handler, then reset()."""
        return resetter_props(self.reset, on_click=on_click, **props)

    def _commit(self, new_value: ToggleState) -> None:
        old_value = self._value
        if old_value == new_value:
            return

        self._value = new_value

        for watcher in list(self._watchers):
            watcher(old_value, new_value)

        message = StateChanged(self, old_value, new_value)
        for widget in self._subscribers:
            widget.post_message(message)

    def _resolve(self) -> Resolution:
        return resolve_mode(self._config, self._value)

    def _run_diagnostics(self) -> None:
        if not diagnostics_enabled():
            return
        config = self._config
        self._switch_watchdog.observe(config.on, stacklevel=_DIAGNOSTIC_STACKLEVEL)
        self._read_only_watchdog.observe(
            config.on,
            config.on_change is not None,
            config.read_only,
            stacklevel=_DIAGNOSTIC_STACKLEVEL,
        )

    def __call__(self) -> bool:
        """Shorthand to get the effective value."""
        return self.on

    def __repr__(self) -> str:
        name = f" name={self._name!r}" if self._name else ""
        mode = "controlled" if self.is_controlled else "uncontrolled"
        return f"ToggleHandle(on={self.on!r} {mode}{name})"


def use_toggle(
    widget: Widget,
    *,
    initial_on: bool = False,
    reducer: Reducer = toggle_reducer,
    on_change: ChangeHandler | None = None,
    on: bool | None = None,
    read_only: bool = False,
    name: str | None = None,
    sink: DiagnosticSink | None = None,
) -> ToggleHandle:
    """
    Create a controllable toggle bound to a widget.

    The widget receives a StateChanged message for every committed change.

    Args:
        widget: The widget that owns this toggle.
        initial_on: Initial value of the internal state, captured once.
        reducer: Function (state, action) -> next state.
        on_change: Called with (next_state, action) on every dispatch.
        on: Controlled value. Pass None to let the toggle own its state.
        read_only: Silence the warning for a controlled value without
            on_change.
        name: Optional name for @effect decorator matching.
        sink: Diagnostic channel; defaults to warnings.warn.

    Returns:
        A ToggleHandle. Call handle.evaluate(...) when the inputs change.

    Example:
        ```python
        class Lamp(Widget):
            def on_mount(self):
                self.power = use_toggle(self, initial_on=True, name="power")

            def on_click(self):
                self.power.toggle()

            @effect("power")
            def on_power_change(self, old: ToggleState, new: ToggleState):
                self.refresh()
        ```
    """
    config = ToggleConfig(
        initial_on=initial_on,
        reducer=reducer,
        on_change=on_change,
        on=on,
        read_only=read_only,
    )
    handle = ToggleHandle(config, name=name, sink=sink)
    handle._subscribers.add(widget)

    # Connect @effect decorated methods
    if name:
        connect_effects(widget, name, handle)

    handle._run_diagnostics()
    return handle
