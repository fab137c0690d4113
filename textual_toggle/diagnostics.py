"""Developer warnings for misused controlled toggles."""

from __future__ import annotations

import warnings
from typing import Any, Hashable

from .types import DiagnosticSink


class ToggleMisuseWarning(UserWarning):
    """Category of every toggle misuse diagnostic."""


def emit_warning(message: str, stacklevel: int = 2) -> None:
    """Default diagnostic sink."""
    warnings.warn(message, ToggleMisuseWarning, stacklevel=stacklevel)


class _Watchdog:
    """
    Runs a check only when its dependency tuple changes.

    The first observation always runs.
    """

    __slots__ = ("_sink", "_deps")

    def __init__(self, sink: DiagnosticSink | None = None) -> None:
        self._sink: DiagnosticSink | None = sink
        self._deps: tuple[Hashable, ...] | None = None

    def _run(
        self, deps: tuple[Hashable, ...], message: str | None, stacklevel: int
    ) -> str | None:
        if deps == self._deps:
            return None
        self._deps = deps
        if message is None:
            return None
        if self._sink is None:
            # Attribute the warning to whoever called observe(); the filter
            # registry keys on that location.
            emit_warning(message, stacklevel=stacklevel + 3)
        else:
            self._sink(message)
        return message


class ControlledSwitchWatchdog(_Watchdog):
    """
    Warns when a toggle switches between controlled and uncontrolled.

    The original mode is captured at construction and never updated, so one
    warning fires per transition away from it.

    Example:
        ```python
        watchdog = ControlledSwitchWatchdog(None)
        watchdog.observe(None)   # no warning
        watchdog.observe(True)   # "... changing from uncontrolled to be controlled ..."
        watchdog.observe(True)   # no warning, nothing changed
        ```
    """

    __slots__ = ("was_controlled", "control_prop_name", "component_name")

    def __init__(
        self,
        control_prop_value: Any,
        control_prop_name: str = "on",
        component_name: str = "use_toggle",
        *,
        sink: DiagnosticSink | None = None,
    ) -> None:
        super().__init__(sink)
        self.was_controlled = control_prop_value is not None
        self.control_prop_name = control_prop_name
        self.component_name = component_name

    def observe(self, control_prop_value: Any, *, stacklevel: int = 1) -> str | None:
        """
        Check the current control value.

        Args:
            control_prop_value: The controlled value of this evaluation.
            stacklevel: Frame the default warning is attributed to,
                counted from the caller of observe().

        Returns:
            The warning message emitted by this observation, if any.
        """
        is_controlled = control_prop_value is not None
        deps = (
            is_controlled,
            self.was_controlled,
            self.control_prop_name,
            self.component_name,
        )
        message = None
        if self.was_controlled and not is_controlled:
            message = self._message("controlled", "uncontrolled")
        elif not self.was_controlled and is_controlled:
            message = self._message("uncontrolled", "controlled")
        return self._run(deps, message, stacklevel)

    def _message(self, old_mode: str, new_mode: str) -> str:
        name = self.component_name
        return (
            f"`{name}` is changing from {old_mode} to be {new_mode}. "
            f"Components should not switch from controlled to uncontrolled "
            f"(or vice versa). Decide between using a controlled or uncontrolled "
            f"`{name}` for the lifetime of the component. "
            f"Check the `{self.control_prop_name}` prop."
        )


class ReadOnlyWatchdog(_Watchdog):
    """
    Warns when a controlled value comes without a change handler.

    Without on_change the caller never learns about requested changes, so
    the controlled value is effectively frozen. Passing read_only=True
    accepts that and silences the warning.
    """

    __slots__ = (
        "component_name",
        "control_prop_name",
        "on_change_prop_name",
        "read_only_prop_name",
        "initial_value_prop_name",
    )

    def __init__(
        self,
        component_name: str = "use_toggle",
        control_prop_name: str = "on",
        on_change_prop_name: str = "on_change",
        read_only_prop_name: str = "read_only",
        initial_value_prop_name: str = "initial_on",
        *,
        sink: DiagnosticSink | None = None,
    ) -> None:
        super().__init__(sink)
        self.component_name = component_name
        self.control_prop_name = control_prop_name
        self.on_change_prop_name = on_change_prop_name
        self.read_only_prop_name = read_only_prop_name
        self.initial_value_prop_name = initial_value_prop_name

    def observe(
        self,
        control_prop_value: Any,
        has_on_change: bool,
        read_only: bool,
        *,
        stacklevel: int = 1,
    ) -> str | None:
        """
        Check the current inputs.

        Returns:
            The warning message emitted by this observation, if any.
        """
        is_controlled = control_prop_value is not None
        deps = (
            self.component_name,
            self.control_prop_name,
            is_controlled,
            has_on_change,
            read_only,
            self.on_change_prop_name,
            self.initial_value_prop_name,
            self.read_only_prop_name,
        )
        message = None
        if is_controlled and not has_on_change and not read_only:
            control = self.control_prop_name
            handler = self.on_change_prop_name
            message = (
                f"A `{control}` prop was provided to `{self.component_name}` "
                f"without an `{handler}` handler. This will result in a "
                f"read-only `{control}` value. If you want it to be mutable, "
                f"use `{self.initial_value_prop_name}`. Otherwise, set either "
                f"`{handler}` or `{self.read_only_prop_name}`."
            )
        return self._run(deps, message, stacklevel)
