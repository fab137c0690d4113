"""Effect decorator for reacting to committed toggle changes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

if TYPE_CHECKING:
    from .hooks import ToggleHandle

F = TypeVar("F", bound=Callable[..., Any])

# Attribute name to store effect targets on methods
EFFECT_ATTR = "__textual_toggle_effects__"


def get_effect_targets(method: Callable[..., Any]) -> tuple[str, ...]:
    """Get the toggle names a method is registered for."""
    return getattr(method, EFFECT_ATTR, ())


def effect(*names: str) -> Callable[[F], F]:
    """
    Mark a widget method as an effect of one or more named toggles.

    The method is called with (old, new) ToggleState whenever an
    uncontrolled toggle created with a matching name commits a change.

    Example:
        ```python
        class Lamp(Widget):
            def on_mount(self):
                self.power = use_toggle(self, name="power")

            @effect("power")
            def on_power_change(self, old: ToggleState, new: ToggleState):
                self.set_class(new.on, "-lit")
        ```
    """
    if not names:
        raise ValueError("@effect requires at least one target")

    def decorator(method: F) -> F:
        setattr(method, EFFECT_ATTR, get_effect_targets(method) + names)
        return method

    return decorator


def connect_effects(widget: Any, name: str, toggle: ToggleHandle) -> int:
    """
    Connect a widget's @effect methods for ``name`` to a toggle's commits.

    Returns:
        The number of connected methods.
    """
    connected = 0
    for attr_name in dir(type(widget)):
        if attr_name.startswith("_"):
            continue
        try:
            class_attr = getattr(type(widget), attr_name, None)
            if name not in get_effect_targets(class_attr):
                continue
            method = getattr(widget, attr_name)
        except (AttributeError, AssertionError, TypeError):
            continue
        toggle.watch(lambda old, new, m=method: m(old, new))
        connected += 1
    return connected
