"""Prop getters: ready-to-bind attributes for toggler and resetter triggers."""

from __future__ import annotations

from typing import Any, Callable

from .types import EventHandler


def call_all(*handlers: EventHandler | None) -> Callable[..., None]:
    """
    Combine handlers into one that calls each of them in order.

    None entries are skipped, so optional caller handlers can be passed
    through unchecked.
    """

    def handle(*args: Any) -> None:
        for handler in handlers:
            if handler is not None:
                handler(*args)

    return handle


def _ignoring_args(action: Callable[[], None]) -> EventHandler:
    def handle(*_args: Any) -> None:
        action()

    return handle


def toggler_props(
    pressed: bool,
    toggle: Callable[[], None],
    *,
    on_click: EventHandler | None = None,
    **props: Any,
) -> dict[str, Any]:
    """
    Build attributes for a toggler trigger.

    Args:
        pressed: The effective value, stamped as ``aria_pressed``.
        toggle: The primitive's toggle action.
        on_click: Caller handler, called before toggle with the same event.
        **props: Extra attributes, applied last so they override defaults.
    """
    return {
        "aria_pressed": pressed,
        "on_click": call_all(on_click, _ignoring_args(toggle)),
        **props,
    }


def resetter_props(
    reset: Callable[[], None],
    *,
    on_click: EventHandler | None = None,
    **props: Any,
) -> dict[str, Any]:
    """Build attributes for a resetter trigger."""
    return {
        "on_click": call_all(on_click, _ignoring_args(reset)),
        **props,
    }
