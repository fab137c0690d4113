"""Actions and the built-in toggle reducer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .state import ToggleState


class ToggleAction(str, Enum):
    """Action types understood by toggle_reducer."""

    TOGGLE = "toggle"
    RESET = "reset"


@dataclass(frozen=True, slots=True)
class Action:
    """
    An action flowing through a toggle's dispatcher.

    Attributes:
        type: Action type. Custom reducers may accept types beyond
            ToggleAction.
        initial_state: The frozen initial state, carried by reset actions.
    """

    type: str
    initial_state: ToggleState | None = None


class UnsupportedActionError(ValueError):
    """Raised when toggle_reducer receives an action type it does not know."""

    def __init__(self, action_type: str) -> None:
        self.action_type = action_type
        super().__init__(f"Unsupported type: {action_type}")


def toggle_reducer(state: ToggleState, action: Action) -> ToggleState:
    """Flip the state on toggle, restore the carried initial state on reset."""
    match action.type:
        case ToggleAction.TOGGLE:
            return ToggleState(on=not state.on)
        case ToggleAction.RESET:
            if action.initial_state is None:
                raise ValueError("reset action requires an initial_state")
            return action.initial_state
    raise UnsupportedActionError(action.type)
