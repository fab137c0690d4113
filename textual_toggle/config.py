"""Toggle configuration and process-wide flags."""

from __future__ import annotations

import os
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict

from .reducer import Action, toggle_reducer
from .state import ToggleState

# Set to "production" to switch misuse diagnostics off.
ENV_VAR = "TEXTUAL_TOGGLE_ENV"


class ToggleConfig(BaseModel):
    """
    Caller-supplied toggle configuration for one evaluation.

    Attributes:
        initial_on: Initial value, read only on the first evaluation.
        reducer: Function (state, action) -> next state.
        on_change: Called with (next_state, action) on every dispatch.
        on: Controlled value. Any non-None value makes the toggle controlled.
        read_only: Accept a controlled value without an on_change handler.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    initial_on: bool = False
    reducer: Callable[[ToggleState, Action], ToggleState] = toggle_reducer
    on_change: Optional[Callable[[ToggleState, Action], None]] = None
    on: Optional[bool] = None
    read_only: bool = False


def diagnostics_enabled() -> bool:
    """Whether misuse diagnostics should run in this process."""
    return __debug__ and os.environ.get(ENV_VAR, "development") != "production"
