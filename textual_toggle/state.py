"""Toggle state model and the message posted when it changes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from textual.message import Message

if TYPE_CHECKING:
    from .hooks import ToggleHandle


class ToggleState(BaseModel):
    """The on/off state of a toggle."""

    model_config = ConfigDict(frozen=True)

    on: bool = False


class StateChanged(Message):
    """
    Posted to the owning widget when an uncontrolled toggle commits a change.

    Attributes:
        toggle: The handle that committed the change.
        old_value: State before the commit.
        new_value: State after the commit.
    """

    def __init__(
        self, toggle: ToggleHandle, old_value: ToggleState, new_value: ToggleState
    ) -> None:
        super().__init__()
        self.toggle = toggle
        self.old_value = old_value
        self.new_value = new_value
