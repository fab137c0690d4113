"""Type definitions for textual-toggle."""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .reducer import Action
    from .state import ToggleState


class Reducer(Protocol):
    """Protocol for toggle reducer functions."""

    def __call__(self, state: "ToggleState", action: "Action") -> "ToggleState":
        """Process an action and return the next state."""
        ...


class ChangeHandler(Protocol):
    """Protocol for on_change callbacks."""

    def __call__(self, next_state: "ToggleState", action: "Action") -> None:
        """Called with the would-be next state on every dispatch."""
        ...


class DiagnosticSink(Protocol):
    """Protocol for developer diagnostic channels."""

    def __call__(self, message: str) -> None:
        """Report a misuse warning."""
        ...


class EventHandler(Protocol):
    """Protocol for click-style handlers bound by prop getters."""

    def __call__(self, *args: Any) -> Any:
        """Handle an activation event."""
        ...
