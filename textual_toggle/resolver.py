"""Controlled/uncontrolled mode resolution."""

from __future__ import annotations

from typing import NamedTuple

from .config import ToggleConfig
from .state import ToggleState


class Resolution(NamedTuple):
    """Control mode and the value exposed to the presentation layer."""

    is_controlled: bool
    effective_value: bool


def resolve_mode(config: ToggleConfig, state: ToggleState) -> Resolution:
    """
    Resolve the control mode for one evaluation.

    A toggle is controlled whenever config.on is not None. The effective
    value is then config.on; otherwise it is the internal state's value.
    """
    if config.on is not None:
        return Resolution(True, config.on)
    return Resolution(False, state.on)
