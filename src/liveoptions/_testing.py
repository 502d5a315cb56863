"""Test utilities for live options."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from ._state import OptionState
from ._types import Option


@contextmanager
def overridden(state: OptionState, payload: str | None) -> Iterator[OptionState]:
    """Temporarily set an override on *state*.

    ``payload=None`` installs an inert directive. The previous directive,
    set or not, is restored on exit::

        with overridden(state, "42"):
            assert state.get_effective_value() == 42
    """
    previous = state.get_override()
    state.set_override(Option.of(payload))
    try:
        yield state
    finally:
        state.set_override(previous)


@contextmanager
def bypassed(state: OptionState, payload: str | None) -> Iterator[OptionState]:
    """Temporarily set a bypass on *state*, restoring the previous one on exit."""
    previous = state.get_bypass()
    state.set_bypass(Option.of(payload))
    try:
        yield state
    finally:
        state.set_bypass(previous)
