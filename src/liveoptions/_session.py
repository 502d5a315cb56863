"""Owning session for option states.

A session holds one ``OptionState`` per key, keyed by the key string, and
drives refresh cycles::

    session = OptionSession()
    port = DynamicProperty(25)
    session.register("mail.port", port, int)
    session.add_listener(lambda change: print(change.key, change.new_value))

    session.set_override("mail.port", "2525")
    session.value("mail.port")      # 2525
    session.refresh()               # -> [OptionChange(...)] for moved values
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from ._kinds import DeclaredType, OptionKind
from ._providers import PropertyProvider
from ._state import OptionState
from ._types import DuplicateOptionError, Option, UnknownOptionError

logger = logging.getLogger(__name__)

DirectiveLike = Union[Option, str, None]


@dataclass(frozen=True)
class OptionChange:
    """A snapshot move observed by ``OptionSession.refresh``."""

    key: str
    old_value: Any
    new_value: Any


class OptionSnapshot(BaseModel):
    """Read-only view of one option for administrative display."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str
    kind: OptionKind
    value: Any
    effective_value: Any
    overridden: bool
    bypassed: bool
    override: Optional[str] = None
    bypass: Optional[str] = None


def _same_value(previous: Any, current: Any) -> bool:
    if previous is current:
        return True
    if isinstance(previous, float) and isinstance(current, float):
        if math.isnan(previous) and math.isnan(current):
            return True
    return previous == current


def _as_directive(directive: DirectiveLike) -> Optional[Option]:
    if directive is None or isinstance(directive, Option):
        return directive
    return Option.of(directive)


class OptionSession:
    """Registry of option states for one configuration session."""

    def __init__(self) -> None:
        self._states: dict[str, OptionState] = {}
        self._listeners: list[Callable[[OptionChange], None]] = []
        self._lock = threading.RLock()

    # -- registration -------------------------------------------------------

    def register(
        self,
        key: str,
        provider: PropertyProvider,
        declared_type: DeclaredType | type,
    ) -> OptionState:
        with self._lock:
            if key in self._states:
                raise DuplicateOptionError(key)
            state = OptionState(key, provider, declared_type)
            self._states[key] = state
        logger.debug("registered option %s (%s)", key, state.declared_type)
        return state

    def get(self, key: str) -> Optional[OptionState]:
        return self._states.get(key)

    def __getitem__(self, key: str) -> OptionState:
        try:
            return self._states[key]
        except KeyError:
            raise UnknownOptionError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._states

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._states))

    def __len__(self) -> int:
        return len(self._states)

    def states(self) -> list[OptionState]:
        return list(self._states.values())

    # -- values -------------------------------------------------------------

    def value(self, key: str) -> Any:
        """Return the effective value of *key*."""
        return self[key].get_effective_value()

    def snapshot(self) -> dict[str, OptionSnapshot]:
        result: dict[str, OptionSnapshot] = {}
        for state in self.states():
            override = state.get_override()
            bypass = state.get_bypass()
            result[state.key] = OptionSnapshot(
                key=state.key,
                kind=state.declared_type.kind,
                value=state.get_value(),
                effective_value=state.get_effective_value(),
                overridden=override is not None,
                bypassed=bypass is not None,
                override=override.override if override is not None else None,
                bypass=bypass.override if bypass is not None else None,
            )
        return result

    # -- directives ---------------------------------------------------------

    def set_override(self, key: str, directive: DirectiveLike) -> None:
        state = self[key]
        state.set_override(_as_directive(directive))
        logger.debug("override on %s set to %r", key, state.get_override())

    def set_bypass(self, key: str, directive: DirectiveLike) -> None:
        state = self[key]
        state.set_bypass(_as_directive(directive))
        logger.debug("bypass on %s set to %r", key, state.get_bypass())

    def clear_override(self, key: str) -> None:
        self.set_override(key, None)

    def clear_bypass(self, key: str) -> None:
        self.set_bypass(key, None)

    # -- refresh ------------------------------------------------------------

    def add_listener(self, callback: Callable[[OptionChange], None]) -> None:
        with self._lock:
            self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[OptionChange], None]) -> None:
        with self._lock:
            self._listeners.remove(callback)

    def refresh(self, keys: Iterable[str] | None = None) -> list[OptionChange]:
        """Advance the snapshot of each selected option once.

        Listeners are called, in registration order, with every change once
        all snapshots have advanced. An exception raised by a listener
        propagates and skips the remaining notifications.
        """
        with self._lock:
            targets = self.states() if keys is None else [self[key] for key in keys]
            changes: list[OptionChange] = []

            for state in targets:
                previous = state.update()
                current = state.old_value
                if not _same_value(previous, current):
                    logger.info("option %s changed: %r -> %r", state.key, previous, current)
                    changes.append(OptionChange(state.key, previous, current))

            listeners = list(self._listeners)

        for change in changes:
            for callback in listeners:
                callback(change)

        return changes
