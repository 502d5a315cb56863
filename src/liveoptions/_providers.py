"""Live value providers for options.

A provider is anything with a ``current_value()`` method. Options never
cache what it returns beyond their own ``old_value`` snapshot, so a provider
is free to change its value at any time from any thread.
"""

from __future__ import annotations

import threading
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PropertyProvider(Protocol):
    """Supplies the live backing value of one option.

    For enum and string options the value is text, for every other kind it
    is already of the declared type.
    """

    def current_value(self) -> Any:
        ...


class DynamicProperty:
    """In-memory live value that a host pushes updates into.

    >>> prop = DynamicProperty(30)
    >>> prop.set(60)
    30
    >>> prop.current_value()
    60
    """

    def __init__(self, value: Any = None) -> None:
        self._value = value
        self._lock = threading.Lock()

    def current_value(self) -> Any:
        with self._lock:
            return self._value

    def set(self, value: Any) -> Any:
        """Replace the live value and return the one it replaced."""
        with self._lock:
            previous, self._value = self._value, value
            return previous

    def __repr__(self) -> str:
        return f"DynamicProperty({self.current_value()!r})"
