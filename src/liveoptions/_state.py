"""Per-key option state: live value, snapshot and override directives.

Resolution priority for the effective value::

    bypass  >  override  >  provider's live value

A directive that is set but carries no payload still takes its slot; it
resolves to ``None`` instead of falling through to the next level.

Thread-safety: the read accessors are as safe as the provider's
``current_value()``. ``update()`` is not safe against concurrent calls to
itself on the same state; callers serialize refreshes (``OptionSession``
does so with its lock). Directive setters are plain attribute assignments.
"""

from __future__ import annotations

from typing import Any, Optional

from ._casters import convert_payload, resolve_enum
from ._kinds import DeclaredType
from ._providers import PropertyProvider
from ._types import InvalidArgumentError, Option


class OptionState:
    """Live state of a single configuration key.

    Two states with the same key compare equal and hash alike, whatever
    their providers or directives. Containers holding several sessions'
    states should be keyed by ``state.key`` instead.
    """

    __slots__ = ("_key", "_provider", "_declared_type", "_old_value", "_bypass", "_override")

    def __init__(
        self,
        key: str,
        provider: PropertyProvider,
        declared_type: DeclaredType | type,
    ) -> None:
        if not key:
            raise InvalidArgumentError("key cannot be empty")
        if provider is None:
            raise InvalidArgumentError("provider cannot be None")
        if declared_type is None:
            raise InvalidArgumentError("declared_type cannot be None")

        self._key = key
        self._provider = provider
        self._declared_type = DeclaredType.of(declared_type)
        self._bypass: Optional[Option] = None
        self._override: Optional[Option] = None
        self._old_value = self._extract_value()

    def _extract_value(self) -> Any:
        value = self._provider.current_value()
        if self._declared_type.is_enum:
            return resolve_enum(self._declared_type.enum, value)  # type: ignore[arg-type]
        return value

    # -- identity -----------------------------------------------------------

    @property
    def key(self) -> str:
        return self._key

    @property
    def declared_type(self) -> DeclaredType:
        return self._declared_type

    @property
    def provider(self) -> PropertyProvider:
        return self._provider

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OptionState):
            return self._key == other._key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        flags = []
        if self._override is not None:
            flags.append(f"override={self._override.override!r}")
        if self._bypass is not None:
            flags.append(f"bypass={self._bypass.override!r}")
        extra = f", {', '.join(flags)}" if flags else ""
        return f"OptionState({self._key!r}, {self._declared_type}{extra})"

    # -- values -------------------------------------------------------------

    def get_value(self) -> Any:
        """Return the provider's current value, enum options resolved to members."""
        return self._extract_value()

    @property
    def old_value(self) -> Any:
        return self._old_value

    def get_old_value(self) -> Any:
        return self._old_value

    def update(self) -> Any:
        """Return the previous snapshot and capture a fresh one.

        Call once per refresh cycle; every call advances the snapshot.
        """
        previous = self._old_value
        self._old_value = self._extract_value()
        return previous

    # -- directives ---------------------------------------------------------

    @property
    def override(self) -> Optional[Option]:
        return self._override

    @property
    def bypass(self) -> Optional[Option]:
        return self._bypass

    def get_override(self) -> Optional[Option]:
        return self._override

    def get_bypass(self) -> Optional[Option]:
        return self._bypass

    def set_override(self, directive: Optional[Option]) -> None:
        self._override = directive

    def set_bypass(self, directive: Optional[Option]) -> None:
        self._bypass = directive

    def is_overridden(self) -> bool:
        return self._override is not None

    def is_bypassed(self) -> bool:
        return self._bypass is not None

    def get_override_value(self) -> Any:
        return self._directive_value(self._override)

    def get_bypass_value(self) -> Any:
        return self._directive_value(self._bypass)

    def _directive_value(self, directive: Optional[Option]) -> Any:
        if directive is None or directive.override is None:
            return None
        return self.convert_value(directive.override)

    def get_effective_value(self) -> Any:
        """Return the value in force.

        With no directive set this is the provider's raw value, so enum
        options yield the member name here rather than the member.
        """
        if self._bypass is None and self._override is None:
            return self._provider.current_value()
        if self._bypass is None:
            return self.get_override_value()
        return self.get_bypass_value()

    def convert_value(self, payload: Optional[str]) -> Any:
        """Coerce directive text to this option's declared type."""
        return convert_payload(self._declared_type, payload)
