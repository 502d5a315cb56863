"""Foundation types for live options.

Provides the exception hierarchy and the ``Option`` directive used for
overrides and bypasses.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class OptionError(Exception):
    """Base exception for option resolution errors."""


class InvalidArgumentError(OptionError, ValueError):
    """Raised when a required input is missing."""


class UnknownEnumMemberError(OptionError, ValueError):
    """Raised when text does not name a member of the declared enum."""

    def __init__(self, enum: type, name: Any) -> None:
        self.enum = enum
        self.name = name
        members = [member.name for member in enum]  # type: ignore[attr-defined]
        super().__init__(
            f"{name!r} is not a member of {enum.__name__}. Must be one of {members}"
        )


class MalformedValueError(OptionError, ValueError):
    """Raised when a payload cannot be parsed as the declared numeric kind."""

    def __init__(self, kind: Any, payload: str, reason: str = "") -> None:
        self.kind = kind
        self.payload = payload
        message = f"Cannot parse {payload!r} as {kind}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedTypeError(OptionError, TypeError):
    """Raised when a payload targets a declared type with no coercion."""

    def __init__(self, declared_type: Any) -> None:
        self.declared_type = declared_type
        super().__init__(f"Don't know how to convert a value to {declared_type}")


class UnknownOptionError(OptionError, KeyError):
    """Raised when a session has no option registered under a key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"No option registered under '{self.key}'."


class DuplicateOptionError(OptionError, ValueError):
    """Raised when a key is registered twice in the same session."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Option '{key}' is already registered.")


# ---------------------------------------------------------------------------
# Option directive
# ---------------------------------------------------------------------------


class Option(BaseModel):
    """An override or bypass directive.

    The directive may carry no payload at all. An inert directive still
    counts as set, it just resolves to ``None``::

        Option.of("42").override     # '42'
        Option.inert().override      # None
    """

    model_config = ConfigDict(frozen=True)

    override: Optional[str] = None

    @classmethod
    def of(cls, payload: str | None) -> "Option":
        return cls(override=payload)

    @classmethod
    def inert(cls) -> "Option":
        return cls()

    @property
    def has_payload(self) -> bool:
        return self.override is not None
