"""Cast helpers for option values.

Directive casters turn override/bypass payload text into the declared type.
They are strict for numbers and lenient for booleans.
"""

from __future__ import annotations

import enum
import re
import struct
from typing import Any, Callable

from ._kinds import DeclaredType, OptionKind
from ._types import (
    InvalidArgumentError,
    MalformedValueError,
    UnknownEnumMemberError,
    UnsupportedTypeError,
)

# ---------------------------------------------------------------------------
# Enum lookup
# ---------------------------------------------------------------------------


def resolve_enum(enum_cls: type[enum.Enum], name: Any) -> enum.Enum:
    """Return the member of *enum_cls* named exactly *name*."""
    if not isinstance(name, str):
        raise UnknownEnumMemberError(enum_cls, name)
    try:
        return enum_cls[name]
    except KeyError:
        raise UnknownEnumMemberError(enum_cls, name) from None


# ---------------------------------------------------------------------------
# Directive casters
# ---------------------------------------------------------------------------

_INTEGER = re.compile(r"[+-]?[0-9]+")

_INT_BOUNDS = {
    OptionKind.INT: (-(2**31), 2**31 - 1),
    OptionKind.LONG: (-(2**63), 2**63 - 1),
}


def _parse_integer(kind: OptionKind, payload: str) -> int:
    if not _INTEGER.fullmatch(payload):
        raise MalformedValueError(kind, payload)
    value = int(payload, 10)
    low, high = _INT_BOUNDS[kind]
    if not low <= value <= high:
        raise MalformedValueError(kind, payload, f"out of range [{low}, {high}]")
    return value


def _parse_int(payload: str) -> int:
    return _parse_integer(OptionKind.INT, payload)


def _parse_long(payload: str) -> int:
    return _parse_integer(OptionKind.LONG, payload)


def _parse_bool(payload: str) -> bool:
    """Only ``"true"`` (any case) is true. Everything else is false."""
    return payload.lower() == "true"


# ASCII decimal text with an optional exponent and f/F/d/D suffix, or the
# exact spellings NaN and Infinity. Hex floats are not accepted.
_DECIMAL = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?[fFdD]?)"
)

# Characters trimmed around numeric text: ASCII control characters and space.
_TRIM = "".join(chr(code) for code in range(0x21))


def _parse_decimal(kind: OptionKind, payload: str) -> float:
    text = payload.strip(_TRIM)
    if not _DECIMAL.fullmatch(text):
        raise MalformedValueError(kind, payload)
    return float(text.rstrip("fFdD"))


def _parse_double(payload: str) -> float:
    return _parse_decimal(OptionKind.DOUBLE, payload)


def _parse_float(payload: str) -> float:
    value = _parse_decimal(OptionKind.FLOAT, payload)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


_DIRECTIVE_PARSERS: dict[OptionKind, Callable[[str], Any]] = {
    OptionKind.INT: _parse_int,
    OptionKind.BOOL: _parse_bool,
    OptionKind.LONG: _parse_long,
    OptionKind.FLOAT: _parse_float,
    OptionKind.DOUBLE: _parse_double,
}


def convert_payload(declared_type: DeclaredType, payload: str | None) -> Any:
    """Coerce directive *payload* text to *declared_type*."""
    kind = declared_type.kind

    if kind is OptionKind.ENUM:
        return resolve_enum(declared_type.enum, payload)  # type: ignore[arg-type]
    if kind is OptionKind.STRING:
        return payload

    if payload is None:
        raise InvalidArgumentError(
            f"A payload is required to convert a value to {declared_type}"
        )

    parser = _DIRECTIVE_PARSERS.get(kind)
    if parser is None:
        raise UnsupportedTypeError(declared_type)
    return parser(payload)
