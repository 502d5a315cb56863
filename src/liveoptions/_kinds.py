"""Declared value types for options.

An option's declared type is decided once, when the option is created, and
carried around as data. Coercion dispatches on ``DeclaredType.kind``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional


class OptionKind(str, enum.Enum):
    BOOL = "bool"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    ENUM = "enum"
    OPAQUE = "opaque"

    def __str__(self) -> str:
        return self.value


# Kinds whose provider hands out text rather than a typed scalar.
STRING_BACKED = frozenset({OptionKind.STRING, OptionKind.ENUM})


@dataclass(frozen=True)
class DeclaredType:
    """Tagged declared type.

    Attributes:
        kind: The scalar kind the option resolves to.
        enum: The ``Enum`` subclass for ``ENUM`` options, ``None`` otherwise.
        python_type: The original Python type for ``OPAQUE`` options, used
            in error messages.
    """

    kind: OptionKind
    enum: Optional[type[enum.Enum]] = None
    python_type: Optional[type] = None

    def __post_init__(self) -> None:
        if self.kind is OptionKind.ENUM:
            if not (isinstance(self.enum, type) and issubclass(self.enum, enum.Enum)):
                raise TypeError("ENUM declared types require an Enum subclass")
        elif self.enum is not None:
            raise TypeError(f"{self.kind} declared types cannot carry an enum")

    # -- constructors -------------------------------------------------------

    @classmethod
    def of(cls, tp: Any) -> "DeclaredType":
        """Map a Python type onto a declared type.

        ``float`` maps to ``DOUBLE`` and ``int`` to ``INT``; use the module
        constants for ``LONG`` and ``FLOAT``. Unknown types become ``OPAQUE``.
        """
        if isinstance(tp, DeclaredType):
            return tp
        if isinstance(tp, OptionKind):
            return cls(tp)
        if isinstance(tp, type) and issubclass(tp, enum.Enum):
            return cls.enum_of(tp)
        kind = _PYTHON_KINDS.get(tp)
        if kind is not None:
            return cls(kind)
        return cls(OptionKind.OPAQUE, python_type=tp)

    @classmethod
    def enum_of(cls, enum_cls: type[enum.Enum]) -> "DeclaredType":
        return cls(OptionKind.ENUM, enum=enum_cls)

    # -- queries ------------------------------------------------------------

    @property
    def is_enum(self) -> bool:
        return self.kind is OptionKind.ENUM

    @property
    def is_string_backed(self) -> bool:
        return self.kind in STRING_BACKED

    def __str__(self) -> str:
        if self.enum is not None:
            return f"enum {self.enum.__name__}"
        if self.python_type is not None:
            return getattr(self.python_type, "__name__", repr(self.python_type))
        return str(self.kind)


_PYTHON_KINDS: dict[Any, OptionKind] = {
    bool: OptionKind.BOOL,
    int: OptionKind.INT,
    float: OptionKind.DOUBLE,
    str: OptionKind.STRING,
}


BOOL = DeclaredType(OptionKind.BOOL)
INT = DeclaredType(OptionKind.INT)
LONG = DeclaredType(OptionKind.LONG)
FLOAT = DeclaredType(OptionKind.FLOAT)
DOUBLE = DeclaredType(OptionKind.DOUBLE)
STRING = DeclaredType(OptionKind.STRING)
