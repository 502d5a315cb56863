"""Live, override-aware configuration options.

Each configuration key gets an ``OptionState`` that reads its backing value
from a live provider and resolves an effective value by priority: an
administrative bypass wins over an override, which wins over the live value.
Textual directive payloads are coerced to the key's declared type.
"""

from ._kinds import BOOL, DOUBLE, FLOAT, INT, LONG, STRING, DeclaredType, OptionKind
from ._providers import DynamicProperty, PropertyProvider
from ._session import OptionChange, OptionSession, OptionSnapshot
from ._state import OptionState
from ._testing import bypassed, overridden
from ._types import (
    DuplicateOptionError,
    InvalidArgumentError,
    MalformedValueError,
    Option,
    OptionError,
    UnknownEnumMemberError,
    UnknownOptionError,
    UnsupportedTypeError,
)
from ._version import __version__

__all__ = [
    "__version__",
    # Core
    "OptionState",
    "Option",
    "DeclaredType",
    "OptionKind",
    "BOOL",
    "INT",
    "LONG",
    "FLOAT",
    "DOUBLE",
    "STRING",
    # Errors
    "OptionError",
    "InvalidArgumentError",
    "UnknownEnumMemberError",
    "MalformedValueError",
    "UnsupportedTypeError",
    "UnknownOptionError",
    "DuplicateOptionError",
    # Providers
    "PropertyProvider",
    "DynamicProperty",
    # Session
    "OptionSession",
    "OptionChange",
    "OptionSnapshot",
    # Testing
    "overridden",
    "bypassed",
]
