"""
Helmsman utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the descriptor, prompt and session layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/""/[].

- truthy(value)
  • Loose boolean reading used for environment and host configuration values.

- preferred(names)
  • Pick the spelling of an option that is used when writing tokens back.

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce(None, "fallback") is None
    True
    >>> preferred(["-m", "--message"])
    '--message'
"""
import functools
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None and 0.
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()


def coalesce(object, default=None, /):
    """
    Resolve the Unset sentinel to a concrete default.

    Falsey values like None, 0, "", or [] are preserved as-is; only Unset is
    replaced.
    """
    return object if object is not Unset else default


def truthy(value, /):
    """
    Read a loosely typed configuration value as a boolean.

    Accepted forms
    - bool: returned unchanged.
    - int/float: non-zero is True.
    - str: one of "1", "true", "t", "yes", "y", "on" (case-insensitive, trimmed).
    - anything else: False.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
    return False


def isshort(name, /):
    """
    Return True when an option spelling is a short, single-character form (e.g. "-o").

    Short forms cannot carry an inline "=value"; the value must follow as its own token.
    """
    prefix = name[:1]
    return len(name) == 2 and name[1] != prefix


def preferred(names, /):
    """
    Pick the option spelling used when writing tokens.

    The first long form wins (declaration order); when only short forms exist,
    the first one is used.
    """
    names = list(names)
    if not names:
        raise ValueError("preferred() argument must not be empty")
    for name in names:
        if not isshort(name):
            return name
    return names[0]


__all__ = (
    "UnsetType",
    "Unset",
    "coalesce",
    "truthy",
    "isshort",
    "preferred",
)
