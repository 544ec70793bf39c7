"""
Argument classification: which prompt strategy applies to a descriptor.

Rules (evaluated in order)
1. repeatable  → Strategy.REPEATED
2. required    → Strategy.REQUIRED
3. otherwise   → Strategy.OPTIONAL

classify() is pure: it reads descriptor metadata and nothing else.
"""
from enum import Enum


class Strategy(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"
    REPEATED = "repeated"


def classify(argument, /):
    if argument.repeatable:
        return Strategy.REPEATED
    if argument.required:
        return Strategy.REQUIRED
    return Strategy.OPTIONAL


__all__ = (
    "Strategy",
    "classify",
)
