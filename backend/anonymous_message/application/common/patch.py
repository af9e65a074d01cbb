"""
Partial update support.

A patch field left as UNSET means "keep the current value". An explicit
None means "clear it" for optional fields.
"""

from typing import Any, TypeVar, Union

T = TypeVar("T")


class _Unset:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

Patchable = Union[T, None, _Unset]


def is_set(value: object) -> bool:
    return value is not UNSET


def merge(value: object, current: T) -> T:
    """Return ``current`` when ``value`` is UNSET, otherwise ``value``."""
    return current if value is UNSET else value  # type: ignore[return-value]
