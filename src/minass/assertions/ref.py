"""Pointer-like references accepted by ``nil()`` and ``contains()``."""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    """A mutable box that either holds a value or holds nothing.

    ``Ref()`` and ``Ref(None)`` are absent references; ``Ref(x)`` points at ``x``.
    """

    value: T | None = None


def is_nilable(value: Any) -> bool:
    """Return whether ``value`` is a reference that can be absent."""
    return value is None or isinstance(value, (Ref, weakref.ReferenceType))


def deref(value: Any) -> Any:
    """Return what a nilable reference points at, or ``None`` if it is absent."""
    if value is None:
        return None
    if isinstance(value, Ref):
        return value.value
    if isinstance(value, weakref.ReferenceType):
        return value()
    raise TypeError(f"{type(value).__name__} is not a reference")
