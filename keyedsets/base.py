"""Shared type aliases and small helpers for keyed set operations.

Elements are compared by a derived key rather than by their own equality.
The callables that drive every operation are:
- Identifier: maps an element to its key
- Combiner: resolves two elements that share a key into one
- Predicate: decides whether a candidate element is eligible for the result
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

type Identifier[T, K] = Callable[[T], K]
type Combiner[T] = Callable[[T, T], T]
type Predicate[T] = Callable[[T], bool]


def identity[T](item: T) -> T:
    """Key extractor that uses the element itself as its key."""
    return item


def always[T](item: T) -> bool:
    """Predicate accepting every element."""
    return True


def require_callable(name: str, value: Any) -> None:
    """Fail fast when a required function argument is missing.

    Raises:
        TypeError: If value is None or not callable.
    """
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")
