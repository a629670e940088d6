"""Key membership tests over input sets.

`has_key` answers "does some element of this set map to the same key as
target" with a linear scan. `KeyIndex` computes the key set of an input once
so that the same question becomes a hash lookup, which is what the set
operations use.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator

from keyedsets.base import Identifier, require_callable


def has_key[T, K](items: Iterable[T] | None, identifier: Identifier[T, K], target: T) -> bool:
    """Check whether any element of items shares target's key.

    Args:
        items: Elements to scan. None is treated as empty.
        identifier: Key extraction function.
        target: Element whose key is looked up.

    Returns:
        True if some element of items maps to identifier(target).
    """
    require_callable("identifier", identifier)
    if items is None:
        return False
    wanted = identifier(target)
    return any(identifier(item) == wanted for item in items)


def key_set[T, K: Hashable](items: Iterable[T] | None, identifier: Identifier[T, K]) -> frozenset[K]:
    """Return the distinct keys of items. None is treated as empty."""
    require_callable("identifier", identifier)
    if items is None:
        return frozenset()
    return frozenset(identifier(item) for item in items)


class KeyIndex[T, K: Hashable]:
    """Pre-computed key set of one input, queried with elements.

    Args:
        items: Elements to index. None is treated as empty.
        identifier: Key extraction function shared with the queries.

    Example:
        index = KeyIndex(stock, lambda item: item.id)
        if candidate in index:
            ...
    """

    __slots__ = ("_identifier", "_keys")

    def __init__(self, items: Iterable[T] | None, identifier: Identifier[T, K]):
        self._keys = key_set(items, identifier)
        self._identifier = identifier

    @property
    def keys(self) -> frozenset[K]:
        """Distinct keys of the indexed input."""
        return self._keys

    def contains_key(self, key: K) -> bool:
        return key in self._keys

    def __contains__(self, item: T) -> bool:
        """Check whether item's key appears in the indexed input."""
        return self._identifier(item) in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[K]:
        return iter(self._keys)

    def __repr__(self) -> str:
        return f"KeyIndex(keys={len(self._keys)})"
