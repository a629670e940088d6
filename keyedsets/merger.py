"""Keyed set operations: union, intersection and differences by derived key.

Every operation is one configuration of the `merge` engine:

1. Pool the elements of both inputs into one set.
2. Keep the elements accepted by a membership predicate.
3. Group the survivors by identifier(element).
4. Fold each group into one element with the combiner.

Only the predicate differs between operations:

    union                 every element
    intersect             key present in both inputs
    left_difference       key present in the first input only
    right_difference      key present in the second input only
    symmetric_difference  key present in exactly one input

Inputs may be None (treated as empty) and are never mutated. Results are
plain sets with at most one element per key.

Combiners are folded over a group in encounter order, which for a set is
arbitrary. With groups of more than two elements the result is only
deterministic when the combiner does not depend on argument order.

Example:
    from keyedsets import intersect, min_by

    shared = intersect(stock_a, stock_b, lambda i: i.id, min_by(lambda i: i.price))
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Hashable
from functools import reduce

from keyedsets.base import Combiner, Identifier, Predicate, always, identity, require_callable
from keyedsets.combiners import prefer_first
from keyedsets.membership import KeyIndex

logger = logging.getLogger(__name__)


def merge[T: Hashable, K: Hashable](
    first: Collection[T] | None,
    second: Collection[T] | None,
    predicate: Predicate[T],
    identifier: Identifier[T, K],
    combiner: Combiner[T],
) -> set[T]:
    """Combine two inputs into a set holding one element per eligible key.

    Args:
        first: First input. None is treated as empty.
        second: Second input. None is treated as empty.
        predicate: Eligibility test applied to every pooled element.
        identifier: Key extraction function.
        combiner: Resolves two elements sharing a key.

    Returns:
        New set with at most one element per key.

    Raises:
        TypeError: If predicate, identifier or combiner is not callable.
    """
    require_callable("predicate", predicate)
    require_callable("identifier", identifier)
    require_callable("combiner", combiner)

    pooled: set[T] = set()
    for source in (first, second):
        if source is not None:
            pooled.update(source)

    groups: dict[K, list[T]] = {}
    for item in pooled:
        if predicate(item):
            groups.setdefault(identifier(item), []).append(item)

    result = {reduce(combiner, members) for members in groups.values()}

    logger.debug(
        "merge: pooled=%d eligible_keys=%d result=%d",
        len(pooled),
        len(groups),
        len(result),
    )
    return result


def union[T: Hashable, K: Hashable](
    first: Collection[T] | None,
    second: Collection[T] | None,
    identifier: Identifier[T, K] = identity,
    combiner: Combiner[T] = prefer_first,
) -> set[T]:
    """Union of two inputs, combining elements whose keys collide.

    With the default identifier elements are only deduplicated by their own
    equality.
    """
    return merge(first, second, always, identifier, combiner)


def intersect[T: Hashable, K: Hashable](
    first: Collection[T] | None,
    second: Collection[T] | None,
    identifier: Identifier[T, K] = identity,
    combiner: Combiner[T] = prefer_first,
) -> set[T]:
    """Elements whose key occurs in both inputs, combined per key.

    With the default identifier only elements present verbatim in both
    inputs survive.
    """
    in_first = KeyIndex(first, identifier)
    in_second = KeyIndex(second, identifier)
    return merge(
        first,
        second,
        lambda item: item in in_first and item in in_second,
        identifier,
        combiner,
    )


def left_difference[T: Hashable, K: Hashable](
    first: Collection[T] | None,
    second: Collection[T] | None,
    identifier: Identifier[T, K] = identity,
) -> set[T]:
    """Elements of first whose key does not occur in second."""
    in_first = KeyIndex(first, identifier)
    in_second = KeyIndex(second, identifier)
    return merge(
        first,
        second,
        lambda item: item in in_first and item not in in_second,
        identifier,
        prefer_first,
    )


def right_difference[T: Hashable, K: Hashable](
    first: Collection[T] | None,
    second: Collection[T] | None,
    identifier: Identifier[T, K] = identity,
) -> set[T]:
    """Elements of second whose key does not occur in first."""
    in_first = KeyIndex(first, identifier)
    in_second = KeyIndex(second, identifier)
    return merge(
        first,
        second,
        lambda item: item not in in_first and item in in_second,
        identifier,
        prefer_first,
    )


def symmetric_difference[T: Hashable, K: Hashable](
    first: Collection[T] | None,
    second: Collection[T] | None,
    identifier: Identifier[T, K] = identity,
) -> set[T]:
    """Elements whose key occurs in exactly one of the inputs."""
    in_first = KeyIndex(first, identifier)
    in_second = KeyIndex(second, identifier)
    return merge(
        first,
        second,
        lambda item: (item in in_first) != (item in in_second),
        identifier,
        prefer_first,
    )


class KeyedSetMerger[T: Hashable, K: Hashable]:
    """Set operations bound to one identifier and combiner.

    Args:
        identifier: Key extraction function. Defaults to the element itself.
        combiner: Resolves elements sharing a key. Defaults to prefer_first.

    Raises:
        TypeError: If identifier or combiner is not callable.

    Example:
        by_id = KeyedSetMerger(lambda i: i.id, min_by(lambda i: i.price))
        by_id.union(stock_a, stock_b)
        by_id.left_difference(stock_a, stock_b)
    """

    def __init__(
        self,
        identifier: Identifier[T, K] = identity,
        combiner: Combiner[T] = prefer_first,
    ):
        require_callable("identifier", identifier)
        require_callable("combiner", combiner)
        self._identifier = identifier
        self._combiner = combiner

    @property
    def identifier(self) -> Identifier[T, K]:
        return self._identifier

    @property
    def combiner(self) -> Combiner[T]:
        return self._combiner

    def merge(
        self,
        first: Collection[T] | None,
        second: Collection[T] | None,
        predicate: Predicate[T],
    ) -> set[T]:
        """Run the engine with a custom eligibility predicate."""
        return merge(first, second, predicate, self._identifier, self._combiner)

    def union(self, first: Collection[T] | None, second: Collection[T] | None) -> set[T]:
        return union(first, second, self._identifier, self._combiner)

    def intersect(self, first: Collection[T] | None, second: Collection[T] | None) -> set[T]:
        return intersect(first, second, self._identifier, self._combiner)

    def left_difference(self, first: Collection[T] | None, second: Collection[T] | None) -> set[T]:
        return left_difference(first, second, self._identifier)

    def right_difference(self, first: Collection[T] | None, second: Collection[T] | None) -> set[T]:
        return right_difference(first, second, self._identifier)

    def symmetric_difference(
        self, first: Collection[T] | None, second: Collection[T] | None
    ) -> set[T]:
        return symmetric_difference(first, second, self._identifier)

    def __repr__(self) -> str:
        identifier = getattr(self._identifier, "__name__", repr(self._identifier))
        combiner = getattr(self._combiner, "__name__", repr(self._combiner))
        return f"KeyedSetMerger(identifier={identifier}, combiner={combiner})"
