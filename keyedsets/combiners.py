"""Ready-made combiners for resolving elements that share a key.

A combiner receives two elements with the same key and returns the one that
survives (or a merged value). Groups of more than two elements are folded
pairwise, so combiners used on such groups should not depend on argument
order.

Example:
    from keyedsets import union
    from keyedsets.combiners import min_by

    cheapest = union(stock_a, stock_b, lambda i: i.id, min_by(lambda i: i.price))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from keyedsets.base import Combiner, require_callable


def prefer_first[T](first: T, second: T) -> T:
    """Keep the element that was seen first."""
    return first


def prefer_last[T](first: T, second: T) -> T:
    """Keep the element that was seen last."""
    return second


def min_by[T](attribute: Callable[[T], Any]) -> Combiner[T]:
    """Build a combiner keeping the element with the smaller derived value.

    Args:
        attribute: Extracts the comparable value from an element.

    Returns:
        A combiner. On ties the first argument wins.

    Raises:
        TypeError: If attribute is not callable.
    """
    require_callable("attribute", attribute)

    def combine(first: T, second: T) -> T:
        return second if attribute(second) < attribute(first) else first

    return combine


def max_by[T](attribute: Callable[[T], Any]) -> Combiner[T]:
    """Build a combiner keeping the element with the larger derived value.

    On ties the first argument wins.
    """
    require_callable("attribute", attribute)

    def combine(first: T, second: T) -> T:
        return second if attribute(second) > attribute(first) else first

    return combine
