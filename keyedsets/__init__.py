"""keyedsets: set operations where element identity comes from a key function.

    from keyedsets import union, intersect, left_difference, right_difference
    from keyedsets import min_by

    cheapest = union(stock_a, stock_b, lambda i: i.id, min_by(lambda i: i.price))
    only_a = left_difference(stock_a, stock_b, lambda i: i.id)
"""

import logging

from keyedsets.base import Combiner, Identifier, Predicate, identity
from keyedsets.combiners import max_by, min_by, prefer_first, prefer_last
from keyedsets.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from keyedsets.membership import KeyIndex, has_key, key_set
from keyedsets.merger import (
    KeyedSetMerger,
    intersect,
    left_difference,
    merge,
    right_difference,
    symmetric_difference,
    union,
)

# Silent unless the application configures logging
logging.getLogger("keyedsets").addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Combiner",
    "Identifier",
    "Predicate",
    "identity",
    # Set operations
    "KeyedSetMerger",
    "intersect",
    "left_difference",
    "merge",
    "right_difference",
    "symmetric_difference",
    "union",
    # Membership
    "KeyIndex",
    "has_key",
    "key_set",
    # Combiners
    "max_by",
    "min_by",
    "prefer_first",
    "prefer_last",
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
