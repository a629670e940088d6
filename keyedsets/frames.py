"""Keyed set operations over pandas DataFrame rows.

Each row becomes a hashable named tuple and the key is the tuple of the `on`
columns, so two frames can be combined exactly like two sets of records:

    from keyedsets.frames import frame_union
    from keyedsets.combiners import min_by

    prices = frame_union(shop_a, shop_b, on="id", combiner=min_by(lambda row: row.price))

Combiners receive row tuples (attribute access by column name works for
columns that are valid identifiers). Results are new DataFrames with the
columns of the first frame and a fresh RangeIndex. Row order is unspecified.
Missing cells (NaN, None, NaT, NA) compare equal to each other, as in
`DataFrame.merge`, and come back as missing values (NaN or None). An empty
result keeps the input dtypes.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import pandas as pd

from keyedsets.base import Combiner
from keyedsets.combiners import prefer_first
from keyedsets.merger import intersect, left_difference, right_difference, union

logger = logging.getLogger(__name__)

type Row = tuple


def _key_columns(on: str | Sequence[str]) -> list[str]:
    if isinstance(on, str):
        return [on]
    columns = list(on)
    if not columns:
        raise ValueError("on must name at least one column")
    return columns


def _columns_of(first: pd.DataFrame | None, second: pd.DataFrame | None) -> list:
    """Resolve the shared column layout of two frames."""
    if first is None:
        return list(second.columns)
    if second is not None and set(first.columns) != set(second.columns):
        raise ValueError(
            f"Frames have different columns: {list(first.columns)} vs {list(second.columns)}"
        )
    return list(first.columns)


def _cell(value):
    """Collapse every missing marker (NaN, None, NaT, NA) to None.

    NaN never equals itself, so rows holding it would neither dedupe nor
    match on key the way pandas merge and drop_duplicates treat them.
    """
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def _rows(frame: pd.DataFrame | None, columns: list) -> set[Row] | None:
    if frame is None:
        return None
    rows = set()
    for row in frame[columns].itertuples(index=False, name="Row"):
        cells = [_cell(value) for value in row]
        rows.add(row._make(cells) if hasattr(row, "_make") else tuple(cells))
    return rows


def _run(
    operation: Callable[..., set[Row]],
    first: pd.DataFrame | None,
    second: pd.DataFrame | None,
    on: str | Sequence[str],
    *extra,
) -> pd.DataFrame:
    if first is None and second is None:
        return pd.DataFrame()
    columns = _columns_of(first, second)
    keys = _key_columns(on)
    missing = [k for k in keys if k not in columns]
    if missing:
        raise KeyError(f"Key columns not found in frame: {missing}")

    positions = [columns.index(k) for k in keys]

    def identifier(row: Row) -> tuple:
        return tuple(row[i] for i in positions)

    result = operation(_rows(first, columns), _rows(second, columns), identifier, *extra)
    logger.debug("%s on %s: %d rows", operation.__name__, keys, len(result))
    if not result:
        template = first if first is not None else second
        return template[columns].iloc[0:0].reset_index(drop=True)
    return pd.DataFrame([tuple(row) for row in result], columns=columns)


def frame_union(
    first: pd.DataFrame | None,
    second: pd.DataFrame | None,
    on: str | Sequence[str],
    combiner: Combiner[Row] = prefer_first,
) -> pd.DataFrame:
    """Rows of either frame, one per key, colliding rows combined.

    Raises:
        KeyError: If a key column is missing.
        ValueError: If the frames have different columns.
    """
    return _run(union, first, second, on, combiner)


def frame_intersect(
    first: pd.DataFrame | None,
    second: pd.DataFrame | None,
    on: str | Sequence[str],
    combiner: Combiner[Row] = prefer_first,
) -> pd.DataFrame:
    """Rows whose key occurs in both frames, combined per key."""
    return _run(intersect, first, second, on, combiner)


def frame_left_difference(
    first: pd.DataFrame | None,
    second: pd.DataFrame | None,
    on: str | Sequence[str],
) -> pd.DataFrame:
    """Rows of first whose key does not occur in second."""
    return _run(left_difference, first, second, on)


def frame_right_difference(
    first: pd.DataFrame | None,
    second: pd.DataFrame | None,
    on: str | Sequence[str],
) -> pd.DataFrame:
    """Rows of second whose key does not occur in first."""
    return _run(right_difference, first, second, on)
