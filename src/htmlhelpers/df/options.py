"""
Option collections from DataFrames - requires polars.

Build the ordered value -> label mappings used by select(),
collection_check_boxes() and collection_radios() from DataFrame columns.
"""

__all__ = [
    "collection_from_frame",
    "grouped_collection_from_frame",
]

from typing import Any, Dict, List, Optional

import polars as pl
from loguru import logger


def _require_columns(df: pl.DataFrame, columns: List[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {', '.join(missing)}")


def collection_from_frame(
    df: pl.DataFrame,
    value_column: str,
    label_column: Optional[str] = None,
) -> Dict[Any, Any]:
    """
    Build an ordered value -> label collection from two columns.

    Rows with a null value are skipped. A repeated value keeps its first
    position and takes the last label.

    Args:
        df: Input DataFrame
        value_column: Column holding option values
        label_column: Column holding labels (defaults to value_column)

    Returns:
        Dict of value to label, in row order

    Raises:
        ValueError: If a column is missing

    Example:
        >>> df = pl.DataFrame({"code": ["b", "w"], "name": ["black", "white"]})
        >>> collection_from_frame(df, "code", "name")
        {'b': 'black', 'w': 'white'}
    """
    label_column = label_column or value_column
    _require_columns(df, [value_column, label_column])

    collection = {}
    for value, label in zip(df[value_column].to_list(), df[label_column].to_list()):
        if value is None:
            continue
        collection[value] = label

    logger.debug(f"Built collection of {len(collection)} options from {value_column!r}")
    return collection


def grouped_collection_from_frame(
    df: pl.DataFrame,
    group_column: str,
    value_column: str,
    label_column: Optional[str] = None,
) -> Dict[Any, Dict[Any, Any]]:
    """
    Build a grouped collection (group -> value -> label) for <optgroup>s.

    Groups appear in order of first appearance. Rows with a null group or
    value are skipped.

    Example:
        >>> df = pl.DataFrame({
        ...     "kind": ["Coffee", "Tea", "Coffee"],
        ...     "code": ["bc", "gt", "wc"],
        ...     "name": ["black", "Green", "white"],
        ... })
        >>> grouped_collection_from_frame(df, "kind", "code", "name")
        {'Coffee': {'bc': 'black', 'wc': 'white'}, 'Tea': {'gt': 'Green'}}
    """
    label_column = label_column or value_column
    _require_columns(df, [group_column, value_column, label_column])

    groups: Dict[Any, Dict[Any, Any]] = {}
    rows = zip(
        df[group_column].to_list(),
        df[value_column].to_list(),
        df[label_column].to_list(),
    )
    for group, value, label in rows:
        if group is None or value is None:
            continue
        groups.setdefault(group, {})[value] = label

    logger.debug(f"Built {len(groups)} option groups from {group_column!r}")
    return groups
