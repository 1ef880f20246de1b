"""
DataFrame utilities subpackage - requires polars.

Pure functions turning DataFrame columns into option collections.
"""

from htmlhelpers.df.options import (
    collection_from_frame,
    grouped_collection_from_frame,
)

__all__ = [
    # options
    "collection_from_frame",
    "grouped_collection_from_frame",
]
