from __future__ import annotations

import pytest

pl = pytest.importorskip("polars")

from htmlhelpers.df import collection_from_frame, grouped_collection_from_frame  # noqa: E402
from htmlhelpers.form import select  # noqa: E402


def test_collection_from_frame() -> None:
    df = pl.DataFrame({"code": ["b", "w"], "name": ["black", "white"]})
    assert collection_from_frame(df, "code", "name") == {"b": "black", "w": "white"}


def test_collection_from_frame_label_defaults_to_value() -> None:
    df = pl.DataFrame({"size": ["S", "M"]})
    assert collection_from_frame(df, "size") == {"S": "S", "M": "M"}


def test_collection_from_frame_skips_nulls_and_keeps_first_position() -> None:
    df = pl.DataFrame(
        {
            "code": ["a", None, "b", "a"],
            "name": ["first", "skipped", "B", "last"],
        }
    )
    collection = collection_from_frame(df, "code", "name")
    assert collection == {"a": "last", "b": "B"}
    assert list(collection) == ["a", "b"]


def test_collection_from_frame_missing_column() -> None:
    df = pl.DataFrame({"code": ["a"]})
    with pytest.raises(ValueError, match="Missing columns: name"):
        collection_from_frame(df, "code", "name")


def test_grouped_collection_from_frame_feeds_select() -> None:
    df = pl.DataFrame(
        {
            "kind": ["Coffee", "Tea", "Coffee", None],
            "code": ["bc", "gt", "wc", "xx"],
            "name": ["black", "Green", "white", "ignored"],
        }
    )
    groups = grouped_collection_from_frame(df, "kind", "code", "name")
    assert groups == {
        "Coffee": {"bc": "black", "wc": "white"},
        "Tea": {"gt": "Green"},
    }

    out = select("bev", groups, "wc")
    assert out.count("<optgroup") == 2
    assert '<option value="wc" selected>white</option>' in out


def test_grouped_collection_from_frame_missing_column() -> None:
    df = pl.DataFrame({"code": ["a"]})
    with pytest.raises(ValueError, match="kind"):
        grouped_collection_from_frame(df, "kind", "code")
