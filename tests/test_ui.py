from __future__ import annotations

import pytest

pytest.importorskip("marimo")

from htmlhelpers.form import check_box, collection_radios  # noqa: E402
from htmlhelpers.ui import wrap_html  # noqa: E402


def test_wrap_html_string() -> None:
    assert wrap_html("<b>x</b>").text == "<b>x</b>"


def test_wrap_html_joins_fragments() -> None:
    parts = check_box("x", True, with_hidden_field="array")
    assert wrap_html(parts).text == "".join(parts)

    radios = collection_radios("s", {"a": "A"}, "a", return_as_list=True)
    assert wrap_html(radios).text == radios[0]


def test_wrap_html_empty() -> None:
    assert wrap_html("").text == ""
    assert wrap_html(None).text == ""
