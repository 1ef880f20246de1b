from __future__ import annotations

from htmlhelpers.html import attributes, escape, tag


def test_escape_replaces_special_characters() -> None:
    assert escape("<a href='x' title=\"y\">&</a>") == (
        "&lt;a href=&#039;x&#039; title=&quot;y&quot;&gt;&amp;&lt;/a&gt;"
    )


def test_escape_coerces_non_strings() -> None:
    assert escape(5) == "5"


def test_escape_is_not_idempotent() -> None:
    once = escape("&")
    assert once == "&amp;"
    assert escape(once) == "&amp;amp;"


def test_attributes_empty() -> None:
    assert attributes({}) == ""
    assert attributes(None) == ""


def test_attributes_false_and_none_are_omitted() -> None:
    assert attributes({"selected": False, "title": None}) == ""
    assert attributes({"id": "a", "hidden": False}) == ' id="a"'


def test_attributes_true_is_bare() -> None:
    out = attributes({"disabled": True, "id": "x"})
    assert out == ' disabled id="x"'
    assert "disabled=" not in out


def test_attributes_sequences_are_space_joined_and_escaped() -> None:
    assert attributes({"class": ["a", "b&c"]}) == ' class="a b&amp;c"'
    assert attributes({"class": ("one", "two")}) == ' class="one two"'


def test_attributes_escape_values_once() -> None:
    assert attributes({"value": "&amp;"}) == ' value="&amp;amp;"'


def test_attributes_positional_keys_are_bare_tokens() -> None:
    assert attributes({0: "required", "id": "x"}) == ' required id="x"'


def test_attributes_keep_insertion_order_and_coerce_scalars() -> None:
    assert attributes({"tabindex": 3, "name": "q"}) == ' tabindex="3" name="q"'


def test_tag_without_content_has_no_closing_tag() -> None:
    assert tag("input", {"type": "text", "value": "a&b"}) == (
        '<input type="text" value="a&amp;b">'
    )
    assert tag("br") == "<br>"


def test_tag_escapes_content_by_default() -> None:
    assert tag("div", {}, "<b>x</b>") == "<div>&lt;b&gt;x&lt;/b&gt;</div>"
    assert tag("div", {}, "<b>x</b>", True) == "<div>&lt;b&gt;x&lt;/b&gt;</div>"


def test_tag_raw_content() -> None:
    assert tag("div", {}, "<b>x</b>", False) == "<div><b>x</b></div>"


def test_tag_empty_content_closes() -> None:
    assert tag("p", {"class": "lead"}, "") == '<p class="lead"></p>'


def test_escape_none_is_empty() -> None:
    assert escape(None) == ""
