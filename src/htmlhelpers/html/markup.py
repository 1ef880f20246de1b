"""
Pure HTML generation utilities - no external dependencies.

Functions that build tag and attribute strings. No framework dependencies.
"""

__all__ = [
    "escape",
    "attributes",
    "tag",
]

from typing import Any, Mapping, Optional

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#039;",
    }
)


def escape(text: Any) -> str:
    """
    Escape text for output in HTML text nodes or attribute values.

    Args:
        text: Text to escape; None gives an empty string, other
            non-strings are converted with str()

    Returns:
        Text with &, <, >, " and ' replaced by entities

    Example:
        >>> escape('Tom & "Jerry"')
        'Tom &amp; &quot;Jerry&quot;'
    """
    if text is None:
        return ""
    return str(text).translate(_ESCAPE_TABLE)


def attributes(attrs: Optional[Mapping[Any, Any]]) -> str:
    """
    Serialize a mapping of HTML attributes.

    False or None values are left out. True values, and values given under
    an integer key, are written as bare tokens (checked, disabled, ...).
    Lists and tuples are joined with spaces before escaping.

    Args:
        attrs: Attribute names to values, serialized in insertion order

    Returns:
        Attribute string starting with a space, or empty string

    Example:
        >>> attributes({"id": "some-id", "selected": False, "disabled": True, "class": ["a", "b"]})
        ' id="some-id" disabled class="a b"'
        >>> attributes({0: "required"})
        ' required'
    """
    if not attrs:
        return ""

    parts = []
    for name, value in attrs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
        elif isinstance(name, int):
            parts.append(f" {value}")
        else:
            if isinstance(value, (list, tuple)):
                value = " ".join(str(v) for v in value)
            parts.append(f' {name}="{escape(value)}"')
    return "".join(parts)


def tag(
    name: str,
    attrs: Optional[Mapping[Any, Any]] = None,
    content: Optional[Any] = None,
    escape_content: bool = True,
) -> str:
    """
    Generate an HTML tag.

    Args:
        name: Tag name
        attrs: HTML attributes, see attributes()
        content: Tag content. Omit to get only the opening tag (void elements)
        escape_content: Whether to escape content (pass False for markup)

    Returns:
        HTML tag string

    Example:
        >>> tag("input", {"type": "text", "value": "a&b"})
        '<input type="text" value="a&amp;b">'
        >>> tag("div", {}, "<b>x</b>", escape_content=False)
        '<div><b>x</b></div>'
    """
    result = f"<{name}{attributes(attrs)}>"

    if content is not None:
        body = escape(content) if escape_content else str(content)
        result += f"{body}</{name}>"

    return result
