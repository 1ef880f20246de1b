"""Attribute defaults and id generation shared by the form helpers."""

__all__ = [
    "auto_id",
    "merge_defaults",
]

import re
from typing import Any, Dict, Mapping, Optional

BRACKET_SEGMENT = re.compile(r"\[([^\]]+)\]")


def auto_id(name: str) -> Optional[str]:
    """
    Generate an element id from the name of an input.

    Collection inputs (names containing "[]") get no id, since several
    elements share the name.

    Example:
        >>> auto_id("model[field][other_field]")
        'model-field-other_field'
        >>> auto_id("tags[]") is None
        True
    """
    if "[]" in name:
        return None
    return BRACKET_SEGMENT.sub(r"-\1", name)


def merge_defaults(
    defaults: Mapping[Any, Any],
    attrs: Optional[Mapping[Any, Any]] = None,
) -> Dict[Any, Any]:
    """
    Apply default attributes for the keys the caller did not set.

    Caller values win, including None and False, which then suppress the
    attribute. Default keys keep their position; extra caller keys follow.

    Example:
        >>> merge_defaults({"id": "x", "type": "text"}, {"type": "email", "required": True})
        {'id': 'x', 'type': 'email', 'required': True}
    """
    merged = dict(defaults)
    if attrs:
        merged.update(attrs)
    return merged
