"""
Choice inputs: checkboxes, radio buttons and selects.

Collections are ordered mappings of option value to label. For selects,
a label may itself be a mapping, which renders as an <optgroup>.
"""

__all__ = [
    "check_box",
    "collection_check_boxes",
    "radio",
    "collection_radios",
    "select",
]

from collections.abc import Iterable
from typing import Any, List, Mapping, Optional, Set, Union

from loguru import logger

from htmlhelpers.config import CONFIG
from htmlhelpers.form.helpers import auto_id, merge_defaults
from htmlhelpers.html.markup import escape, tag


def _strict_equals(a: Any, b: Any) -> bool:
    """Equality that does not mix types (1 != "1", 1 != True)."""
    return type(a) is type(b) and a == b


def check_box(
    name: str,
    checked: Any = False,
    value: Any = None,
    attrs: Optional[Mapping[Any, Any]] = None,
    with_hidden_field: Union[bool, str] = True,
) -> Union[str, List[str]]:
    """
    Generate a checkbox.

    By default a hidden field with the unchecked value is emitted first, so
    the field is present in the submitted form even when the box is not
    checked. When it is checked, the checkbox value comes later and wins.

    Args:
        name: Field name
        checked: Checked state (coerced to bool)
        value: Value submitted when checked (defaults to
            CONFIG["checkbox_checked_value"])
        attrs: HTML attributes for the checkbox
        with_hidden_field: False to omit the hidden field, "array" to get
            [hidden, checkbox] as a list instead of a single string.
            The hidden field's id is "<auto id>-hidden"; names without an
            auto id (containing "[]") give a hidden field without id.

    Returns:
        HTML string, or a two-element list with with_hidden_field="array"

    Example:
        >>> check_box("terms", True)
        '<input name="terms" type="hidden" value="0" id="terms-hidden"><input name="terms" type="checkbox" value="1" id="terms" checked>'
        >>> check_box("terms", with_hidden_field=False)
        '<input name="terms" type="checkbox" value="1" id="terms">'
    """
    if value is None:
        value = CONFIG["checkbox_checked_value"]
    element_id = auto_id(name)

    defaults = {
        "name": name,
        "type": "checkbox",
        "value": value,
        "id": element_id,
        "checked": bool(checked),
    }
    checkbox = tag("input", merge_defaults(defaults, attrs))

    if with_hidden_field is False:
        return checkbox

    if element_id is None:
        logger.debug(f"No auto id for checkbox {name!r}, hidden field gets none either")
        hidden_id = None
    else:
        hidden_id = f"{element_id}{CONFIG['hidden_id_suffix']}"

    hidden = tag(
        "input",
        {
            "name": name,
            "type": "hidden",
            "value": CONFIG["checkbox_unchecked_value"],
            "id": hidden_id,
        },
    )

    if with_hidden_field == "array":
        return [hidden, checkbox]
    return hidden + checkbox


def collection_check_boxes(
    name: str,
    collection: Mapping[Any, Any],
    checked: Any,
    label_attrs: Optional[Mapping[Any, Any]] = None,
    return_as_list: bool = False,
) -> Union[str, List[str]]:
    """
    Generate labelled checkboxes for a has-many association.

    Every checkbox is named "<name>[]" and has no hidden field. A box is
    checked when its value is strictly equal to one of the checked values.

    Args:
        name: Base field name
        collection: Ordered mapping of value to label
        checked: Checked values; any collection or iterable except a string.
            For a mapping, its values are used.
        label_attrs: HTML attributes for every <label>
        return_as_list: Return the labels as a list instead of one string

    Returns:
        HTML string or list of HTML strings

    Raises:
        TypeError: If checked is a string or not iterable

    Example:
        >>> collection_check_boxes("tags", {"py": "Python"}, ["py"])
        '<label><input name="tags[]" type="checkbox" value="py" checked>Python</label>'
    """
    if isinstance(checked, (str, bytes)) or not isinstance(checked, Iterable):
        logger.debug(f"Rejected checked values for {name!r}: {checked!r}")
        raise TypeError(
            f"{name} must be a collection or iterable, got {type(checked).__name__}"
        )

    if isinstance(checked, Mapping):
        checked_values = list(checked.values())
    else:
        checked_values = list(checked)

    check_boxes = []
    for value, text in collection.items():
        is_checked = any(_strict_equals(value, c) for c in checked_values)
        box = check_box(f"{name}[]", is_checked, value, None, False)
        check_boxes.append(
            tag("label", label_attrs, box + escape(text), escape_content=False)
        )

    return check_boxes if return_as_list else "".join(check_boxes)


def radio(
    name: str,
    value: Any,
    checked: Any = False,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """
    Generate a radio button.

    Example:
        >>> radio("size", "m", True)
        '<input type="radio" name="size" value="m" checked>'
    """
    defaults = {
        "type": "radio",
        "name": name,
        "value": value,
        "checked": bool(checked),
    }
    return tag("input", merge_defaults(defaults, attrs))


def collection_radios(
    name: str,
    collection: Mapping[Any, Any],
    checked: Any,
    label_attrs: Optional[Mapping[Any, Any]] = None,
    return_as_list: bool = False,
) -> Union[str, List[str]]:
    """
    Generate labelled radio buttons.

    Unlike collection_check_boxes, checked is a single value. The radio whose
    value is strictly equal to it is checked.

    Args:
        name: Field name shared by all radios
        collection: Ordered mapping of value to label
        checked: The checked value
        label_attrs: HTML attributes for every <label>
        return_as_list: Return the labels as a list instead of one string

    Returns:
        HTML string or list of HTML strings
    """
    radio_buttons = []
    for value, text in collection.items():
        button = radio(name, value, _strict_equals(value, checked))
        radio_buttons.append(
            tag("label", label_attrs, button + escape(text), escape_content=False)
        )

    return radio_buttons if return_as_list else "".join(radio_buttons)


def _option_key(value: Any) -> str:
    """String form used to match option values (1, 1.0 and "1" agree)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _selected_values(selected: Any) -> Set[str]:
    """Normalize the selected argument of select() to a set of strings."""
    if isinstance(selected, bool):
        return set()
    if isinstance(selected, (str, int, float)):
        return {_option_key(selected)}
    if isinstance(selected, (list, tuple, set, frozenset)):
        return {_option_key(v) for v in selected}
    return set()


def _option(value: Any, text: Any, selected: Set[str]) -> str:
    # Escaped &nbsp; is restored so labels can be indented
    content = escape(text).replace("&amp;nbsp;", CONFIG["nbsp_entity"])
    return tag(
        "option",
        {
            "value": value,
            "selected": _option_key(value) in selected,
        },
        content,
        escape_content=False,
    )


def select(
    name: str,
    collection: Mapping[Any, Any],
    selected: Any = None,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """
    Generate a select tag.

    Args:
        name: Field name
        collection: Ordered mapping of value to label. A non-empty mapping
            as label renders an <optgroup> labelled with the key.
        selected: Selected value, or a list/tuple/set of them. Values are
            matched by string form, integral floats as integers
            (1, 1.0 and "1" all select the option 1)
        attrs: HTML attributes

    Returns:
        HTML <select> tag

    Example:
        >>> select("coffee", {"b": "black", "w": "white"}, "w")
        '<select name="coffee" id="coffee"><option value="b">black</option><option value="w" selected>white</option></select>'
        >>> select("beverage", {"Coffee": {"bc": "black"}, "Tea": {"gt": "Green"}})
        '<select name="beverage" id="beverage"><optgroup label="Coffee"><option value="bc">black</option></optgroup><optgroup label="Tea"><option value="gt">Green</option></optgroup></select>'
    """
    defaults = {
        "name": name,
        "id": auto_id(name),
        "multiple": False,
    }
    selected_values = _selected_values(selected)

    content = ""
    for value, element in collection.items():
        if isinstance(element, Mapping):
            if not element:
                content += _option(value, "", selected_values)
                continue
            group = "".join(
                _option(group_value, group_text, selected_values)
                for group_value, group_text in element.items()
            )
            content += tag("optgroup", {"label": value}, group, escape_content=False)
        else:
            content += _option(value, element, selected_values)

    return tag("select", merge_defaults(defaults, attrs), content, escape_content=False)
