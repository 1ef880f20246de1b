"""
Form, label and single-value input helpers.

Each function merges its default attributes with the caller's (caller
wins, see merge_defaults) and returns an HTML string.
"""

__all__ = [
    "open_form",
    "close_form",
    "label",
    "text",
    "password",
    "hidden",
    "file",
    "text_area",
    "button",
]

from typing import Any, Mapping, Optional

from htmlhelpers.config import CONFIG
from htmlhelpers.form.helpers import auto_id, merge_defaults
from htmlhelpers.html.markup import tag


def open_form(action: str = "", attrs: Optional[Mapping[Any, Any]] = None) -> str:
    """
    Generate a form opening tag.

    A truthy "multipart" attribute is replaced by the multipart enctype.
    Method defaults to post and accept-charset to utf-8.

    Args:
        action: Form action URL
        attrs: HTML attributes

    Returns:
        HTML <form> opening tag

    Example:
        >>> open_form("/upload", {"multipart": True})
        '<form action="/upload" method="post" accept-charset="utf-8" enctype="multipart/form-data">'
    """
    attrs = dict(attrs or {})
    if attrs.get("multipart"):
        del attrs["multipart"]
        attrs["enctype"] = CONFIG["multipart_enctype"]

    attrs = merge_defaults(
        {
            "method": CONFIG["form_method"],
            "accept-charset": CONFIG["form_accept_charset"],
        },
        attrs,
    )

    # TODO: CSRF token field once a token source is configurable
    return tag("form", merge_defaults({"action": action}, attrs))


def close_form() -> str:
    """Form closing tag."""
    return "</form>"


def label(
    text: Any,
    field_name: Optional[str] = None,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """
    Generate a label for an input.

    Without an explicit "for", it points at the auto id of field_name.
    Labels that point somewhere get the id "<for>-label" unless one is given.

    Args:
        text: Label text (escaped)
        field_name: Name of the labelled input
        attrs: HTML attributes

    Returns:
        HTML <label> tag

    Example:
        >>> label("E-mail", "user[email]")
        '<label for="user-email" id="user-email-label">E-mail</label>'
    """
    attrs = dict(attrs or {})
    if attrs.get("for") is None and field_name is not None:
        attrs["for"] = auto_id(field_name)
    if attrs.get("id") is None and attrs.get("for") is not None:
        attrs["id"] = f"{attrs['for']}{CONFIG['label_id_suffix']}"

    return tag("label", attrs, text)


def _input(
    input_type: str,
    name: str,
    value: Any,
    attrs: Optional[Mapping[Any, Any]],
) -> str:
    defaults = {
        "id": auto_id(name),
        "name": name,
        "type": input_type,
        "value": value,
    }
    return tag("input", merge_defaults(defaults, attrs))


def text(
    name: str,
    value: Any = None,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """
    Generate a text input.

    Example:
        >>> text("user[name]", "Ada")
        '<input id="user-name" name="user[name]" type="text" value="Ada">'
    """
    return _input("text", name, value, attrs)


def password(
    name: str,
    value: Any = None,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """Generate a password input."""
    return _input("password", name, value, attrs)


def hidden(
    name: str,
    value: Any,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """Generate a hidden input."""
    return _input("hidden", name, value, attrs)


def file(name: str, attrs: Optional[Mapping[Any, Any]] = None) -> str:
    """
    Generate a file input.

    Example:
        >>> file("avatar")
        '<input type="file" name="avatar" id="avatar">'
    """
    defaults = {
        "type": "file",
        "name": name,
        "id": auto_id(name),
    }
    return tag("input", merge_defaults(defaults, attrs))


def text_area(
    name: str,
    text: Any = None,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """
    Generate a textarea.

    Args:
        name: Field name
        text: Initial content, escaped; None gives an empty textarea
        attrs: HTML attributes

    Returns:
        HTML <textarea> tag with closing tag

    Example:
        >>> text_area("bio", "<3")
        '<textarea id="bio" name="bio">&lt;3</textarea>'
    """
    defaults = {
        "id": auto_id(name),
        "name": name,
    }
    content = "" if text is None else str(text)
    return tag("textarea", merge_defaults(defaults, attrs), content)


def button(
    name: str,
    text: Any,
    attrs: Optional[Mapping[Any, Any]] = None,
) -> str:
    """Generate a button with escaped text."""
    defaults = {
        "id": auto_id(name),
        "name": name,
    }
    return tag("button", merge_defaults(defaults, attrs), text)
