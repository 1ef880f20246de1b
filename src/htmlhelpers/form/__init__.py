"""
Form utilities subpackage - requires loguru.

Form field generators built on htmlhelpers.html. Default attributes
(ids derived from field names, names, types) are applied only where the
caller has not set a value.
"""

from htmlhelpers.form.helpers import (
    auto_id,
    merge_defaults,
)

from htmlhelpers.form.fields import (
    open_form,
    close_form,
    label,
    text,
    password,
    hidden,
    file,
    text_area,
    button,
)

from htmlhelpers.form.choices import (
    check_box,
    collection_check_boxes,
    radio,
    collection_radios,
    select,
)

__all__ = [
    # helpers
    "auto_id",
    "merge_defaults",
    # fields
    "open_form",
    "close_form",
    "label",
    "text",
    "password",
    "hidden",
    "file",
    "text_area",
    "button",
    # choices
    "check_box",
    "collection_check_boxes",
    "radio",
    "collection_radios",
    "select",
]
