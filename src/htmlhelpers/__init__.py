"""
htmlhelpers - HTML markup and form field generators.

This package is organized into focused subpackages:

- html/     Markup primitives (no dependencies)
            - markup: escape, attributes, tag

- form/     Form fields built on html/ (logs through loguru)
            - helpers: auto_id, merge_defaults
            - fields: open_form, close_form, label, text, password,
                      hidden, file, text_area, button
            - choices: check_box, collection_check_boxes, radio,
                       collection_radios, select

- df/       Option collections from DataFrames (requires polars)
            - options: collection_from_frame, grouped_collection_from_frame

- ui/       Notebook display (requires marimo)
            - wrap_html: wrap_html

Defaults used by the form helpers live in htmlhelpers.config.CONFIG.

Logging is disabled by default; call logger.enable("htmlhelpers") from
loguru to see debug records.

Usage:
    from htmlhelpers.html import tag, escape
    from htmlhelpers.form import open_form, text, select, close_form
    from htmlhelpers.df import collection_from_frame
    from htmlhelpers.ui import wrap_html
"""

__version__ = "0.1.0"

from loguru import logger

# Convenience imports from html (no dependencies)
from htmlhelpers.html import (
    escape,
    attributes,
    tag,
)

# Convenience imports from form
from htmlhelpers.form import (
    auto_id,
    merge_defaults,
    open_form,
    close_form,
    label,
    text,
    password,
    hidden,
    file,
    text_area,
    button,
    check_box,
    collection_check_boxes,
    radio,
    collection_radios,
    select,
)

logger.disable("htmlhelpers")

__all__ = [
    "__version__",
    # html.markup
    "escape",
    "attributes",
    "tag",
    # form.helpers
    "auto_id",
    "merge_defaults",
    # form.fields
    "open_form",
    "close_form",
    "label",
    "text",
    "password",
    "hidden",
    "file",
    "text_area",
    "button",
    # form.choices
    "check_box",
    "collection_check_boxes",
    "radio",
    "collection_radios",
    "select",
]
