"""Wrap generated markup in mo.Html."""

__all__ = ["wrap_html"]

from typing import Sequence, Union

import marimo as mo


def wrap_html(markup: Union[str, Sequence[str], None]) -> mo.Html:
    """
    Wrap generated markup in mo.Html for display in a marimo app.

    Lists of fragments (check_box(..., with_hidden_field="array"),
    return_as_list=True) are concatenated first.
    """
    if markup is not None and not isinstance(markup, str):
        markup = "".join(markup)
    return mo.Html(markup) if markup else mo.Html("")
