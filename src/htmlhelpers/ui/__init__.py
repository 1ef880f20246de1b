"""
Notebook display subpackage - requires marimo.
"""

from htmlhelpers.ui.wrap_html import wrap_html

__all__ = [
    "wrap_html",
]
