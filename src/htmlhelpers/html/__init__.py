"""
HTML utilities subpackage - no external dependencies.

Pure functions for escaping text and building tags.
"""

from htmlhelpers.html.markup import (
    escape,
    attributes,
    tag,
)

__all__ = [
    # markup
    "escape",
    "attributes",
    "tag",
]
