"""
Default values used by the form helpers.

All default attribute values and id suffixes are centralized here
for easy maintenance.
"""

__all__ = ["CONFIG"]

from typing import Any, Dict

# ====================================================================
# FORM CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # <form> defaults
    "form_method": "post",
    "form_accept_charset": "utf-8",
    "multipart_enctype": "multipart/form-data",  # Replaces the `multipart` flag
    # Checkboxes
    "checkbox_checked_value": 1,
    "checkbox_unchecked_value": 0,  # Sent by the hidden field when unchecked
    # Derived ids
    "hidden_id_suffix": "-hidden",
    "label_id_suffix": "-label",
    # <option> labels may indent with &nbsp; without double escaping
    "nbsp_entity": "&nbsp;",
}
