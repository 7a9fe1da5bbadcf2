# json_workbench/shared/utils/__init__.py

"""Shared utility functions for text positions, collation and value coercion"""

# Local imports
# JSON text utilities
from json_workbench.shared.utils.json_text import render_number
from json_workbench.shared.utils.json_text import render_scalar
from json_workbench.shared.utils.json_text import render_string
from json_workbench.shared.utils.json_text import to_number
from json_workbench.shared.utils.json_text import to_text

# Text utilities
from json_workbench.shared.utils.text_utils import collation_key
from json_workbench.shared.utils.text_utils import is_identifier
from json_workbench.shared.utils.text_utils import natural_key
from json_workbench.shared.utils.text_utils import offset_to_line_column

__all__ = [
    # JSON text utilities
    "render_number",
    "render_scalar",
    "render_string",
    "to_number",
    "to_text",
    # Text utilities
    "collation_key",
    "is_identifier",
    "natural_key",
    "offset_to_line_column",
]
