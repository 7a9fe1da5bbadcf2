# json_workbench/application/formatting/__init__.py

"""Template-aware formatting and serialization"""

# Local imports
from json_workbench.application.formatting._formatter import compact_json
from json_workbench.application.formatting._formatter import format_json
from json_workbench.application.formatting._formatter import smart_format_json
from json_workbench.application.formatting._formatter import sort_json_keys
from json_workbench.application.formatting._serializer import resolve_indent
from json_workbench.application.formatting._serializer import serialize_json
from json_workbench.application.formatting._serializer import smart_serialize
from json_workbench.application.formatting._templates import TemplatePlaceholder
from json_workbench.application.formatting._templates import extract_templates
from json_workbench.application.formatting._templates import has_template_syntax
from json_workbench.application.formatting._templates import restore_templates

__all__ = [
    "TemplatePlaceholder",
    "compact_json",
    "extract_templates",
    "format_json",
    "has_template_syntax",
    "resolve_indent",
    "restore_templates",
    "serialize_json",
    "smart_format_json",
    "smart_serialize",
    "sort_json_keys",
]
