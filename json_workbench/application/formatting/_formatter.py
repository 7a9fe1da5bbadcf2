# json_workbench/application/formatting/_formatter.py

"""Text-level formatting operations

All operations share one pipeline: protect templates, parse strictly,
optionally repair and retry once, render, restore templates. On an
unrecoverable failure the input text is returned unchanged.
"""

# Standard library imports
from logging import getLogger
from typing import Callable

# Local imports
from json_workbench.application.formatting._serializer import serialize_json
from json_workbench.application.formatting._serializer import smart_serialize
from json_workbench.application.formatting._templates import TemplatePlaceholder
from json_workbench.application.formatting._templates import extract_templates
from json_workbench.application.formatting._templates import has_template_syntax
from json_workbench.application.formatting._templates import restore_templates
from json_workbench.application.parsing import parse_json
from json_workbench.application.query._sorting import sort_object_keys
from json_workbench.application.repair import repair_json
from json_workbench.core.domain.enums import SortDirection
from json_workbench.core.types.json import JSONType

logger = getLogger(__name__)

type Renderer = Callable[[JSONType], str]


def _render_once(text: str, render: Renderer) -> str | None:
    result = parse_json(text)
    if not result.ok:
        return None
    return render(result.value)


def _run_pipeline(
    text: str, render: Renderer, preserve_templates: bool, auto_repair: bool, operation: str
) -> str:
    if not isinstance(text, str):
        raise TypeError(f"{operation} expects str, got {type(text).__name__}")

    placeholders: list[TemplatePlaceholder] = []
    processed = text
    if preserve_templates and has_template_syntax(text):
        processed, placeholders = extract_templates(text)
        logger.debug(f"{operation}: protected {len(placeholders)} template span(s)")

    rendered = _render_once(processed, render)
    if rendered is None and auto_repair:
        repaired = repair_json(processed)
        if repaired.was_repaired:
            # Retry once on the repaired text without repairing again
            value = parse_json(repaired.output).value
            if isinstance(value, str) and value in (text, processed):
                logger.debug(f"{operation}: repair only quoted the input, keeping it")
                return text
            rendered = _render_once(repaired.output, render)

    if rendered is None:
        logger.debug(f"{operation}: input is not valid JSON, returning it unchanged")
        return text
    return restore_templates(rendered, placeholders)


def format_json(
    text: str,
    indent: int | str = 2,
    preserve_templates: bool = True,
    auto_repair: bool = True,
) -> str:
    """Pretty-print JSON text

    Args:
        text: Document text, possibly containing template syntax
        indent: Number of spaces or ``"tab"``
        preserve_templates: Protect template spans from the parser
        auto_repair: Repair and retry once when strict parsing fails

    Returns:
        Formatted text, or ``text`` unchanged when it cannot be parsed
    """
    return _run_pipeline(
        text,
        lambda value: serialize_json(value, indent),
        preserve_templates,
        auto_repair,
        "format",
    )


def compact_json(text: str, preserve_templates: bool = True, auto_repair: bool = False) -> str:
    """Minify JSON text into its canonical single-line form"""
    return _run_pipeline(text, serialize_json, preserve_templates, auto_repair, "compact")


def smart_format_json(
    text: str,
    indent: int | str = 2,
    max_line_length: int = 80,
    preserve_templates: bool = True,
    auto_repair: bool = False,
) -> str:
    """Format with short arrays and objects kept on one line

    Args:
        text: Document text
        indent: Number of spaces or ``"tab"``
        max_line_length: Longest line an inlined structure may produce

    Returns:
        Formatted text, or ``text`` unchanged when it cannot be parsed
    """
    return _run_pipeline(
        text,
        lambda value: smart_serialize(value, indent, max_line_length),
        preserve_templates,
        auto_repair,
        "smart format",
    )


def sort_json_keys(
    text: str,
    direction: SortDirection | str = SortDirection.ASC,
    recursive: bool = True,
    indent: int | str = 2,
    preserve_templates: bool = True,
    auto_repair: bool = False,
) -> str:
    """Reorder object keys and pretty-print

    Keys compare accent- and case-insensitively with a code point tie-break.
    Array element order is never changed.
    """
    direction = SortDirection(direction)
    return _run_pipeline(
        text,
        lambda value: serialize_json(sort_object_keys(value, direction, recursive), indent),
        preserve_templates,
        auto_repair,
        "sort keys",
    )
