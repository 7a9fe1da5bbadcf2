# json_workbench/application/validation/_validator.py

"""JSON Schema validation with editor-friendly issues"""

# Standard library imports
from logging import getLogger
from re import search
from typing import Iterable

# Third party imports
from jsonschema.exceptions import ValidationError as EngineError

# Local imports
from json_workbench.application.parsing import parse_json
from json_workbench.application.validation._schema_cache import SchemaCache
from json_workbench.application.validation._schema_cache import get_default_schema_cache
from json_workbench.core.domain.results import SchemaCheckResult
from json_workbench.core.domain.validation_issue import ValidationIssue
from json_workbench.core.exceptions import SchemaCompileError
from json_workbench.core.types.json import JSONType
from json_workbench.shared.utils.json_text import to_text
from json_workbench.shared.utils.text_utils import is_identifier

logger = getLogger(__name__)

_LIMIT_MESSAGES = {
    "minLength": "String must be at least {} characters",
    "maxLength": "String must be at most {} characters",
    "minimum": "Value must be >= {}",
    "maximum": "Value must be <= {}",
    "minItems": "Array must have at least {} items",
    "maxItems": "Array must have at most {} items",
}


def json_type_name(value: JSONType) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _escape_segment(segment: str | int) -> str:
    return str(segment).replace("~", "~0").replace("/", "~1")


def to_pointer(segments: Iterable[str | int]) -> str:
    """Build a JSON Pointer from path segments; the root is ``/``"""
    parts = [_escape_segment(segment) for segment in segments]
    return "/" + "/".join(parts) if parts else "/"


def _schema_pointer(error: EngineError) -> str:
    parts = [_escape_segment(segment) for segment in error.absolute_schema_path]
    return "#/" + "/".join(parts) if parts else "#"


def _extra_properties(error: EngineError) -> list[str]:
    instance = error.instance if isinstance(error.instance, dict) else {}
    schema = error.schema if isinstance(error.schema, dict) else {}
    declared = schema.get("properties", {})
    patterns = schema.get("patternProperties", {})
    return [
        key
        for key in instance
        if key not in declared and not any(search(pattern, key) for pattern in patterns)
    ]


def _to_issues(error: EngineError, seen: set[tuple[str, str]]) -> list[ValidationIssue]:
    """Map one engine error to domain issues"""
    keyword = str(error.validator)
    path = to_pointer(error.absolute_path)
    schema_path = _schema_pointer(error)
    value = error.validator_value

    if keyword == "additionalProperties" or (keyword == "required" and isinstance(value, list)):
        # The engine may report several properties from one keyword; emit one
        # issue per property exactly once
        if (path, schema_path) in seen:
            return []
        seen.add((path, schema_path))
        if keyword == "required":
            instance = error.instance if isinstance(error.instance, dict) else {}
            missing = [name for name in value if name not in instance]
            return [
                ValidationIssue(
                    path=path,
                    message=f"Missing required property: {name}",
                    keyword=keyword,
                    params={"missingProperty": name},
                    schema_path=schema_path,
                )
                for name in missing
            ]
        return [
            ValidationIssue(
                path=path,
                message=f"Unknown property: {name}",
                keyword=keyword,
                params={"additionalProperty": name},
                schema_path=schema_path,
            )
            for name in _extra_properties(error)
        ]

    params: dict[str, JSONType] = {}
    if keyword == "type":
        expected = value if isinstance(value, str) else ", ".join(value)
        message = f"Expected {expected}, got {json_type_name(error.instance)}"
        params = {"type": value}
    elif keyword == "enum":
        message = "Value must be one of: " + ", ".join(to_text(item) for item in value)
        params = {"allowedValues": value}
    elif keyword in _LIMIT_MESSAGES:
        message = _LIMIT_MESSAGES[keyword].format(value)
        params = {"limit": value}
    elif keyword == "pattern":
        message = f"String does not match pattern: {value}"
        params = {"pattern": value}
    elif keyword == "format":
        message = f"Invalid format: expected {value}"
        params = {"format": value}
    elif keyword == "uniqueItems":
        message = "Array items must be unique"
    else:
        message = error.message
        if isinstance(value, (str, int, float, bool)) or value is None:
            params = {keyword: value}

    return [
        ValidationIssue(
            path=path, message=message, keyword=keyword, params=params, schema_path=schema_path
        )
    ]


def validate_json_schema(
    value: JSONType, schema: JSONType, cache: SchemaCache | None = None
) -> list[ValidationIssue]:
    """Validate a parsed value against a JSON Schema

    Args:
        value: Parsed document
        schema: JSON Schema; its draft is detected from ``$schema``
        cache: Compiled-validator cache, the process default when omitted

    Returns:
        Issues in the order the engine reports them; empty when valid. A schema
        that fails to compile yields a single issue with keyword ``$schema``.
    """
    cache = cache if cache is not None else get_default_schema_cache()
    try:
        validator = cache.compile(schema)
        errors = list(validator.iter_errors(value))
    except SchemaCompileError as e:
        logger.debug(f"Schema rejected: {e}")
        return [ValidationIssue(path="/", message=str(e), keyword="$schema", schema_path="#")]
    except Exception as e:
        # Unresolvable $ref and similar failures surface only while validating
        logger.debug(f"Schema could not be applied: {e}")
        return [
            ValidationIssue(
                path="/", message=f"Invalid schema: {e}", keyword="$schema", schema_path="#"
            )
        ]

    seen: set[tuple[str, str]] = set()
    issues: list[ValidationIssue] = []
    for error in errors:
        issues.extend(_to_issues(error, seen))
    return issues


def is_valid_schema(candidate: JSONType, cache: SchemaCache | None = None) -> bool:
    """Whether ``candidate`` compiles as a JSON Schema; never raises"""
    cache = cache if cache is not None else get_default_schema_cache()
    try:
        cache.compile(candidate)
    except SchemaCompileError:
        return False
    return True


def format_path(pointer: str) -> str:
    """Render a JSON Pointer for people

    Example:
        format_path("/items/0/name") == "items[0].name"
    """
    if not pointer or pointer == "/":
        return "root"

    rendered: list[str] = []
    for raw in pointer.split("/"):
        if not raw:
            continue
        segment = raw.replace("~1", "/").replace("~0", "~")
        if segment.isascii() and segment.isdigit():
            rendered.append(f"[{segment}]")
        elif is_identifier(segment):
            rendered.append(f".{segment}" if rendered else segment)
        else:
            escaped = segment.replace("\\", "\\\\").replace('"', '\\"')
            rendered.append(f'["{escaped}"]')
    return "".join(rendered) or "root"


def parse_and_validate(
    text: str, schema: JSONType, cache: SchemaCache | None = None
) -> SchemaCheckResult:
    """Parse text and validate the result in one step"""
    parsed = parse_json(text)
    if not parsed.ok:
        return SchemaCheckResult(parse_error=parsed.error)
    return SchemaCheckResult(
        value=parsed.value, issues=validate_json_schema(parsed.value, schema, cache)
    )
