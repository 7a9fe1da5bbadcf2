# json_workbench/application/formatting/_serializer.py

"""Value-level serializers shared by every formatting operation"""

# Local imports
from json_workbench.core.types.json import JSONType
from json_workbench.shared.utils.json_text import render_scalar
from json_workbench.shared.utils.json_text import render_string

# JSON.stringify clamps indentation to ten characters
MAX_INDENT = 10


def resolve_indent(indent: int | str | None) -> str:
    """Turn an indent option into the literal indentation unit

    Args:
        indent: Number of spaces, ``"tab"``, a literal whitespace string, or None

    Returns:
        Indentation unit; the empty string means compact output
    """
    if indent is None:
        return ""
    if isinstance(indent, bool):
        raise TypeError("indent must be an int or a string")
    if isinstance(indent, int):
        return " " * max(0, min(indent, MAX_INDENT))
    if isinstance(indent, str):
        if indent == "tab":
            return "\t"
        return indent[:MAX_INDENT]
    raise TypeError(f"indent must be an int or a string, got {type(indent).__name__}")


def _write(value: JSONType, unit: str, depth: int, out: list[str]) -> None:
    if isinstance(value, dict):
        if not value:
            out.append("{}")
            return
        out.append("{")
        for position, (key, item) in enumerate(value.items()):
            if position:
                out.append(",")
            if unit:
                out.append("\n" + unit * (depth + 1))
            out.append(render_string(key))
            out.append(": " if unit else ":")
            _write(item, unit, depth + 1, out)
        if unit:
            out.append("\n" + unit * depth)
        out.append("}")
    elif isinstance(value, list):
        if not value:
            out.append("[]")
            return
        out.append("[")
        for position, item in enumerate(value):
            if position:
                out.append(",")
            if unit:
                out.append("\n" + unit * (depth + 1))
            _write(item, unit, depth + 1, out)
        if unit:
            out.append("\n" + unit * depth)
        out.append("]")
    else:
        out.append(render_scalar(value))


def serialize_json(value: JSONType, indent: int | str | None = None) -> str:
    """Serialize a value to JSON text

    Args:
        value: JSON value; dict keys are written in insertion order
        indent: Indentation (see ``resolve_indent``); None or 0 gives compact output

    Returns:
        JSON text
    """
    out: list[str] = []
    _write(value, resolve_indent(indent), 0, out)
    return "".join(out)


def _render_inline(value: JSONType) -> str:
    if isinstance(value, dict):
        if not value:
            return "{}"
        members = ", ".join(f"{render_string(k)}: {_render_inline(v)}" for k, v in value.items())
        return "{ " + members + " }"
    if isinstance(value, list):
        if not value:
            return "[]"
        return "[" + ", ".join(_render_inline(item) for item in value) + "]"
    return render_scalar(value)


def _render_smart(
    value: JSONType, unit: str, max_line_length: int, depth: int, lead: int, trail: int
) -> str:
    if not isinstance(value, (dict, list)) or not value:
        return _render_inline(value)

    inline = _render_inline(value)
    if lead + len(inline) + trail <= max_line_length and "\n" not in inline:
        return inline

    child_indent = unit * (depth + 1)
    last = len(value) - 1
    lines: list[str] = []
    if isinstance(value, dict):
        for position, (key, item) in enumerate(value.items()):
            prefix = f"{render_string(key)}: "
            rendered = _render_smart(
                item,
                unit,
                max_line_length,
                depth + 1,
                len(child_indent) + len(prefix),
                0 if position == last else 1,
            )
            lines.append(child_indent + prefix + rendered)
        opener, closer = "{", "}"
    else:
        for position, item in enumerate(value):
            rendered = _render_smart(
                item,
                unit,
                max_line_length,
                depth + 1,
                len(child_indent),
                0 if position == last else 1,
            )
            lines.append(child_indent + rendered)
        opener, closer = "[", "]"

    return opener + "\n" + ",\n".join(lines) + "\n" + unit * depth + closer


def smart_serialize(value: JSONType, indent: int | str = 2, max_line_length: int = 80) -> str:
    """Serialize with small structures inlined and large ones expanded

    Each array or object is first rendered on one line. It stays inline when
    the complete line it would sit on, indentation, key and trailing comma
    included, fits in ``max_line_length``; otherwise it expands one level.
    An indent of 0 gives compact output, as ``serialize_json`` does.
    """
    unit = resolve_indent(indent)
    if not unit:
        return serialize_json(value)
    return _render_smart(value, unit, max_line_length, 0, 0, 0)
