# json_workbench/shared/utils/json_text.py

"""JSON text rendering of scalars and value coercions

Rendering matches what a browser's JSON.stringify produces for the same
value: integral floats print without a fractional part, exponents drop their
leading zeros, and non-finite numbers render as null.
"""

# Standard library imports
from json import dumps
from math import isfinite
from re import compile

# Local imports
from json_workbench.core.types.json import JSONType

_LONE_SURROGATE_PATTERN = compile(r"[\ud800-\udfff]")
_NUMERIC_TEXT_PATTERN = compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def render_number(value: int | float) -> str:
    if isinstance(value, int):
        return str(value)
    if not isfinite(value):
        return "null"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent_text = text.split("e")
    exponent = int(exponent_text)
    if -7 < exponent < 0:
        # Plain decimal down to 1e-6, like Number.prototype.toString
        negative = mantissa.startswith("-")
        digits = mantissa.lstrip("-").replace(".", "")
        return ("-" if negative else "") + "0." + "0" * (-exponent - 1) + digits
    return f"{mantissa}e{'-' if exponent < 0 else '+'}{abs(exponent)}"


def render_string(value: str) -> str:
    encoded = dumps(value, ensure_ascii=False)
    # Lone surrogates are written as escapes so the output stays encodable
    return _LONE_SURROGATE_PATTERN.sub(lambda m: f"\\u{ord(m.group(0)):04x}", encoded)


def render_scalar(value: JSONType) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, (int, float)):
        return render_number(value)
    if isinstance(value, str):
        return render_string(value)
    raise TypeError(f"Value of type {type(value).__name__} is not JSON serializable")


def to_text(value: JSONType) -> str:
    """String form used when comparing or searching values as text"""
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return dumps(value, ensure_ascii=False, separators=(",", ":"))
    return render_scalar(value)


def to_number(value: JSONType) -> float | None:
    """Finite numeric reading of a value, or None

    Numbers and numeric strings qualify; booleans and non-finite readings do not.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_TEXT_PATTERN.match(text):
            return None
        number = float(text)
    else:
        return None
    return number if isfinite(number) else None
