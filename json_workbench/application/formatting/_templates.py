# json_workbench/application/formatting/_templates.py

"""Template syntax protection for the formatting pipeline

Documents may embed template syntax that is not JSON, for example
``{"greeting": "Hello {{ name }}", "items": {% for x in xs %}}``. Every
template span is swapped for a placeholder token before parsing and swapped
back after serialization.
"""

# Standard library imports
from dataclasses import dataclass
from re import compile

TEMPLATE_PATTERN = compile(
    r"\{\{!--[\s\S]*?--\}\}"  # {{!-- block comment --}}
    r"|\{\{![^}]*\}\}"  # {{! comment }}
    r"|\{\{[^}]+\}\}"  # {{ variable }}
    r"|\{%[^%]+%\}"  # {% statement %}
    r"|\{#[^#]*#\}"  # {# comment #}
)


@dataclass(slots=True, frozen=True)
class TemplatePlaceholder:
    """A placeholder token and the template text it stands for"""

    placeholder: str
    original: str


def has_template_syntax(text: str) -> bool:
    """Whether ``text`` contains any recognized template span"""
    return TEMPLATE_PATTERN.search(text) is not None


def _token(index: int) -> str:
    return f"__TEMPLATE_{index}__"


def extract_templates(text: str) -> tuple[str, list[TemplatePlaceholder]]:
    """Replace every template span with a placeholder

    A template that is the whole content of a string literal is replaced
    together with its quotes, one inside a larger string literal becomes a
    bare token, and one outside any string literal becomes a quoted token so
    the surrounding text can parse.

    Args:
        text: Raw document text

    Returns:
        Tuple of (substituted text, placeholders in discovery order)
    """
    placeholders: list[TemplatePlaceholder] = []
    out: list[str] = []
    pos = 0
    length = len(text)
    in_string = False
    string_start = -1

    while pos < length:
        ch = text[pos]
        match = TEMPLATE_PATTERN.match(text, pos) if ch == "{" else None
        if match is not None:
            end = match.end()
            token = _token(len(placeholders))
            if not in_string:
                placeholders.append(TemplatePlaceholder(f'"{token}"', match.group(0)))
                out.append(f'"{token}"')
            elif pos == string_start + 1 and end < length and text[end] == '"':
                # The opening quote was emitted on its own just before
                out.pop()
                placeholders.append(TemplatePlaceholder(f'"{token}"', f'"{match.group(0)}"'))
                out.append(f'"{token}"')
                end += 1
                in_string = False
            else:
                placeholders.append(TemplatePlaceholder(token, match.group(0)))
                out.append(token)
            pos = end
            continue

        if in_string:
            if ch == "\\":
                out.append(text[pos : pos + 2])
                pos += 2
                continue
            if ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
            string_start = pos
        out.append(ch)
        pos += 1

    return "".join(out), placeholders


def restore_templates(text: str, placeholders: list[TemplatePlaceholder]) -> str:
    """Swap placeholders back, last registered first"""
    for placeholder in reversed(placeholders):
        text = text.replace(placeholder.placeholder, placeholder.original)
    return text
