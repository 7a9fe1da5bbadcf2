# json_workbench/application/repair/_repairer.py

"""Best-effort repair of malformed JSON-like text"""

# Standard library imports
from logging import getLogger
from re import Match
from re import compile
from typing import Callable

# Local imports
from json_workbench.application.parsing import parse_json
from json_workbench.application.repair._scanner import balance_brackets
from json_workbench.application.repair._scanner import has_unbalanced_brackets
from json_workbench.application.repair._scanner import map_structural
from json_workbench.application.repair._scanner import split_segments
from json_workbench.core.domain.results import RepairResult
from json_workbench.core.exceptions import RepairFailure
from json_workbench.shared.utils.json_text import render_string

logger = getLogger(__name__)

_BAREWORD_KEY_PATTERN = compile(r"([{,]\s*)([A-Za-z_$][\w$-]*)(\s*:)")
_TRAILING_COMMA_PATTERN = compile(r",(\s*[}\]])")
_LITERAL_PATTERNS = (
    (compile(r"\bTrue\b"), "true"),
    (compile(r"\bFalse\b"), "false"),
    (compile(r"\b(?:None|undefined)\b"), "null"),
    (compile(r"-?\bInfinity\b|\bNaN\b"), "null"),
)

# Signatures that make a failing document worth handing to the repairer
_REPAIRABLE_SIGNATURES = (
    compile(r"//|/\*"),
    compile(r"'"),
    _BAREWORD_KEY_PATTERN,
    compile(r"\b(?:True|False|None|undefined|NaN|Infinity)\b"),
    _TRAILING_COMMA_PATTERN,
)


def _strip_comments(text: str) -> str:
    output: list[str] = []
    quote: str | None = None
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        if quote is not None:
            output.append(ch)
            if ch == "\\" and pos + 1 < length:
                output.append(text[pos + 1])
                pos += 2
                continue
            if ch == quote:
                quote = None
            pos += 1
        elif text.startswith("//", pos):
            newline = text.find("\n", pos)
            pos = length if newline == -1 else newline
        elif text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            pos = length if close == -1 else close + 2
        else:
            if ch in "\"'":
                quote = ch
            output.append(ch)
            pos += 1
    return "".join(output)


def _requote(literal: str) -> str:
    """Turn one single-quoted literal into a double-quoted one"""
    body = literal[1:-1] if len(literal) > 1 and literal.endswith("'") else literal[1:]
    chars: list[str] = []
    pos = 0
    while pos < len(body):
        ch = body[pos]
        if ch == "\\" and pos + 1 < len(body):
            escaped = body[pos + 1]
            chars.append("'" if escaped == "'" else ch + escaped)
            pos += 2
            continue
        chars.append('\\"' if ch == '"' else ch)
        pos += 1
    closing = '"' if literal.endswith("'") and len(literal) > 1 else ""
    return '"' + "".join(chars) + closing


def _normalize_quotes(text: str) -> str:
    return "".join(
        _requote(chunk) if is_string and chunk.startswith("'") else chunk
        for is_string, chunk in split_segments(text, quotes="\"'")
    )


def _quote_keys(text: str) -> str:
    def quote(match: Match[str]) -> str:
        return f'{match.group(1)}"{match.group(2)}"{match.group(3)}'

    return map_structural(text, lambda chunk: _BAREWORD_KEY_PATTERN.sub(quote, chunk))


def _coerce_literals(text: str) -> str:
    def coerce(chunk: str) -> str:
        for pattern, replacement in _LITERAL_PATTERNS:
            chunk = pattern.sub(replacement, chunk)
        return chunk

    return map_structural(text, coerce)


def _remove_trailing_commas(text: str) -> str:
    return map_structural(text, lambda chunk: _TRAILING_COMMA_PATTERN.sub(r"\1", chunk))


def _balance(text: str) -> str:
    balanced, _ = balance_brackets(text)
    return balanced


class JsonRepairer:
    """Applies an ordered sequence of string-aware fixups

    Each step receives the previous step's output. Steps never touch the
    contents of string literals. The result is re-parsed to decide whether the
    repair was meaningful.
    """

    def __init__(self) -> None:
        self.steps: list[tuple[str, Callable[[str], str]]] = [
            ("strip comments", _strip_comments),
            ("normalize quotes", _normalize_quotes),
            ("quote keys", _quote_keys),
            ("coerce literals", _coerce_literals),
            ("remove trailing commas", _remove_trailing_commas),
            ("balance brackets", _balance),
            ("remove exposed trailing commas", _remove_trailing_commas),
        ]

    def repair(self, text: str) -> RepairResult:
        """Repair text into strict JSON where possible

        Args:
            text: Possibly malformed document

        Returns:
            RepairResult. ``was_repaired`` is True only when the output differs
            from the input and parses strictly.
        """
        if not isinstance(text, str):
            raise TypeError(f"repair_json expects str, got {type(text).__name__}")

        original = parse_json(text)
        if original.ok:
            return RepairResult(output=text, was_repaired=False)

        try:
            candidate = self._apply_steps(text)
            if not parse_json(candidate).ok:
                logger.debug("Fixups left the text invalid, quoting it as a last resort")
                candidate = render_string(text)
            return self._guard(text, candidate)
        except RepairFailure as e:
            logger.debug(f"Repair gave up: {e}")
            return RepairResult(output=text, error=str(original.error), was_repaired=False)
        except Exception as e:
            logger.warning(f"Repair failed with an internal error: {e}")
            return RepairResult(output=text, error=str(e), was_repaired=False)

    def _guard(self, text: str, candidate: str) -> RepairResult:
        """Accept ``candidate`` only if it is a meaningful repair of ``text``

        Raises:
            RepairFailure: If the candidate does not parse or merely quotes the input
        """
        result = parse_json(candidate)
        if not result.ok:
            raise RepairFailure(f"candidate still invalid: {result.error}")
        if isinstance(result.value, str) and result.value == text:
            raise RepairFailure("repair degenerated into quoting the input")
        logger.debug("Repair produced valid JSON")
        return RepairResult(output=candidate, was_repaired=True)

    def _apply_steps(self, text: str) -> str:
        for name, step in self.steps:
            updated = step(text)
            if updated != text:
                logger.debug(f"Repair step '{name}' changed the text")
            text = updated
        return text

    def can_repair(self, text: str) -> bool:
        """Cheap check whether repair is worth offering for ``text``"""
        if not isinstance(text, str) or not text.strip():
            return False
        if parse_json(text).ok:
            return False
        if any(pattern.search(text) for pattern in _REPAIRABLE_SIGNATURES):
            return True
        return has_unbalanced_brackets(text)


_default_repairer = JsonRepairer()


def repair_json(text: str) -> RepairResult:
    """Repair malformed JSON text; never raises for string input"""
    return _default_repairer.repair(text)


def can_repair_json(text: str) -> bool:
    """Whether ``text`` fails to parse but shows a repairable mistake"""
    return _default_repairer.can_repair(text)
