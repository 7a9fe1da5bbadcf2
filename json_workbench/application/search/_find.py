# json_workbench/application/search/_find.py

"""Find-in-document support with line and column coordinates"""

# Standard library imports
from logging import getLogger
from re import IGNORECASE
from re import compile
from re import error as RegexError
from re import escape

# Local imports
from json_workbench.core.domain.results import SearchMatch
from json_workbench.shared.utils.text_utils import offset_to_line_column

logger = getLogger(__name__)


def find_matches(
    content: str, search_text: str, case_sensitive: bool = False, use_regex: bool = False
) -> list[SearchMatch]:
    """Find every occurrence of ``search_text`` in ``content``

    Args:
        content: Text to search
        search_text: Literal text, or a regular expression when ``use_regex`` is set
        case_sensitive: Whether letter case must match
        use_regex: Treat ``search_text`` as a regular expression

    Returns:
        Matches in order. Empty for an empty search or an invalid expression.
    """
    if not search_text:
        return []

    try:
        pattern = compile(
            search_text if use_regex else escape(search_text),
            0 if case_sensitive else IGNORECASE,
        )
    except RegexError as e:
        logger.debug(f"Invalid search expression {search_text!r}: {e}")
        return []

    matches: list[SearchMatch] = []
    # finditer steps past zero-length matches on its own
    for match in pattern.finditer(content):
        line, column = offset_to_line_column(content, match.start())
        matches.append(SearchMatch(start=match.start(), end=match.end(), line=line, column=column))
    return matches
