# json_workbench/application/query/_query.py

"""Path expression evaluation and path enumeration"""

# Standard library imports
from logging import getLogger
from typing import Iterator

# Local imports
from json_workbench.application.query._path_expression import IndexSelector
from json_workbench.application.query._path_expression import NameSelector
from json_workbench.application.query._path_expression import Selector
from json_workbench.application.query._path_expression import SliceSelector
from json_workbench.application.query._path_expression import WildcardSelector
from json_workbench.application.query._path_expression import parse_path_expression
from json_workbench.core.domain.results import QueryResult
from json_workbench.core.types.json import JSONType
from json_workbench.shared.utils.text_utils import is_identifier

logger = getLogger(__name__)

ROOT_PATH = "$"

type Node = tuple[str, JSONType]


def child_path(path: str, key: str | int) -> str:
    """Append a key or index to a normalized path

    Example:
        child_path("$.store", "odd key") == "$.store['odd key']"
    """
    if isinstance(key, int):
        return f"{path}[{key}]"
    if is_identifier(key):
        return f"{path}.{key}"
    escaped = key.replace("\\", "\\\\").replace("'", "\\'")
    return f"{path}['{escaped}']"


def _children(path: str, value: JSONType) -> Iterator[Node]:
    if isinstance(value, dict):
        for key, item in value.items():
            yield child_path(path, key), item
    elif isinstance(value, list):
        for index, item in enumerate(value):
            yield child_path(path, index), item


def _self_and_descendants(path: str, value: JSONType) -> Iterator[Node]:
    """Pre-order walk including the starting node"""
    stack: list[Node] = [(path, value)]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(_children(*node))))


def _slice_indexes(selector: SliceSelector, length: int) -> range:
    step = 1 if selector.step is None else selector.step
    if step == 0:
        return range(0)
    return range(length)[slice(selector.start, selector.stop, step)]


def _select(selector: Selector, path: str, value: JSONType) -> Iterator[Node]:
    match selector:
        case NameSelector(name=name):
            if isinstance(value, dict) and name in value:
                yield child_path(path, name), value[name]
        case IndexSelector(index=index):
            if isinstance(value, list) and -len(value) <= index < len(value):
                normalized = index % len(value)
                yield child_path(path, normalized), value[normalized]
        case WildcardSelector():
            yield from _children(path, value)
        case SliceSelector():
            if isinstance(value, list):
                for index in _slice_indexes(selector, len(value)):
                    yield child_path(path, index), value[index]


def query_json_path(value: JSONType, expression: str) -> list[QueryResult]:
    """Evaluate a path expression against a value

    Args:
        value: Parsed document
        expression: Path expression such as ``$.store.book[*].title``

    Returns:
        Matches in document order with normalized paths; empty when nothing matches

    Raises:
        QueryExpressionError: If the expression is malformed
    """
    segments = parse_path_expression(expression)
    nodes: list[Node] = [(ROOT_PATH, value)]

    for segment in segments:
        selected: list[Node] = []
        for path, node in nodes:
            targets = _self_and_descendants(path, node) if segment.descendant else [(path, node)]
            for target_path, target in targets:
                for selector in segment.selectors:
                    selected.extend(_select(selector, target_path, target))
        nodes = selected

    logger.debug(f"Query {expression!r} matched {len(nodes)} node(s)")
    return [QueryResult(path=path, value=node) for path, node in nodes]


def get_all_paths(value: JSONType) -> list[str]:
    """Every key and index path reachable from the root, in pre-order

    The root itself is not included.
    """
    return [path for path, _ in _self_and_descendants(ROOT_PATH, value)][1:]
