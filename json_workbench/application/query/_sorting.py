# json_workbench/application/query/_sorting.py

"""Array and object key sorting"""

# Standard library imports
from logging import getLogger
from typing import Any
from typing import Callable

# Local imports
from json_workbench.core.domain.enums import ComparisonStrategy
from json_workbench.core.domain.enums import SortDirection
from json_workbench.core.domain.enums import SortType
from json_workbench.core.types.json import JSONList
from json_workbench.core.types.json import JSONType
from json_workbench.shared.utils.json_text import to_number
from json_workbench.shared.utils.json_text import to_text
from json_workbench.shared.utils.text_utils import collation_key
from json_workbench.shared.utils.text_utils import natural_key

logger = getLogger(__name__)


class _Missing:
    """Marker for a field path that does not resolve"""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def get_field_value(item: JSONType, field: str) -> JSONType | _Missing:
    """Resolve a dot path such as ``a.b`` or ``items.0`` against an item

    An empty field addresses the item itself.
    """
    if not field:
        return item
    current: JSONType = item
    for part in field.split("."):
        if isinstance(current, dict):
            if part not in current:
                return MISSING
            current = current[part]
        elif isinstance(current, list) and part.isascii() and part.isdigit():
            index = int(part)
            if index >= len(current):
                return MISSING
            current = current[index]
        else:
            return MISSING
    return current


def resolve_strategy(values: list[JSONType], sort_type: SortType) -> ComparisonStrategy:
    """Pick the comparison strategy for a sort

    ``auto`` inspects the values once: number when every one of them reads as
    a finite number, string otherwise (including when there are none).
    """
    match sort_type:
        case SortType.STRING:
            return ComparisonStrategy.STRING
        case SortType.NUMBER:
            return ComparisonStrategy.NUMBER
        case SortType.NATURAL:
            return ComparisonStrategy.NATURAL
    if values and all(to_number(value) is not None for value in values):
        return ComparisonStrategy.NUMBER
    return ComparisonStrategy.STRING


def _key_function(strategy: ComparisonStrategy) -> Callable[[JSONType], Any]:
    match strategy:
        case ComparisonStrategy.NUMBER:
            return to_number
        case ComparisonStrategy.NATURAL:
            return lambda value: natural_key(to_text(value))
        case _:
            return lambda value: collation_key(to_text(value))


def sort_array(
    array: JSONList,
    field: str = "",
    direction: SortDirection | str = SortDirection.ASC,
    sort_type: SortType | str = SortType.AUTO,
) -> JSONList:
    """Return a sorted copy of an array

    The sort is stable. Items whose field is missing or null, or in number mode
    does not read as a number, keep their relative order at the end in both
    directions.

    Args:
        array: Items to sort; not modified
        field: Dot path of the sort field; empty sorts by the items themselves
        direction: ``asc`` or ``desc``
        sort_type: ``auto``, ``string``, ``number`` or ``natural``

    Returns:
        New list
    """
    if not isinstance(array, list):
        raise TypeError(f"sort_array expects a list, got {type(array).__name__}")
    direction = SortDirection(direction)
    sort_type = SortType(sort_type)

    present: list[tuple[int, JSONType, JSONType]] = []
    missing: list[tuple[int, JSONType]] = []
    for position, item in enumerate(array):
        value = get_field_value(item, field)
        if value is MISSING or value is None:
            missing.append((position, item))
        else:
            present.append((position, value, item))

    strategy = resolve_strategy([value for _, value, _ in present], sort_type)
    key_function = _key_function(strategy)

    keyed: list[tuple[Any, JSONType]] = []
    for position, value, item in present:
        key = key_function(value)
        if key is None:
            missing.append((position, item))
        else:
            keyed.append((key, item))

    missing.sort(key=lambda pair: pair[0])
    keyed.sort(key=lambda pair: pair[0], reverse=direction is SortDirection.DESC)
    logger.debug(
        f"Sorted {len(array)} item(s) by {field or 'value'!r} using {strategy.value} comparison"
    )
    return [item for _, item in keyed] + [item for _, item in missing]


def sort_object_keys(
    value: JSONType,
    direction: SortDirection | str = SortDirection.ASC,
    recursive: bool = True,
) -> JSONType:
    """Return a copy with object keys ordered by locale-style collation

    Array element order is never changed. With ``recursive=False`` only the
    top-level object is reordered.
    """
    reverse = SortDirection(direction) is SortDirection.DESC

    def sort_keys(node: JSONType) -> JSONType:
        if isinstance(node, dict):
            ordered = sorted(node, key=collation_key, reverse=reverse)
            return {key: sort_keys(node[key]) if recursive else node[key] for key in ordered}
        if isinstance(node, list) and recursive:
            return [sort_keys(item) for item in node]
        return node

    return sort_keys(value)
