# json_workbench/application/query/_filtering.py

"""Condition-based array filtering"""

# Standard library imports
from logging import getLogger
from typing import Iterable
from typing import Mapping

# Local imports
from json_workbench.application.query._sorting import MISSING
from json_workbench.application.query._sorting import get_field_value
from json_workbench.core.domain.enums import FilterLogic
from json_workbench.core.domain.enums import FilterOperator
from json_workbench.core.domain.filter_condition import FilterCondition
from json_workbench.core.types.json import JSONList
from json_workbench.core.types.json import JSONType
from json_workbench.shared.utils.json_text import to_number
from json_workbench.shared.utils.json_text import to_text

logger = getLogger(__name__)

_TEXT_OPERATORS = {
    FilterOperator.CONTAINS: lambda actual, expected: expected in actual,
    FilterOperator.NOT_CONTAINS: lambda actual, expected: expected not in actual,
    FilterOperator.STARTS_WITH: lambda actual, expected: actual.startswith(expected),
    FilterOperator.ENDS_WITH: lambda actual, expected: actual.endswith(expected),
}
_NUMERIC_OPERATORS = {
    FilterOperator.GT: lambda actual, expected: actual > expected,
    FilterOperator.GTE: lambda actual, expected: actual >= expected,
    FilterOperator.LT: lambda actual, expected: actual < expected,
    FilterOperator.LTE: lambda actual, expected: actual <= expected,
}
# Outcome for a field the item does not have
_MISSING_OUTCOMES = {
    FilterOperator.NOT_EQUALS: True,
    FilterOperator.NOT_CONTAINS: True,
}


def is_empty_value(value: JSONType | object) -> bool:
    """Missing, null, empty string, empty array and empty object count as empty"""
    if value is MISSING or value is None:
        return True
    return isinstance(value, (str, list, dict)) and len(value) == 0


def _values_equal(actual: JSONType, expected: JSONType) -> bool:
    actual_number = to_number(actual)
    expected_number = to_number(expected)
    if actual_number is not None and expected_number is not None:
        return actual_number == expected_number
    return to_text(actual) == to_text(expected)


def matches_condition(
    item: JSONType, condition: FilterCondition, case_sensitive: bool = False
) -> bool:
    """Evaluate one complete condition against one item"""
    actual = get_field_value(item, condition.field)
    operator = condition.operator

    if operator is FilterOperator.IS_EMPTY:
        return is_empty_value(actual)
    if operator is FilterOperator.IS_NOT_EMPTY:
        return not is_empty_value(actual)
    if actual is MISSING:
        return _MISSING_OUTCOMES.get(operator, False)

    if operator is FilterOperator.EQUALS:
        return _values_equal(actual, condition.value)
    if operator is FilterOperator.NOT_EQUALS:
        return not _values_equal(actual, condition.value)

    if operator in _TEXT_OPERATORS:
        actual_text = to_text(actual)
        expected_text = to_text(condition.value)
        if not case_sensitive:
            actual_text = actual_text.casefold()
            expected_text = expected_text.casefold()
        return _TEXT_OPERATORS[operator](actual_text, expected_text)

    actual_number = to_number(actual)
    expected_number = to_number(condition.value)
    if actual_number is None or expected_number is None:
        return False
    return _NUMERIC_OPERATORS[operator](actual_number, expected_number)


def filter_array(
    array: JSONList,
    conditions: Iterable[FilterCondition | Mapping[str, JSONType]],
    logic: FilterLogic | str = FilterLogic.AND,
    case_sensitive: bool = False,
) -> JSONList:
    """Keep the items that satisfy the conditions

    Incomplete conditions (no field, or no value for an operator that needs
    one) are ignored. When none remain the input list itself is returned.

    Args:
        array: Items to filter; not modified
        conditions: FilterCondition objects or mappings with the same fields
        logic: ``and`` requires every condition, ``or`` any of them
        case_sensitive: Whether text operators respect letter case

    Returns:
        New list of matching items, or ``array`` when no condition applies
    """
    if not isinstance(array, list):
        raise TypeError(f"filter_array expects a list, got {type(array).__name__}")
    logic = FilterLogic(logic)
    active = [
        condition
        for condition in (
            c if isinstance(c, FilterCondition) else FilterCondition.model_validate(c)
            for c in conditions
        )
        if condition.is_complete
    ]
    if not active:
        return array

    combine = all if logic is FilterLogic.AND else any
    result = [
        item
        for item in array
        if combine(matches_condition(item, condition, case_sensitive) for condition in active)
    ]
    logger.debug(
        f"Filter kept {len(result)} of {len(array)} item(s) with {len(active)} condition(s)"
    )
    return result
