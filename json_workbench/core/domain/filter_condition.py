# json_workbench/core/domain/filter_condition.py

"""Filter condition domain model"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from json_workbench.core.domain.enums import FilterOperator
from json_workbench.core.domain.enums import VALUELESS_OPERATORS
from json_workbench.core.types.json import JSONPrimitive


class FilterCondition(BaseModel):
    """A user-selected predicate applied to every item of an array"""

    model_config = ConfigDict(frozen=True)

    field: str = Field(description="Dot path of the item field to test")
    operator: FilterOperator = FilterOperator.EQUALS
    value: JSONPrimitive = ""

    @property
    def is_complete(self) -> bool:
        """Whether the condition has everything it needs to be evaluated"""
        if not self.field:
            return False
        return self.operator in VALUELESS_OPERATORS or self.value not in ("", None)
