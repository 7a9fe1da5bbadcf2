# json_workbench/core/domain/validation_issue.py

"""Validation issue domain model"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Local imports
from json_workbench.core.types.json import JSONType


class ValidationIssue(BaseModel):
    """A single schema violation, located by JSON Pointer"""

    model_config = ConfigDict(frozen=True)

    path: str = Field(default="/", description="JSON Pointer of the offending value")
    message: str
    keyword: str = Field(description="Schema keyword that failed (type, required, ...)")
    params: dict[str, JSONType] = Field(default_factory=dict)
    schema_path: str = Field(default="#", description="Pointer into the schema")
