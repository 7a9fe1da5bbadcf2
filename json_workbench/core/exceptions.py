# json_workbench/core/exceptions.py

"""Exception hierarchy for the JSON workbench

Only QueryExpressionError crosses the public API as an exception. The others
are raised internally and converted into structured results at the component
boundary (ParseResult.error, RepairResult.error, a ``$schema`` issue).
"""


class JsonWorkbenchError(Exception):
    """Base class for all workbench errors"""


class JsonSyntaxError(JsonWorkbenchError, ValueError):
    """First lexical or structural violation found by the parser"""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


class RepairFailure(JsonWorkbenchError):
    """Repair was attempted but produced nothing usable"""


class SchemaCompileError(JsonWorkbenchError, ValueError):
    """A JSON Schema could not be compiled"""


class QueryExpressionError(JsonWorkbenchError, ValueError):
    """A path expression is malformed"""

    def __init__(self, expression: str, reason: str, position: int | None = None) -> None:
        location = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid path expression {expression!r}{location}: {reason}")
        self.expression = expression
        self.reason = reason
        self.position = position
