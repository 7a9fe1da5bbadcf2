# json_workbench/core/types/json.py

"""JSON type definitions for type-safe JSON handling using Python 3.13 features."""

# JSON Type Usage Guide:
# - JSONDict: When you KNOW it's an object (e.g., a parsed schema, a record in an array)
# - JSONList: When you KNOW it's an array (e.g., the input of sort/filter operations)
# - JSONType: Any parsed document or a value reached while walking one
# - Object key order is significant everywhere: never rebuild a JSONDict through a set

type JSONPrimitive = str | int | float | bool | None

# Recursive type definition - Python 3.13 handles this cleanly without quotes!
type JSONType = JSONDict | JSONList | JSONPrimitive
type JSONDict = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONDict", "JSONList"]
