# json_workbench/application/validation/_schema_cache.py

"""Compiled-validator cache keyed by schema content"""

# Standard library imports
from collections import OrderedDict
from json import dumps
from logging import getLogger
from threading import Lock

# Third party imports
from jsonschema.exceptions import SchemaError
from jsonschema.protocols import Validator
from jsonschema.validators import Draft202012Validator
from jsonschema.validators import validator_for

# Local imports
from json_workbench.core.exceptions import SchemaCompileError
from json_workbench.core.types.json import JSONType

logger = getLogger(__name__)

DEFAULT_CACHE_SIZE = 64


def schema_cache_key(schema: JSONType) -> str:
    """Content key for a schema; equal schemas share one compiled validator"""
    return dumps(schema, sort_keys=True, separators=(",", ":"), allow_nan=False)


class SchemaCache:
    """Thread-safe bounded LRU of compiled schema validators

    Compilation runs outside the lock; only a fully compiled validator is ever
    published into the map. Two threads compiling the same schema at once both
    do the work and the second one to finish wins, which is harmless.
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self._entries: OrderedDict[str, Validator] = OrderedDict()
        self._lock = Lock()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def compile(self, schema: JSONType) -> Validator:
        """Return a validator for ``schema``, compiling it on first use

        Raises:
            SchemaCompileError: If the schema is not a valid JSON Schema
        """
        try:
            key = schema_cache_key(schema)
        except (TypeError, ValueError) as e:
            raise SchemaCompileError(f"Schema is not serializable JSON: {e}") from e

        with self._lock:
            validator = self._entries.get(key)
            if validator is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                logger.debug("Schema cache hit")
                return validator
            self.misses += 1

        validator = self._build(schema)

        with self._lock:
            self._entries[key] = validator
            self._entries.move_to_end(key)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
        return validator

    @staticmethod
    def _build(schema: JSONType) -> Validator:
        if not isinstance(schema, (dict, bool)):
            raise SchemaCompileError(
                f"Schema must be an object or a boolean, got {type(schema).__name__}"
            )
        if isinstance(schema, dict) and not isinstance(schema.get("$schema", ""), str):
            raise SchemaCompileError("$schema must be a string")
        try:
            validator_class = validator_for(schema, default=Draft202012Validator)
            validator_class.check_schema(schema)
        except SchemaError as e:
            raise SchemaCompileError(f"Invalid schema: {e.message}") from e
        except (AttributeError, TypeError, ValueError) as e:
            raise SchemaCompileError(f"Invalid schema: {e}") from e
        logger.debug(f"Compiled schema with {validator_class.__name__}")
        return validator_class(schema, format_checker=validator_class.FORMAT_CHECKER)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0


_default_cache = SchemaCache()


def get_default_schema_cache() -> SchemaCache:
    """Process-wide cache used when callers do not supply their own"""
    return _default_cache
