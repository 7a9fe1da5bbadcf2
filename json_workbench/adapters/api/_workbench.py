# json_workbench/adapters/api/_workbench.py

"""High-level facade wiring configuration, dispatch and the engine together"""

# Standard library imports
from logging import getLogger
from pathlib import Path
from typing import Iterable
from typing import Mapping

# Local imports
from json_workbench.application.diff import diff_lines
from json_workbench.application.diff import get_diff_summary
from json_workbench.application.query import filter_array
from json_workbench.application.query import get_all_paths
from json_workbench.application.query import query_json_path
from json_workbench.application.query import sort_array
from json_workbench.application.repair import can_repair_json
from json_workbench.application.search import find_matches
from json_workbench.application.validation import SchemaCache
from json_workbench.application.validation import find_path_line
from json_workbench.application.validation import is_valid_schema
from json_workbench.core.domain.enums import FilterLogic
from json_workbench.core.domain.enums import SortDirection
from json_workbench.core.domain.enums import SortType
from json_workbench.core.domain.enums import TaskKind
from json_workbench.core.domain.filter_condition import FilterCondition
from json_workbench.core.domain.results import DiffSummary
from json_workbench.core.domain.results import LineDiff
from json_workbench.core.domain.results import ParseResult
from json_workbench.core.domain.results import QueryResult
from json_workbench.core.domain.results import RepairResult
from json_workbench.core.domain.results import SchemaCheckResult
from json_workbench.core.domain.results import SearchMatch
from json_workbench.core.domain.validation_issue import ValidationIssue
from json_workbench.core.types.json import JSONList
from json_workbench.core.types.json import JSONType
from json_workbench.infrastructure.config import ConfigLoader
from json_workbench.infrastructure.config import get_config
from json_workbench.infrastructure.dispatch import TaskDispatcher

logger = getLogger(__name__)


class JsonWorkbench:
    """One entry point for every workbench operation

    Heavy text operations (parse, repair, the formatters, validation and line
    diff) go through a TaskDispatcher; queries, sorting, filtering, search and
    location run in the calling process. Configuration supplies the defaults
    for every optional argument.
    """

    def __init__(
        self,
        config_path: Path | str | None = None,
        config: ConfigLoader | None = None,
        dispatcher: TaskDispatcher | None = None,
        schema_cache: SchemaCache | None = None,
    ) -> None:
        """Initialize the workbench

        Args:
            config_path: Path to a JSON configuration file
            config: Already loaded configuration; takes precedence over ``config_path``
            dispatcher: Dispatcher to use instead of one built from configuration
            schema_cache: Compiled-schema cache shared by validation calls
        """
        if config is None:
            config = get_config(config_path) if config_path else get_config()
        self.config = config

        if schema_cache is None:
            schema_cache = SchemaCache(config.validation.cache_size)
        self.schema_cache = schema_cache

        if dispatcher is None:
            dispatch_config = config.dispatch
            dispatcher = TaskDispatcher(
                enabled=dispatch_config.enabled,
                timeout_seconds=dispatch_config.timeout_seconds,
                max_workers=dispatch_config.max_workers,
                schema_cache=self.schema_cache,
            )
            self._owns_dispatcher = True
        else:
            self._owns_dispatcher = False
        self.dispatcher = dispatcher

    def __enter__(self) -> "JsonWorkbench":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release worker processes started by this workbench"""
        if self._owns_dispatcher:
            self.dispatcher.close()

    # Parsing and repair

    def parse(self, text: str) -> ParseResult:
        return self.dispatcher.run(TaskKind.PARSE, text=text)

    def repair(self, text: str) -> RepairResult:
        return self.dispatcher.run(TaskKind.REPAIR, text=text)

    def can_repair(self, text: str) -> bool:
        return can_repair_json(text)

    def parse_with_repair(self, text: str) -> tuple[ParseResult, RepairResult | None]:
        """Parse text, repairing and reparsing once when strict parsing fails

        Returns:
            The final parse result and the repair result when a repair was attempted
        """
        parsed = self.parse(text)
        if parsed.ok or not self.config.formatting.auto_repair or not self.can_repair(text):
            return parsed, None

        repaired = self.repair(text)
        if not repaired.was_repaired:
            logger.debug(f"Repair did not help: {repaired.error}")
            return parsed, repaired
        return self.parse(repaired.output), repaired

    # Formatting

    def format(
        self,
        text: str,
        indent: int | str | None = None,
        preserve_templates: bool | None = None,
        auto_repair: bool | None = None,
    ) -> str:
        formatting = self.config.formatting
        return self.dispatcher.run(
            TaskKind.FORMAT,
            text=text,
            indent=formatting.indent if indent is None else indent,
            preserve_templates=(
                formatting.preserve_templates if preserve_templates is None else preserve_templates
            ),
            auto_repair=formatting.auto_repair if auto_repair is None else auto_repair,
        )

    def compact(self, text: str, preserve_templates: bool | None = None) -> str:
        formatting = self.config.formatting
        return self.dispatcher.run(
            TaskKind.COMPACT,
            text=text,
            preserve_templates=(
                formatting.preserve_templates if preserve_templates is None else preserve_templates
            ),
        )

    def smart_format(
        self,
        text: str,
        indent: int | str | None = None,
        max_line_length: int | None = None,
    ) -> str:
        formatting = self.config.formatting
        return self.dispatcher.run(
            TaskKind.SMART_FORMAT,
            text=text,
            indent=formatting.indent if indent is None else indent,
            max_line_length=(
                formatting.max_line_length if max_line_length is None else max_line_length
            ),
            preserve_templates=formatting.preserve_templates,
        )

    def sort_keys(
        self,
        text: str,
        direction: SortDirection | str = SortDirection.ASC,
        recursive: bool = True,
        indent: int | str | None = None,
    ) -> str:
        formatting = self.config.formatting
        return self.dispatcher.run(
            TaskKind.SORT_KEYS,
            text=text,
            direction=SortDirection(direction),
            recursive=recursive,
            indent=formatting.indent if indent is None else indent,
            preserve_templates=formatting.preserve_templates,
        )

    # Validation

    def validate(self, value: JSONType, schema: JSONType) -> list[ValidationIssue]:
        return self.dispatcher.run(TaskKind.VALIDATE, value=value, schema=schema)

    def is_valid_schema(self, candidate: JSONType) -> bool:
        return is_valid_schema(candidate, self.schema_cache)

    def check(self, text: str, schema: JSONType) -> SchemaCheckResult:
        """Parse text and validate it against a schema"""
        parsed = self.parse(text)
        if not parsed.ok:
            return SchemaCheckResult(parse_error=parsed.error)
        return SchemaCheckResult(value=parsed.value, issues=self.validate(parsed.value, schema))

    def locate(self, text: str, pointer: str) -> int | None:
        return find_path_line(text, pointer)

    def locate_issues(
        self, text: str, issues: Iterable[ValidationIssue]
    ) -> list[tuple[ValidationIssue, int | None]]:
        """Pair every issue with the source line its path resolves to"""
        return [(issue, find_path_line(text, issue.path)) for issue in issues]

    # Query and transform

    def query(self, value: JSONType, expression: str) -> list[QueryResult]:
        return query_json_path(value, expression)

    def paths(self, value: JSONType) -> list[str]:
        return get_all_paths(value)

    def sort(
        self,
        array: JSONList,
        field: str = "",
        direction: SortDirection | str = SortDirection.ASC,
        sort_type: SortType | str = SortType.AUTO,
    ) -> JSONList:
        return sort_array(array, field, direction, sort_type)

    def filter(
        self,
        array: JSONList,
        conditions: Iterable[FilterCondition | Mapping[str, JSONType]],
        logic: FilterLogic | str = FilterLogic.AND,
        case_sensitive: bool | None = None,
    ) -> JSONList:
        if case_sensitive is None:
            case_sensitive = self.config.query.case_sensitive_filters
        return filter_array(array, conditions, logic, case_sensitive)

    # Editor helpers

    def find(
        self, content: str, search_text: str, case_sensitive: bool = False, use_regex: bool = False
    ) -> list[SearchMatch]:
        return find_matches(content, search_text, case_sensitive, use_regex)

    def diff(self, old_text: str, new_text: str) -> tuple[list[LineDiff], DiffSummary]:
        """Line diff of two documents together with its summary counts"""
        diffs: list[LineDiff] = self.dispatcher.run(
            TaskKind.LINE_DIFF, old_text=old_text, new_text=new_text
        )
        return diffs, get_diff_summary(diffs)
