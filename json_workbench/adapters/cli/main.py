# json_workbench/adapters/cli/main.py

"""
JSON Workbench - CLI Main Module

Command-line interface for checking, repairing, formatting, validating and
querying JSON documents.

Exit codes:
    0: success
    1: the data failed (parse error, validation issues, invalid query,
       unresolved pointer)
    2: usage error (bad arguments, unreadable input)

Results are written to stdout; diagnostics go to stderr.
"""

# Standard library imports
import sys
from argparse import Namespace
from logging import getLogger
from pathlib import Path
from time import perf_counter

# Local imports
from json_workbench.adapters.api import JsonWorkbench
from json_workbench.adapters.cli.parser import STDIN
from json_workbench.adapters.cli.parser import create_argument_parser
from json_workbench.application.formatting import has_template_syntax
from json_workbench.application.formatting import serialize_json
from json_workbench.core.domain.enums import DiffType
from json_workbench.core.domain.enums import SortDirection
from json_workbench.core.domain.results import ParseResult
from json_workbench.core.exceptions import QueryExpressionError
from json_workbench.infrastructure.config import get_config
from json_workbench.infrastructure.dispatch import TaskDispatcher
from json_workbench.infrastructure.logging import DiagnosticConsole
from json_workbench.infrastructure.logging import log_run_summary
from json_workbench.infrastructure.logging import setup_logging

logger = getLogger(__name__)

EXIT_OK = 0
EXIT_DATA_ERROR = 1
EXIT_USAGE_ERROR = 2

_DIFF_MARKERS = {DiffType.UNCHANGED: " ", DiffType.ADDED: "+", DiffType.REMOVED: "-"}


class InputError(Exception):
    """An input file could not be read"""


def read_input(source: str) -> str:
    """Read a document from a path, or from stdin for ``-``"""
    if source == STDIN:
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Cannot read {source}: {e}") from e


def _emit(text: str) -> None:
    sys.stdout.write(text if text.endswith("\n") else f"{text}\n")


def _load_document(
    workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace
) -> ParseResult | None:
    """Read and parse the input, repairing it when configured to

    Returns:
        The parse result, or None after reporting a parse error
    """
    text = read_input(args.input)
    parsed, repaired = workbench.parse_with_repair(text)
    if not parsed.ok:
        diagnostics.parse_error(args.input, parsed.error)
        return None
    if repaired is not None and repaired.was_repaired:
        diagnostics.warning(f"{args.input}: input was malformed and has been repaired")
    return parsed


def _run_check(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    text = read_input(args.input)
    parsed = workbench.parse(text)
    if parsed.ok:
        diagnostics.success(f"{args.input}: valid JSON")
        return EXIT_OK
    diagnostics.parse_error(args.input, parsed.error)
    if workbench.can_repair(text):
        diagnostics.warning("The input looks repairable; try 'json-workbench repair'")
    return EXIT_DATA_ERROR


def _run_repair(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    text = read_input(args.input)
    result = workbench.repair(text)
    if result.error is not None:
        diagnostics.error(f"{args.input}: could not be repaired: {result.error}")
        return EXIT_DATA_ERROR
    _emit(result.output)
    if result.was_repaired:
        diagnostics.warning(f"{args.input}: repaired")
    else:
        diagnostics.success(f"{args.input}: already valid JSON")
    return EXIT_OK


def _run_format(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    text = read_input(args.input)
    if not has_template_syntax(text):
        parsed, repaired = workbench.parse_with_repair(text)
        if not parsed.ok:
            diagnostics.parse_error(args.input, parsed.error)
            return EXIT_DATA_ERROR
        if repaired is not None and repaired.was_repaired:
            diagnostics.warning(f"{args.input}: input was malformed and has been repaired")
            text = repaired.output

    indent = "tab" if args.tab else args.indent
    if args.compact:
        output = workbench.compact(text)
    elif args.smart:
        output = workbench.smart_format(text, indent, args.max_line_length)
    elif args.sort_keys:
        direction = SortDirection.DESC if args.desc else SortDirection.ASC
        output = workbench.sort_keys(text, direction, indent=indent)
    else:
        output = workbench.format(text, indent)
    _emit(output)
    return EXIT_OK


def _run_validate(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    schema_result = workbench.parse(read_input(args.schema))
    if not schema_result.ok:
        diagnostics.parse_error(args.schema, schema_result.error)
        return EXIT_DATA_ERROR

    text = read_input(args.input)
    result = workbench.check(text, schema_result.value)
    if result.parse_error is not None:
        diagnostics.parse_error(args.input, result.parse_error)
        return EXIT_DATA_ERROR
    if result.issues:
        diagnostics.validation_issues(args.input, workbench.locate_issues(text, result.issues))
        return EXIT_DATA_ERROR
    diagnostics.success(f"{args.input}: valid against {args.schema}")
    return EXIT_OK


def _run_query(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    parsed = _load_document(workbench, diagnostics, args)
    if parsed is None:
        return EXIT_DATA_ERROR
    try:
        results = workbench.query(parsed.value, args.expression)
    except QueryExpressionError as e:
        diagnostics.error(str(e))
        return EXIT_DATA_ERROR
    _emit(serialize_json([{"path": r.path, "value": r.value} for r in results], indent=2))
    return EXIT_OK


def _run_paths(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    parsed = _load_document(workbench, diagnostics, args)
    if parsed is None:
        return EXIT_DATA_ERROR
    for path in workbench.paths(parsed.value):
        _emit(path)
    return EXIT_OK


def _run_locate(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    line = workbench.locate(read_input(args.input), args.pointer)
    if line is None:
        diagnostics.error(f"{args.input}: could not locate {args.pointer}")
        return EXIT_DATA_ERROR
    _emit(str(line))
    return EXIT_OK


def _run_diff(workbench: JsonWorkbench, diagnostics: DiagnosticConsole, args: Namespace) -> int:
    diffs, summary = workbench.diff(read_input(args.old), read_input(args.new))
    for diff in diffs:
        _emit(f"{_DIFF_MARKERS[diff.type]} {diff.line_number:>4} {diff.content}")
    diagnostics.diff_summary(summary)
    return EXIT_OK


_COMMANDS = {
    "check": _run_check,
    "repair": _run_repair,
    "format": _run_format,
    "validate": _run_validate,
    "query": _run_query,
    "paths": _run_paths,
    "locate": _run_locate,
    "diff": _run_diff,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when omitted

    Returns:
        Process exit code
    """
    args = create_argument_parser().parse_args(argv)

    # Re-parse so option defaults come from the requested config file
    config = get_config(args.config) if args.config else get_config()
    if args.config:
        args = create_argument_parser(config).parse_args(argv)

    setup_logging(
        log_file=args.log_file,
        log_level=args.log_level,
        silent=args.silent,
        disable_file_logging=args.log_file is None,
    )
    diagnostics = DiagnosticConsole(enabled=not args.silent)
    source = getattr(args, "input", None) or f"{args.old} {args.new}"

    logger.debug(f"Running {args.command} with config {args.config or 'defaults'}")
    start_time = perf_counter()
    exit_code = EXIT_USAGE_ERROR
    # Single commands always run in process
    with JsonWorkbench(config=config, dispatcher=TaskDispatcher(enabled=False)) as workbench:
        try:
            exit_code = _COMMANDS[args.command](workbench, diagnostics, args)
        except InputError as e:
            diagnostics.error(str(e))
        finally:
            log_run_summary(args.command, source, start_time, perf_counter(), exit_code)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
