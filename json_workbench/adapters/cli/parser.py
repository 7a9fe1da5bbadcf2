# json_workbench/adapters/cli/parser.py

"""Command-line argument parser configuration"""

# Standard library imports
from argparse import ArgumentParser

# Local imports
from json_workbench.infrastructure.config import ConfigLoader
from json_workbench.infrastructure.config import get_config

STDIN = "-"


def _add_input_argument(parser: ArgumentParser) -> None:
    parser.add_argument(
        "input", nargs="?", default=STDIN, help="JSON file to read, or '-' for stdin (default)"
    )


def create_argument_parser(config: ConfigLoader | None = None) -> ArgumentParser:
    """Create and configure argument parser with all CLI options

    Args:
        config: Configuration supplying option defaults; the process default
            when omitted
    """
    if config is None:
        config = get_config()
    formatting_config = config.formatting
    logging_config = config.logging

    parser = ArgumentParser(
        prog="json-workbench",
        description="Parse, repair, format, validate and query JSON documents",
    )

    # Global options
    parser.add_argument("--config", default=None, help="Path to a JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="DEBUG" if logging_config.debug else "WARNING",
        help="Console logging level (default: WARNING, or DEBUG when enabled in config)",
    )
    parser.add_argument(
        "--log-file",
        default=logging_config.log_file,
        help="Also write a debug log to this file (default: no file logging)",
    )
    parser.add_argument(
        "--silent", action="store_true", help="Suppress all console diagnostics and logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    # check
    check = subparsers.add_parser("check", help="Report whether the input is valid JSON")
    _add_input_argument(check)

    # repair
    repair = subparsers.add_parser("repair", help="Repair malformed JSON-like text")
    _add_input_argument(repair)

    # format
    format_parser = subparsers.add_parser("format", help="Pretty-print, compact or sort a document")
    _add_input_argument(format_parser)
    format_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help=f"Spaces per indentation level (default: {formatting_config.indent})",
    )
    format_parser.add_argument("--tab", action="store_true", help="Indent with tabs")
    layout = format_parser.add_mutually_exclusive_group()
    layout.add_argument("--compact", action="store_true", help="Emit a single line")
    layout.add_argument(
        "--smart", action="store_true", help="Inline small structures that fit on a line"
    )
    layout.add_argument("--sort-keys", action="store_true", help="Sort object keys recursively")
    format_parser.add_argument(
        "--max-line-length",
        type=int,
        default=formatting_config.max_line_length,
        help=f"Line budget for --smart (default: {formatting_config.max_line_length})",
    )
    format_parser.add_argument(
        "--desc", action="store_true", help="Sort keys in descending order with --sort-keys"
    )

    # validate
    validate = subparsers.add_parser("validate", help="Validate the input against a JSON Schema")
    _add_input_argument(validate)
    validate.add_argument("--schema", required=True, help="Path to the JSON Schema file")

    # query
    query = subparsers.add_parser("query", help="Evaluate a JSONPath expression")
    query.add_argument("expression", help="Path expression, e.g. '$.store.book[*].title'")
    _add_input_argument(query)

    # paths
    paths = subparsers.add_parser("paths", help="List every key and index path")
    _add_input_argument(paths)

    # locate
    locate = subparsers.add_parser("locate", help="Print the source line of a JSON Pointer")
    locate.add_argument("pointer", help="JSON Pointer, e.g. '/items/0/name'")
    _add_input_argument(locate)

    # diff
    diff = subparsers.add_parser("diff", help="Line diff of two documents")
    diff.add_argument("old", help="Original file, or '-' for stdin")
    diff.add_argument("new", help="Changed file")

    return parser
