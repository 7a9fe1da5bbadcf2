# json_workbench/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import Handler
from logging import INFO
from logging import Logger
from logging import StreamHandler
from logging import getLevelNamesMapping
from logging import getLogger
from os import makedirs

LOG_DIR = "logs"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_default_log_path() -> str:
    """Generate default log file path with timestamp"""
    makedirs(LOG_DIR, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{LOG_DIR}/json_workbench_{timestamp}.log"


def resolve_level(log_level: str) -> int:
    """Map a level name such as ``"debug"`` to its logging constant, INFO if unknown"""
    return getLevelNamesMapping().get(log_level.upper(), INFO)


def _attach(root: Logger, handler: Handler, level: int, fmt: str) -> None:
    handler.setLevel(level)
    handler.setFormatter(Formatter(fmt))
    root.addHandler(handler)


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = False,
) -> str | None:
    """Configure the root logger for a CLI run

    The console handler writes to stderr at ``log_level``. The file handler
    always records DEBUG, so the root level drops to DEBUG whenever a file is
    attached.

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Console level name (DEBUG, INFO, WARNING, ERROR)
        silent: If True, no console handler is installed
        disable_file_logging: If True, no file handler is installed

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = resolve_level(log_level)
    root_logger = getLogger()

    # Clear any existing handlers
    root_logger.handlers = []

    if not silent:
        _attach(root_logger, StreamHandler(), level, CONSOLE_FORMAT)

    if disable_file_logging:
        root_logger.setLevel(level)
        return None

    if log_file is None:
        log_file = get_default_log_path()
    _attach(root_logger, FileHandler(log_file, encoding="utf-8"), DEBUG, FILE_FORMAT)
    root_logger.setLevel(DEBUG)

    getLogger(__name__).info(f"Logging to file: {log_file}")
    return log_file


def log_run_summary(
    command: str, source: str, start_time: float, end_time: float, exit_code: int
) -> None:
    """Log a one-command run summary

    Args:
        command: CLI subcommand that ran
        source: Input path, or ``-`` for stdin
        start_time: Start time from ``time.perf_counter``
        end_time: End time from ``time.perf_counter``
        exit_code: Process exit code
    """
    elapsed_ms = (end_time - start_time) * 1000
    outcome = "ok" if exit_code == 0 else f"failed (exit {exit_code})"
    getLogger(__name__).info(f"{command} {source}: {outcome} in {elapsed_ms:.1f} ms")
