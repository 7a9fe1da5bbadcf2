# json_workbench/infrastructure/logging/_console.py

"""Rich diagnostics rendering for CLI output"""

# Standard library imports
from logging import getLogger
from typing import Iterable

# Third party imports
from rich.console import Console
from rich.table import Table

# Local imports
from json_workbench.core.domain.results import DiffSummary
from json_workbench.core.domain.results import ParseError
from json_workbench.core.domain.validation_issue import ValidationIssue

logger = getLogger(__name__)


class DiagnosticConsole:
    """Renders diagnostics on stderr, keeping stdout for results

    Messages are also logged at DEBUG so a log file keeps a record of them
    without the console handler printing them a second time.
    """

    def __init__(self, enabled: bool = True, console: Console | None = None) -> None:
        """Initialize the diagnostic console

        Args:
            enabled: Whether to print anything at all
            console: Console to render on, a new stderr console by default
        """
        self.enabled = enabled
        self.console = console if console is not None else Console(stderr=True)

    def success(self, message: str) -> None:
        logger.debug(message)
        if self.enabled:
            self.console.print(f"[bold green]✓[/bold green] {message}", highlight=False)

    def warning(self, message: str) -> None:
        logger.debug(message)
        if self.enabled:
            self.console.print(f"[bold yellow]![/bold yellow] {message}", highlight=False)

    def error(self, message: str) -> None:
        logger.debug(message)
        if self.enabled:
            self.console.print(f"[bold red]✗[/bold red] {message}", highlight=False)

    def parse_error(self, source: str, error: ParseError) -> None:
        self.error(f"{source}:{error.line}:{error.column}: {error.message}")

    def validation_issues(
        self, source: str, issues: Iterable[tuple[ValidationIssue, int | None]]
    ) -> None:
        """Render schema issues with their resolved source lines"""
        table = Table(title=f"Schema validation: {source}", title_justify="left")
        table.add_column("Line", justify="right", style="cyan")
        table.add_column("Path", style="magenta")
        table.add_column("Keyword", style="yellow")
        table.add_column("Message")

        count = 0
        for issue, line in issues:
            count += 1
            location = "-" if line is None else str(line)
            table.add_row(location, issue.path, issue.keyword, issue.message)
            logger.debug(f"{source}: {issue.path}: {issue.message}")

        if self.enabled:
            self.console.print(table)
        self.error(f"{count} validation issue(s) in {source}")

    def diff_summary(self, summary: DiffSummary) -> None:
        message = (
            f"{summary.added} added, {summary.removed} removed, {summary.changed} changed line(s)"
        )
        logger.debug(message)
        if self.enabled:
            self.console.print(message, highlight=False)
