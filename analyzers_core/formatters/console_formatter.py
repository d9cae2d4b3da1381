"""Human-readable terminal report rendered with rich."""

from io import StringIO
from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from analyzers_core.formatters.base import Reporter
from analyzers_core.models.enums import Status
from analyzers_core.results.analysis_result import AnalysisResult
from analyzers_core.results.collection import ResultCollection

REPORT_TITLE = "Analysis Report"
REPORT_WIDTH = 60

# Enum colour names that are not rich colour names
_RICH_COLORS = {
    "gray": "bright_black",
    "orange": "dark_orange",
}


def _style(color: str) -> str:
    return _RICH_COLORS.get(color, color)


def _score_color(score: float) -> str:
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    return "red"


class ConsoleFormatter(Reporter):
    """Renders results as a terminal report, with or without ANSI colours."""

    format_name = "console"

    def __init__(self, use_colors: bool = True, verbose: bool = False):
        self.use_colors = use_colors
        self.verbose = verbose

    def format(self, results: Iterable[AnalysisResult]) -> str:
        collection = ResultCollection(results)
        buffer = StringIO()
        console = Console(
            file=buffer,
            width=100,
            force_terminal=self.use_colors,
            no_color=not self.use_colors,
            color_system="standard" if self.use_colors else None,
            highlight=False,
            soft_wrap=True,
        )

        console.print(
            Panel(Text(REPORT_TITLE, style="bold"), width=REPORT_WIDTH, style="bold")
        )
        self._print_summary(console, collection)
        console.print()

        sections = [
            ("Failed Analyzers", collection.failed(), "red"),
            ("Warnings", collection.warnings(), "yellow"),
            ("Errors", collection.errors(), "red"),
        ]
        if self.verbose:
            sections.append(("Passed Analyzers", collection.passed(), "green"))

        for title, section_results, color in sections:
            if section_results:
                self._print_section(console, title, section_results, color)
                console.print()

        self._print_footer(console, collection)
        return buffer.getvalue()

    def _print_summary(self, console: Console, collection: ResultCollection) -> None:
        total = len(collection)
        passed = len(collection.passed())
        skipped = len(collection.skipped())
        errors = len(collection.errors())
        score = round((passed + skipped) / total * 100, 1) if total else 100.0

        console.print(Text(f"Score: {score}%", style=_score_color(score)))
        console.print()
        console.print(f"Total Analyzers: {total}")
        console.print(Text(f"  {Status.PASSED.emoji} Passed: {passed}", style="green"))
        console.print(Text(f"  {Status.FAILED.emoji} Failed: {len(collection.failed())}", style="red"))
        console.print(Text(f"  {Status.WARNING.emoji} Warnings: {len(collection.warnings())}", style="yellow"))
        console.print(Text(f"  {Status.SKIPPED.emoji} Skipped: {skipped}", style=_style("gray")))
        if errors:
            console.print(Text(f"  {Status.ERROR.emoji} Errors: {errors}", style="red"))
        console.print()
        console.print(f"Total Issues Found: {collection.total_issues()}")
        console.print(f"Execution Time: {round(collection.total_execution_time(), 2)}s")

    def _print_section(
        self, console: Console, title: str, results: list[AnalysisResult], color: str
    ) -> None:
        console.print(Text(f"{title}:", style=color))
        console.print("─" * REPORT_WIDTH)

        for result in results:
            console.print()
            console.print(Text(f"{result.status.emoji} {result.analyzer_id}", style=color))
            console.print(Text(f"  {result.message}"))
            if not result.issues:
                continue

            console.print(Text("  Issues:", style=color))
            for issue in result.issues:
                console.print(Text(f"    • {issue.message}"))
                if issue.location is not None:
                    console.print(Text(f"      Location: {issue.location}", style=_style("gray")))
                console.print(
                    Text(f"      Severity: {issue.severity.label}", style=_style(issue.severity.color))
                )
                console.print(Text(f"      Recommendation: {issue.recommendation}"))

                if issue.code is not None and self.verbose:
                    console.print(Text("      Code:", style=_style("gray")))
                    for line in issue.code.splitlines():
                        console.print(Text(f"        {line}", style=_style("gray")))

    def _print_footer(self, console: Console, collection: ResultCollection) -> None:
        if collection.failed() or collection.errors():
            console.print(Text(f"{Status.FAILED.emoji} Analysis completed with issues", style="red"))
        elif collection.warnings():
            console.print(Text(f"{Status.WARNING.emoji} Analysis completed with warnings", style="yellow"))
        else:
            console.print(Text(f"{Status.PASSED.emoji} Analysis completed successfully", style="green"))
