"""Detects raw SQL built from concatenated or interpolated strings."""

from typing import Optional

from analyzers_core.analyzers.file_analyzer import FileAnalyzer
from analyzers_core.config import Settings
from analyzers_core.models.enums import Category, Severity
from analyzers_core.models.issue import Issue
from analyzers_core.models.metadata import AnalyzerMetadata
from analyzers_core.parsers.nodes import SyntaxNode, SyntaxTree
from analyzers_core.parsers.php_parser import PhpParser
from analyzers_core.parsers.queries import (
    find_method_calls,
    find_static_calls,
    has_concatenation,
    has_interpolation,
)
from analyzers_core.results.analysis_result import AnalysisResult

RAW_STATIC_CALLS = [
    ("DB", "raw"),
    ("DB", "select"),
    ("DB", "statement"),
    ("DB", "unprepared"),
]

RAW_METHODS = [
    "whereRaw",
    "orWhereRaw",
    "selectRaw",
    "orderByRaw",
    "havingRaw",
    "groupByRaw",
]


class RawQueryAnalyzer(FileAnalyzer):
    """Flags raw query calls whose arguments are assembled from strings."""

    def __init__(self, settings: Optional[Settings] = None, parser: Optional[PhpParser] = None):
        super().__init__(settings)
        self.parser = parser or PhpParser()

    def metadata(self) -> AnalyzerMetadata:
        return AnalyzerMetadata(
            id="raw-query-injection",
            name="Raw Query Injection",
            description="Detects raw SQL queries built with string concatenation or interpolation",
            category=Category.SECURITY,
            severity=Severity.CRITICAL,
            tags=["security", "sql", "injection"],
        )

    def run_analysis(self) -> AnalysisResult:
        issues: list[Issue] = []

        for file_path in self.php_files():
            tree = self.parser.parse_file(file_path)
            for call, label in self._raw_calls(tree):
                arguments = call.child_of_kind("arguments")
                if arguments is None:
                    continue
                if not (has_concatenation(arguments) or has_interpolation(arguments)):
                    continue

                issues.append(
                    self.create_issue_with_snippet(
                        message=f"Raw SQL in {label} is built from dynamic strings",
                        file_path=file_path,
                        line=call.start_line,
                        severity=Severity.CRITICAL,
                        recommendation="Use parameter bindings (? placeholders) instead of building SQL strings",
                        column=call.start_column,
                        metadata={"call": label},
                    )
                )

        message = (
            f"Found {len(issues)} potential SQL injection(s) in raw queries"
            if issues
            else "No unsafe raw queries found"
        )
        return self.result_by_severity(message, issues)

    def _raw_calls(self, tree: SyntaxTree) -> list[tuple[SyntaxNode, str]]:
        calls = []
        for owner, method in RAW_STATIC_CALLS:
            calls.extend((node, f"{owner}::{method}()") for node in find_static_calls(tree, owner, method))
        for method in RAW_METHODS:
            calls.extend((node, f"{method}()") for node in find_method_calls(tree, method))
        return sorted(calls, key=lambda pair: (pair[0].start_line, pair[0].start_column))
