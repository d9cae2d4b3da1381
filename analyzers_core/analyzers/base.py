"""Base analyzer with timing, error capture and issue helpers."""

import logging
import os
import time
import traceback
from abc import ABC, abstractmethod
from typing import Any, Optional

from analyzers_core.config import Settings, get_settings
from analyzers_core.models.enums import Severity
from analyzers_core.models.issue import Issue, Location
from analyzers_core.models.metadata import AnalyzerMetadata
from analyzers_core.models.snippet import CodeSnippet
from analyzers_core.results.analysis_result import AnalysisResult

logger = logging.getLogger(__name__)


class Analyzer(ABC):
    """
    Base class for analyzers.

    Subclasses implement ``metadata()`` and ``run_analysis()``; callers use
    ``analyze()``, which never raises for failures inside the analysis.
    """

    run_in_ci: bool = True

    # None means every environment
    relevant_environments: Optional[list[str]] = None

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._start_time: Optional[float] = None

    @abstractmethod
    def metadata(self) -> AnalyzerMetadata:
        raise NotImplementedError

    @abstractmethod
    def run_analysis(self) -> AnalysisResult:
        raise NotImplementedError

    @property
    def id(self) -> str:
        return self.metadata().id

    def analyze(self) -> AnalysisResult:
        """Run the analysis and return its result with measured execution time."""
        self._start_time = None
        if not self.should_run():
            logger.debug(f"Skipping analyzer {self.id}")
            return self.skipped(self.get_skip_reason())

        self._start_time = time.perf_counter()
        try:
            result = self.run_analysis()
        except Exception as e:
            logger.exception(f"Analyzer {self.id} failed")
            return self.error(
                f"Analysis failed: {e}",
                {"exception": type(e).__name__, "trace": traceback.format_exc()},
            )

        result = result.with_execution_time(self.get_execution_time())
        logger.info(f"Analyzer {result.analyzer_id} finished: {result.status.value} ({result.execution_time}s)")
        return result

    def should_run(self) -> bool:
        return self.is_relevant_for_current_environment()

    def get_skip_reason(self) -> str:
        return "Not applicable in current environment or configuration"

    def get_environment(self) -> str:
        return self.settings.resolved_environment

    def is_relevant_for_current_environment(self) -> bool:
        if self.relevant_environments is None:
            return True
        current = self.get_environment().lower()
        return any(current == env.lower() for env in self.relevant_environments)

    def get_execution_time(self) -> float:
        if self._start_time is None:
            return 0.0
        return round(time.perf_counter() - self._start_time, 4)

    # Result helpers

    def passed(self, message: str, metadata: Optional[dict[str, Any]] = None) -> AnalysisResult:
        return AnalysisResult.passed(self.id, message, self.get_execution_time(), metadata)

    def failed(
        self, message: str, issues: Optional[list[Issue]] = None, metadata: Optional[dict[str, Any]] = None
    ) -> AnalysisResult:
        return AnalysisResult.failed(self.id, message, issues, self.get_execution_time(), metadata)

    def warning(
        self, message: str, issues: Optional[list[Issue]] = None, metadata: Optional[dict[str, Any]] = None
    ) -> AnalysisResult:
        return AnalysisResult.warning(self.id, message, issues, self.get_execution_time(), metadata)

    def skipped(self, message: str, metadata: Optional[dict[str, Any]] = None) -> AnalysisResult:
        return AnalysisResult.skipped(self.id, message, self.get_execution_time(), metadata)

    def error(self, message: str, metadata: Optional[dict[str, Any]] = None) -> AnalysisResult:
        return AnalysisResult.error(self.id, message, self.get_execution_time(), metadata)

    def result_by_severity(
        self, message: str, issues: list[Issue], metadata: Optional[dict[str, Any]] = None
    ) -> AnalysisResult:
        """Passed with no issues, failed if any issue is HIGH or worse, warning otherwise."""
        if not issues:
            return self.passed(message, metadata)
        if any(issue.severity.level >= Severity.HIGH.level for issue in issues):
            return self.failed(message, issues, metadata)
        return self.warning(message, issues, metadata)

    # Issue helpers

    def create_issue(
        self,
        message: str,
        location: Optional[Location],
        severity: Severity,
        recommendation: str,
        code: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Issue:
        return Issue(
            message=message,
            location=location,
            severity=severity,
            recommendation=recommendation,
            code=code,
            metadata=metadata or {},
        )

    def create_issue_with_snippet(
        self,
        message: str,
        file_path: str,
        line: Optional[int],
        severity: Severity,
        recommendation: str,
        column: Optional[int] = None,
        context_lines: Optional[int] = None,
        code: Optional[str] = None,
        metadata: Optional[dict[str, Any]] = None,
    ) -> Issue:
        """Build an issue whose location is relative to the base path, with a code snippet when enabled."""
        file_path = str(file_path)
        location = Location(file=self.get_relative_path(file_path), line=line, column=column)

        snippet = None
        if self.settings.show_code_snippets and line is not None:
            radius = context_lines if context_lines is not None else self.settings.snippet_context_lines
            snippet = CodeSnippet.from_file(file_path, line, radius)

        return Issue(
            message=message,
            location=location,
            severity=severity,
            recommendation=recommendation,
            code=code,
            metadata=metadata or {},
            code_snippet=snippet,
        )

    # Paths

    def get_base_path(self) -> str:
        return self.settings.base_path or os.getcwd()

    def build_path(self, *segments: str) -> str:
        base_path = self.get_base_path()
        if not segments:
            return base_path
        return os.path.join(base_path, *segments)

    def get_relative_path(self, file: str) -> str:
        """``file`` relative to the base path, or unchanged when outside it."""
        base_path = self.get_base_path()
        if not base_path or base_path == ".":
            return file

        prefix = base_path.replace("\\", "/").rstrip("/") + "/"
        normalized = file.replace("\\", "/")
        if normalized.startswith(prefix):
            return normalized[len(prefix):]
        return file
