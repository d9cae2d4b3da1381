"""Ordered collection of analyzer results with aggregate scoring."""

from typing import Any, Iterable, Iterator, Optional

from analyzers_core.models.enums import Status
from analyzers_core.results.analysis_result import AnalysisResult


class ResultCollection:
    """Results in the order analyzers produced them."""

    def __init__(self, results: Optional[Iterable[AnalysisResult]] = None):
        self._results: list[AnalysisResult] = list(results or [])

    def add(self, result: AnalysisResult) -> "ResultCollection":
        self._results.append(result)
        return self

    def all(self) -> list[AnalysisResult]:
        return list(self._results)

    def by_status(self, status: Status) -> list[AnalysisResult]:
        return [result for result in self._results if result.status == status]

    def passed(self) -> list[AnalysisResult]:
        return self.by_status(Status.PASSED)

    def failed(self) -> list[AnalysisResult]:
        return self.by_status(Status.FAILED)

    def warnings(self) -> list[AnalysisResult]:
        return self.by_status(Status.WARNING)

    def skipped(self) -> list[AnalysisResult]:
        return self.by_status(Status.SKIPPED)

    def errors(self) -> list[AnalysisResult]:
        return self.by_status(Status.ERROR)

    def score(self) -> float:
        """Percentage of successful results; passed and skipped both count."""
        if not self._results:
            return 100.0
        successful = len(self.passed()) + len(self.skipped())
        return round(successful / len(self._results) * 100, 2)

    def total_issues(self) -> int:
        return sum(len(result.issues) for result in self._results)

    def total_execution_time(self) -> float:
        return sum((result.execution_time for result in self._results), 0.0)

    def is_success(self) -> bool:
        return all(result.is_success for result in self._results)

    def to_list(self) -> list[dict[str, Any]]:
        return [result.to_dict() for result in self._results]

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[AnalysisResult]:
        return iter(list(self._results))
