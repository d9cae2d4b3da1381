"""Outcome of one analyzer run."""

from dataclasses import dataclass, field, replace
from typing import Any

from analyzers_core.models.enums import Status
from analyzers_core.models.issue import Issue


@dataclass(frozen=True)
class AnalysisResult:
    analyzer_id: str
    status: Status
    message: str
    issues: list[Issue] = field(default_factory=list)
    execution_time: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def passed(
        cls, analyzer_id: str, message: str, execution_time: float = 0.0, metadata: dict[str, Any] | None = None
    ) -> "AnalysisResult":
        return cls(analyzer_id, Status.PASSED, message, [], execution_time, metadata or {})

    @classmethod
    def failed(
        cls,
        analyzer_id: str,
        message: str,
        issues: list[Issue] | None = None,
        execution_time: float = 0.0,
        metadata: dict[str, Any] | None = None,
    ) -> "AnalysisResult":
        return cls(analyzer_id, Status.FAILED, message, list(issues or []), execution_time, metadata or {})

    @classmethod
    def warning(
        cls,
        analyzer_id: str,
        message: str,
        issues: list[Issue] | None = None,
        execution_time: float = 0.0,
        metadata: dict[str, Any] | None = None,
    ) -> "AnalysisResult":
        return cls(analyzer_id, Status.WARNING, message, list(issues or []), execution_time, metadata or {})

    @classmethod
    def skipped(
        cls, analyzer_id: str, message: str, execution_time: float = 0.0, metadata: dict[str, Any] | None = None
    ) -> "AnalysisResult":
        return cls(analyzer_id, Status.SKIPPED, message, [], execution_time, metadata or {})

    @classmethod
    def error(
        cls, analyzer_id: str, message: str, execution_time: float = 0.0, metadata: dict[str, Any] | None = None
    ) -> "AnalysisResult":
        return cls(analyzer_id, Status.ERROR, message, [], execution_time, metadata or {})

    @property
    def is_success(self) -> bool:
        return self.status.is_success

    def with_execution_time(self, execution_time: float) -> "AnalysisResult":
        return replace(self, execution_time=execution_time)

    def to_dict(self) -> dict[str, Any]:
        return {
            "analyzer_id": self.analyzer_id,
            "status": self.status.value,
            "message": self.message,
            "issues": [issue.to_dict() for issue in self.issues],
            "execution_time": self.execution_time,
            "metadata": self.metadata,
        }
