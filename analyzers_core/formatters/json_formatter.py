"""JSON report output."""

import json
from typing import Any, Iterable

from analyzers_core.formatters.base import Reporter
from analyzers_core.models.enums import Status
from analyzers_core.results.analysis_result import AnalysisResult
from analyzers_core.results.collection import ResultCollection


class JsonFormatter(Reporter):
    """Serializes results plus a summary block."""

    format_name = "json"

    def __init__(self, pretty_print: bool = False):
        self.pretty_print = pretty_print

    def format(self, results: Iterable[AnalysisResult]) -> str:
        collection = ResultCollection(results)
        data = {
            "summary": self.generate_summary(collection),
            "results": collection.to_list(),
        }
        if self.pretty_print:
            return json.dumps(data, indent=4, ensure_ascii=False)
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    @staticmethod
    def generate_summary(collection: ResultCollection) -> dict[str, Any]:
        return {
            "total": len(collection),
            "passed": len(collection.by_status(Status.PASSED)),
            "failed": len(collection.by_status(Status.FAILED)),
            "warnings": len(collection.by_status(Status.WARNING)),
            "skipped": len(collection.by_status(Status.SKIPPED)),
            "errors": len(collection.by_status(Status.ERROR)),
            "total_issues": collection.total_issues(),
            "score": collection.score(),
            "execution_time": round(collection.total_execution_time(), 4),
        }
