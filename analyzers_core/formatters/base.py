"""Reporter interface shared by all output formats."""

from abc import ABC, abstractmethod
from typing import Iterable

from analyzers_core.results.analysis_result import AnalysisResult


class Reporter(ABC):
    """Turns a sequence of analysis results into a report string."""

    format_name: str = ""

    @abstractmethod
    def format(self, results: Iterable[AnalysisResult]) -> str:
        raise NotImplementedError
