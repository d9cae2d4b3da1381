"""Analyzer results and their aggregation."""

from analyzers_core.results.analysis_result import AnalysisResult
from analyzers_core.results.collection import ResultCollection

__all__ = ["AnalysisResult", "ResultCollection"]
