"""Value objects shared by analyzers, results and formatters."""

from analyzers_core.models.enums import Category, Severity, Status
from analyzers_core.models.issue import Issue, Location
from analyzers_core.models.metadata import AnalyzerMetadata
from analyzers_core.models.snippet import CodeSnippet

__all__ = [
    "AnalyzerMetadata",
    "Category",
    "CodeSnippet",
    "Issue",
    "Location",
    "Severity",
    "Status",
]
