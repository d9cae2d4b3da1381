"""Analyzer framework and built-in analyzers."""

from analyzers_core.analyzers.base import Analyzer
from analyzers_core.analyzers.dangerous_functions import DangerousFunctionAnalyzer
from analyzers_core.analyzers.file_analyzer import FileAnalyzer
from analyzers_core.analyzers.raw_query import RawQueryAnalyzer

__all__ = [
    "Analyzer",
    "DangerousFunctionAnalyzer",
    "FileAnalyzer",
    "RawQueryAnalyzer",
]
