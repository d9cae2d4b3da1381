"""Base class for analyzers that inspect PHP files on disk."""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterator, Optional, Union

from analyzers_core.analyzers.base import Analyzer
from analyzers_core.config import Settings

logger = logging.getLogger(__name__)

PHP_EXTENSION = ".php"


class FileAnalyzer(Analyzer):
    """Analyzer over the PHP files found under a set of paths."""

    def __init__(self, settings: Optional[Settings] = None):
        super().__init__(settings)
        self.base_path = (self.settings.base_path or "").rstrip("/")
        self.paths: list[str] = []
        self.exclude_patterns: list[str] = list(self.settings.exclude_patterns)

    def set_base_path(self, path: Union[str, os.PathLike]) -> "FileAnalyzer":
        self.base_path = str(path).rstrip("/")
        return self

    def set_paths(self, paths: list[str]) -> "FileAnalyzer":
        self.paths = list(paths)
        return self

    def set_exclude_patterns(self, patterns: list[str]) -> "FileAnalyzer":
        self.exclude_patterns = list(patterns)
        return self

    def get_base_path(self) -> str:
        return self.base_path or super().get_base_path()

    def files_to_analyze(self) -> Iterator[Path]:
        """Every regular file under the configured paths, directories walked in sorted order."""
        paths = self.paths or [self.base_path]
        for path in paths:
            full_path = Path(self.base_path, path) if self.base_path and path != self.base_path else Path(path)

            if full_path.is_file():
                yield full_path
            elif full_path.is_dir():
                for candidate in sorted(full_path.rglob("*")):
                    if candidate.is_file():
                        yield candidate
            else:
                logger.debug(f"Path not found, skipping: {full_path}")

    def should_analyze_file(self, path: Union[str, os.PathLike]) -> bool:
        path = Path(path)
        if path.suffix != PHP_EXTENSION:
            return False

        # Glob wildcards also match across directory separators
        pathname = str(path)
        for pattern in self.exclude_patterns:
            if fnmatch.fnmatchcase(pathname, pattern):
                logger.debug(f"Excluded by {pattern!r}: {pathname}")
                return False
        return True

    def php_files(self) -> list[str]:
        return [str(path) for path in self.files_to_analyze() if self.should_analyze_file(path)]

    def read_file(self, path: Union[str, os.PathLike]) -> Optional[str]:
        path = Path(path)
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Cannot read {path}: {e}")
            return None

    def get_code_snippet(self, path: Union[str, os.PathLike], line: int, context_lines: int = 2) -> Optional[str]:
        """Raw text of the lines around ``line``, without signature expansion."""
        contents = self.read_file(path)
        if contents is None:
            return None

        lines = contents.splitlines(keepends=True)
        start = max(0, line - context_lines - 1)
        end = min(len(lines), line + context_lines)
        return "".join(lines[start:end])
