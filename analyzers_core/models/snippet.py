"""Code snippet value object and context-window extraction."""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

MAX_LINE_LENGTH = 250
SIGNATURE_SEARCH_DEPTH = 15

SIGNATURE_PATTERNS = [
    re.compile(r"^(abstract\s+)?(final\s+)?(class|interface|trait|enum)\s+\w+", re.IGNORECASE),
    re.compile(r"^(public|protected|private|static)\s+(static\s+)?function\s+\w+", re.IGNORECASE),
    re.compile(r"^function\s+\w+", re.IGNORECASE),
]

BLOCK_CLOSERS = {"}", "};"}


@dataclass(frozen=True)
class CodeSnippet:
    """Lines of a file around the line an issue points at."""

    file_path: str
    target_line: int
    lines: dict[int, str] = field(default_factory=dict)
    context_lines: int = 8

    @classmethod
    def from_file(
        cls,
        file_path: Union[str, os.PathLike],
        target_line: int,
        context_lines: int = 8,
    ) -> Optional["CodeSnippet"]:
        """
        Read a snippet centered on ``target_line``.

        The window is widened upward to include the enclosing class or
        function signature when it sits just outside the centered window and
        enough lines remain below the target.

        Returns:
            The snippet, or None if the file is missing or unreadable
        """
        path = Path(file_path)
        if not path.is_file():
            return None

        try:
            content = path.read_bytes().decode("utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Cannot read {path} for snippet: {e}")
            return None

        source_lines = content.split("\n")
        start, end = _calculate_bounds(source_lines, target_line, context_lines)

        lines = {}
        for number in range(start, end + 1):
            lines[number] = source_lines[number - 1][:MAX_LINE_LENGTH].rstrip()

        return cls(
            file_path=str(file_path),
            target_line=target_line,
            lines=lines,
            context_lines=context_lines,
        )

    @property
    def start_line(self) -> Optional[int]:
        return next(iter(self.lines), None)

    @property
    def end_line(self) -> Optional[int]:
        return next(reversed(self.lines), None) if self.lines else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file_path,
            "target_line": self.target_line,
            "lines": dict(self.lines),
            "context_lines": self.context_lines,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CodeSnippet":
        """Restore a snippet; JSON object keys come back as strings."""
        return cls(
            file_path=data.get("file", ""),
            target_line=data.get("target_line", 0),
            lines={int(number): text for number, text in (data.get("lines") or {}).items()},
            context_lines=data.get("context_lines", 5),
        )


def _calculate_bounds(source_lines: list[str], target_line: int, context_lines: int) -> tuple[int, int]:
    total_lines = len(source_lines)

    start = max(target_line - context_lines, 1)
    end = min(target_line + context_lines, total_lines)

    # Lines cut off by the top of the file are given to the bottom, and vice versa
    if target_line - context_lines < 1:
        unused_above = 1 - (target_line - context_lines)
        end = min(end + unused_above, total_lines)
    if target_line + context_lines > total_lines:
        unused_below = (target_line + context_lines) - total_lines
        start = max(start - unused_below, 1)

    signature_line = _find_signature_line(source_lines, target_line, max(target_line - SIGNATURE_SEARCH_DEPTH, 1))
    if signature_line is not None and signature_line < start:
        budget = 2 * context_lines
        lines_below = budget - (target_line - signature_line)
        if lines_below >= min(3, context_lines):
            start = signature_line
            end = min(target_line + lines_below, total_lines)

    return start, end


def _find_signature_line(source_lines: list[str], target_line: int, min_line: int) -> Optional[int]:
    """Nearest declaration line above the target, not crossing a closing brace."""
    for number in range(min(target_line - 1, len(source_lines)), min_line - 1, -1):
        stripped = source_lines[number - 1].strip()
        if any(pattern.match(stripped) for pattern in SIGNATURE_PATTERNS):
            return number
        if stripped in BLOCK_CLOSERS:
            break
    return None
