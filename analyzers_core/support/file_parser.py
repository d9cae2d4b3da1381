"""Text-level helpers for reading PHP files.

All helpers are total over missing or unreadable files: they return None, an
empty collection, 0 or False instead of raising.
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from analyzers_core.models.snippet import CodeSnippet

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

NAMESPACE_PATTERN = re.compile(r"namespace\s+([^;]+);")
CLASS_PATTERN = re.compile(r"class\s+(\w+)")
USE_PATTERN = re.compile(r"use\s+([^;]+);")
LINE_COMMENT_PATTERN = re.compile(r"//.*$|#.*$")


def read_file(file_path: PathLike) -> Optional[str]:
    path = Path(file_path)
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Cannot read {path}: {e}")
        return None


def get_lines(file_path: PathLike) -> list[str]:
    """Lines of the file, each keeping its line terminator."""
    content = read_file(file_path)
    if content is None:
        return []
    return content.splitlines(keepends=True)


def get_line(file_path: PathLike, line_number: int) -> Optional[str]:
    lines = get_lines(file_path)
    if line_number < 1 or line_number > len(lines):
        return None
    return lines[line_number - 1]


def get_line_range(file_path: PathLike, start_line: int, end_line: int) -> dict[int, str]:
    """Lines ``start_line..end_line`` keyed by number; numbers outside the file are left out."""
    lines = get_lines(file_path)
    return {
        number: lines[number - 1]
        for number in range(max(start_line, 1), end_line + 1)
        if number <= len(lines)
    }


def count_lines(file_path: PathLike) -> int:
    return len(get_lines(file_path))


def get_file_size(file_path: PathLike) -> int:
    path = Path(file_path)
    if not path.is_file():
        return 0
    try:
        return path.stat().st_size
    except OSError:
        return 0


def contains(file_path: PathLike, needle: str) -> bool:
    content = read_file(file_path)
    return content is not None and needle in content


def matches(file_path: PathLike, pattern: str) -> bool:
    """Whether the regular expression ``pattern`` matches anywhere in the file."""
    content = read_file(file_path)
    return content is not None and re.search(pattern, content) is not None


def count_occurrences(file_path: PathLike, needle: str) -> int:
    content = read_file(file_path)
    if content is None or not needle:
        return 0
    return content.count(needle)


def extract_namespace(file_path: PathLike) -> Optional[str]:
    content = read_file(file_path)
    if content is None:
        return None
    match = NAMESPACE_PATTERN.search(content)
    return match.group(1).strip() if match else None


def extract_class_name(file_path: PathLike) -> Optional[str]:
    """First ``class Name`` in the file, by plain text match."""
    content = read_file(file_path)
    if content is None:
        return None
    match = CLASS_PATTERN.search(content)
    return match.group(1) if match else None


def extract_fully_qualified_class_name(file_path: PathLike) -> Optional[str]:
    class_name = extract_class_name(file_path)
    if class_name is None:
        return None
    namespace = extract_namespace(file_path)
    if namespace is None:
        return class_name
    return f"{namespace}\\{class_name}"


def extract_use_statements(file_path: PathLike) -> list[str]:
    content = read_file(file_path)
    if content is None:
        return []
    return [statement.strip() for statement in USE_PATTERN.findall(content)]


def strip_comments(line: str) -> str:
    """Remove a trailing ``//`` or ``#`` comment from a single line."""
    return LINE_COMMENT_PATTERN.sub("", line)


def get_code_snippet(file_path: PathLike, line: int, context_lines: int = 2) -> Optional[str]:
    """Snippet around ``line`` as plain text, one newline-terminated line each."""
    snippet = CodeSnippet.from_file(file_path, line, context_lines)
    if snippet is None:
        return None
    return "".join(f"{text}\n" for text in snippet.lines.values())
