"""Issue and location value objects."""

from dataclasses import dataclass, field
from typing import Any, Optional

from analyzers_core.models.enums import Severity
from analyzers_core.models.snippet import CodeSnippet


@dataclass(frozen=True)
class Location:
    """A position in a source file."""

    file: str
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.line is None:
            return self.file
        location = f"{self.file}:{self.line}"
        if self.column is not None:
            location += f":{self.column}"
        return location

    def to_dict(self) -> dict[str, Any]:
        data = {"file": self.file, "line": self.line, "column": self.column}
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Location":
        return cls(file=data["file"], line=data.get("line"), column=data.get("column"))


@dataclass(frozen=True)
class Issue:
    """A single problem reported by an analyzer."""

    message: str
    location: Optional[Location]
    severity: Severity
    recommendation: str
    code: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)
    code_snippet: Optional[CodeSnippet] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize, leaving out fields that are None or empty."""
        data = {
            "message": self.message,
            "location": self.location.to_dict() if self.location else None,
            "severity": self.severity.value,
            "recommendation": self.recommendation,
            "code": self.code,
            "metadata": self.metadata or None,
            "code_snippet": self.code_snippet.to_dict() if self.code_snippet else None,
        }
        return {key: value for key, value in data.items() if value is not None and value != []}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Issue":
        location = data.get("location")
        snippet = data.get("code_snippet")
        if snippet is not None and not isinstance(snippet, dict):
            snippet = {}

        return cls(
            message=data["message"],
            location=Location.from_dict(location) if location else None,
            severity=Severity(data["severity"]),
            recommendation=data["recommendation"],
            code=data.get("code"),
            metadata=data.get("metadata") or {},
            code_snippet=CodeSnippet.from_dict(snippet) if snippet is not None else None,
        )
