"""Descriptive metadata attached to every analyzer."""

from dataclasses import dataclass, field
from typing import Any, Optional

from analyzers_core.models.enums import Category, Severity


@dataclass(frozen=True)
class AnalyzerMetadata:
    id: str
    name: str
    description: str
    category: Category
    severity: Severity
    tags: list[str] = field(default_factory=list)
    docs_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category.value,
            "severity": self.severity.value,
            "tags": list(self.tags) or None,
            "docs_url": self.docs_url,
        }
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalyzerMetadata":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            category=Category(data["category"]),
            severity=Severity(data["severity"]),
            tags=list(data.get("tags") or []),
            docs_url=data.get("docs_url"),
        )
