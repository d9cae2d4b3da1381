"""Tests for issue, location and analyzer metadata value objects."""

import pytest

from analyzers_core.models import AnalyzerMetadata, Category, CodeSnippet, Issue, Location, Severity


class TestLocation:
    """Test location rendering and serialization."""

    def test_str_with_line(self):
        assert str(Location("app/User.php", 10)) == "app/User.php:10"

    def test_str_with_column(self):
        assert str(Location("app/User.php", 10, 5)) == "app/User.php:10:5"

    def test_str_without_line(self):
        assert str(Location("app/User.php")) == "app/User.php"

    def test_to_dict_drops_none(self):
        assert Location("app/User.php", 10).to_dict() == {"file": "app/User.php", "line": 10}

    def test_from_dict(self):
        location = Location.from_dict({"file": "a.php", "line": 3, "column": 7})

        assert location == Location("a.php", 3, 7)


class TestIssue:
    """Test issue serialization."""

    def test_to_dict_omits_empty_fields(self):
        issue = Issue(
            message="Dangerous call",
            location=Location("a.php", 4),
            severity=Severity.HIGH,
            recommendation="Remove it",
        )

        assert issue.to_dict() == {
            "message": "Dangerous call",
            "location": {"file": "a.php", "line": 4},
            "severity": "high",
            "recommendation": "Remove it",
        }

    def test_to_dict_without_location(self):
        issue = Issue("Config missing", None, Severity.LOW, "Add it")

        assert "location" not in issue.to_dict()

    def test_to_dict_full(self):
        snippet = CodeSnippet("a.php", 2, {1: "<?php", 2: "eval($x);"}, 1)
        issue = Issue(
            message="eval",
            location=Location("a.php", 2),
            severity=Severity.CRITICAL,
            recommendation="Remove eval",
            code="eval($x);",
            metadata={"function": "eval"},
            code_snippet=snippet,
        )

        data = issue.to_dict()
        assert data["code"] == "eval($x);"
        assert data["metadata"] == {"function": "eval"}
        assert data["code_snippet"]["lines"] == {1: "<?php", 2: "eval($x);"}

    def test_from_dict(self):
        issue = Issue.from_dict(
            {
                "message": "eval",
                "location": {"file": "a.php", "line": 2},
                "severity": "critical",
                "recommendation": "Remove eval",
                "code_snippet": {"file": "a.php", "target_line": 2, "lines": {"2": "eval($x);"}},
            }
        )

        assert issue.severity is Severity.CRITICAL
        assert issue.location == Location("a.php", 2)
        assert issue.metadata == {}
        assert issue.code is None
        assert issue.code_snippet.lines == {2: "eval($x);"}
        assert issue.code_snippet.context_lines == 5

    def test_from_dict_invalid_severity(self):
        with pytest.raises(ValueError):
            Issue.from_dict({"message": "m", "severity": "urgent", "recommendation": "r"})


class TestAnalyzerMetadata:
    """Test analyzer metadata serialization."""

    def test_to_dict_drops_empty(self):
        metadata = AnalyzerMetadata("sql", "SQL", "Finds SQL", Category.SECURITY, Severity.CRITICAL)

        assert metadata.to_dict() == {
            "id": "sql",
            "name": "SQL",
            "description": "Finds SQL",
            "category": "security",
            "severity": "critical",
        }

    def test_from_dict(self):
        metadata = AnalyzerMetadata.from_dict(
            {
                "id": "sql",
                "name": "SQL",
                "description": "Finds SQL",
                "category": "performance",
                "severity": "low",
                "tags": ["db"],
                "docs_url": "https://example.com/sql",
            }
        )

        assert metadata.category is Category.PERFORMANCE
        assert metadata.severity is Severity.LOW
        assert metadata.tags == ["db"]
        assert metadata.docs_url == "https://example.com/sql"
