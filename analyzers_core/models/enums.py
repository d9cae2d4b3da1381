"""Severity, category and status enums shared by analyzers and reports."""

from enum import Enum


class Severity(str, Enum):
    """Issue severity levels."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"

    @property
    def level(self) -> int:
        """Numeric level, higher is more severe."""
        return _SEVERITY_LEVELS[self]

    @property
    def color(self) -> str:
        return _SEVERITY_COLORS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _SEVERITY_DESCRIPTIONS[self]


_SEVERITY_LEVELS = {
    Severity.CRITICAL: 5,
    Severity.HIGH: 4,
    Severity.MEDIUM: 3,
    Severity.LOW: 2,
    Severity.INFO: 1,
}

_SEVERITY_COLORS = {
    Severity.CRITICAL: "red",
    Severity.HIGH: "orange",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
    Severity.INFO: "gray",
}

_SEVERITY_DESCRIPTIONS = {
    Severity.CRITICAL: "Critical security or stability issue requiring immediate attention",
    Severity.HIGH: "High priority issue that should be addressed soon",
    Severity.MEDIUM: "Medium priority issue that should be considered",
    Severity.LOW: "Low priority issue or minor improvement",
    Severity.INFO: "Informational message or suggestion",
}


class Category(str, Enum):
    """Analyzer categories."""

    SECURITY = "security"
    PERFORMANCE = "performance"
    CODE_QUALITY = "code_quality"
    BEST_PRACTICES = "best_practices"
    RELIABILITY = "reliability"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()

    @property
    def icon(self) -> str:
        return _CATEGORY_ICONS[self]

    @property
    def description(self) -> str:
        return _CATEGORY_DESCRIPTIONS[self]


_CATEGORY_ICONS = {
    Category.SECURITY: "🔒",
    Category.PERFORMANCE: "⚡",
    Category.CODE_QUALITY: "📊",
    Category.BEST_PRACTICES: "✨",
    Category.RELIABILITY: "🛡️",
}

_CATEGORY_DESCRIPTIONS = {
    Category.SECURITY: "Security vulnerabilities and risks",
    Category.PERFORMANCE: "Performance issues and optimizations",
    Category.CODE_QUALITY: "Code quality and maintainability",
    Category.BEST_PRACTICES: "Best practices and conventions",
    Category.RELIABILITY: "Reliability and stability issues",
}


class Status(str, Enum):
    """Outcome of a single analyzer run."""

    PASSED = "passed"
    FAILED = "failed"
    WARNING = "warning"
    SKIPPED = "skipped"
    ERROR = "error"

    @property
    def is_success(self) -> bool:
        return self in (Status.PASSED, Status.SKIPPED)

    @property
    def emoji(self) -> str:
        return _STATUS_EMOJI[self]

    @property
    def color(self) -> str:
        return _STATUS_COLORS[self]


_STATUS_EMOJI = {
    Status.PASSED: "✓",
    Status.FAILED: "✗",
    Status.WARNING: "⚠",
    Status.SKIPPED: "⊝",
    Status.ERROR: "⚡",
}

_STATUS_COLORS = {
    Status.PASSED: "green",
    Status.FAILED: "red",
    Status.WARNING: "yellow",
    Status.SKIPPED: "gray",
    Status.ERROR: "red",
}
