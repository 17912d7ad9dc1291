"""Issue, recommendation and validation result value types."""

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .snapshot import ProjectSnapshot


class Category(StrEnum):
    """Rule categories, declared in evaluation order."""

    STRUCTURE = "structure"
    NAMING = "naming"
    CODE_STYLE = "code-style"
    DOCUMENTATION = "documentation"
    CONFIGURATION = "configuration"


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


SEVERITY_PRIORITY = {Severity.ERROR: 3, Severity.WARNING: 2, Severity.INFO: 1}


@dataclass(frozen=True)
class Issue:
    """A single deviation from the standards model."""

    category: Category
    severity: Severity
    message: str
    target_path: str | None = None
    suggestion: str | None = None

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "target_path": self.target_path,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class Recommendation:
    """Category-level rollup of issues with a static action checklist."""

    category: Category
    issue_count: int
    dominant_severity: Severity
    priority: int
    suggested_actions: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "category": self.category.value,
            "issue_count": self.issue_count,
            "dominant_severity": self.dominant_severity.value,
            "priority": self.priority,
            "suggested_actions": list(self.suggested_actions),
        }


@dataclass(frozen=True)
class ValidationResult:
    """Everything one validation run produced."""

    snapshot: "ProjectSnapshot"
    issues: tuple[Issue, ...]
    score: int
    recommendations: tuple[Recommendation, ...]

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"Score must be 0-100, got {self.score}")

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)


# Suggestions are plain sentences with a fixed prefix so the remediator can
# apply them without guessing.
CREATE_FILE = "Create file: "
CREATE_DIRECTORY = "Create directory: "
RENAME_TO = "Rename to: "

_SUGGESTION_PATTERN = re.compile(
    r"^(?P<prefix>Create file: |Create directory: |Rename to: )(?P<argument>.+)$"
)


def create_file_suggestion(name: str) -> str:
    return f"{CREATE_FILE}{name}"


def create_directory_suggestion(name: str) -> str:
    return f"{CREATE_DIRECTORY}{name}"


def rename_suggestion(new_name: str) -> str:
    return f"{RENAME_TO}{new_name}"


def parse_suggestion(suggestion: str | None) -> tuple[str, str] | None:
    """Split an actionable suggestion into ``(prefix, argument)``.

    Returns None for suggestions the remediator cannot apply (for example
    ``Add key: compilerOptions to tsconfig.json``).
    """
    if not suggestion:
        return None
    match = _SUGGESTION_PATTERN.match(suggestion)
    if not match:
        return None
    return match.group("prefix"), match.group("argument")
