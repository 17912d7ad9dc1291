"""Data models for standards, snapshots, issues and fixes."""

from .fix import AppliedFix, FixSummary, RemediationOptions
from .issue import Category, Issue, Recommendation, Severity, ValidationResult
from .snapshot import Dependencies, InvalidConfig, ProjectSnapshot
from .standards import DEFAULT_STANDARDS, StandardsModel

__all__ = [
    "AppliedFix",
    "Category",
    "DEFAULT_STANDARDS",
    "Dependencies",
    "FixSummary",
    "InvalidConfig",
    "Issue",
    "ProjectSnapshot",
    "Recommendation",
    "RemediationOptions",
    "Severity",
    "StandardsModel",
    "ValidationResult",
]
