"""Remediation options and per-fix outcome records."""

from dataclasses import dataclass, field
from typing import Literal

FixKind = Literal["rename", "create-file", "create-directory", "format"]


@dataclass(frozen=True)
class RemediationOptions:
    """Which fix families to run. Everything is off unless asked for."""

    auto_rename_naming: bool = False
    scaffold_missing_files: bool = False
    invoke_formatter: bool = False

    @property
    def any_enabled(self) -> bool:
        return self.auto_rename_naming or self.scaffold_missing_files or self.invoke_formatter


@dataclass(frozen=True)
class AppliedFix:
    """Outcome of one attempted fix; failures are recorded, never raised."""

    kind: FixKind
    target: str
    success: bool
    message: str
    error: str | None = None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "target": self.target,
            "success": self.success,
            "message": self.message,
            "error": self.error,
        }


@dataclass
class FixSummary:
    """Totals over a batch of applied fixes."""

    total: int = 0
    succeeded: int = 0
    failed: int = 0
    by_kind: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_fixes(cls, fixes: list[AppliedFix]) -> "FixSummary":
        summary = cls()
        for fix in fixes:
            summary.total += 1
            if fix.success:
                summary.succeeded += 1
            else:
                summary.failed += 1
            summary.by_kind[fix.kind] = summary.by_kind.get(fix.kind, 0) + 1
        return summary

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "by_kind": dict(self.by_kind),
        }
