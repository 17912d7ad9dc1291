"""Structured JSON report plus a short human-readable summary."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Sequence

from ..models.fix import AppliedFix, FixSummary
from ..models.issue import Severity, ValidationResult
from ..models.standards import DEFAULT_STANDARDS, StandardsModel
from ..rules.structure import missing_recommended_files

TOP_RECOMMENDATIONS = 3


def format_bytes(size: int) -> str:
    """Humanize a byte count: ``0 Bytes``, ``512 Bytes``, ``1.5 KB``, ``2 MB``."""
    units = ["Bytes", "KB", "MB", "GB", "TB"]
    if size <= 0:
        return "0 Bytes"
    exponent = 0
    while exponent < len(units) - 1 and size >= 1024 ** (exponent + 1):
        exponent += 1
    value = round(size / 1024**exponent, 2)
    if value == int(value):
        value = int(value)
    return f"{value} {units[exponent]}"


@dataclass(frozen=True)
class SerializedReport:
    """Report payload with fixed field names and nesting."""

    data: dict
    summary: str

    def to_json(self) -> str:
        return json.dumps(self.data, indent=2, ensure_ascii=False)

    def write(self, output_path: Path) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.to_json())
            f.write("\n")
        return output_path


class ReportEmitter:
    """Serializes a validation result (and optional fixes)."""

    def __init__(self, standards: StandardsModel = DEFAULT_STANDARDS):
        self.standards = standards

    def emit(
        self,
        result: ValidationResult,
        fixes: Sequence[AppliedFix] | None = None,
        generated_at: datetime | None = None,
    ) -> SerializedReport:
        snapshot = result.snapshot
        generated_at = generated_at or datetime.now(timezone.utc)
        fixes = list(fixes or [])

        data = {
            "project": {
                "name": snapshot.name,
                "path": str(snapshot.root_path),
                "type": snapshot.project_type,
                "score": result.score,
            },
            "analysis": {
                "files": len(snapshot.files),
                "directories": len(snapshot.directories),
                "size": format_bytes(snapshot.total_size),
                "dependencies": (
                    snapshot.dependencies.to_dict() if snapshot.dependencies else None
                ),
                "missing_recommended_files": missing_recommended_files(
                    snapshot, self.standards
                ),
            },
            "issues": [issue.to_dict() for issue in result.issues],
            "recommendations": [r.to_dict() for r in result.recommendations],
            "fixes": [fix.to_dict() for fix in fixes],
            "generated": generated_at.isoformat(),
        }
        return SerializedReport(data=data, summary=self.summarize(result, fixes))

    def summarize(
        self, result: ValidationResult, fixes: Sequence[AppliedFix] = ()
    ) -> str:
        snapshot = result.snapshot
        lines = [
            "Consistency Report",
            "=" * 50,
            f"Project: {snapshot.name} ({snapshot.project_type})",
            f"Score: {result.score}/100",
            f"Files: {len(snapshot.files)}  Directories: {len(snapshot.directories)}  "
            f"Size: {format_bytes(snapshot.total_size)}",
            "",
            f"Issues: {len(result.issues)} "
            f"({result.count(Severity.ERROR)} errors, "
            f"{result.count(Severity.WARNING)} warnings, "
            f"{result.count(Severity.INFO)} info)",
        ]

        missing = missing_recommended_files(snapshot, self.standards)
        if missing:
            lines.append(f"Recommended files missing: {', '.join(missing)}")

        if result.recommendations:
            lines.append("")
            lines.append("Top recommendations:")
            for recommendation in result.recommendations[:TOP_RECOMMENDATIONS]:
                lines.append(
                    f"  [{recommendation.dominant_severity.value}] "
                    f"{recommendation.category.value}: "
                    f"{recommendation.issue_count} issue(s) - "
                    f"{recommendation.suggested_actions[0]}"
                )
        else:
            lines.append("")
            lines.append("No issues found.")

        if fixes:
            summary = FixSummary.from_fixes(list(fixes))
            lines.append("")
            lines.append(
                f"Fixes: {summary.succeeded} applied, {summary.failed} failed"
            )

        return "\n".join(lines)
