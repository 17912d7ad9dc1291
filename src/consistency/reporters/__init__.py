"""Report serialization and score badges."""

from .badge import ScoreBadge
from .json_report import ReportEmitter, SerializedReport, format_bytes

__all__ = ["ReportEmitter", "ScoreBadge", "SerializedReport", "format_bytes"]
