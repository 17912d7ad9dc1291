"""Exception hierarchy for the consistency engine."""

from pathlib import Path


class ConsistencyError(Exception):
    """Base exception for consistency validation and remediation."""


class PathNotFoundError(ConsistencyError):
    """Raised when the project root does not exist or is not a directory."""

    def __init__(self, path: Path | str) -> None:
        super().__init__(f"Project path '{path}' does not exist or is not a directory")
        self.path = path


class UnreadableEntryError(ConsistencyError):
    """Raised when a file or directory cannot be stat'ed or read mid-walk."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigParseError(ConsistencyError):
    """Raised when a tracked configuration file is not valid JSON."""

    def __init__(self, filename: str, detail: str) -> None:
        super().__init__(f"Invalid JSON in {filename}: {detail}")
        self.filename = filename
        self.detail = detail


class FixApplicationError(ConsistencyError):
    """Raised when a single remediation action cannot be applied."""


class FormatterInvocationError(ConsistencyError):
    """Raised when the external formatter is missing or exits non-zero."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"Formatter '{command}' failed: {reason}")
        self.command = command
        self.reason = reason


class TraversalCancelled(ConsistencyError):
    """Raised when a caller interrupts a directory walk."""


class StandardsError(ConsistencyError):
    """Raised when a standards document cannot be loaded or validated."""
