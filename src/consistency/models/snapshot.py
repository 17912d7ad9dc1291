"""Immutable, point-in-time description of a project tree."""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Literal, Mapping

ProjectType = Literal[
    "web",
    "api",
    "mobile",
    "desktop",
    "library",
    "ai-ml",
    "game",
    "blockchain",
    "unknown",
]


@dataclass(frozen=True)
class InvalidConfig:
    """Marker stored in place of a configuration file that failed to parse."""

    reason: str


@dataclass(frozen=True)
class Dependencies:
    """Dependencies declared by the project manifest."""

    production: Mapping[str, str] = field(default_factory=dict)
    development: Mapping[str, str] = field(default_factory=dict)
    scripts: Mapping[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "production": dict(self.production),
            "development": dict(self.development),
            "scripts": dict(self.scripts),
        }


@dataclass(frozen=True)
class ProjectSnapshot:
    """Structural snapshot produced by one ``ProjectAnalyzer.analyze`` call.

    Paths are POSIX-style and relative to ``root_path``. ``directories`` and
    ``files`` keep traversal order (depth-first, lexical within a directory).
    Mappings are wrapped read-only after construction.
    """

    root_path: Path
    project_type: ProjectType = "unknown"
    directories: tuple[str, ...] = ()
    files: tuple[str, ...] = ()
    max_depth: int = 0
    total_size: int = 0
    files_by_extension: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    files_by_type: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    dependencies: Dependencies | None = None
    config_files: Mapping[str, Any] = field(default_factory=dict)
    file_contents: Mapping[str, str] = field(default_factory=dict)
    unreadable: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        for name in (
            "files_by_extension",
            "files_by_type",
            "config_files",
            "file_contents",
            "unreadable",
        ):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))

    @property
    def name(self) -> str:
        return self.root_path.name

    def has_file(self, relative_path: str) -> bool:
        return relative_path in self.files

    def has_directory(self, relative_path: str) -> bool:
        return relative_path in self.directories
