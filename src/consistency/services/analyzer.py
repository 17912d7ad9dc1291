"""Project analysis: turns a directory tree into a ProjectSnapshot."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Callable

from ..errors import ConfigParseError, PathNotFoundError
from ..models.snapshot import Dependencies, InvalidConfig, ProjectSnapshot, ProjectType
from ..models.standards import DEFAULT_STANDARDS, StandardsModel
from .tree_walker import walk

logger = logging.getLogger(__name__)

# Files larger than this are listed but their text is not loaded.
MAX_CONTENT_BYTES = 1024 * 1024

FILE_TYPES = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".json": "json",
    ".md": "markdown",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".html": "html",
    ".css": "css",
    ".scss": "scss",
    ".sass": "sass",
    ".less": "less",
    ".py": "python",
    ".sol": "solidity",
    ".cs": "csharp",
}

# Manifest dependency -> project type, checked in this order.
_FRAMEWORK_TYPES: tuple[tuple[str, ProjectType], ...] = (
    ("react-native", "mobile"),
    ("electron", "desktop"),
    ("express", "api"),
    ("react", "web"),
)

_REQUIREMENT_LINE = re.compile(r"^([A-Za-z0-9][A-Za-z0-9._-]*)(\[[^\]]*\])?\s*(.*)$")


def get_file_type(extension: str) -> str:
    return FILE_TYPES.get(extension.lower(), "unknown")


class ProjectAnalyzer:
    """Builds a fresh, read-only snapshot of a project on every call."""

    def __init__(self, standards: StandardsModel = DEFAULT_STANDARDS):
        """Initialize analyzer.

        Args:
            standards: Rules deciding which directories are skipped, which
                config files are parsed, and which file contents are loaded
        """
        self.standards = standards

    def analyze(
        self, root_path: Path | str, should_cancel: Callable[[], bool] | None = None
    ) -> ProjectSnapshot:
        """Analyze the project rooted at ``root_path``.

        Raises:
            PathNotFoundError: If root_path is missing or not a directory
            TraversalCancelled: If should_cancel interrupted the walk
        """
        root = Path(root_path)
        if not root.is_dir():
            raise PathNotFoundError(root_path)

        directories: list[str] = []
        files: list[str] = []
        unreadable: dict[str, str] = {}
        by_extension: dict[str, list[str]] = {}
        by_type: dict[str, list[str]] = {}
        contents: dict[str, str] = {}
        max_depth = 0
        total_size = 0

        content_extensions = {ext.lower() for ext in self.standards.style_rules.source_extensions}
        readme = self.standards.doc_rules.readme_file

        for entry in walk(
            root,
            excluded=self.standards.structure_rules.excluded_directories,
            should_cancel=should_cancel,
        ):
            max_depth = max(max_depth, entry.depth)

            if entry.kind == "unreadable":
                unreadable[entry.relative_path] = entry.error or "unreadable"
                continue
            if entry.kind == "directory":
                directories.append(entry.relative_path)
                continue

            files.append(entry.relative_path)
            total_size += entry.size

            extension = Path(entry.relative_path).suffix
            by_extension.setdefault(extension, []).append(entry.relative_path)
            by_type.setdefault(get_file_type(extension), []).append(entry.relative_path)

            if extension.lower() in content_extensions or entry.relative_path == readme:
                text = self._read_text(root, entry.relative_path, entry.size, unreadable)
                if text is not None:
                    contents[entry.relative_path] = text

        manifest = self._load_manifest(root)
        dependencies = self._analyze_dependencies(root, manifest)

        return ProjectSnapshot(
            root_path=root,
            project_type=self._detect_project_type(root, manifest),
            directories=tuple(directories),
            files=tuple(files),
            max_depth=max_depth,
            total_size=total_size,
            files_by_extension={ext: tuple(paths) for ext, paths in by_extension.items()},
            files_by_type={kind: tuple(paths) for kind, paths in by_type.items()},
            dependencies=dependencies,
            config_files=self._analyze_configuration(root),
            file_contents=contents,
            unreadable=unreadable,
        )

    def _read_text(
        self, root: Path, relative_path: str, size: int, unreadable: dict[str, str]
    ) -> str | None:
        if size > MAX_CONTENT_BYTES:
            logger.debug("Not loading %s (%d bytes)", relative_path, size)
            return None
        try:
            return (root / relative_path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Cannot read %s: %s", relative_path, e)
            unreadable[relative_path] = e.strerror or str(e)
            return None

    def _load_manifest(self, root: Path) -> dict | None:
        manifest_path = root / "package.json"
        if not manifest_path.is_file():
            return None
        try:
            with open(manifest_path, "r", encoding="utf-8") as f:
                manifest = json.load(f)
        except (OSError, json.JSONDecodeError):
            # Reported by the configuration rule when package.json is tracked
            return None
        return manifest if isinstance(manifest, dict) else None

    def _detect_project_type(self, root: Path, manifest: dict | None) -> ProjectType:
        """Infer the project type; the first matching marker wins."""
        if manifest is not None:
            production = manifest.get("dependencies") or {}
            if isinstance(production, dict):
                for package, project_type in _FRAMEWORK_TYPES:
                    if package in production:
                        return project_type
            if manifest.get("main") and "dependencies" not in manifest:
                return "library"

        if (root / "requirements.txt").is_file():
            return "ai-ml"
        if (root / "Assets").is_dir():
            return "game"
        if (root / "contracts").is_dir():
            return "blockchain"
        return "unknown"

    def _analyze_dependencies(
        self, root: Path, manifest: dict | None
    ) -> Dependencies | None:
        if manifest is not None:
            return Dependencies(
                production=_string_map(manifest.get("dependencies")),
                development=_string_map(manifest.get("devDependencies")),
                scripts=_string_map(manifest.get("scripts")),
            )

        requirements = root / "requirements.txt"
        if requirements.is_file():
            try:
                text = requirements.read_text(encoding="utf-8", errors="replace")
            except OSError as e:
                logger.warning("Cannot read requirements.txt: %s", e)
                return None
            return Dependencies(production=parse_requirements(text))

        return None

    def _analyze_configuration(self, root: Path) -> dict[str, Any]:
        """Parse every tracked configuration file present at the root."""
        configs: dict[str, Any] = {}
        for filename in self.standards.config_rules.per_file:
            path = root / filename
            if not path.is_file():
                continue
            try:
                configs[filename] = load_config_file(path)
            except ConfigParseError as e:
                logger.warning("%s", e)
                configs[filename] = InvalidConfig(reason=e.detail)
        return configs


def load_config_file(path: Path) -> Any:
    """Read and parse a JSON configuration file.

    Raises:
        ConfigParseError: If the file cannot be read or is not valid JSON
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path.name, f"{e.msg} (line {e.lineno})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(path.name, str(e)) from e


def parse_requirements(text: str) -> dict[str, str]:
    """Map requirement names to their version specifiers ("" when unpinned)."""
    requirements: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.split("#", 1)[0].strip()
        if not line or line.startswith("-"):
            continue
        match = _REQUIREMENT_LINE.match(line)
        if match:
            requirements[match.group(1)] = match.group(3).split(";", 1)[0].strip()
    return requirements


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): str(item) for key, item in value.items()}
