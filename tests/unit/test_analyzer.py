"""Tests for project analysis."""

import dataclasses
import json

import pytest

from consistency.errors import ConfigParseError, PathNotFoundError
from consistency.models.snapshot import InvalidConfig
from consistency.services.analyzer import (
    ProjectAnalyzer,
    get_file_type,
    load_config_file,
    parse_requirements,
)


def write_manifest(root, **fields):
    (root / "package.json").write_text(json.dumps({"name": "demo", **fields}))


class TestProjectAnalyzer:
    """Test ProjectAnalyzer snapshots."""

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(PathNotFoundError):
            ProjectAnalyzer().analyze(tmp_path / "nope")

    def test_file_root_raises(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")

        with pytest.raises(PathNotFoundError):
            ProjectAnalyzer().analyze(target)

    def test_empty_project(self, tmp_path):
        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert snapshot.files == ()
        assert snapshot.directories == ()
        assert snapshot.max_depth == 0
        assert snapshot.total_size == 0
        assert snapshot.project_type == "unknown"
        assert snapshot.dependencies is None

    def test_collects_files_and_directories(self, tmp_path):
        (tmp_path / "src" / "components").mkdir(parents=True)
        (tmp_path / "src" / "components" / "button.tsx").write_text("export {};\n")
        (tmp_path / "src" / "index.ts").write_text("x")
        (tmp_path / "README.md").write_text("# Demo\n")

        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert snapshot.directories == ("src", "src/components")
        assert snapshot.files == ("README.md", "src/components/button.tsx", "src/index.ts")
        assert snapshot.max_depth == 2
        assert snapshot.total_size == len("export {};\n") + 1 + len("# Demo\n")
        assert snapshot.files_by_extension[".ts"] == ("src/index.ts",)
        assert snapshot.files_by_type["typescript"] == (
            "src/components/button.tsx",
            "src/index.ts",
        )

    def test_loads_source_and_readme_contents_only(self, tmp_path):
        (tmp_path / "app.js").write_text("const a = 1;\n")
        (tmp_path / "README.md").write_text("# Demo\n")
        (tmp_path / "notes.txt").write_text("ignored")

        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert snapshot.file_contents["app.js"] == "const a = 1;\n"
        assert snapshot.file_contents["README.md"] == "# Demo\n"
        assert "notes.txt" not in snapshot.file_contents

    def test_excluded_directories_are_skipped(self, tmp_path):
        (tmp_path / "node_modules" / "lib").mkdir(parents=True)
        (tmp_path / "node_modules" / "lib" / "index.js").write_text("")
        (tmp_path / ".git").mkdir()

        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert snapshot.files == ()
        assert snapshot.directories == ()

    def test_snapshot_is_immutable(self, tmp_path):
        snapshot = ProjectAnalyzer().analyze(tmp_path)

        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.files = ("x",)
        with pytest.raises(TypeError):
            snapshot.config_files["x"] = {}

    def test_invalid_config_is_recorded(self, tmp_path):
        (tmp_path / "tsconfig.json").write_text("{not json")

        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert isinstance(snapshot.config_files["tsconfig.json"], InvalidConfig)

    def test_valid_config_is_parsed(self, tmp_path):
        (tmp_path / ".eslintrc.json").write_text('{"rules": {}}')

        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert snapshot.config_files[".eslintrc.json"] == {"rules": {}}

    def test_manifest_dependencies(self, tmp_path):
        write_manifest(
            tmp_path,
            dependencies={"express": "^4.18.0"},
            devDependencies={"jest": "^29.0.0"},
            scripts={"test": "jest"},
        )

        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert snapshot.dependencies.production == {"express": "^4.18.0"}
        assert snapshot.dependencies.development == {"jest": "^29.0.0"}
        assert snapshot.dependencies.scripts == {"test": "jest"}

    def test_requirements_dependencies(self, tmp_path):
        (tmp_path / "requirements.txt").write_text("numpy==1.26\ntorch\n")

        snapshot = ProjectAnalyzer().analyze(tmp_path)

        assert snapshot.dependencies.production == {"numpy": "==1.26", "torch": ""}


class TestProjectTypeDetection:
    """Test project type markers."""

    @pytest.mark.parametrize(
        "dependencies,expected",
        [
            ({"react": "18", "react-native": "0.72"}, "mobile"),
            ({"electron": "27"}, "desktop"),
            ({"express": "4"}, "api"),
            ({"react": "18"}, "web"),
        ],
    )
    def test_framework_dependencies(self, tmp_path, dependencies, expected):
        write_manifest(tmp_path, dependencies=dependencies)

        assert ProjectAnalyzer().analyze(tmp_path).project_type == expected

    def test_library(self, tmp_path):
        write_manifest(tmp_path, main="index.js")

        assert ProjectAnalyzer().analyze(tmp_path).project_type == "library"

    def test_empty_dependencies_block_is_not_a_library(self, tmp_path):
        write_manifest(tmp_path, main="index.js", dependencies={})

        assert ProjectAnalyzer().analyze(tmp_path).project_type == "unknown"

    def test_ai_ml(self, tmp_path):
        (tmp_path / "requirements.txt").write_text("torch\n")

        assert ProjectAnalyzer().analyze(tmp_path).project_type == "ai-ml"

    def test_game(self, tmp_path):
        (tmp_path / "Assets").mkdir()

        assert ProjectAnalyzer().analyze(tmp_path).project_type == "game"

    def test_blockchain(self, tmp_path):
        (tmp_path / "contracts").mkdir()

        assert ProjectAnalyzer().analyze(tmp_path).project_type == "blockchain"

    def test_invalid_manifest_is_unknown(self, tmp_path):
        (tmp_path / "package.json").write_text("{")

        assert ProjectAnalyzer().analyze(tmp_path).project_type == "unknown"


class TestHelpers:
    """Test module-level helpers."""

    def test_get_file_type(self):
        assert get_file_type(".TS") == "typescript"
        assert get_file_type(".xyz") == "unknown"

    def test_parse_requirements(self):
        text = (
            "# pinned\n"
            "requests>=2.31\n"
            "flask\n"
            "-r dev.txt\n"
            "uvicorn[standard]==0.23 ; python_version >= '3.8'\n"
        )

        assert parse_requirements(text) == {
            "requests": ">=2.31",
            "flask": "",
            "uvicorn": "==0.23",
        }

    def test_load_config_file_error(self, tmp_path):
        path = tmp_path / "tsconfig.json"
        path.write_text('{"a": }')

        with pytest.raises(ConfigParseError) as exc_info:
            load_config_file(path)

        assert exc_info.value.filename == "tsconfig.json"
        assert "line 1" in exc_info.value.detail
