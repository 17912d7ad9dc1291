"""Tests for the standards model and standards document loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from consistency.config import (
    dump_standards,
    find_standards_file,
    load_standards,
    user_standards_path,
)
from consistency.errors import StandardsError
from consistency.models.standards import DEFAULT_STANDARDS, ConfigFileRule, StandardsModel


@pytest.fixture
def fake_home(monkeypatch, tmp_path):
    """Point Path.home() at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


class TestStandardsModel:
    """Test StandardsModel parsing and defaults."""

    def test_defaults(self):
        model = StandardsModel()

        assert model.naming_rules.file_casing == "kebab"
        assert model.structure_rules.required_files == ("README.md", ".gitignore", "package.json")
        assert model.structure_rules.max_depth == 5
        assert model.style_rules.indent_width == 2
        assert model.style_rules.quote_style == "single"
        assert model.doc_rules.required_readme_sections[0] == "Overview"
        assert model.config_rules.per_file["tsconfig.json"] == ConfigFileRule(
            required_keys=("compilerOptions",), severity="error"
        )

    def test_empty_document_uses_defaults(self):
        assert StandardsModel.from_yaml_dict(None) == DEFAULT_STANDARDS
        assert StandardsModel.from_yaml_dict({}) == DEFAULT_STANDARDS

    def test_camel_case_keys(self):
        model = StandardsModel.from_yaml_dict(
            {
                "namingRules": {"fileCasing": "PascalCase"},
                "structureRules": {"maxDepth": 3},
            }
        )

        assert model.naming_rules.file_casing == "pascal"
        assert model.structure_rules.max_depth == 3

    @pytest.mark.parametrize(
        "spelling,expected",
        [
            ("kebab-case", "kebab"),
            ("camelCase", "camel"),
            ("snake_case", "snake"),
            ("UPPER_SNAKE_CASE", "screaming-snake"),
            ("SCREAMING_SNAKE", "screaming-snake"),
            ("pascal", "pascal"),
        ],
    )
    def test_casing_spellings(self, spelling, expected):
        model = StandardsModel.from_yaml_dict({"naming_rules": {"directory_casing": spelling}})

        assert model.naming_rules.directory_casing == expected

    def test_unknown_casing_rejected(self):
        with pytest.raises(ValidationError):
            StandardsModel.from_yaml_dict({"naming_rules": {"file_casing": "sarcastic"}})

    def test_unknown_keys_rejected(self):
        with pytest.raises(ValidationError):
            StandardsModel.from_yaml_dict({"lint_rules": {}})

    def test_negative_depth_rejected(self):
        with pytest.raises(ValidationError):
            StandardsModel.from_yaml_dict({"structure_rules": {"max_depth": -1}})

    def test_non_mapping_rejected(self):
        with pytest.raises(ValidationError):
            StandardsModel.from_yaml_dict(["not", "a", "mapping"])

    def test_duplicates_collapsed_in_order(self):
        model = StandardsModel.from_yaml_dict(
            {"structure_rules": {"required_files": ["README.md", "LICENSE", "README.md"]}}
        )

        assert model.structure_rules.required_files == ("README.md", "LICENSE")

    def test_model_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_STANDARDS.structure_rules.max_depth = 10

    def test_dump_reloads_to_same_model(self):
        assert StandardsModel.from_yaml_dict(DEFAULT_STANDARDS.to_yaml_dict()) == DEFAULT_STANDARDS


class TestFindStandardsFile:
    """Test standards discovery order."""

    def test_nothing_found(self, tmp_path, fake_home):
        assert find_standards_file(tmp_path) is None

    def test_explicit_takes_precedence(self, tmp_path, fake_home):
        (tmp_path / ".consistency.yaml").write_text("{}")
        explicit = tmp_path / "team.yaml"
        explicit.write_text("{}")

        assert find_standards_file(tmp_path, explicit) == explicit

    def test_missing_explicit_raises(self, tmp_path, fake_home):
        with pytest.raises(StandardsError, match="not found"):
            find_standards_file(tmp_path, tmp_path / "missing.yaml")

    def test_yaml_before_yml_before_json(self, tmp_path, fake_home):
        (tmp_path / ".consistency.json").write_text("{}")
        assert find_standards_file(tmp_path) == tmp_path / ".consistency.json"

        (tmp_path / ".consistency.yml").write_text("{}")
        assert find_standards_file(tmp_path) == tmp_path / ".consistency.yml"

        (tmp_path / ".consistency.yaml").write_text("{}")
        assert find_standards_file(tmp_path) == tmp_path / ".consistency.yaml"

    def test_user_level_fallback(self, tmp_path, fake_home):
        user_file = user_standards_path()
        user_file.parent.mkdir(parents=True)
        user_file.write_text("{}")

        assert user_file == fake_home / ".config" / "consistency" / "standards.yaml"
        assert find_standards_file(tmp_path) == user_file

    def test_repo_level_beats_user_level(self, tmp_path, fake_home):
        user_file = user_standards_path()
        user_file.parent.mkdir(parents=True)
        user_file.write_text("{}")
        (tmp_path / ".consistency.yaml").write_text("{}")

        assert find_standards_file(tmp_path) == tmp_path / ".consistency.yaml"


class TestLoadStandards:
    """Test load_standards."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / ".consistency.yaml"
        path.write_text("naming_rules:\n  file_casing: snake_case\n")

        assert load_standards(path).naming_rules.file_casing == "snake"

    def test_load_json(self, tmp_path):
        path = tmp_path / ".consistency.json"
        path.write_text('{"styleRules": {"indentWidth": 4}}')

        assert load_standards(path).style_rules.indent_width == 4

    def test_empty_file(self, tmp_path):
        path = tmp_path / ".consistency.yaml"
        path.write_text("")

        assert load_standards(path) == DEFAULT_STANDARDS

    def test_yaml_syntax_error(self, tmp_path):
        path = tmp_path / ".consistency.yaml"
        path.write_text("naming_rules: [unclosed\n")

        with pytest.raises(StandardsError, match="YAML syntax error"):
            load_standards(path)

    def test_schema_error_names_field(self, tmp_path):
        path = tmp_path / ".consistency.yaml"
        path.write_text("style_rules:\n  indent_width: 0\n")

        with pytest.raises(StandardsError) as exc_info:
            load_standards(path)

        assert "indent_width" in str(exc_info.value) or "indentWidth" in str(exc_info.value)
        assert "greater than 0" in str(exc_info.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(StandardsError, match="Cannot read"):
            load_standards(tmp_path / "missing.yaml")

    def test_dump_standards_is_loadable(self, tmp_path):
        path = tmp_path / "out.yaml"
        path.write_text(dump_standards(DEFAULT_STANDARDS))

        assert load_standards(path) == DEFAULT_STANDARDS
