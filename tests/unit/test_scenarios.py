"""End-to-end validation scenarios over real project trees."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from consistency.cli.main import cli
from consistency.models.issue import Category, Severity
from consistency.models.standards import DEFAULT_STANDARDS, StandardsModel
from consistency.services.scaffold import ScaffoldRenderer
from consistency.services.validator import ConsistencyValidator

FULL_README = """# Demo

## Overview
## Installation
## Usage
## API
## Contributing
## License
"""


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)


def minimal_standards(required_files):
    return StandardsModel.from_yaml_dict(
        {
            "structure_rules": {
                "required_directories": {},
                "required_files": required_files,
                "recommended_files": [],
            },
            "doc_rules": {"required_files": ["README.md"]},
        }
    )


class TestValidationScenarios:
    """Validation results for known project layouts."""

    def test_missing_files_bad_name_and_bad_tsconfig(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        (project / "MyComponent.ts").write_text("export const value = 1;\n")
        (project / "tsconfig.json").write_text("{}")

        result = ConsistencyValidator(minimal_standards(["README.md", ".gitignore"])).validate(
            project
        )

        assert [(i.category, i.severity) for i in result.issues] == [
            (Category.STRUCTURE, Severity.ERROR),
            (Category.STRUCTURE, Severity.ERROR),
            (Category.NAMING, Severity.WARNING),
            (Category.CONFIGURATION, Severity.ERROR),
        ]
        assert result.issues[2].suggestion == "Rename to: my-component.ts"
        assert result.issues[3].message == "tsconfig.json missing compilerOptions"
        assert result.score == 65

    def test_clean_project_scores_100(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        (project / "README.md").write_text(FULL_README)
        (project / "package.json").write_text(json.dumps({"name": "project"}))

        result = ConsistencyValidator(minimal_standards(["README.md", "package.json"])).validate(
            project
        )

        assert result.issues == ()
        assert result.score == 100
        assert result.recommendations == ()

    def test_missing_recommended_files_do_not_lower_score(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        for directory in ("src", "tests", "docs"):
            (project / directory).mkdir()
        (project / "README.md").write_text(FULL_README)
        (project / ".gitignore").write_text("node_modules/\n")
        (project / "package.json").write_text(json.dumps({"name": "project"}))
        (project / "API.md").write_text("# API\n")
        (project / "CHANGELOG.md").write_text("# Changelog\n")

        result = ConsistencyValidator().validate(project)

        assert result.issues == ()
        assert result.score == 100

    def test_repeated_validation_is_identical(self, tmp_path):
        project = tmp_path / "project"
        (project / "Src" / "Widgets").mkdir(parents=True)
        (project / "Src" / "Widgets" / "BigButton.jsx").write_text('\tconst a = "x"\n')
        (project / ".eslintrc.json").write_text("{")

        validator = ConsistencyValidator()
        first = validator.validate(project)
        second = validator.validate(project)

        assert first.issues == second.issues
        assert first.score == second.score
        assert first.recommendations == second.recommendations


class TestCreateMissingScenario:
    """fix --create-missing writes the built-in README template."""

    def test_creates_readme_matching_template(self, tmp_path):
        project = tmp_path / "project"
        project.mkdir()
        runner = CliRunner()

        result = runner.invoke(cli, ["fix", str(project), "--create-missing"])

        assert result.exit_code == 0
        assert "Created README.md" in result.output
        expected = ScaffoldRenderer("project", DEFAULT_STANDARDS).render("README.md")
        assert (project / "README.md").read_text() == expected

        revalidated = ConsistencyValidator().validate(project)
        messages = [issue.message for issue in revalidated.issues]
        assert "Missing required file: README.md" not in messages
        assert not any("README.md missing section" in message for message in messages)
