"""Built-in templates for files created by remediation."""

from pathlib import Path, PurePosixPath

from jinja2 import Environment, PackageLoader, select_autoescape

from ..casing import to_kebab
from ..errors import FixApplicationError
from ..models.standards import DEFAULT_STANDARDS, StandardsModel


class ScaffoldRenderer:
    """Renders skeleton files (README, ignore file, env example, manifest)."""

    TEMPLATES = {
        "README.md": "README.md.j2",
        ".gitignore": "gitignore.j2",
        ".env.example": "env.example.j2",
        "package.json": "package.json.j2",
    }

    def __init__(self, project_name: str, standards: StandardsModel = DEFAULT_STANDARDS):
        """Initialize renderer.

        Args:
            project_name: Used as the README title and manifest name
            standards: Supplies the README sections the skeleton must contain
        """
        self.project_name = project_name
        self.standards = standards
        self.env = Environment(
            loader=PackageLoader("consistency", "templates/scaffold"),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def template_for(self, filename: str) -> str:
        """Name of the template used for ``filename``; unknown names get a placeholder."""
        name = PurePosixPath(filename).name
        if name in self.TEMPLATES:
            return self.TEMPLATES[name]
        if name == self.standards.doc_rules.readme_file:
            return self.TEMPLATES["README.md"]
        if name.endswith(".json"):
            return "placeholder.json.j2"
        return "placeholder.j2"

    def render(self, filename: str) -> str:
        template = self.env.get_template(self.template_for(filename))
        return template.render(
            project_name=self.project_name,
            package_name=to_kebab(self.project_name) or "project",
            sections=self.standards.doc_rules.required_readme_sections,
            filename=PurePosixPath(filename).name,
        )

    def create_file(self, path: Path, filename: str) -> Path:
        """Write the rendered skeleton to ``path``; never overwrite.

        Raises:
            FixApplicationError: If the file exists or cannot be written
        """
        content = self.render(filename)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            raise FixApplicationError(f"{filename} already exists") from e
        except OSError as e:
            raise FixApplicationError(f"Cannot create {filename}: {e}") from e
        return path
