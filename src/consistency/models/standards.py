"""Declarative standards model the rule engine validates against."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

Casing = Literal["kebab", "camel", "pascal", "snake", "screaming-snake"]
Severity = Literal["error", "warning", "info"]

_CASING_ALIASES = {
    "upper-snake": "screaming-snake",
    "constant": "screaming-snake",
}


def _normalize_casing(value: Any) -> Any:
    """Accept spellings like ``kebab-case``, ``PascalCase`` or ``UPPER_SNAKE_CASE``."""
    if not isinstance(value, str):
        return value
    normalized = value.strip().lower().replace("_", "-")
    if normalized.endswith("-case"):
        normalized = normalized[: -len("-case")]
    elif normalized.endswith("case") and normalized != "case":
        normalized = normalized[: -len("case")]
    return _CASING_ALIASES.get(normalized, normalized)


def _dedupe(values: Any) -> Any:
    """Collapse duplicates while keeping declaration order."""
    if isinstance(values, (list, tuple, set, frozenset)):
        seen: dict[str, None] = {}
        for item in values:
            seen.setdefault(item, None)
        return tuple(seen)
    return values


class _Rules(BaseModel):
    """Shared config: immutable, strict keys, camelCase or snake_case input."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NamingRules(_Rules):
    """Casing conventions for names on disk and in code."""

    file_casing: Casing = "kebab"
    directory_casing: Casing = "kebab"
    variable_casing: Casing = "camel"
    constant_casing: Casing = "screaming-snake"
    exempt_names: tuple[str, ...] = (
        "README",
        "LICENSE",
        "CHANGELOG",
        "CONTRIBUTING",
        "CODE_OF_CONDUCT",
        "SECURITY",
        "AUTHORS",
        "NOTICE",
        "API",
        "Makefile",
        "Dockerfile",
        "Procfile",
        "Gemfile",
        "Jenkinsfile",
        "Vagrantfile",
        "__init__",
        "__main__",
    )

    @field_validator(
        "file_casing",
        "directory_casing",
        "variable_casing",
        "constant_casing",
        mode="before",
    )
    @classmethod
    def normalize_casing(cls, value: Any) -> Any:
        return _normalize_casing(value)

    @field_validator("exempt_names", mode="before")
    @classmethod
    def dedupe_names(cls, value: Any) -> Any:
        return _dedupe(value)


class StructureRules(_Rules):
    """Required layout of the project tree."""

    required_directories: dict[str, str] = Field(
        default_factory=lambda: {
            "src": "source code",
            "tests": "test files",
            "docs": "documentation",
        }
    )
    required_files: tuple[str, ...] = ("README.md", ".gitignore", "package.json")
    recommended_files: tuple[str, ...] = (".env.example", "LICENSE", "CHANGELOG.md")
    max_depth: int = Field(default=5, ge=0)
    excluded_directories: tuple[str, ...] = (
        ".git",
        ".hg",
        ".svn",
        "node_modules",
        "bower_components",
        "__pycache__",
        ".venv",
        "venv",
        ".tox",
        ".mypy_cache",
        ".pytest_cache",
    )

    @field_validator(
        "required_files", "recommended_files", "excluded_directories", mode="before"
    )
    @classmethod
    def dedupe_files(cls, value: Any) -> Any:
        return _dedupe(value)


class StyleRules(_Rules):
    """Shallow textual code-style conventions."""

    indent_width: int = Field(default=2, gt=0)
    quote_style: Literal["single", "double"] = "single"
    require_trailing_comma: bool = True
    source_extensions: tuple[str, ...] = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx")

    @field_validator("source_extensions", mode="before")
    @classmethod
    def dedupe_extensions(cls, value: Any) -> Any:
        return _dedupe(value)


class DocRules(_Rules):
    """Documentation files and README sections."""

    required_files: tuple[str, ...] = ("README.md", "API.md", "CHANGELOG.md")
    required_readme_sections: tuple[str, ...] = (
        "Overview",
        "Installation",
        "Usage",
        "API",
        "Contributing",
        "License",
    )
    readme_file: str = "README.md"

    @field_validator("required_files", "required_readme_sections", mode="before")
    @classmethod
    def dedupe_entries(cls, value: Any) -> Any:
        return _dedupe(value)


class ConfigFileRule(_Rules):
    """Required top-level keys of one JSON configuration file."""

    required_keys: tuple[str, ...] = ()
    severity: Severity = "warning"

    @field_validator("required_keys", mode="before")
    @classmethod
    def dedupe_keys(cls, value: Any) -> Any:
        return _dedupe(value)


class ConfigRules(_Rules):
    """Tracked configuration files and their required keys."""

    per_file: dict[str, ConfigFileRule] = Field(
        default_factory=lambda: {
            "tsconfig.json": ConfigFileRule(
                required_keys=("compilerOptions",), severity="error"
            ),
            ".eslintrc.json": ConfigFileRule(required_keys=("rules",)),
            "package.json": ConfigFileRule(required_keys=("name",)),
        }
    )

    @field_validator("per_file", mode="before")
    @classmethod
    def accept_key_lists(cls, value: Any) -> Any:
        """Allow ``filename: [key, ...]`` as shorthand for a warning-level rule."""
        if not isinstance(value, dict):
            return value
        return {
            filename: {"required_keys": rule} if isinstance(rule, (list, tuple)) else rule
            for filename, rule in value.items()
        }


class StandardsModel(_Rules):
    """The rule catalog: naming, structure, style, documentation, configuration.

    Every collection is stored as a tuple (or an insertion-ordered dict) so
    rule evaluation iterates in declaration order on every run.
    """

    naming_rules: NamingRules = Field(default_factory=NamingRules)
    structure_rules: StructureRules = Field(default_factory=StructureRules)
    style_rules: StyleRules = Field(default_factory=StyleRules)
    doc_rules: DocRules = Field(default_factory=DocRules)
    config_rules: ConfigRules = Field(default_factory=ConfigRules)

    @model_validator(mode="before")
    @classmethod
    def reject_non_mapping(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError("standards document must be a mapping")
        return data

    @classmethod
    def from_yaml_dict(cls, data: dict | None) -> "StandardsModel":
        """Build a model from a parsed YAML/JSON document (``None`` means empty)."""
        return cls.model_validate(data or {})

    def to_yaml_dict(self) -> dict:
        """Dump to a plain, YAML-friendly mapping using snake_case keys."""
        return self.model_dump(mode="json")


DEFAULT_STANDARDS = StandardsModel()
