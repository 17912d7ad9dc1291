"""Loading and discovery of standards documents (YAML or JSON)."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import StandardsError
from .models.standards import StandardsModel

REPO_STANDARDS_FILES = (".consistency.yaml", ".consistency.yml", ".consistency.json")


def user_standards_path() -> Path:
    return Path.home() / ".config" / "consistency" / "standards.yaml"


def find_standards_file(repo_path: Path, explicit: Path | None = None) -> Path | None:
    """Locate the standards document to use.

    Priority: explicit path > repository-level file > user-level file. Returns
    None when nothing is found and the built-in defaults apply.

    Raises:
        StandardsError: If an explicit path was given but does not exist
    """
    if explicit is not None:
        explicit = Path(explicit)
        if not explicit.is_file():
            raise StandardsError(f"Standards file not found: {explicit}")
        return explicit

    for filename in REPO_STANDARDS_FILES:
        candidate = Path(repo_path) / filename
        if candidate.is_file():
            return candidate

    user_file = user_standards_path()
    if user_file.is_file():
        return user_file

    return None


def load_standards(path: Path) -> StandardsModel:
    """Parse and validate a standards document.

    JSON documents are read through the YAML parser, which accepts them.

    Raises:
        StandardsError: On unreadable files, YAML syntax errors or schema violations
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise StandardsError(f"Cannot read standards file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise StandardsError(f"YAML syntax error in {path}: {e}") from e

    try:
        return StandardsModel.from_yaml_dict(data)
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in e.errors()
        )
        raise StandardsError(f"Invalid standards in {path}: {details}") from e


def dump_standards(standards: StandardsModel) -> str:
    return yaml.safe_dump(standards.to_yaml_dict(), sort_keys=False, allow_unicode=True)
