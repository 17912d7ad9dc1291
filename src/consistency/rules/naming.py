"""Naming rules: file and directory names follow the configured casing."""

from posixpath import basename

from ..casing import is_compliant, split_name, suggest_name
from ..models.issue import Category, Issue, Severity, rename_suggestion
from ..models.snapshot import ProjectSnapshot
from ..models.standards import Casing, StandardsModel


def check_naming(snapshot: ProjectSnapshot, standards: StandardsModel) -> list[Issue]:
    """Check every file name, then every directory name, in traversal order.

    Only the stem is tested: leading dots and dotted extensions are kept, so
    ``MyComponent.test.ts`` is judged on ``MyComponent``.
    """
    rules = standards.naming_rules
    exempt = set(rules.exempt_names)
    issues: list[Issue] = []

    for path in snapshot.files:
        issue = _check_name(path, "File", rules.file_casing, exempt)
        if issue:
            issues.append(issue)

    for path in snapshot.directories:
        issue = _check_name(path, "Directory", rules.directory_casing, exempt)
        if issue:
            issues.append(issue)

    return issues


def _check_name(path: str, label: str, casing: Casing, exempt: set[str]) -> Issue | None:
    name = basename(path)
    _, stem, _ = split_name(name)
    if not stem or stem in exempt or is_compliant(stem, casing):
        return None

    return Issue(
        category=Category.NAMING,
        severity=Severity.WARNING,
        message=f"{label} name should be {casing}-case: {path}",
        target_path=path,
        suggestion=rename_suggestion(suggest_name(name, casing)),
    )
