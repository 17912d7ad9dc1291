"""Structure rules for project layout: required directories and files, depth."""

from ..models.issue import (
    Category,
    Issue,
    Severity,
    create_directory_suggestion,
    create_file_suggestion,
)
from ..models.snapshot import ProjectSnapshot
from ..models.standards import StandardsModel


def check_structure(snapshot: ProjectSnapshot, standards: StandardsModel) -> list[Issue]:
    """Check the project tree against the required layout.

    Emits, in order:
    - warning per missing required directory
    - error per missing required file
    - one warning if the tree is deeper than allowed
    - warning per entry that could not be read during the walk
    """
    rules = standards.structure_rules
    issues: list[Issue] = []

    for directory, description in rules.required_directories.items():
        if not snapshot.has_directory(directory):
            issues.append(
                Issue(
                    category=Category.STRUCTURE,
                    severity=Severity.WARNING,
                    message=f"Missing recommended directory: {directory} ({description})",
                    target_path=directory,
                    suggestion=create_directory_suggestion(directory),
                )
            )

    for filename in rules.required_files:
        if not snapshot.has_file(filename):
            issues.append(
                Issue(
                    category=Category.STRUCTURE,
                    severity=Severity.ERROR,
                    message=f"Missing required file: {filename}",
                    target_path=filename,
                    suggestion=create_file_suggestion(filename),
                )
            )

    if snapshot.max_depth > rules.max_depth:
        issues.append(
            Issue(
                category=Category.STRUCTURE,
                severity=Severity.WARNING,
                message=(
                    f"Deep directory structure detected ({snapshot.max_depth} levels, "
                    f"maximum is {rules.max_depth})"
                ),
                suggestion=f"Flatten below depth {rules.max_depth}",
            )
        )

    for path, reason in snapshot.unreadable.items():
        issues.append(
            Issue(
                category=Category.STRUCTURE,
                severity=Severity.WARNING,
                message=f"Unreadable entry skipped: {path} ({reason})",
                target_path=path,
                suggestion=f"Fix file permissions: {path}",
            )
        )

    return issues


def missing_recommended_files(
    snapshot: ProjectSnapshot, standards: StandardsModel
) -> list[str]:
    """Recommended files that are absent; listed in reports, never scored."""
    rules = standards.structure_rules
    return [
        filename
        for filename in rules.recommended_files
        if filename not in rules.required_files and not snapshot.has_file(filename)
    ]
