"""Configuration rules: tracked JSON config files parse and carry required keys."""

from ..models.issue import Category, Issue, Severity
from ..models.snapshot import InvalidConfig, ProjectSnapshot
from ..models.standards import StandardsModel


def check_configuration(
    snapshot: ProjectSnapshot, standards: StandardsModel
) -> list[Issue]:
    issues: list[Issue] = []

    for filename, rule in standards.config_rules.per_file.items():
        if filename not in snapshot.config_files:
            continue
        parsed = snapshot.config_files[filename]

        if isinstance(parsed, InvalidConfig):
            issues.append(
                Issue(
                    category=Category.CONFIGURATION,
                    severity=Severity.ERROR,
                    message=f"{filename} is not valid JSON: {parsed.reason}",
                    target_path=filename,
                    suggestion=f"Fix JSON syntax in {filename}",
                )
            )
            continue

        keys = parsed if isinstance(parsed, dict) else {}
        for key in rule.required_keys:
            if key not in keys:
                issues.append(
                    Issue(
                        category=Category.CONFIGURATION,
                        severity=Severity(rule.severity),
                        message=f"{filename} missing {key}",
                        target_path=filename,
                        suggestion=f"Add key: {key} to {filename}",
                    )
                )

    return issues
