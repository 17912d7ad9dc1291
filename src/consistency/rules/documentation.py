"""Documentation rules: required doc files and README sections."""

import re

from ..models.issue import Category, Issue, Severity, create_file_suggestion
from ..models.snapshot import ProjectSnapshot
from ..models.standards import StandardsModel

_ATX_HEADING = re.compile(r"^\s{0,3}#{1,6}\s+(.*?)\s*#*\s*$")


def check_documentation(
    snapshot: ProjectSnapshot, standards: StandardsModel
) -> list[Issue]:
    rules = standards.doc_rules
    # Files the structure rule already requires are reported there only.
    already_required = set(standards.structure_rules.required_files)
    issues: list[Issue] = []

    for filename in rules.required_files:
        if filename in already_required or snapshot.has_file(filename):
            continue
        issues.append(
            Issue(
                category=Category.DOCUMENTATION,
                severity=Severity.WARNING,
                message=f"Missing documentation file: {filename}",
                target_path=filename,
                suggestion=create_file_suggestion(filename),
            )
        )

    readme = snapshot.file_contents.get(rules.readme_file)
    if readme is not None:
        headings = readme_headings(readme)
        for section in rules.required_readme_sections:
            if section.strip().lower() not in headings:
                issues.append(
                    Issue(
                        category=Category.DOCUMENTATION,
                        severity=Severity.INFO,
                        message=f"{rules.readme_file} missing section: {section}",
                        target_path=rules.readme_file,
                        suggestion=f"Add section: ## {section} to {rules.readme_file}",
                    )
                )

    return issues


def readme_headings(content: str) -> set[str]:
    """Lower-cased text of every ATX heading, skipping fenced code blocks."""
    headings: set[str] = set()
    in_fence = False
    for line in content.splitlines():
        if line.lstrip().startswith(("```", "~~~")):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = _ATX_HEADING.match(line)
        if match:
            headings.add(match.group(1).strip().lower())
    return headings
