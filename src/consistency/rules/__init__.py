"""Rule engine: a fixed table of rule functions keyed by category."""

from typing import Callable

from ..models.issue import Category, Issue
from ..models.snapshot import ProjectSnapshot
from ..models.standards import StandardsModel
from .code_style import check_code_style
from .configuration import check_configuration
from .documentation import check_documentation
from .naming import check_naming
from .structure import check_structure

Rule = Callable[[ProjectSnapshot, StandardsModel], list[Issue]]

# Evaluation order is the declaration order of Category.
RULES: dict[Category, Rule] = {
    Category.STRUCTURE: check_structure,
    Category.NAMING: check_naming,
    Category.CODE_STYLE: check_code_style,
    Category.DOCUMENTATION: check_documentation,
    Category.CONFIGURATION: check_configuration,
}


def evaluate(snapshot: ProjectSnapshot, standards: StandardsModel) -> list[Issue]:
    """Run every rule against ``snapshot``.

    Pure: no I/O, no clock, no randomness. Identical inputs always yield an
    identical, identically ordered issue list.
    """
    issues: list[Issue] = []
    for category in Category:
        issues.extend(RULES[category](snapshot, standards))
    return issues


__all__ = ["RULES", "Rule", "evaluate"]
