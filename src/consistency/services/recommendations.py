"""Category-level recommendations with static action checklists."""

from typing import Iterable

from ..models.issue import SEVERITY_PRIORITY, Category, Issue, Recommendation

ACTIONS: dict[Category, tuple[str, ...]] = {
    Category.STRUCTURE: (
        "Create missing directories and files",
        "Reorganize directory structure",
        "Follow standard project layout",
    ),
    Category.NAMING: (
        "Rename files and directories to the configured casing",
        "Use consistent naming conventions",
        "Follow language-specific naming standards",
    ),
    Category.CODE_STYLE: (
        "Run the code formatter",
        "Fix indentation and quotes",
        "Follow consistent coding style",
    ),
    Category.DOCUMENTATION: (
        "Create missing documentation files",
        "Add required sections to README",
        "Improve code comments and documentation",
    ),
    Category.CONFIGURATION: (
        "Fix invalid configuration files",
        "Add missing configuration keys",
        "Configure linting and formatting",
    ),
}


class RecommendationBuilder:
    """Groups issues by category and ranks the groups by urgency."""

    def build(self, issues: Iterable[Issue]) -> list[Recommendation]:
        """Build one recommendation per category that has issues.

        Sorted by priority (descending), then issue count (descending), then
        category name (ascending).
        """
        grouped: dict[Category, list[Issue]] = {}
        for issue in issues:
            grouped.setdefault(issue.category, []).append(issue)

        recommendations = []
        for category, category_issues in grouped.items():
            dominant = max(
                (issue.severity for issue in category_issues),
                key=lambda severity: SEVERITY_PRIORITY[severity],
            )
            recommendations.append(
                Recommendation(
                    category=category,
                    issue_count=len(category_issues),
                    dominant_severity=dominant,
                    priority=SEVERITY_PRIORITY[dominant],
                    suggested_actions=ACTIONS[category],
                )
            )

        return sorted(
            recommendations,
            key=lambda r: (-r.priority, -r.issue_count, r.category.value),
        )
