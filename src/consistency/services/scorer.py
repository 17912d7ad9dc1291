"""Consistency score: severity-weighted deduction from 100, floored at 0."""

from typing import Iterable

from ..models.issue import Issue, Severity

MAX_SCORE = 100
ERROR_WEIGHT = 10
WARNING_WEIGHT = 5
INFO_WEIGHT = 2

SEVERITY_WEIGHTS = {
    Severity.ERROR: ERROR_WEIGHT,
    Severity.WARNING: WARNING_WEIGHT,
    Severity.INFO: INFO_WEIGHT,
}


class Scorer:
    """Reduces issues to an integer score in [0, 100].

    ``score = max(0, 100 - 10*errors - 5*warnings - 2*infos)``

    The result depends only on the multiset of severities: ordering,
    messages and paths do not matter.
    """

    def __init__(self, weights: dict[Severity, int] | None = None):
        self.weights = dict(weights or SEVERITY_WEIGHTS)

    def score(self, issues: Iterable[Issue]) -> int:
        deduction = sum(self.weights[issue.severity] for issue in issues)
        return int(round(max(0, MAX_SCORE - deduction)))


def calculate_score(issues: Iterable[Issue]) -> int:
    return Scorer().score(issues)
