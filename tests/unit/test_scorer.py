"""Tests for scoring and recommendations."""

import pytest

from consistency.models.issue import Category, Issue, Severity
from consistency.services.recommendations import ACTIONS, RecommendationBuilder
from consistency.services.scorer import Scorer, calculate_score


def issue(severity, category=Category.STRUCTURE, message="problem"):
    return Issue(category=category, severity=severity, message=message)


class TestScorer:
    """Test Scorer."""

    def test_no_issues_is_perfect(self):
        assert calculate_score([]) == 100

    def test_weighted_deduction(self):
        issues = [issue(Severity.ERROR)] * 3 + [issue(Severity.WARNING)]

        assert calculate_score(issues) == 65

    def test_info_weight(self):
        assert calculate_score([issue(Severity.INFO)] * 4) == 92

    def test_floor_at_zero(self):
        assert calculate_score([issue(Severity.ERROR)] * 25) == 0

    def test_order_and_messages_do_not_matter(self):
        first = [
            issue(Severity.ERROR, message="a"),
            issue(Severity.INFO, Category.NAMING, message="b"),
            issue(Severity.WARNING, message="c"),
        ]
        second = [
            issue(Severity.WARNING, Category.CONFIGURATION, message="x"),
            issue(Severity.ERROR, message="y"),
            issue(Severity.INFO, message="z"),
        ]

        assert calculate_score(first) == calculate_score(second) == 83

    @pytest.mark.parametrize("severity", list(Severity))
    def test_adding_an_issue_never_raises_score(self, severity):
        issues = [issue(Severity.WARNING), issue(Severity.INFO)]

        assert calculate_score(issues + [issue(severity)]) <= calculate_score(issues)

    def test_score_is_deterministic_not_random(self):
        """The score is a pure function of the issues, never a sampled value."""
        issues = [issue(Severity.ERROR), issue(Severity.WARNING), issue(Severity.INFO)]

        scores = {calculate_score(issues) for _ in range(20)}

        assert scores == {83}

    def test_custom_weights(self):
        scorer = Scorer({Severity.ERROR: 50, Severity.WARNING: 1, Severity.INFO: 0})

        assert scorer.score([issue(Severity.ERROR), issue(Severity.INFO)]) == 50


class TestRecommendationBuilder:
    """Test RecommendationBuilder."""

    def test_no_issues(self):
        assert RecommendationBuilder().build([]) == []

    def test_grouping_and_priority_order(self):
        issues = [
            issue(Severity.WARNING, Category.NAMING),
            issue(Severity.INFO, Category.DOCUMENTATION),
            issue(Severity.WARNING, Category.NAMING),
            issue(Severity.ERROR, Category.STRUCTURE),
            issue(Severity.INFO, Category.STRUCTURE),
        ]

        recommendations = RecommendationBuilder().build(issues)

        assert [(r.category, r.issue_count, r.dominant_severity, r.priority) for r in recommendations] == [
            (Category.STRUCTURE, 2, Severity.ERROR, 3),
            (Category.NAMING, 2, Severity.WARNING, 2),
            (Category.DOCUMENTATION, 1, Severity.INFO, 1),
        ]
        assert recommendations[0].suggested_actions == ACTIONS[Category.STRUCTURE]

    def test_count_breaks_priority_ties(self):
        issues = [
            issue(Severity.WARNING, Category.CODE_STYLE),
            issue(Severity.WARNING, Category.NAMING),
            issue(Severity.WARNING, Category.NAMING),
        ]

        recommendations = RecommendationBuilder().build(issues)

        assert [r.category for r in recommendations] == [Category.NAMING, Category.CODE_STYLE]

    def test_category_name_breaks_remaining_ties(self):
        issues = [
            issue(Severity.WARNING, Category.NAMING),
            issue(Severity.WARNING, Category.CODE_STYLE),
        ]

        recommendations = RecommendationBuilder().build(issues)

        assert [r.category for r in recommendations] == [Category.CODE_STYLE, Category.NAMING]

    def test_every_category_has_actions(self):
        assert set(ACTIONS) == set(Category)
        assert all(ACTIONS[category] for category in Category)
