"""Validation pipeline: analyze, evaluate, score, recommend."""

import logging
from pathlib import Path
from typing import Callable

from ..models.issue import ValidationResult
from ..models.standards import DEFAULT_STANDARDS, StandardsModel
from ..rules import evaluate
from .analyzer import ProjectAnalyzer
from .recommendations import RecommendationBuilder
from .scorer import Scorer

logger = logging.getLogger(__name__)


class ConsistencyValidator:
    """Runs one full validation pass per call; keeps no state between calls."""

    def __init__(
        self,
        standards: StandardsModel = DEFAULT_STANDARDS,
        analyzer: ProjectAnalyzer | None = None,
        scorer: Scorer | None = None,
        recommendations: RecommendationBuilder | None = None,
    ):
        self.standards = standards
        self.analyzer = analyzer or ProjectAnalyzer(standards)
        self.scorer = scorer or Scorer()
        self.recommendations = recommendations or RecommendationBuilder()

    def validate(
        self, root_path: Path | str, should_cancel: Callable[[], bool] | None = None
    ) -> ValidationResult:
        """Validate the project at ``root_path``.

        Raises:
            PathNotFoundError: If root_path is not an existing directory
        """
        snapshot = self.analyzer.analyze(root_path, should_cancel=should_cancel)
        issues = evaluate(snapshot, self.standards)
        score = self.scorer.score(issues)
        logger.debug(
            "Validated %s: %d files, %d issues, score %d",
            snapshot.root_path,
            len(snapshot.files),
            len(issues),
            score,
        )
        return ValidationResult(
            snapshot=snapshot,
            issues=tuple(issues),
            score=score,
            recommendations=tuple(self.recommendations.build(issues)),
        )
