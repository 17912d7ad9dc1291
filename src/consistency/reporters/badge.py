"""Badge and status grading for consistency scores."""

from typing import Literal

ScoreStatus = Literal["healthy", "needs_attention", "failing"]


class ScoreBadge:
    """Grades consistency scores and renders Shields.io badges."""

    # Color schemes for each status
    COLORS = {
        "healthy": "#16a34a",  # Green
        "needs_attention": "#eab308",  # Yellow
        "failing": "#dc2626",  # Red
    }

    SYMBOLS = {
        "healthy": "✅",
        "needs_attention": "⚠️",
        "failing": "❌",
    }

    HEALTHY_THRESHOLD = 80
    ATTENTION_THRESHOLD = 60

    @classmethod
    def get_status(cls, score: float) -> ScoreStatus:
        """
        Determine status from score.

        Args:
            score: Consistency score (0-100)

        Returns:
            Status string
        """
        if score >= cls.HEALTHY_THRESHOLD:
            return "healthy"
        elif score >= cls.ATTENTION_THRESHOLD:
            return "needs_attention"
        else:
            return "failing"

    @classmethod
    def symbol(cls, score: float) -> str:
        return cls.SYMBOLS[cls.get_status(score)]

    @classmethod
    def generate_shields_url(
        cls,
        score: float,
        status: ScoreStatus | None = None,
        style: str = "flat-square",
        label: str = "consistency",
    ) -> str:
        """
        Generate Shields.io badge URL.

        Args:
            score: Consistency score (0-100)
            status: Status (auto-detected if None)
            style: Badge style (flat, flat-square, plastic, for-the-badge, social)
            label: Badge label text

        Returns:
            Shields.io badge URL
        """
        if status is None:
            status = cls.get_status(score)

        color = cls.COLORS[status].lstrip("#")
        message = f"{score:.0f}%2F100"

        return f"https://img.shields.io/badge/{label}-{message}-{color}?style={style}"

    @classmethod
    def generate_markdown_badge(
        cls,
        score: float,
        status: ScoreStatus | None = None,
        report_url: str | None = None,
        style: str = "flat-square",
    ) -> str:
        """Generate Markdown badge with optional link."""
        badge_url = cls.generate_shields_url(score, status, style)

        if report_url:
            return f"[![Consistency]({badge_url})]({report_url})"
        else:
            return f"![Consistency]({badge_url})"
