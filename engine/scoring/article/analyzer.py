"""Category-weighted article SEO analyzer.

Runs the six fixed category checks over a normalized article. The overall
score is the clamped sum of category points; any failure inside the
pipeline yields the all-zero result instead of an exception so editor views
always receive a well-formed score.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from engine.entities import EntitySnapshot
from engine.scoring.article.categories import CATEGORY_ANALYZERS, CategoryResult
from engine.scoring.article.inputs import normalize_article_input
from engine.scoring.normalize import clamp, normalize_score

logger = structlog.get_logger(__name__)

ARTICLE_MAX_SCORE = 100

CATEGORY_LABELS = {
    "meta_tags": "Meta Tags",
    "content": "Content",
    "images": "Images",
    "structured_data": "Structured Data",
    "technical": "Technical",
    "social": "Social",
}


@dataclass
class ArticleSEOScore:
    """Overall article score with per-category breakdown."""

    score: int
    percentage: int
    categories: dict[str, CategoryResult] = field(default_factory=dict)
    max_score: int = ARTICLE_MAX_SCORE

    @classmethod
    def empty(cls) -> "ArticleSEOScore":
        return cls(
            score=0,
            percentage=0,
            categories={key: CategoryResult.empty() for key in CATEGORY_ANALYZERS},
        )

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "categories": {key: result.to_dict() for key, result in self.categories.items()},
        }

    def show_the_math(self) -> str:
        """Generate human-readable calculation breakdown."""
        lines = [
            "=" * 50,
            "ARTICLE SEO SCORE",
            "=" * 50,
            "",
            f"Total Score: {self.score}/{self.max_score} ({self.percentage}%)",
            "",
            "-" * 50,
            "CATEGORY BREAKDOWN",
            "-" * 50,
        ]

        for key, result in self.categories.items():
            label = CATEGORY_LABELS.get(key, key)
            lines.append(
                f"{label}: {result.score}/{result.max_score} "
                f"({result.passed}/{result.total} checks passed, {result.percentage}%)"
            )
            for item in result.items:
                mark = "+" if item.passed else "-"
                detail = f" - {item.detail}" if item.detail else ""
                lines.append(f"   {mark} {item.name}: {item.points} pts{detail}")

        lines.extend(
            [
                "",
                "-" * 50,
                "FORMULA",
                "-" * 50,
                " + ".join(str(result.score) for result in self.categories.values())
                + f" = {self.score}",
                "=" * 50,
            ]
        )
        return "\n".join(lines)


def analyze_article_seo(entity: Mapping[str, Any] | EntitySnapshot | None) -> ArticleSEOScore:
    """
    Score an article across the six fixed categories.

    Args:
        entity: Article mapping (form data or hydrated record)

    Returns:
        ArticleSEOScore; the all-zero result when any step fails
    """
    try:
        article = normalize_article_input(entity)
        categories = {key: analyze(article) for key, analyze in CATEGORY_ANALYZERS.items()}
    except Exception:
        logger.exception("article_seo_analysis_failed")
        return ArticleSEOScore.empty()

    total = sum(result.score for result in categories.values())
    score = int(clamp(total, 0, ARTICLE_MAX_SCORE))
    result = ArticleSEOScore(
        score=score,
        percentage=normalize_score(score, ARTICLE_MAX_SCORE),
        categories=categories,
    )

    logger.debug(
        "article_seo_analyzed",
        score=result.score,
        categories={key: value.score for key, value in categories.items()},
    )
    return result
