"""Fixed six-category SEO analyzer for articles."""

from engine.scoring.article.analyzer import ArticleSEOScore, analyze_article_seo
from engine.scoring.article.categories import (
    CATEGORY_ANALYZERS,
    CATEGORY_MAX_SCORES,
    CategoryResult,
    ItemCheck,
)
from engine.scoring.article.inputs import NormalizedArticle, normalize_article_input

__all__ = [
    "ArticleSEOScore",
    "CATEGORY_ANALYZERS",
    "CATEGORY_MAX_SCORES",
    "CategoryResult",
    "ItemCheck",
    "NormalizedArticle",
    "analyze_article_seo",
    "normalize_article_input",
]
