"""SEO readiness scoring: validator registries and the article analyzer."""

from engine.scoring.article import ArticleSEOScore, CategoryResult, analyze_article_seo
from engine.scoring.contract import (
    FieldSpec,
    Registry,
    ScoreSummary,
    ValidationResult,
    ValidationStatus,
)
from engine.scoring.field_engine import (
    FieldCheck,
    FieldScoreEngine,
    FieldScoreReport,
    calculate_field_score,
)
from engine.scoring.normalize import clamp, normalize_score, round_half_up, summarize
from engine.scoring.registry import (
    RegistryBuilder,
    RegistryConfigurationError,
    build_all,
    get_registry,
)
from engine.scoring.thresholds import DEFAULT_THRESHOLDS, SEOThresholds

__all__ = [
    # Validator contract
    "ValidationStatus",
    "ValidationResult",
    "FieldSpec",
    "Registry",
    "ScoreSummary",
    # Registries
    "RegistryBuilder",
    "RegistryConfigurationError",
    "build_all",
    "get_registry",
    # Field engine
    "FieldCheck",
    "FieldScoreEngine",
    "FieldScoreReport",
    "calculate_field_score",
    # Article analyzer
    "ArticleSEOScore",
    "CategoryResult",
    "analyze_article_seo",
    # Normalization
    "clamp",
    "normalize_score",
    "round_half_up",
    "summarize",
    # Thresholds
    "SEOThresholds",
    "DEFAULT_THRESHOLDS",
]
