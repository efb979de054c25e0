"""Field-level scoring engine.

Evaluates every FieldSpec of a registry against one entity snapshot and
sums the results. A field wired under several dimensions contributes once
per FieldSpec, so the total can exceed the registry ceiling; the percentage
is clamped by ``normalize_score``.
"""

from collections import Counter
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import structlog

from engine.entities import EntitySnapshot, EntityType, snapshot
from engine.scoring.contract import Registry, ValidationStatus
from engine.scoring.field_mapping import DEFAULT_MAX_SCORE
from engine.scoring.normalize import normalize_score
from engine.scoring.registry import get_registry
from engine.scoring.thresholds import DEFAULT_THRESHOLDS, SEOThresholds

logger = structlog.get_logger(__name__)


@dataclass
class FieldCheck:
    """Outcome of one FieldSpec evaluation."""

    label: str
    field: str
    dimension: str
    status: ValidationStatus
    message: str
    score: float

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "field": self.field,
            "dimension": self.dimension,
            "status": self.status.value,
            "message": self.message,
            "score": self.score,
        }


@dataclass
class FieldScoreReport:
    """Ordered checks plus the normalized total."""

    entity_type: EntityType
    total_score: float
    max_score: int
    percentage: int
    checks: list[FieldCheck] = field(default_factory=list)

    @property
    def status_counts(self) -> dict[str, int]:
        counts = Counter(check.status.value for check in self.checks)
        return {status.value: counts.get(status.value, 0) for status in ValidationStatus}

    def checks_with_status(self, status: ValidationStatus) -> list[FieldCheck]:
        return [check for check in self.checks if check.status == status]

    def to_dict(self) -> dict:
        return {
            "score": self.total_score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "checks": [check.to_dict() for check in self.checks],
        }

    def show_the_math(self) -> str:
        """Generate human-readable calculation breakdown."""
        lines = [
            "=" * 50,
            f"SEO DOCTOR: {self.entity_type.value.upper()}",
            "=" * 50,
            "",
            f"Score: {self.total_score:g}/{self.max_score} = {self.percentage}%",
            "",
            "-" * 50,
            "FIELD CHECKS",
            "-" * 50,
        ]
        for check in self.checks:
            lines.append(f"[{check.status.value:>7}] {check.label}: +{check.score:g}")
            lines.append(f"          {check.message}")

        counts = self.status_counts
        lines.extend(
            [
                "",
                "-" * 50,
                " | ".join(f"{status}: {count}" for status, count in counts.items()),
                "=" * 50,
            ]
        )
        return "\n".join(lines)


class FieldScoreEngine:
    """Applies a registry to entity snapshots."""

    def __init__(self, fallback_max_score: int = DEFAULT_MAX_SCORE):
        self.fallback_max_score = fallback_max_score

    def calculate(
        self, entity: Mapping[str, Any] | EntitySnapshot | None, registry: Registry
    ) -> FieldScoreReport:
        """
        Score an entity against a registry.

        Args:
            entity: Hydrated entity mapping or snapshot
            registry: Registry for the entity's kind

        Returns:
            FieldScoreReport with one check per FieldSpec, in registry order
        """
        data = snapshot(entity)
        checks = []
        for spec in registry.fields:
            result = spec.validator(data.raw(spec.name), data)
            checks.append(
                FieldCheck(
                    label=spec.label,
                    field=spec.name,
                    dimension=spec.dimension,
                    status=result.status,
                    message=result.message,
                    score=result.score,
                )
            )

        total = sum(check.score for check in checks)
        max_score = registry.max_score or self.fallback_max_score
        report = FieldScoreReport(
            entity_type=registry.entity_type,
            total_score=total,
            max_score=max_score,
            percentage=normalize_score(total, max_score),
            checks=checks,
        )

        logger.debug(
            "field_score_calculated",
            entity_type=registry.entity_type.value,
            score=total,
            max_score=max_score,
            percentage=report.percentage,
        )
        return report


def calculate_field_score(
    entity_type: EntityType | str,
    entity: Mapping[str, Any] | EntitySnapshot | None,
    thresholds: SEOThresholds | None = None,
) -> FieldScoreReport:
    """Score an entity with the cached registry for its kind."""
    registry = get_registry(EntityType(entity_type), thresholds or DEFAULT_THRESHOLDS)
    return FieldScoreEngine().calculate(entity, registry)
