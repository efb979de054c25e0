"""Validator contract shared by every scoring rule.

A validator is a pure, total function ``(value, snapshot) -> ValidationResult``.
Registries bind validators to entity attributes through FieldSpecs.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from engine.entities import EntitySnapshot, EntityType


class ValidationStatus(str, Enum):
    """Outcome of a single validator call."""

    GOOD = "good"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class ValidationResult:
    """Status, editor-facing message and points for one check."""

    status: ValidationStatus
    message: str
    score: float = 0

    def __post_init__(self) -> None:
        if self.score < 0:
            object.__setattr__(self, "score", 0)

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "message": self.message,
            "score": self.score,
        }


Validator = Callable[[Any, EntitySnapshot], ValidationResult]


def good(message: str, score: float) -> ValidationResult:
    return ValidationResult(ValidationStatus.GOOD, message, score)


def warning(message: str, score: float = 0) -> ValidationResult:
    return ValidationResult(ValidationStatus.WARNING, message, score)


def error(message: str, score: float = 0) -> ValidationResult:
    return ValidationResult(ValidationStatus.ERROR, message, score)


def info(message: str, score: float = 0) -> ValidationResult:
    return ValidationResult(ValidationStatus.INFO, message, score)


# Default dimension for a field wired once
VALUE_DIMENSION = "value"


@dataclass(frozen=True)
class FieldSpec:
    """One evaluation unit in a registry.

    ``dimension`` distinguishes several labeled checks wired to the same
    attribute (e.g. ``seo_title`` scored as a title and as Open Graph input).
    """

    name: str
    label: str
    validator: Validator
    dimension: str = VALUE_DIMENSION

    @property
    def key(self) -> tuple[str, str]:
        return (self.name, self.dimension)


@dataclass(frozen=True)
class Registry:
    """Immutable, ordered set of FieldSpecs for one entity type."""

    entity_type: EntityType
    fields: tuple[FieldSpec, ...]
    max_score: int

    def __len__(self) -> int:
        return len(self.fields)

    def field_names(self) -> list[str]:
        return [spec.name for spec in self.fields]

    def to_dict(self) -> dict:
        return {
            "entity_type": self.entity_type.value,
            "max_score": self.max_score,
            "fields": [
                {"name": spec.name, "label": spec.label, "dimension": spec.dimension}
                for spec in self.fields
            ],
        }


@dataclass(frozen=True)
class ScoreSummary:
    """Total points against a ceiling, with the clamped percentage."""

    total_score: float
    max_score: float
    percentage: int

    def to_dict(self) -> dict:
        return {
            "score": self.total_score,
            "max_score": self.max_score,
            "percentage": self.percentage,
        }
