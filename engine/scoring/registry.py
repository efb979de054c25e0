"""Registry construction.

``RegistryBuilder`` turns a field source table plus a validator catalog into
an immutable, ordered Registry:

1. select entries that influence meta-tag or structured-data output
2. drop entries in the Integration category
3. expand compound fields into concrete ``(field, dimension)`` keys
4. wire each concrete key at most once

The ceiling sums the ``optimal`` weight of every selected source entry,
counting each source field once, and falls back to a per-kind constant when
that sum is zero.
"""

from collections.abc import Callable, Mapping
from functools import lru_cache

import structlog

from engine.entities import EntityType
from engine.scoring.contract import FieldSpec, Registry
from engine.scoring.field_mapping import (
    DEFAULT_MAX_SCORE,
    FALLBACK_MAX_SCORES,
    FIELD_TABLES,
    INTEGRATION,
    FieldMapping,
    concrete_keys,
)
from engine.scoring.thresholds import DEFAULT_THRESHOLDS, SEOThresholds
from engine.scoring.validators import CATALOGS, Catalog

logger = structlog.get_logger(__name__)


class RegistryConfigurationError(Exception):
    """Source tables, expansions and validator catalogs disagree."""

    def __init__(self, entity_type: EntityType | str, problem: str):
        self.entity_type = entity_type
        self.problem = problem
        label = entity_type.value if isinstance(entity_type, EntityType) else entity_type
        super().__init__(f"{label} registry: {problem}")


class RegistryBuilder:
    """Builds registries from source tables and validator catalogs."""

    def __init__(
        self,
        thresholds: SEOThresholds = DEFAULT_THRESHOLDS,
        tables: Mapping[EntityType, tuple[FieldMapping, ...]] | None = None,
        catalogs: Mapping[EntityType, Callable[[SEOThresholds], Catalog]] | None = None,
    ):
        self.thresholds = thresholds
        self.tables = tables if tables is not None else FIELD_TABLES
        self.catalogs = catalogs if catalogs is not None else CATALOGS

    def select(self, entity_type: EntityType) -> list[FieldMapping]:
        """Source entries that reach the registry, in table order."""
        table = self.tables.get(entity_type)
        if table is None:
            raise RegistryConfigurationError(entity_type, "no field source table")
        return [
            mapping
            for mapping in table
            if mapping.is_seo_relevant and mapping.category != INTEGRATION
        ]

    def catalog(self, entity_type: EntityType) -> Catalog:
        factory = self.catalogs.get(entity_type)
        if factory is None:
            raise RegistryConfigurationError(entity_type, "no validator catalog")
        return factory(self.thresholds)

    def build(self, entity_type: EntityType) -> Registry:
        """
        Build the registry for one entity kind.

        Raises:
            RegistryConfigurationError: A selected field has no validator, or
                the kind has no source table or catalog
        """
        selected = self.select(entity_type)
        catalog = self.catalog(entity_type)

        fields: list[FieldSpec] = []
        wired: set[tuple[str, str]] = set()
        counted: set[str] = set()
        ceiling = 0

        for mapping in selected:
            if mapping.name not in counted:
                counted.add(mapping.name)
                ceiling += mapping.optimal

            for key in concrete_keys(entity_type, mapping):
                if key in wired:
                    continue
                entry = catalog.get(key)
                if entry is None:
                    name, dimension = key
                    raise RegistryConfigurationError(
                        entity_type, f"no validator for {name!r} ({dimension})"
                    )
                label, validator = entry
                fields.append(FieldSpec(key[0], label, validator, key[1]))
                wired.add(key)

        max_score = ceiling
        if max_score <= 0:
            max_score = FALLBACK_MAX_SCORES.get(entity_type, DEFAULT_MAX_SCORE)
        registry = Registry(entity_type=entity_type, fields=tuple(fields), max_score=max_score)

        logger.debug(
            "registry_built",
            entity_type=entity_type.value,
            field_count=len(registry),
            max_score=max_score,
        )
        return registry


@lru_cache(maxsize=32)
def get_registry(
    entity_type: EntityType, thresholds: SEOThresholds = DEFAULT_THRESHOLDS
) -> Registry:
    """Registry for one kind, built once per thresholds value."""
    return RegistryBuilder(thresholds).build(entity_type)


def build_all(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> dict[EntityType, Registry]:
    """Build (and cache) every registry so configuration errors surface early."""
    return {entity_type: get_registry(entity_type, thresholds) for entity_type in EntityType}
