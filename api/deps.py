"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Path

from api.config import Settings, get_settings
from api.exceptions import UnknownEntityTypeError
from engine.entities import EntityType
from engine.graph.models import GraphSiteConfig
from engine.scoring.contract import Registry
from engine.scoring.registry import get_registry
from engine.scoring.thresholds import SEOThresholds

__all__ = ["SettingsDep", "ThresholdsDep", "SiteDep", "EntityTypeDep", "RegistryDep"]


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_thresholds(settings: SettingsDep) -> SEOThresholds:
    return settings.seo_thresholds()


ThresholdsDep = Annotated[SEOThresholds, Depends(get_thresholds)]


def get_site(settings: SettingsDep) -> GraphSiteConfig:
    return settings.graph_site()


SiteDep = Annotated[GraphSiteConfig, Depends(get_site)]


ENTITY_PATHS = {
    **{entity_type.value: entity_type for entity_type in EntityType},
    "articles": EntityType.ARTICLE,
    "organizations": EntityType.ORGANIZATION,
    "authors": EntityType.AUTHOR,
    "tags": EntityType.TAG,
    "categories": EntityType.CATEGORY,
    "industries": EntityType.INDUSTRY,
}


def get_entity_type(
    entity_type: str = Path(
        ..., description="article, organization, author, tag, category or industry"
    ),
) -> EntityType:
    """Resolve the path segment; singular and plural forms are accepted."""
    resolved = ENTITY_PATHS.get(entity_type.lower())
    if resolved is None:
        raise UnknownEntityTypeError(entity_type)
    return resolved


EntityTypeDep = Annotated[EntityType, Depends(get_entity_type)]


def get_entity_registry(entity_type: EntityTypeDep, thresholds: ThresholdsDep) -> Registry:
    """Cached registry for the requested kind under the configured thresholds."""
    return get_registry(entity_type, thresholds)


RegistryDep = Annotated[Registry, Depends(get_entity_registry)]
