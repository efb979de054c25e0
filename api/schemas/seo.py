"""Request and response schemas for the scoring and graph endpoints."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field


# Requests


class EntityPayload(BaseModel):
    """A hydrated entity snapshot; unknown fields are ignored by the engine."""

    entity: dict[str, Any] = Field(default_factory=dict, description="Entity field values")


class ArticleGraphRequest(BaseModel):
    """Article with author and publisher hydrated."""

    article: dict[str, Any]
    page_url: str | None = Field(
        None, description="URL of the rendered page when it differs from the canonical URL"
    )


class CollectionGraphRequest(BaseModel):
    """Tag, category or industry listing page."""

    collection: dict[str, Any]


class OrganizationGraphRequest(BaseModel):
    """Client organization for its about page."""

    organization: dict[str, Any]
    page_url: str | None = Field(None, description="URL of the rendered client page")


class AuthorGraphRequest(BaseModel):
    """Author for their profile page."""

    author: dict[str, Any]
    page_url: str | None = Field(None, description="URL of the rendered author page")


# Responses


class RegistryField(BaseModel):
    name: str
    label: str
    dimension: str


class RegistryResponse(BaseModel):
    """Validators applied to one entity kind and the ceiling they share."""

    entity_type: str
    max_score: int
    fields: list[RegistryField]


class FieldCheckResponse(BaseModel):
    label: str
    field: str
    dimension: str
    status: Literal["good", "warning", "error", "info"]
    message: str
    score: float


class FieldScoreResponse(BaseModel):
    """Field engine result."""

    entity_type: str
    score: float
    max_score: int
    percentage: int
    status_counts: dict[str, int]
    checks: list[FieldCheckResponse]


class ItemCheckResponse(BaseModel):
    name: str
    points: int
    passed: bool
    detail: str


class CategoryResponse(BaseModel):
    score: int
    max_score: int
    percentage: int
    passed: int
    total: int
    items: list[ItemCheckResponse] = Field(default_factory=list)


class ArticleAnalysisResponse(BaseModel):
    """Composite article score with per-category breakdown."""

    score: int
    max_score: int
    percentage: int
    categories: dict[str, CategoryResponse]


class GraphValidationResponse(BaseModel):
    is_valid: bool
    errors: list[str]
    warnings: list[str]


class CacheEntryResponse(BaseModel):
    json_ld: str
    generated_at: datetime


class GraphResponse(BaseModel):
    """Assembled JSON-LD document with its structural report."""

    graph: dict[str, Any] = Field(..., description="@context and @graph")
    validation: GraphValidationResponse
    cache: CacheEntryResponse
