"""Scoring and knowledge graph endpoints."""

from fastapi import APIRouter

from api.deps import EntityTypeDep, RegistryDep, SiteDep
from api.exceptions import ValidationError
from api.schemas import ErrorResponse
from api.schemas.seo import (
    ArticleAnalysisResponse,
    ArticleGraphRequest,
    AuthorGraphRequest,
    CollectionGraphRequest,
    EntityPayload,
    FieldScoreResponse,
    GraphResponse,
    OrganizationGraphRequest,
    RegistryResponse,
)
from engine.graph import (
    GraphCacheEntry,
    JsonLdDocument,
    assemble_article_graph,
    assemble_author_graph,
    assemble_collection_graph,
    assemble_organization_graph,
    validate_graph,
)
from engine.scoring import FieldScoreEngine, analyze_article_seo

router = APIRouter(
    prefix="/seo",
    tags=["SEO"],
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)


def _graph_response(document: JsonLdDocument) -> GraphResponse:
    return GraphResponse(
        graph=document.to_dict(),
        validation=validate_graph(document).to_dict(),
        cache=GraphCacheEntry.from_document(document).to_dict(),
    )


@router.get("/registries/{entity_type}", response_model=RegistryResponse)
async def get_registry_fields(registry: RegistryDep) -> RegistryResponse:
    """List the validators applied to an entity kind and their shared ceiling."""
    return RegistryResponse(**registry.to_dict())


@router.post("/articles/analyze", response_model=ArticleAnalysisResponse)
async def analyze_article(payload: EntityPayload) -> ArticleAnalysisResponse:
    """
    Category-weighted article score out of 100.

    Failures inside the analyzer are logged and yield the all-zero result.
    """
    result = analyze_article_seo(payload.entity)
    return ArticleAnalysisResponse(**result.to_dict())


@router.post("/articles/graph", response_model=GraphResponse)
async def article_graph(request: ArticleGraphRequest, site: SiteDep) -> GraphResponse:
    """Assemble the JSON-LD knowledge graph for an article page."""
    document = assemble_article_graph(request.article, site, request.page_url)
    return _graph_response(document)


@router.post("/collections/graph", response_model=GraphResponse)
async def collection_graph(request: CollectionGraphRequest, site: SiteDep) -> GraphResponse:
    """Assemble the JSON-LD graph for a tag, category or industry listing page."""
    try:
        document = assemble_collection_graph(request.collection, site)
    except ValueError as e:
        raise ValidationError(str(e), field="collection.kind") from e
    return _graph_response(document)


@router.post("/organizations/graph", response_model=GraphResponse)
async def organization_graph(request: OrganizationGraphRequest, site: SiteDep) -> GraphResponse:
    """Assemble the JSON-LD graph for a client's about page."""
    try:
        document = assemble_organization_graph(request.organization, site, request.page_url)
    except ValueError as e:
        raise ValidationError(str(e), field="organization.slug") from e
    return _graph_response(document)


@router.post("/authors/graph", response_model=GraphResponse)
async def author_graph(request: AuthorGraphRequest, site: SiteDep) -> GraphResponse:
    """Assemble the JSON-LD graph for an author's profile page."""
    try:
        document = assemble_author_graph(request.author, site, request.page_url)
    except ValueError as e:
        raise ValidationError(str(e), field="author.slug") from e
    return _graph_response(document)


@router.post("/{entity_type}/score", response_model=FieldScoreResponse)
async def score_entity(
    entity_type: EntityTypeDep, registry: RegistryDep, payload: EntityPayload
) -> FieldScoreResponse:
    """Run every validator in the kind's registry over the entity."""
    report = FieldScoreEngine().calculate(payload.entity, registry)
    return FieldScoreResponse(
        entity_type=entity_type.value,
        status_counts=report.status_counts,
        **report.to_dict(),
    )
