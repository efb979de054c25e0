"""JSON-LD knowledge graph assembly for articles, listing and profile pages."""

from engine.graph.assembler import KnowledgeGraphAssembler, assemble_article_graph
from engine.graph.collection import (
    CollectionKind,
    CollectionMember,
    CollectionRecord,
    assemble_collection_graph,
)
from engine.graph.document import GraphCacheEntry, GraphNode, JsonLdDocument
from engine.graph.ids import GraphIds, resolve_page_url
from engine.graph.models import (
    ArticleRecord,
    AuthorRecord,
    CategoryRecord,
    FAQEntry,
    GalleryItem,
    GraphSiteConfig,
    MediaAsset,
    MissingRelationError,
    ParentOrganization,
    PublisherRecord,
)
from engine.graph.profiles import assemble_author_graph, assemble_organization_graph
from engine.graph.validation import GraphValidationReport, validate_graph

__all__ = [
    # Assembly
    "KnowledgeGraphAssembler",
    "assemble_article_graph",
    "assemble_collection_graph",
    "assemble_organization_graph",
    "assemble_author_graph",
    # Documents
    "GraphNode",
    "JsonLdDocument",
    "GraphCacheEntry",
    "GraphIds",
    "resolve_page_url",
    # Inputs
    "ArticleRecord",
    "AuthorRecord",
    "CategoryRecord",
    "CollectionKind",
    "CollectionMember",
    "CollectionRecord",
    "FAQEntry",
    "GalleryItem",
    "GraphSiteConfig",
    "MediaAsset",
    "MissingRelationError",
    "ParentOrganization",
    "PublisherRecord",
    # Validation
    "GraphValidationReport",
    "validate_graph",
]
