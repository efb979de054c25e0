"""Article knowledge graph assembly.

Emission order is fixed: WebPage, Article, Organization (publisher),
Person (author), BreadcrumbList, then FAQPage when the article has FAQs.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from engine.graph.document import JsonLdDocument
from engine.graph.ids import GraphIds
from engine.graph.models import ArticleRecord, GraphSiteConfig
from engine.graph.nodes import (
    build_article,
    build_breadcrumb,
    build_faq_page,
    build_organization,
    build_person,
    build_web_page,
)

logger = structlog.get_logger(__name__)


class KnowledgeGraphAssembler:
    """Turns hydrated articles into linked JSON-LD documents for one site."""

    def __init__(self, site: GraphSiteConfig):
        self.site = site

    def ids_for(self, article: ArticleRecord, page_url: str | None = None) -> GraphIds:
        return GraphIds.for_article(article, self.site, page_url)

    def assemble(self, article: ArticleRecord, page_url: str | None = None) -> JsonLdDocument:
        """
        Build the document for one article.

        Args:
            article: Article with author and publisher hydrated
            page_url: URL of the page being rendered, when it differs from
                the article's canonical URL

        Returns:
            Immutable JsonLdDocument
        """
        ids = self.ids_for(article, page_url)
        nodes = [
            build_web_page(article, ids, self.site),
            build_article(article, ids, self.site),
            build_organization(article.publisher, ids.publisher),
            build_person(article.author, ids.author),
            build_breadcrumb(article, ids, self.site),
        ]
        if article.faqs:
            nodes.append(build_faq_page(article.faqs, ids.faq))

        document = JsonLdDocument(tuple(nodes))
        logger.debug(
            "knowledge_graph_assembled",
            page_url=ids.page,
            node_types=document.types(),
        )
        return document


def assemble_article_graph(
    article: ArticleRecord | Mapping[str, Any],
    site: GraphSiteConfig,
    page_url: str | None = None,
) -> JsonLdDocument:
    """Assemble from a record or a raw mapping (hydrated via ArticleRecord.from_dict)."""
    record = article if isinstance(article, ArticleRecord) else ArticleRecord.from_dict(article)
    return KnowledgeGraphAssembler(site).assemble(record, page_url)
