"""Graphs for tag, category and industry listing pages.

A listing page gets a CollectionPage root describing the tag or industry
(as a DefinedTerm) or the category (as a Thing), the member articles as an
ItemList, and a two-step breadcrumb.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from engine.entities import as_number, as_text
from engine.graph.document import GraphNode, JsonLdDocument, ref
from engine.graph.ids import category_url, industry_url, tag_url, website_id
from engine.graph.models import GraphSiteConfig
from engine.graph.nodes import list_items, website_reference

logger = structlog.get_logger(__name__)


class CollectionKind(str, Enum):
    TAG = "tag"
    CATEGORY = "category"
    INDUSTRY = "industry"


@dataclass
class CollectionMember:
    """An article listed on the page."""

    title: str
    url: str
    position: int = 0


@dataclass
class CollectionRecord:
    kind: CollectionKind
    name: str
    slug: str
    description: str | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    canonical_url: str | None = None
    in_language: str | None = None
    articles: list[CollectionMember] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], site: GraphSiteConfig) -> "CollectionRecord":
        """
        Hydrate from a mapping.

        Member articles need a title and either a ``url`` or a ``slug``
        (resolved to ``{site}/articles/{slug}``); others are skipped.

        Raises:
            ValueError: ``kind`` is not tag, category or industry
        """
        members = []
        raw_articles = data.get("articles")
        for index, entry in enumerate(raw_articles if isinstance(raw_articles, list) else []):
            if not isinstance(entry, Mapping):
                continue
            title = as_text(entry.get("title"))
            url = as_text(entry.get("url")) or as_text(entry.get("canonical_url"))
            slug = as_text(entry.get("slug"))
            if url is None and slug is not None:
                url = f"{site.site_url}/articles/{slug}"
            if title is None or url is None:
                continue
            position = as_number(entry.get("position"))
            members.append(
                CollectionMember(title, url, int(position) if position is not None else index)
            )

        return cls(
            kind=CollectionKind(data.get("kind", CollectionKind.TAG.value)),
            name=as_text(data.get("name")) or "",
            slug=as_text(data.get("slug")) or "",
            description=as_text(data.get("description")),
            seo_title=as_text(data.get("seo_title")),
            seo_description=as_text(data.get("seo_description")),
            canonical_url=as_text(data.get("canonical_url")),
            in_language=as_text(data.get("in_language")),
            articles=members,
        )


def collection_page_url(collection: CollectionRecord, site: GraphSiteConfig) -> str:
    if collection.canonical_url:
        return collection.canonical_url
    if collection.kind == CollectionKind.CATEGORY:
        return category_url(site, collection.slug)
    if collection.kind == CollectionKind.INDUSTRY:
        return industry_url(site, collection.slug)
    return tag_url(site, collection.slug)


def _subject(collection: CollectionRecord, site: GraphSiteConfig) -> dict:
    if collection.kind == CollectionKind.CATEGORY:
        return {
            "@type": "Thing",
            "@id": category_url(site, collection.slug),
            "name": collection.name,
            "description": collection.description,
        }
    return {
        "@type": "DefinedTerm",
        "name": collection.name,
        "description": collection.description,
    }


def assemble_collection_graph(
    collection: CollectionRecord | Mapping[str, Any], site: GraphSiteConfig
) -> JsonLdDocument:
    """CollectionPage root followed by its BreadcrumbList."""
    if not isinstance(collection, CollectionRecord):
        collection = CollectionRecord.from_dict(collection, site)

    url = collection_page_url(collection, site)
    breadcrumb_id = f"{url}#breadcrumb"

    members = sorted(collection.articles, key=lambda member: member.position)
    item_list = None
    if members:
        item_list = {
            "@type": "ItemList",
            "numberOfItems": len(members),
            "itemListElement": [
                {"@type": "ListItem", "position": position, "name": member.title, "url": member.url}
                for position, member in enumerate(members, start=1)
            ],
        }

    page = GraphNode(
        "CollectionPage",
        url,
        url=url,
        name=collection.seo_title or collection.name,
        description=collection.seo_description or collection.description,
        about=_subject(collection, site),
        isPartOf=website_reference(site, website_id(site)),
        breadcrumb=ref(breadcrumb_id),
        inLanguage=collection.in_language or site.default_language,
        mainEntity=item_list,
    )
    breadcrumb = GraphNode(
        "BreadcrumbList",
        breadcrumb_id,
        itemListElement=list_items([(site.home_label, site.site_url), (collection.name, url)]),
    )

    document = JsonLdDocument((page, breadcrumb))
    logger.debug(
        "knowledge_graph_assembled",
        page_url=url,
        node_types=document.types(),
        member_count=len(members),
    )
    return document
