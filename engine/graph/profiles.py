"""Graphs for client and author profile pages.

A client page gets an AboutPage root whose main entity is the client's
Organization node; an author page gets a ProfilePage root around the
author's Person node. Both reuse the ``#organization`` and ``#person`` ids
that article documents reference, so a crawler can join the pages.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from engine.graph.document import GraphNode, JsonLdDocument, ref
from engine.graph.ids import author_url, client_url, organization_id, person_id, website_id
from engine.graph.models import AuthorRecord, GraphSiteConfig, PublisherRecord
from engine.graph.nodes import build_organization, build_person, list_items, website_reference

logger = structlog.get_logger(__name__)


def _profile_document(
    page_type: str,
    url: str,
    name: str,
    entity: GraphNode,
    site: GraphSiteConfig,
    title: str | None,
    description: str | None,
) -> JsonLdDocument:
    breadcrumb_id = f"{url}#breadcrumb"
    page = GraphNode(
        page_type,
        url,
        url=url,
        name=title or name,
        description=description,
        mainEntity=ref(entity.id),
        isPartOf=website_reference(site, website_id(site)),
        breadcrumb=ref(breadcrumb_id),
        inLanguage=site.default_language,
    )
    breadcrumb = GraphNode(
        "BreadcrumbList",
        breadcrumb_id,
        itemListElement=list_items([(site.home_label, site.site_url), (name, url)]),
    )
    document = JsonLdDocument((page, entity, breadcrumb))
    logger.debug("knowledge_graph_assembled", page_url=url, node_types=document.types())
    return document


def assemble_organization_graph(
    organization: PublisherRecord | Mapping[str, Any],
    site: GraphSiteConfig,
    page_url: str | None = None,
) -> JsonLdDocument:
    """
    AboutPage, Organization and BreadcrumbList for a client page.

    The page URL is ``page_url``, else the canonical URL, else
    ``{site}/clients/{slug}``.

    Raises:
        ValueError: The organization has no slug
    """
    if not isinstance(organization, PublisherRecord):
        organization = PublisherRecord.from_dict(organization)
    if not organization.slug:
        raise ValueError("organization slug is required")

    url = page_url or organization.canonical_url or client_url(site, organization.slug)
    node = build_organization(organization, organization_id(site, organization.slug))
    return _profile_document(
        "AboutPage",
        url,
        organization.name,
        node,
        site,
        organization.seo_title,
        organization.seo_description or organization.description,
    )


def assemble_author_graph(
    author: AuthorRecord | Mapping[str, Any],
    site: GraphSiteConfig,
    page_url: str | None = None,
) -> JsonLdDocument:
    """
    ProfilePage, Person and BreadcrumbList for an author page.

    Raises:
        ValueError: The author has no slug
    """
    if not isinstance(author, AuthorRecord):
        author = AuthorRecord.from_dict(author)
    if not author.slug:
        raise ValueError("author slug is required")

    url = page_url or author.canonical_url or author_url(site, author.slug)
    node = build_person(author, person_id(site, author.slug))
    return _profile_document(
        "ProfilePage",
        url,
        author.name,
        node,
        site,
        author.seo_title,
        author.seo_description or author.bio,
    )
