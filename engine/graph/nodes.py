"""Node builders for the article knowledge graph.

Each builder returns one GraphNode. Optional properties are passed as
``None`` when the source lacks them and are dropped by the node itself.
"""

from engine.graph.document import GraphNode, iso_datetime, ref
from engine.graph.ids import GraphIds, category_url
from engine.graph.models import (
    ArticleRecord,
    AuthorRecord,
    FAQEntry,
    GalleryItem,
    GraphSiteConfig,
    MediaAsset,
    PublisherRecord,
)
from engine.text import html_to_text


def website_reference(site: GraphSiteConfig, website_id: str) -> dict:
    """Inline WebSite pointer used by page roots."""
    return {"@type": "WebSite", "@id": website_id, "name": site.site_name, "url": site.site_url}


def language(article: ArticleRecord, site: GraphSiteConfig) -> str:
    return article.in_language or site.default_language


def build_web_page(article: ArticleRecord, ids: GraphIds, site: GraphSiteConfig) -> GraphNode:
    return GraphNode(
        "WebPage",
        ids.page,
        url=ids.page,
        name=article.seo_title or article.title,
        description=article.summary,
        mainEntity=ref(ids.article),
        isPartOf=website_reference(site, ids.website),
        breadcrumb=ref(ids.breadcrumb),
        inLanguage=language(article, site),
        datePublished=iso_datetime(article.date_published),
        dateModified=iso_datetime(article.date_modified),
    )


def build_hero_image(media: MediaAsset, ids: GraphIds) -> GraphNode:
    return GraphNode(
        "ImageObject",
        ids.primary_image,
        url=media.url,
        contentUrl=media.url,
        width=media.width or None,
        height=media.height or None,
        caption=media.caption,
        name=media.alt_text,
        license=media.license,
        creator={"@type": "Person", "name": media.creator} if media.creator else None,
        representativeOfPage=True,
    )


def build_gallery_image(item: GalleryItem, image_id: str) -> GraphNode:
    return GraphNode(
        "ImageObject",
        image_id,
        url=item.media.url,
        contentUrl=item.media.url,
        width=item.media.width or None,
        height=item.media.height or None,
        caption=item.effective_caption,
        name=item.effective_alt_text,
        license=item.media.license,
    )


def build_image_list(article: ArticleRecord, ids: GraphIds) -> list[GraphNode]:
    """
    Hero image first, then gallery images ordered by position.

    Gallery ids are numbered from 2 in position order.
    """
    images = []
    if article.featured_image is not None:
        images.append(build_hero_image(article.featured_image, ids))
    gallery = sorted(article.gallery, key=lambda item: item.position)
    for index, item in enumerate(gallery):
        images.append(build_gallery_image(item, ids.gallery_image(index)))
    return images


def article_body(article: ArticleRecord) -> str | None:
    """Plain-text body for crawlers: the stored text, else the stripped HTML."""
    if article.article_body_text:
        return article.article_body_text
    if article.content:
        return html_to_text(article.content) or None
    return None


def build_article(article: ArticleRecord, ids: GraphIds, site: GraphSiteConfig) -> GraphNode:
    category = article.category
    about = None
    if category is not None:
        about = {
            "@type": "Thing",
            "@id": category_url(site, category.slug),
            "name": category.name,
        }
    free = article.is_accessible_for_free
    return GraphNode(
        "Article",
        ids.article,
        headline=article.title,
        description=article.summary,
        author=ref(ids.author),
        publisher=ref(ids.publisher),
        mainEntityOfPage=ref(ids.page),
        inLanguage=language(article, site),
        isAccessibleForFree=True if free is None else free,
        datePublished=iso_datetime(article.date_published),
        dateModified=iso_datetime(article.date_modified),
        lastReviewed=iso_datetime(article.last_reviewed),
        articleBody=article_body(article),
        wordCount=article.word_count or None,
        license=article.license,
        articleSection=category.name if category else None,
        about=about,
        keywords=list(article.tags),
        citation=list(article.citations),
        image=build_image_list(article, ids),
    )


def _employee_count(count: tuple[int, int] | None) -> dict | None:
    if count is None:
        return None
    low, high = count
    if low == high:
        return {"@type": "QuantitativeValue", "value": low}
    return {"@type": "QuantitativeValue", "minValue": low, "maxValue": high}


def build_organization(publisher: PublisherRecord, node_id: str) -> GraphNode:
    """Organization node; ``organization_type`` replaces the type when set."""
    logo = None
    if publisher.logo is not None:
        # zero dimensions mean "unknown" in the media library
        logo = {
            "@type": "ImageObject",
            "url": publisher.logo.url,
            "width": publisher.logo.width or None,
            "height": publisher.logo.height or None,
        }

    contact = None
    if publisher.email or publisher.phone:
        contact = {
            "@type": "ContactPoint",
            "contactType": publisher.contact_type,
            "email": publisher.email,
            "telephone": publisher.phone,
            "availableLanguage": list(publisher.knows_language),
        }

    address = None
    if (
        publisher.address_street
        or publisher.address_city
        or publisher.address_country
        or publisher.address_region
        or publisher.address_neighborhood
    ):
        address = {
            "@type": "PostalAddress",
            "streetAddress": publisher.address_street,
            "addressNeighborhood": publisher.address_neighborhood,
            "addressLocality": publisher.address_city,
            "addressRegion": publisher.address_region,
            "addressCountry": publisher.address_country,
            "postalCode": publisher.address_postal_code,
        }

    identifier = None
    if publisher.commercial_registration_number:
        identifier = [
            {
                "@type": "PropertyValue",
                "name": "Commercial Registration Number",
                "value": publisher.commercial_registration_number,
            }
        ]

    parent = None
    if publisher.parent_organization is not None:
        parent = {
            "@type": "Organization",
            "@id": publisher.parent_organization.id,
            "name": publisher.parent_organization.name,
            "url": publisher.parent_organization.url,
        }

    return GraphNode(
        publisher.organization_type or "Organization",
        node_id,
        name=publisher.name,
        legalName=publisher.legal_name,
        alternateName=publisher.alternate_name,
        url=publisher.url,
        slogan=publisher.slogan,
        description=publisher.summary,
        logo=logo,
        contactPoint=contact,
        address=address,
        identifier=identifier,
        vatID=publisher.vat_id,
        taxID=publisher.tax_id,
        isicV4=publisher.isic_v4,
        numberOfEmployees=_employee_count(publisher.number_of_employees),
        parentOrganization=parent,
        keywords=list(publisher.keywords),
        knowsLanguage=list(publisher.knows_language),
        sameAs=list(publisher.same_as),
        foundingDate=publisher.founding_date.isoformat() if publisher.founding_date else None,
    )


def build_person(author: AuthorRecord, node_id: str) -> GraphNode:
    return GraphNode(
        "Person",
        node_id,
        name=author.name,
        description=author.bio,
        image=author.image.url if author.image else None,
        url=author.url,
        jobTitle=author.job_title,
        knowsAbout=list(author.expertise_areas),
        hasCredential=list(author.credentials),
        memberOf=[{"@type": "Organization", "name": name} for name in author.member_of],
        sameAs=author.profile_links,
    )


def build_breadcrumb(
    article: ArticleRecord, ids: GraphIds, site: GraphSiteConfig
) -> GraphNode:
    """Home, then the category when there is one, then the article."""
    trail = [(site.home_label, site.site_url)]
    if article.category is not None:
        trail.append((article.category.name, category_url(site, article.category.slug)))
    trail.append((article.title, ids.page))
    return GraphNode("BreadcrumbList", ids.breadcrumb, itemListElement=list_items(trail))


def list_items(trail: list[tuple[str, str]]) -> list[dict]:
    return [
        {"@type": "ListItem", "position": position, "name": name, "item": url}
        for position, (name, url) in enumerate(trail, start=1)
    ]


def build_faq_page(faqs: list[FAQEntry], node_id: str) -> GraphNode:
    ordered = sorted(faqs, key=lambda faq: faq.position)
    return GraphNode(
        "FAQPage",
        node_id,
        mainEntity=[
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in ordered
        ],
    )


__all__ = [
    "build_article",
    "build_breadcrumb",
    "build_faq_page",
    "build_image_list",
    "build_organization",
    "build_person",
    "build_web_page",
]
