"""Stable node identifiers.

Every ``@id`` is a pure string derivation from the page URL, the site URL
and a relation slug, so re-assembling an unchanged article reproduces the
same cross-references.
"""

from dataclasses import dataclass

from engine.graph.models import ArticleRecord, GraphSiteConfig


def resolve_page_url(
    article: ArticleRecord, site: GraphSiteConfig, page_url: str | None = None
) -> str:
    """Explicit page URL, else the canonical URL, else ``{site}/articles/{slug}``."""
    if page_url:
        return page_url
    if article.canonical_url:
        return article.canonical_url
    return f"{site.site_url}/articles/{article.slug}"


def website_id(site: GraphSiteConfig) -> str:
    return f"{site.site_url}#website"


def category_url(site: GraphSiteConfig, slug: str) -> str:
    return f"{site.site_url}/categories/{slug}"


def tag_url(site: GraphSiteConfig, slug: str) -> str:
    return f"{site.site_url}/tags/{slug}"


def industry_url(site: GraphSiteConfig, slug: str) -> str:
    return f"{site.site_url}/industries/{slug}"


def author_url(site: GraphSiteConfig, slug: str) -> str:
    return f"{site.site_url}/authors/{slug}"


def client_url(site: GraphSiteConfig, slug: str) -> str:
    return f"{site.site_url}/clients/{slug}"


def person_id(site: GraphSiteConfig, slug: str) -> str:
    return f"{author_url(site, slug)}#person"


def organization_id(site: GraphSiteConfig, slug: str) -> str:
    return f"{client_url(site, slug)}#organization"


@dataclass(frozen=True)
class GraphIds:
    """The ids one article document uses."""

    page: str
    article: str
    author: str
    publisher: str
    breadcrumb: str
    faq: str
    primary_image: str
    website: str

    @classmethod
    def for_article(
        cls, article: ArticleRecord, site: GraphSiteConfig, page_url: str | None = None
    ) -> "GraphIds":
        url = resolve_page_url(article, site, page_url)
        return cls(
            page=url,
            article=f"{url}#article",
            author=person_id(site, article.author.slug),
            publisher=organization_id(site, article.publisher.slug),
            breadcrumb=f"{url}#breadcrumb",
            faq=f"{url}#faq",
            primary_image=f"{url}#primary-image",
            website=website_id(site),
        )

    def gallery_image(self, index: int) -> str:
        """Id of the gallery image at ``index`` (0-based); numbering starts at 2."""
        return f"{self.page}#image-{index + 2}"
