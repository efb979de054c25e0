"""Article analyzer input normalization.

Collapses the several shapes an article can arrive in (flat form data,
hydrated record with relations) into one flat, typed record so each
category check reads a single attribute.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from engine.entities import EntitySnapshot, snapshot
from engine.text import count_words


@dataclass(frozen=True)
class NormalizedArticle:
    """Flat view of the article attributes the analyzer checks."""

    title: str = ""
    seo_title: str = ""
    seo_description: str = ""
    meta_robots: str = ""
    word_count: int = 0
    content_depth: str = ""
    excerpt: str = ""
    has_featured_image: bool = False
    featured_image_alt: str = ""
    json_ld: str = ""
    has_author: bool = False
    date_published: datetime | None = None
    canonical_url: str = ""
    faq_count: int = 0
    sitemap_priority: float | None = None
    sitemap_change_frequency: str = ""
    og_title: str = ""
    og_description: str = ""
    twitter_card: str = ""


def _text(entity: EntitySnapshot, *names: str) -> str:
    for name in names:
        value = entity.text(name)
        if value is not None:
            return value
    return ""


def _word_count(entity: EntitySnapshot) -> int:
    explicit = entity.number("word_count")
    if explicit is not None:
        return max(int(explicit), 0)
    content = entity.text("content")
    return count_words(content) if content else 0


def _faq_count(entity: EntitySnapshot) -> int:
    explicit = entity.number("faq_count")
    if explicit is not None:
        return max(int(explicit), 0)
    return len(entity.items("faqs"))


def _has_author(entity: EntitySnapshot) -> bool:
    if entity.raw("author_id") not in (None, ""):
        return True
    author = entity.nested("author")
    return author.text("name") is not None or author.raw("id") not in (None, "")


def _json_ld(entity: EntitySnapshot) -> str:
    value = entity.raw("json_ld_structured_data")
    if isinstance(value, str):
        return value.strip()
    # already-parsed documents count when they carry anything
    if isinstance(value, Mapping | list) and value:
        return "present"
    return ""


def normalize_article_input(entity: Mapping[str, Any] | EntitySnapshot | None) -> NormalizedArticle:
    """
    Flatten an article mapping for the category checks.

    Word count prefers an explicit ``word_count`` and otherwise counts the
    HTML-stripped ``content``. FAQ count prefers ``faq_count`` over
    ``len(faqs)``. The featured image is present when ``featured_image_id``
    or ``featured_image.url`` is set.
    """
    data = snapshot(entity)
    featured = data.media("featured_image")
    has_image = data.raw("featured_image_id") not in (None, "") or featured is not None
    alt_text = data.text("featured_image_alt") or (featured.alt_text if featured else None)

    return NormalizedArticle(
        title=_text(data, "title"),
        seo_title=_text(data, "seo_title"),
        seo_description=_text(data, "seo_description"),
        meta_robots=_text(data, "meta_robots"),
        word_count=_word_count(data),
        content_depth=_text(data, "content_depth"),
        excerpt=_text(data, "excerpt"),
        has_featured_image=has_image,
        featured_image_alt=alt_text or "",
        json_ld=_json_ld(data),
        has_author=_has_author(data),
        date_published=data.when("date_published"),
        canonical_url=_text(data, "canonical_url"),
        faq_count=_faq_count(data),
        sitemap_priority=data.number("sitemap_priority"),
        sitemap_change_frequency=_text(data, "sitemap_change_frequency"),
        og_title=_text(data, "og_title"),
        og_description=_text(data, "og_description"),
        twitter_card=_text(data, "twitter_card"),
    )
