"""Article validators."""

from typing import Any

from engine.entities import EntitySnapshot, as_datetime, as_media, as_number, as_text
from engine.scoring.contract import ValidationResult, error, good, info, warning
from engine.scoring.validators.common import (
    make_media_alt_validator,
    make_media_dimensions_validator,
    make_name_validator,
    make_twitter_cards_validator,
)
from engine.text import count_words

PUBLISHED_STATUS = "PUBLISHED"

validate_article_title = make_name_validator("Article title")
validate_featured_image_alt = make_media_alt_validator("Featured image")
validate_featured_image_dimensions = make_media_dimensions_validator("Featured image")
validate_article_twitter_cards = make_twitter_cards_validator(("og_image", "featured_image"))


def validate_article_content(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """Word count of the body with markup stripped: >= 300 -> 10, >= 200 -> 5, else 2."""
    content = as_text(value)
    if content is None:
        return error("Article content is required")
    words = count_words(content)
    if words >= 300:
        return good(f"Article content has {words} words - good depth", 10)
    if words >= 200:
        return warning(f"Article content has {words} words - aim for 300+ words", 5)
    return warning(f"Article content too short ({words} words) - minimum 300 words", 2)


def validate_featured_image(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """
    Featured image presence, weighted by its alt text.

    The image counts as present when the relation has a URL or the entity
    carries a ``featured_image_id``.
    """
    media = as_media(value)
    if media is None and entity.raw("featured_image_id") in (None, ""):
        return warning("Featured image recommended (1200x630px) for social sharing")
    alt_text = (media.alt_text if media else None) or entity.text("featured_image_alt")
    if alt_text:
        return good("Featured image with alt text provided", 10)
    return error("Featured image alt text required when image exists", 5)


def validate_date_published(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """Publication date is only required once the article is published."""
    if entity.text("status") != PUBLISHED_STATUS:
        return info("Publication date will be set when the article is published")
    if as_datetime(value) is not None:
        return good("Publication date set", 10)
    return error("Publication date required for published articles")


def validate_last_reviewed(value: Any, entity: EntitySnapshot) -> ValidationResult:
    if as_datetime(value) is not None:
        return good("Last reviewed date set - shows content freshness", 5)
    return warning("Last reviewed date recommended - update when content is reviewed")


def validate_category(value: Any, entity: EntitySnapshot) -> ValidationResult:
    # ids may be strings or integers depending on the store
    if as_text(value) or as_number(value) is not None:
        return good("Category assigned", 5)
    return warning("Category recommended - improves site structure")
