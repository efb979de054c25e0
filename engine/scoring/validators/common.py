"""Validators shared by every entity kind.

Settings-aware rules are built by ``make_*`` factories that close over an
SEOThresholds instance; everything else is a plain function. All of them
follow the contract in ``engine.scoring.contract``: total, pure, and
degrading to the absent branch on unexpected input.
"""

import re
from typing import Any

from engine.entities import EntitySnapshot, as_media, as_text
from engine.scoring.contract import ValidationResult, Validator, error, good, info, warning
from engine.scoring.thresholds import DEFAULT_THRESHOLDS, SEOThresholds

FULL_URL_PATTERN = re.compile(r"^https?://.+\..+")

# Open Graph image sizes
OPTIMAL_IMAGE_SIZE = (1200, 630)
MINIMUM_IMAGE_SIZE = (600, 314)


def has_text(entity: EntitySnapshot, *names: str) -> bool:
    """True when any of the named attributes holds non-blank text."""
    return any(entity.text(name) is not None for name in names)


def has_media(entity: EntitySnapshot, *names: str) -> bool:
    return any(entity.media(name) is not None for name in names)


def validate_slug(value: Any, entity: EntitySnapshot) -> ValidationResult:
    if as_text(value):
        return good("URL-friendly slug is set", 5)
    return error("Slug is required (auto-generated from name)")


def make_seo_title_validator(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Validator:
    """
    SEO title length check against the configured bounds.

    Bands:
        within [min, max]       -> good, 15
        below min               -> error, 5
        above max, restricted   -> error, 0
        up to 10 chars over     -> warning, 12
        further over            -> warning, 8
    """
    low = thresholds.seo_title_min
    high = thresholds.seo_title_max

    def validate_seo_title(value: Any, entity: EntitySnapshot) -> ValidationResult:
        title = as_text(value)
        if title is None:
            return error("SEO title is missing - critical for search visibility")
        length = len(title)
        if low <= length <= high:
            return good(f"Good length ({length} chars) - within {low}-{high} chars", 15)
        if length < low:
            return error(f"Too short ({length} chars) - minimum {low} chars recommended", 5)
        if thresholds.seo_title_restrict:
            return error(f"Too long ({length} chars) - maximum {high} chars allowed")
        if length <= high + 10:
            return warning(
                f"Slightly long ({length} chars) - may be truncated in search results", 12
            )
        return warning(f"Too long ({length} chars) - will be truncated, aim for {low}-{high}", 8)

    return validate_seo_title


def make_seo_description_validator(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Validator:
    """SEO description length check; 20 chars of slack before the lowest band."""
    low = thresholds.seo_description_min
    high = thresholds.seo_description_max

    def validate_seo_description(value: Any, entity: EntitySnapshot) -> ValidationResult:
        description = as_text(value)
        if description is None:
            return error("SEO description is missing - critical for click-through rate")
        length = len(description)
        if low <= length <= high:
            return good(f"Good length ({length} chars) - within {low}-{high} chars", 15)
        if length < low:
            return error(f"Too short ({length} chars) - minimum {low} chars recommended", 5)
        if thresholds.seo_description_restrict:
            return error(f"Too long ({length} chars) - maximum {high} chars allowed")
        if length <= high + 20:
            return warning(f"Slightly long ({length} chars) - may be truncated", 10)
        return warning(f"Too long ({length} chars) - will be truncated, aim for {low}-{high}", 8)

    return validate_seo_description


def _make_max_length_validator(noun: str, maximum: int, restrict: bool) -> Validator:
    def validate(value: Any, entity: EntitySnapshot) -> ValidationResult:
        text = as_text(value)
        if text is None:
            return info(f"{noun} optional - falls back to the SEO fields")
        length = len(text)
        if length <= maximum:
            return good(f"{noun} set ({length} chars)", 5)
        if restrict:
            return error(f"{noun} too long ({length} chars) - maximum {maximum} chars allowed")
        return warning(f"{noun} long ({length} chars) - recommended maximum {maximum}", 2)

    return validate


def make_twitter_title_validator(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Validator:
    return _make_max_length_validator(
        "Twitter title", thresholds.twitter_title_max, thresholds.twitter_title_restrict
    )


def make_twitter_description_validator(
    thresholds: SEOThresholds = DEFAULT_THRESHOLDS,
) -> Validator:
    return _make_max_length_validator(
        "Twitter description",
        thresholds.twitter_description_max,
        thresholds.twitter_description_restrict,
    )


def make_open_graph_validator(
    thresholds: SEOThresholds = DEFAULT_THRESHOLDS,
    image_fields: tuple[str, ...] = ("og_image",),
    url_field: str | None = None,
) -> Validator:
    """
    Combined check that every essential Open Graph tag can be generated.

    og:title and og:description fall back to the SEO title/description. A
    value over its configured maximum only counts as missing when the
    matching restrict flag is set.

    Args:
        thresholds: Length bounds for og:title / og:description
        image_fields: Media relations that can supply og:image, in order
        url_field: Attribute supplying og:url, when the entity carries one
    """

    def fits(text: str | None, maximum: int, restrict: bool) -> bool:
        if text is None:
            return False
        return not (restrict and len(text) > maximum)

    def validate_open_graph(value: Any, entity: EntitySnapshot) -> ValidationResult:
        title = entity.text("og_title") or entity.text("seo_title")
        description = entity.text("og_description") or entity.text("seo_description")
        image = next(
            (media for media in map(entity.media, image_fields) if media is not None), None
        )

        has_title = fits(title, thresholds.og_title_max, thresholds.og_title_restrict)
        has_description = fits(
            description, thresholds.og_description_max, thresholds.og_description_restrict
        )
        has_url = url_field is None or entity.text(url_field) is not None
        has_alt = image is not None and image.has_alt_text
        has_width = image is not None and image.width is not None
        has_height = image is not None and image.height is not None

        if has_title and has_description and has_url and image is not None:
            message = "All essential OG tags can be generated"
            if has_alt and has_width and has_height:
                return good(message + " - complete with alt text and dimensions", 15)
            if has_alt:
                return good(message + " - add image dimensions (1200x630px recommended)", 12)
            if has_width and has_height:
                return good(message + " - add image alt text for accessibility", 12)
            return good(message + " - add image alt text and dimensions", 10)

        missing = []
        if not has_title:
            missing.append("og:title")
        if not has_description:
            missing.append("og:description")
        if not has_url:
            missing.append("og:url")
        if image is None:
            missing.append("og:image")
        else:
            if not has_alt:
                missing.append("og:image:alt")
            if not has_width:
                missing.append("og:image:width")
            if not has_height:
                missing.append("og:image:height")

        partial = (
            (3 if has_title else 0)
            + (3 if has_description else 0)
            + (2 if has_url and url_field is not None else 0)
            + (2 if image is not None else 0)
            + (2 if has_alt else 0)
            + (1 if has_width else 0)
            + (1 if has_height else 0)
        )
        return warning(f"Missing OG tags: {', '.join(missing)}", partial)

    return validate_open_graph


def make_media_presence_validator(noun: str, points: int = 5) -> Validator:
    """Presence of a media relation; a missing one is a warning worth 0."""

    def validate_presence(value: Any, entity: EntitySnapshot) -> ValidationResult:
        if as_media(value) is not None:
            return good(f"{noun} set", points)
        return warning(f"{noun} recommended")

    return validate_presence


def make_media_alt_validator(noun: str, points: int = 5) -> Validator:
    """Alt text on a media relation; not applicable when there is no media."""

    def validate_alt(value: Any, entity: EntitySnapshot) -> ValidationResult:
        media = as_media(value)
        if media is None:
            return info(f"{noun} alt text not needed (no {noun.lower()} provided)")
        if media.has_alt_text:
            return good(f"{noun} alt text provided", points)
        return error(f"{noun} alt text required when {noun.lower()} exists")

    return validate_alt


def make_media_dimensions_validator(noun: str) -> Validator:
    """Width/height on a media relation: 1200x630 -> 5, >= 600x314 -> 3, smaller -> 2."""

    def validate_dimensions(value: Any, entity: EntitySnapshot) -> ValidationResult:
        media = as_media(value)
        if media is None:
            return info(f"{noun} dimensions not needed (no {noun.lower()} provided)")
        if media.has_dimensions:
            size = f"{media.width:g}x{media.height:g}px"
            if (media.width, media.height) == OPTIMAL_IMAGE_SIZE:
                return good(f"{noun} dimensions optimal ({size})", 5)
            if media.width >= MINIMUM_IMAGE_SIZE[0] and media.height >= MINIMUM_IMAGE_SIZE[1]:
                return warning(f"{noun} dimensions ({size}) - recommend 1200x630px", 3)
            return warning(f"{noun} dimensions ({size}) - recommend 1200x630px minimum", 2)
        if media.width is not None or media.height is not None:
            return warning(f"{noun} dimensions incomplete - add both width and height", 1)
        return warning(f"{noun} dimensions recommended (1200x630px)")

    return validate_dimensions


validate_og_image = make_media_presence_validator("Open Graph image")
validate_og_image_alt = make_media_alt_validator("OG image")
validate_og_image_dimensions = make_media_dimensions_validator("OG image")
validate_twitter_image_alt = make_media_alt_validator("Twitter image")


def make_twitter_cards_validator(image_fields: tuple[str, ...] = ("og_image",)) -> Validator:
    """
    Twitter card completeness.

    A full card (type, title, description, image) scores 10, or 15 with
    image alt text. When the card could be derived from the SEO fields and
    one of ``image_fields`` the check still earns 5.
    """

    def validate_twitter_cards(value: Any, entity: EntitySnapshot) -> ValidationResult:
        twitter_image = entity.media("twitter_image")
        complete = (
            has_text(entity, "twitter_card")
            and has_text(entity, "twitter_title")
            and has_text(entity, "twitter_description")
            and twitter_image is not None
        )
        if complete:
            if twitter_image.has_alt_text:
                return good("Complete Twitter Cards configured - includes alt text", 15)
            return good("Complete Twitter Cards configured - add image alt text", 10)
        derivable = (
            has_text(entity, "seo_title")
            and has_text(entity, "seo_description")
            and has_media(entity, *image_fields)
        )
        if derivable:
            return warning("Twitter Cards can be auto-generated from existing fields", 5)
        return warning("Twitter Cards recommended for social sharing")

    return validate_twitter_cards


validate_twitter_cards = make_twitter_cards_validator()


def validate_canonical_url(value: Any, entity: EntitySnapshot) -> ValidationResult:
    url = as_text(value)
    if url is None:
        return warning("Canonical URL recommended - prevents duplicate content")
    if FULL_URL_PATTERN.match(url):
        return good("Canonical URL set - prevents duplicate content issues", 5)
    return warning("Canonical URL format invalid - should be a full URL")


def validate_meta_robots(value: Any, entity: EntitySnapshot) -> ValidationResult:
    robots = as_text(value)
    if robots is None:
        return info("Meta robots not set - search engines default to index, follow")
    if "noindex" in robots.lower():
        return warning("Meta robots blocks indexing (noindex)")
    return good(f"Meta robots allows indexing ({robots})", 5)


def validate_url(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """Combined URL format and HTTPS check: 15 / 10 / 5 / 0."""
    url = as_text(value)
    if url is None:
        return warning("Website URL recommended for structured data")
    if not FULL_URL_PATTERN.match(url):
        return warning("URL format should be https://example.com", 5)
    if url.lower().startswith("https://"):
        return good("Valid HTTPS URL provided", 15)
    return warning("Valid URL but not HTTPS - search engines prefer secure sites", 10)


def make_description_validator(noun: str) -> Validator:
    """Long-form description: >= 100 chars -> 10, shorter -> 5, missing -> 0."""

    def validate(value: Any, entity: EntitySnapshot) -> ValidationResult:
        text = as_text(value)
        if text is None:
            return warning(f"{noun} recommended (minimum 100 chars)")
        if len(text.strip()) >= 100:
            return good(f"Comprehensive {noun.lower()} ({len(text)} chars)", 10)
        return warning(f"{noun} too short ({len(text)} chars) - minimum 100 chars recommended", 5)

    return validate


def make_name_validator(noun: str) -> Validator:
    def validate(value: Any, entity: EntitySnapshot) -> ValidationResult:
        if as_text(value):
            return good(f"{noun} is set", 5)
        return error(f"{noun} is required")

    return validate
