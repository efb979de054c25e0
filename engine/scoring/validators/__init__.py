"""Validator library and per-entity catalogs.

A catalog maps a concrete ``(field, dimension)`` key to the label shown to
editors and the validator that scores it. Registries are assembled from
these catalogs by ``engine.scoring.registry``.
"""

from collections.abc import Callable

from engine.entities import EntityType
from engine.scoring.contract import VALUE_DIMENSION, Validator
from engine.scoring.thresholds import DEFAULT_THRESHOLDS, SEOThresholds
from engine.scoring.validators import article, author, common, organization, taxonomy

Catalog = dict[tuple[str, str], tuple[str, Validator]]

# Dimension names used by expansion tables
TITLE = "title"
OPEN_GRAPH = "open_graph"
PRESENCE = "presence"
ALT_TEXT = "alt_text"
DIMENSIONS = "dimensions"
FORMAT = "format"


def _value(name: str) -> tuple[str, str]:
    return (name, VALUE_DIMENSION)


def _social_entries(thresholds: SEOThresholds) -> Catalog:
    return {
        _value("twitter_title"): (
            "Twitter Title",
            common.make_twitter_title_validator(thresholds),
        ),
        _value("twitter_description"): (
            "Twitter Description",
            common.make_twitter_description_validator(thresholds),
        ),
        ("twitter_image", ALT_TEXT): ("Twitter Image Alt Text", common.validate_twitter_image_alt),
        _value("canonical_url"): ("Canonical URL", common.validate_canonical_url),
        _value("meta_robots"): ("Meta Robots", common.validate_meta_robots),
    }


def _og_image_entries() -> Catalog:
    return {
        ("og_image", PRESENCE): ("OG Image", common.validate_og_image),
        ("og_image", ALT_TEXT): ("OG Image Alt Text", common.validate_og_image_alt),
        ("og_image", DIMENSIONS): ("OG Image Dimensions", common.validate_og_image_dimensions),
    }


def article_catalog(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Catalog:
    return {
        _value("title"): ("Article Title", article.validate_article_title),
        _value("slug"): ("Slug", common.validate_slug),
        _value("content"): ("Content (Word Count)", article.validate_article_content),
        ("seo_title", TITLE): ("SEO Title", common.make_seo_title_validator(thresholds)),
        ("seo_title", OPEN_GRAPH): (
            "Open Graph Tags",
            common.make_open_graph_validator(thresholds, ("og_image", "featured_image")),
        ),
        _value("seo_description"): (
            "SEO Description",
            common.make_seo_description_validator(thresholds),
        ),
        ("featured_image", PRESENCE): ("Featured Image", article.validate_featured_image),
        ("featured_image", ALT_TEXT): (
            "Featured Image Alt Text",
            article.validate_featured_image_alt,
        ),
        ("featured_image", DIMENSIONS): (
            "Featured Image Dimensions",
            article.validate_featured_image_dimensions,
        ),
        _value("date_published"): ("Date Published", article.validate_date_published),
        _value("last_reviewed"): ("Last Reviewed", article.validate_last_reviewed),
        _value("category_id"): ("Category", article.validate_category),
        _value("twitter_card"): ("Twitter Cards", article.validate_article_twitter_cards),
        **_social_entries(thresholds),
    }


def organization_catalog(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Catalog:
    return {
        _value("name"): ("Client Name", organization.validate_name),
        _value("slug"): ("Slug", common.validate_slug),
        _value("legal_name"): ("Legal Name", organization.validate_legal_name),
        _value("url"): ("Website URL", common.validate_url),
        ("logo", PRESENCE): ("Logo", organization.validate_logo),
        ("logo", FORMAT): ("Logo Format", organization.validate_logo_format),
        ("logo", ALT_TEXT): ("Logo Alt Text", organization.validate_logo_alt),
        **_og_image_entries(),
        ("seo_title", TITLE): ("SEO Title", common.make_seo_title_validator(thresholds)),
        ("seo_title", OPEN_GRAPH): (
            "Open Graph Tags",
            common.make_open_graph_validator(thresholds, ("og_image",), url_field="url"),
        ),
        _value("seo_description"): (
            "SEO Description",
            common.make_seo_description_validator(thresholds),
        ),
        _value("description"): ("Organization Description", organization.validate_description),
        _value("same_as"): ("Social Profiles", organization.validate_social_profiles),
        _value("email"): ("Contact Information", organization.validate_contact_info),
        _value("contact_type"): ("ContactPoint Structure", organization.validate_contact_point),
        _value("address_street"): ("Address (Local SEO)", organization.validate_address),
        _value("founding_date"): ("Founding Date", organization.validate_founding_date),
        _value("alternate_name"): ("Alternate Name", organization.validate_alternate_name),
        _value("slogan"): ("Slogan", organization.validate_slogan),
        _value("organization_type"): (
            "Organization Type",
            organization.validate_organization_type,
        ),
        _value("address_region"): ("Address Region", organization.validate_address_region),
        _value("address_postal_code"): (
            "National Address",
            organization.validate_national_address,
        ),
        _value("commercial_registration_number"): (
            "Commercial Registration",
            organization.validate_commercial_registration,
        ),
        _value("vat_id"): ("VAT ID", organization.validate_vat_id),
        _value("tax_id"): ("Tax ID", organization.validate_tax_id),
        _value("legal_form"): ("Legal Form", organization.validate_legal_form),
        _value("isic_v4"): ("Industry Classification", organization.validate_classification),
        _value("number_of_employees"): (
            "Number of Employees",
            organization.validate_number_of_employees,
        ),
        _value("license_number"): ("License Information", organization.validate_license_info),
        _value("twitter_card"): ("Twitter Cards", common.validate_twitter_cards),
        **_social_entries(thresholds),
    }


def author_catalog(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Catalog:
    return {
        _value("name"): ("Author Name", author.validate_author_name),
        _value("slug"): ("Slug", common.validate_slug),
        _value("bio"): ("Author Bio", author.validate_author_bio),
        ("image", PRESENCE): ("Profile Image", author.validate_profile_image),
        ("image", ALT_TEXT): ("Profile Image Alt Text", author.validate_profile_image_alt),
        _value("job_title"): ("E-E-A-T Signals", author.validate_eeat_signals),
        _value("linked_in"): ("Social Profiles", author.validate_author_social),
        ("seo_title", TITLE): ("SEO Title", common.make_seo_title_validator(thresholds)),
        _value("seo_description"): (
            "SEO Description",
            common.make_seo_description_validator(thresholds),
        ),
        _value("url"): ("Author URL", common.validate_url),
    }


def tag_catalog(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Catalog:
    return {
        _value("name"): ("Tag Name", taxonomy.validate_tag_name),
        _value("slug"): ("Slug", common.validate_slug),
        _value("description"): ("Tag Description", taxonomy.validate_tag_description),
        ("seo_title", TITLE): ("SEO Title", common.make_seo_title_validator(thresholds)),
        ("seo_title", OPEN_GRAPH): (
            "Open Graph Tags",
            common.make_open_graph_validator(thresholds, ("og_image",)),
        ),
        _value("seo_description"): (
            "SEO Description",
            common.make_seo_description_validator(thresholds),
        ),
        **_og_image_entries(),
        _value("twitter_card"): ("Twitter Cards", common.validate_twitter_cards),
        **_social_entries(thresholds),
    }


def category_catalog(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Catalog:
    return {
        _value("name"): ("Category Name", taxonomy.validate_category_name),
        _value("slug"): ("Slug", common.validate_slug),
        _value("description"): ("Category Description", taxonomy.validate_category_description),
        ("seo_title", TITLE): ("SEO Title", common.make_seo_title_validator(thresholds)),
        ("seo_title", OPEN_GRAPH): (
            "Open Graph Tags",
            common.make_open_graph_validator(thresholds, ("og_image",)),
        ),
        _value("seo_description"): (
            "SEO Description",
            common.make_seo_description_validator(thresholds),
        ),
        _value("twitter_card"): ("Twitter Cards", common.validate_twitter_cards),
        _value("canonical_url"): ("Canonical URL", common.validate_canonical_url),
    }


def industry_catalog(thresholds: SEOThresholds = DEFAULT_THRESHOLDS) -> Catalog:
    # industry pages carry no og:title coupling on the SEO title
    return {
        _value("name"): ("Industry Name", taxonomy.validate_industry_name),
        _value("slug"): ("Slug", common.validate_slug),
        _value("description"): ("Industry Description", taxonomy.validate_industry_description),
        ("seo_title", TITLE): ("SEO Title", common.make_seo_title_validator(thresholds)),
        _value("seo_description"): (
            "SEO Description",
            common.make_seo_description_validator(thresholds),
        ),
        **_og_image_entries(),
        _value("twitter_card"): ("Twitter Cards", common.validate_twitter_cards),
        **_social_entries(thresholds),
    }


CATALOGS: dict[EntityType, Callable[[SEOThresholds], Catalog]] = {
    EntityType.ARTICLE: article_catalog,
    EntityType.ORGANIZATION: organization_catalog,
    EntityType.AUTHOR: author_catalog,
    EntityType.TAG: tag_catalog,
    EntityType.CATEGORY: category_catalog,
    EntityType.INDUSTRY: industry_catalog,
}


__all__ = [
    "ALT_TEXT",
    "CATALOGS",
    "DIMENSIONS",
    "FORMAT",
    "OPEN_GRAPH",
    "PRESENCE",
    "TITLE",
    "Catalog",
]
