"""Field -> {category, optimal weight, description} source tables.

Each entity kind has one source table describing which stored attributes
feed meta-tag or structured-data output and how many points an optimal
value is worth. Registries select from these tables, expand compound
fields into concrete validator keys, and derive their ceiling from the
``optimal`` weights.
"""

from dataclasses import dataclass

from engine.entities import EntityType
from engine.scoring.contract import VALUE_DIMENSION
from engine.scoring.validators import ALT_TEXT, DIMENSIONS, FORMAT, OPEN_GRAPH, PRESENCE, TITLE

# Source entries in this category never reach a registry
INTEGRATION = "Integration"


@dataclass(frozen=True)
class FieldMapping:
    """One stored attribute and its SEO relevance."""

    name: str
    category: str
    optimal: int
    description: str
    affects_meta_tags: bool = False
    affects_json_ld: bool = False

    @property
    def is_seo_relevant(self) -> bool:
        return self.affects_meta_tags or self.affects_json_ld

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "optimal": self.optimal,
            "description": self.description,
            "affects_meta_tags": self.affects_meta_tags,
            "affects_json_ld": self.affects_json_ld,
        }


def _meta(name: str, category: str, optimal: int, description: str) -> FieldMapping:
    return FieldMapping(name, category, optimal, description, affects_meta_tags=True)


def _json_ld(name: str, category: str, optimal: int, description: str) -> FieldMapping:
    return FieldMapping(name, category, optimal, description, affects_json_ld=True)


def _both(name: str, category: str, optimal: int, description: str) -> FieldMapping:
    return FieldMapping(
        name, category, optimal, description, affects_meta_tags=True, affects_json_ld=True
    )


ARTICLE_FIELDS: tuple[FieldMapping, ...] = (
    _json_ld("title", "Basic", 5, "Article headline"),
    _meta("slug", "Basic", 5, "URL slug"),
    _json_ld("content", "Content", 10, "Article body (word count)"),
    _both("seo_title", "SEO", 15, "SEO title and Open Graph title"),
    _both("seo_description", "SEO", 15, "Meta description"),
    _both("featured_image", "Media", 20, "Featured image with alt text and dimensions"),
    _json_ld("date_published", "Dates", 10, "Publication date"),
    _json_ld("last_reviewed", "Dates", 5, "Last reviewed date"),
    _json_ld("category_id", "Taxonomy", 5, "Primary category"),
    _meta("twitter_card", "Social", 15, "Twitter card type"),
    _meta("twitter_title", "Social", 5, "Twitter title override"),
    _meta("twitter_description", "Social", 5, "Twitter description override"),
    _meta("twitter_image", "Social", 5, "Twitter image"),
    _both("canonical_url", "Technical", 5, "Canonical URL"),
    _meta("meta_robots", "Technical", 5, "Robots directives"),
    FieldMapping("status", "Workflow", 0, "Editorial status"),
    FieldMapping("content_depth", "Editorial", 0, "Editorial depth classification"),
)

ORGANIZATION_FIELDS: tuple[FieldMapping, ...] = (
    _json_ld("name", "Basic", 5, "Client name"),
    _meta("slug", "Basic", 5, "URL slug"),
    _json_ld("legal_name", "Basic", 5, "Registered legal name"),
    _both("url", "Basic", 15, "Website URL (format and HTTPS)"),
    _json_ld("logo", "Media", 18, "Logo with format and alt text"),
    _meta("og_image", "Media", 15, "Open Graph image"),
    _both("seo_title", "SEO", 15, "SEO title and Open Graph title"),
    _both("seo_description", "SEO", 15, "Meta description"),
    _json_ld("description", "Content", 10, "Organization description"),
    _json_ld("same_as", "Social", 10, "Social profile links"),
    _json_ld("email", "Contact", 10, "Contact email"),
    _json_ld("phone", "Contact", 0, "Contact phone"),
    _json_ld("contact_type", "Contact", 5, "ContactPoint type"),
    _json_ld("address_street", "Address", 5, "Street address"),
    _json_ld("address_city", "Address", 0, "City"),
    _json_ld("address_country", "Address", 0, "Country"),
    _json_ld("address_postal_code", "Address", 5, "National address postal code"),
    _json_ld("address_building_number", "Address", 0, "National address building number"),
    _json_ld("address_additional_number", "Address", 0, "National address additional number"),
    _json_ld("address_neighborhood", "Address", 0, "District or neighborhood"),
    _json_ld("address_region", "Address", 3, "Region or province"),
    _json_ld("founding_date", "Basic", 5, "Founding date"),
    _json_ld("alternate_name", "Basic", 5, "Alternate or short name"),
    _json_ld("slogan", "Basic", 5, "Brand slogan"),
    _json_ld("organization_type", "Basic", 5, "schema.org organization subtype"),
    _json_ld("commercial_registration_number", "Legal", 5, "Commercial registration number"),
    _json_ld("vat_id", "Legal", 5, "VAT registration number"),
    _json_ld("tax_id", "Legal", 3, "Tax identification number"),
    _json_ld("legal_form", "Legal", 3, "Legal form of the entity"),
    _json_ld("isic_v4", "Classification", 5, "ISIC v4 industry code"),
    _json_ld("business_activity_code", "Classification", 0, "Local business activity code"),
    _json_ld("number_of_employees", "Classification", 3, "Headcount or range"),
    _json_ld("license_number", "Legal", 3, "Operating license number"),
    _json_ld("license_authority", "Legal", 0, "Licensing authority"),
    _meta("twitter_card", "Social", 15, "Twitter card type"),
    _meta("twitter_title", "Social", 5, "Twitter title override"),
    _meta("twitter_description", "Social", 5, "Twitter description override"),
    _meta("twitter_image", "Social", 5, "Twitter image"),
    _both("canonical_url", "Technical", 5, "Canonical URL"),
    _meta("meta_robots", "Technical", 5, "Robots directives"),
    FieldMapping("business_brief", "Internal", 10, "Brief for content writers"),
    _meta("gtm_id", INTEGRATION, 5, "Google Tag Manager container"),
)

AUTHOR_FIELDS: tuple[FieldMapping, ...] = (
    _json_ld("name", "Basic", 5, "Author name"),
    _meta("slug", "Basic", 5, "URL slug"),
    _json_ld("bio", "Content", 10, "Author biography"),
    _json_ld("image", "Media", 10, "Profile image with alt text"),
    _json_ld("job_title", "Expertise", 15, "Job title and E-E-A-T signals"),
    _json_ld("credentials", "Expertise", 0, "Credentials"),
    _json_ld("expertise_areas", "Expertise", 0, "Expertise areas"),
    _json_ld("linked_in", "Social", 10, "LinkedIn profile"),
    _json_ld("twitter", "Social", 0, "Twitter profile"),
    _json_ld("facebook", "Social", 0, "Facebook profile"),
    _json_ld("same_as", "Social", 0, "Other profile links"),
    _meta("seo_title", "SEO", 15, "SEO title"),
    _meta("seo_description", "SEO", 15, "Meta description"),
    _json_ld("url", "Basic", 15, "Author page URL"),
)

TAG_FIELDS: tuple[FieldMapping, ...] = (
    _json_ld("name", "Basic", 5, "Tag name"),
    _meta("slug", "Basic", 5, "URL slug"),
    _both("description", "Content", 10, "Tag description"),
    _both("seo_title", "SEO", 15, "SEO title and Open Graph title"),
    _both("seo_description", "SEO", 15, "Meta description"),
    _meta("og_image", "Media", 15, "Open Graph image"),
    _meta("twitter_card", "Social", 15, "Twitter card type"),
    _meta("twitter_title", "Social", 5, "Twitter title override"),
    _meta("twitter_description", "Social", 5, "Twitter description override"),
    _meta("twitter_image", "Social", 5, "Twitter image"),
    _both("canonical_url", "Technical", 5, "Canonical URL"),
)

CATEGORY_FIELDS: tuple[FieldMapping, ...] = (
    _json_ld("name", "Basic", 5, "Category name"),
    _meta("slug", "Basic", 5, "URL slug"),
    _both("description", "Content", 10, "Category description"),
    _both("seo_title", "SEO", 15, "SEO title and Open Graph title"),
    _both("seo_description", "SEO", 15, "Meta description"),
    _meta("twitter_card", "Social", 15, "Twitter card type"),
    _both("canonical_url", "Technical", 5, "Canonical URL"),
)

INDUSTRY_FIELDS: tuple[FieldMapping, ...] = (
    _json_ld("name", "Basic", 5, "Industry name"),
    _meta("slug", "Basic", 5, "URL slug"),
    _both("description", "Content", 10, "Industry description"),
    _meta("seo_title", "SEO", 15, "SEO title"),
    _both("seo_description", "SEO", 15, "Meta description"),
    _meta("og_image", "Media", 15, "Open Graph image"),
    _meta("twitter_card", "Social", 15, "Twitter card type"),
    _meta("twitter_title", "Social", 5, "Twitter title override"),
    _meta("twitter_description", "Social", 5, "Twitter description override"),
    _meta("twitter_image", "Social", 5, "Twitter image"),
    _both("canonical_url", "Technical", 5, "Canonical URL"),
)

FIELD_TABLES: dict[EntityType, tuple[FieldMapping, ...]] = {
    EntityType.ARTICLE: ARTICLE_FIELDS,
    EntityType.ORGANIZATION: ORGANIZATION_FIELDS,
    EntityType.AUTHOR: AUTHOR_FIELDS,
    EntityType.TAG: TAG_FIELDS,
    EntityType.CATEGORY: CATEGORY_FIELDS,
    EntityType.INDUSTRY: INDUSTRY_FIELDS,
}


# Compound field -> concrete validator keys. Fields not listed here map to
# themselves with the default dimension.
_SEO_TITLE_DIMENSIONS = (("seo_title", TITLE), ("seo_title", OPEN_GRAPH))
_OG_IMAGE_DIMENSIONS = (("og_image", PRESENCE), ("og_image", ALT_TEXT), ("og_image", DIMENSIONS))
_TWITTER_IMAGE = (("twitter_image", ALT_TEXT),)

EXPANSIONS: dict[EntityType, dict[str, tuple[tuple[str, str], ...]]] = {
    EntityType.ARTICLE: {
        "seo_title": _SEO_TITLE_DIMENSIONS,
        "featured_image": (
            ("featured_image", PRESENCE),
            ("featured_image", ALT_TEXT),
            ("featured_image", DIMENSIONS),
        ),
        "twitter_image": _TWITTER_IMAGE,
    },
    EntityType.ORGANIZATION: {
        "seo_title": _SEO_TITLE_DIMENSIONS,
        "logo": (("logo", PRESENCE), ("logo", FORMAT), ("logo", ALT_TEXT)),
        "og_image": _OG_IMAGE_DIMENSIONS,
        "twitter_image": _TWITTER_IMAGE,
        "phone": (("email", VALUE_DIMENSION),),
        "address_city": (("address_street", VALUE_DIMENSION),),
        "address_country": (("address_street", VALUE_DIMENSION),),
        "address_building_number": (("address_street", VALUE_DIMENSION),),
        "address_additional_number": (("address_street", VALUE_DIMENSION),),
        "address_neighborhood": (("address_street", VALUE_DIMENSION),),
        "business_activity_code": (("isic_v4", VALUE_DIMENSION),),
        "license_authority": (("license_number", VALUE_DIMENSION),),
    },
    EntityType.AUTHOR: {
        "seo_title": (("seo_title", TITLE),),
        "image": (("image", PRESENCE), ("image", ALT_TEXT)),
        "credentials": (("job_title", VALUE_DIMENSION),),
        "expertise_areas": (("job_title", VALUE_DIMENSION),),
        "twitter": (("linked_in", VALUE_DIMENSION),),
        "facebook": (("linked_in", VALUE_DIMENSION),),
        "same_as": (("linked_in", VALUE_DIMENSION),),
    },
    EntityType.TAG: {
        "seo_title": _SEO_TITLE_DIMENSIONS,
        "og_image": _OG_IMAGE_DIMENSIONS,
        "twitter_image": _TWITTER_IMAGE,
    },
    EntityType.CATEGORY: {
        "seo_title": _SEO_TITLE_DIMENSIONS,
    },
    EntityType.INDUSTRY: {
        "seo_title": (("seo_title", TITLE),),
        "og_image": _OG_IMAGE_DIMENSIONS,
        "twitter_image": _TWITTER_IMAGE,
    },
}

# Ceiling used when a table's optimal weights sum to zero
FALLBACK_MAX_SCORES: dict[EntityType, int] = {
    EntityType.ARTICLE: 200,
    EntityType.ORGANIZATION: 200,
    EntityType.AUTHOR: 150,
    EntityType.TAG: 100,
    EntityType.CATEGORY: 100,
    EntityType.INDUSTRY: 100,
}

DEFAULT_MAX_SCORE = 200


def concrete_keys(entity_type: EntityType, mapping: FieldMapping) -> tuple[tuple[str, str], ...]:
    """Validator keys a source entry expands into."""
    expansion = EXPANSIONS.get(entity_type, {})
    return expansion.get(mapping.name, ((mapping.name, VALUE_DIMENSION),))
