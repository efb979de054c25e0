"""Tests for the validator library."""

from engine.entities import EntitySnapshot
from engine.scoring.contract import ValidationResult, ValidationStatus
from engine.scoring.thresholds import SEOThresholds
from engine.scoring.validators import article, author, common, organization, taxonomy

GOOD = ValidationStatus.GOOD
WARNING = ValidationStatus.WARNING
ERROR = ValidationStatus.ERROR
INFO = ValidationStatus.INFO

IMAGE = {"url": "https://cdn.example.com/hero.jpg"}
FULL_IMAGE = {**IMAGE, "alt_text": "Hero", "width": 1200, "height": 630}


def make_entity(**fields) -> EntitySnapshot:
    """Create a test EntitySnapshot."""
    return EntitySnapshot(fields)


def check(validator, value=None, **fields) -> tuple[ValidationStatus, float]:
    result = validator(value, make_entity(**fields))
    return result.status, result.score


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_negative_scores_clamp_to_zero(self) -> None:
        """Points are never negative."""
        result = ValidationResult(ERROR, "broken", -3)
        assert result.score == 0

    def test_to_dict(self) -> None:
        """Status serializes as its value."""
        result = ValidationResult(GOOD, "ok", 5)
        assert result.to_dict() == {"status": "good", "message": "ok", "score": 5}


class TestSeoTitle:
    """Tests for the SEO title validator."""

    validate = staticmethod(common.make_seo_title_validator())

    def test_missing(self) -> None:
        """Missing title is an error worth nothing."""
        assert check(self.validate, None) == (ERROR, 0)
        assert check(self.validate, "   ") == (ERROR, 0)

    def test_within_bounds(self) -> None:
        """Lengths 30 through 60 are optimal."""
        assert check(self.validate, "a" * 30) == (GOOD, 15)
        assert check(self.validate, "a" * 60) == (GOOD, 15)

    def test_too_short(self) -> None:
        """Below the minimum keeps partial credit."""
        assert check(self.validate, "a" * 29) == (ERROR, 5)

    def test_slightly_and_far_over(self) -> None:
        """Overruns degrade in two warning bands."""
        assert check(self.validate, "a" * 70) == (WARNING, 12)
        assert check(self.validate, "a" * 71) == (WARNING, 8)

    def test_restrict_makes_overrun_an_error(self) -> None:
        """With restrict set, any overrun scores 0."""
        validate = common.make_seo_title_validator(SEOThresholds(seo_title_restrict=True))
        assert check(validate, "a" * 61) == (ERROR, 0)

    def test_custom_bounds(self) -> None:
        """Thresholds are read from the settings instance."""
        thresholds = SEOThresholds(seo_title_min=10, seo_title_max=20)
        validate = common.make_seo_title_validator(thresholds)
        assert check(validate, "a" * 15) == (GOOD, 15)
        assert check(validate, "a" * 25) == (WARNING, 12)


class TestSeoDescription:
    """Tests for the SEO description validator."""

    validate = staticmethod(common.make_seo_description_validator())

    def test_bands(self) -> None:
        """120-160 optimal, 20 chars of slack, then the lowest band."""
        assert check(self.validate, None) == (ERROR, 0)
        assert check(self.validate, "a" * 119) == (ERROR, 5)
        assert check(self.validate, "a" * 120) == (GOOD, 15)
        assert check(self.validate, "a" * 180) == (WARNING, 10)
        assert check(self.validate, "a" * 181) == (WARNING, 8)

    def test_restrict(self) -> None:
        """Restricted overruns are errors."""
        validate = common.make_seo_description_validator(
            SEOThresholds(seo_description_restrict=True)
        )
        assert check(validate, "a" * 161) == (ERROR, 0)


class TestTwitterText:
    """Tests for the Twitter title and description validators."""

    def test_twitter_title_optional(self) -> None:
        """Absent twitter title falls back and is informational."""
        validate = common.make_twitter_title_validator()
        assert check(validate, None) == (INFO, 0)
        assert check(validate, "a" * 70) == (GOOD, 5)

    def test_twitter_title_restricted_by_default(self) -> None:
        """Default thresholds restrict twitter text length."""
        validate = common.make_twitter_title_validator()
        assert check(validate, "a" * 71) == (ERROR, 0)

    def test_twitter_description_unrestricted(self) -> None:
        """Without restrict an overrun is a warning with partial credit."""
        validate = common.make_twitter_description_validator(
            SEOThresholds(twitter_description_restrict=False)
        )
        assert check(validate, "a" * 201) == (WARNING, 2)


class TestOpenGraph:
    """Tests for the combined Open Graph validator."""

    validate = staticmethod(common.make_open_graph_validator())

    def test_complete_with_alt_and_dimensions(self) -> None:
        """Every tag plus alt text and dimensions scores 15."""
        assert check(
            self.validate, seo_title="Title", seo_description="Desc", og_image=FULL_IMAGE
        ) == (GOOD, 15)

    def test_complete_without_extras(self) -> None:
        """Essential tags alone score 10."""
        assert check(
            self.validate, seo_title="Title", seo_description="Desc", og_image=IMAGE
        ) == (GOOD, 10)

    def test_complete_with_alt_only(self) -> None:
        """Alt text without dimensions scores 12."""
        image = {**IMAGE, "alt_text": "Hero"}
        assert check(
            self.validate, og_title="OG", og_description="Desc", og_image=image
        ) == (GOOD, 12)

    def test_partial_credit(self) -> None:
        """Missing image keeps title and description points."""
        assert check(self.validate, seo_title="Title", seo_description="Desc") == (WARNING, 6)

    def test_partial_credit_with_url_field(self) -> None:
        """og:url counts when the entity carries a URL attribute."""
        validate = common.make_open_graph_validator(url_field="url")
        assert check(validate, seo_title="Title", url="https://example.com") == (WARNING, 5)
        assert check(
            validate, seo_title="Title", seo_description="Desc", og_image=IMAGE
        ) == (WARNING, 8)

    def test_restricted_overrun_counts_as_missing(self) -> None:
        """A restricted og:title over the maximum does not count."""
        validate = common.make_open_graph_validator(SEOThresholds(og_title_restrict=True))
        status, score = check(
            validate, og_title="a" * 61, seo_description="Desc", og_image=IMAGE
        )
        assert status == WARNING
        assert score == 3 + 2

    def test_unrestricted_overrun_still_counts(self) -> None:
        """Without restrict a long og:title is still usable."""
        assert check(
            self.validate, og_title="a" * 61, seo_description="Desc", og_image=IMAGE
        ) == (GOOD, 10)

    def test_message_lists_missing_tags(self) -> None:
        """The warning names each missing tag."""
        result = self.validate(None, make_entity(og_image=IMAGE))
        assert "og:title" in result.message
        assert "og:image:alt" in result.message
        assert "og:url" not in result.message


class TestMediaValidators:
    """Tests for presence, alt text and dimension checks."""

    def test_alt_not_needed_without_media(self) -> None:
        """No media means the alt check is informational."""
        assert check(common.validate_og_image_alt, None) == (INFO, 0)

    def test_alt_required_with_media(self) -> None:
        """Media without alt text is an error."""
        assert check(common.validate_og_image_alt, IMAGE) == (ERROR, 0)
        assert check(common.validate_og_image_alt, FULL_IMAGE) == (GOOD, 5)

    def test_dimensions_bands(self) -> None:
        """1200x630 -> 5, >= 600x314 -> 3, smaller -> 2, one side -> 1."""
        validate = common.validate_og_image_dimensions
        assert check(validate, FULL_IMAGE) == (GOOD, 5)
        assert check(validate, {**IMAGE, "width": 800, "height": 400}) == (WARNING, 3)
        assert check(validate, {**IMAGE, "width": 300, "height": 200}) == (WARNING, 2)
        assert check(validate, {**IMAGE, "width": 1200}) == (WARNING, 1)
        assert check(validate, IMAGE) == (WARNING, 0)
        assert check(validate, None) == (INFO, 0)

    def test_presence(self) -> None:
        """Presence needs a URL."""
        assert check(common.validate_og_image, IMAGE) == (GOOD, 5)
        assert check(common.validate_og_image, {"alt_text": "x"}) == (WARNING, 0)


class TestTwitterCards:
    """Tests for Twitter card completeness."""

    def test_complete_with_alt(self) -> None:
        """A full card with image alt text scores 15."""
        assert check(
            common.validate_twitter_cards,
            twitter_card="summary_large_image",
            twitter_title="T",
            twitter_description="D",
            twitter_image=FULL_IMAGE,
        ) == (GOOD, 15)

    def test_complete_without_alt(self) -> None:
        """A full card without alt text scores 10."""
        assert check(
            common.validate_twitter_cards,
            twitter_card="summary",
            twitter_title="T",
            twitter_description="D",
            twitter_image=IMAGE,
        ) == (GOOD, 10)

    def test_derivable(self) -> None:
        """SEO fields plus an image can generate the card."""
        assert check(
            common.validate_twitter_cards, seo_title="T", seo_description="D", og_image=IMAGE
        ) == (WARNING, 5)

    def test_article_derivable_from_featured_image(self) -> None:
        """Articles may derive the card image from the featured image."""
        assert check(
            article.validate_article_twitter_cards,
            seo_title="T",
            seo_description="D",
            featured_image=IMAGE,
        ) == (WARNING, 5)
        assert check(
            common.validate_twitter_cards, seo_title="T", seo_description="D", featured_image=IMAGE
        ) == (WARNING, 0)


class TestUrlsAndRobots:
    """Tests for URL, canonical URL and meta robots checks."""

    def test_url_bands(self) -> None:
        """HTTPS 15, HTTP 10, malformed 5, missing 0."""
        assert check(common.validate_url, "https://example.com") == (GOOD, 15)
        assert check(common.validate_url, "http://example.com") == (WARNING, 10)
        assert check(common.validate_url, "example") == (WARNING, 5)
        assert check(common.validate_url, None) == (WARNING, 0)

    def test_canonical_url(self) -> None:
        """Canonical URL must be absolute."""
        assert check(common.validate_canonical_url, "https://example.com/a") == (GOOD, 5)
        assert check(common.validate_canonical_url, "/a") == (WARNING, 0)

    def test_meta_robots(self) -> None:
        """noindex is a warning; absence is informational."""
        assert check(common.validate_meta_robots, None) == (INFO, 0)
        assert check(common.validate_meta_robots, "NOINDEX, follow") == (WARNING, 0)
        assert check(common.validate_meta_robots, "index, follow") == (GOOD, 5)


class TestArticleValidators:
    """Tests for article-specific checks."""

    def test_content_word_count_ignores_markup(self) -> None:
        """Word bands are computed on stripped text."""
        body = "<p>" + " ".join(["word"] * 300) + "</p>"
        assert check(article.validate_article_content, body) == (GOOD, 10)
        assert check(article.validate_article_content, " ".join(["w"] * 200)) == (WARNING, 5)
        assert check(article.validate_article_content, "short") == (WARNING, 2)
        assert check(article.validate_article_content, None) == (ERROR, 0)

    def test_featured_image(self) -> None:
        """Alt text doubles the featured image points."""
        assert check(article.validate_featured_image, FULL_IMAGE) == (GOOD, 10)
        assert check(article.validate_featured_image, IMAGE) == (ERROR, 5)
        assert check(article.validate_featured_image, None) == (WARNING, 0)

    def test_featured_image_by_id(self) -> None:
        """An image id with a separate alt field counts as present."""
        assert check(
            article.validate_featured_image, None, featured_image_id=7, featured_image_alt="Alt"
        ) == (GOOD, 10)

    def test_date_published_depends_on_status(self) -> None:
        """Drafts do not need a publication date."""
        assert check(article.validate_date_published, None, status="DRAFT") == (INFO, 0)
        assert check(article.validate_date_published, None, status="PUBLISHED") == (ERROR, 0)
        assert check(
            article.validate_date_published, "2024-05-01T00:00:00Z", status="PUBLISHED"
        ) == (GOOD, 10)

    def test_category_accepts_numeric_ids(self) -> None:
        """Integer and string ids both count."""
        assert check(article.validate_category, 12) == (GOOD, 5)
        assert check(article.validate_category, "cat-1") == (GOOD, 5)
        assert check(article.validate_category, None) == (WARNING, 0)


class TestOrganizationValidators:
    """Tests for organization-specific checks."""

    def test_logo_format(self) -> None:
        """Accepted formats earn 5, or 8 with alt text."""
        logo = {"url": "https://example.com/logo.PNG"}
        assert check(organization.validate_logo_format, logo) == (GOOD, 5)
        assert check(organization.validate_logo_format, {**logo, "alt_text": "Logo"}) == (GOOD, 8)
        assert check(
            organization.validate_logo_format, {"url": "https://example.com/logo.gif"}
        ) == (WARNING, 2)
        assert check(organization.validate_logo_format, None) == (WARNING, 0)

    def test_social_profiles(self) -> None:
        """Profile count bands."""
        validate = organization.validate_social_profiles
        assert check(validate, same_as=["a", "b", "c"]) == (GOOD, 10)
        assert check(validate, same_as=["a", "b"]) == (GOOD, 8)
        assert check(validate, same_as=["a"]) == (WARNING, 5)
        assert check(validate, same_as=[]) == (WARNING, 0)

    def test_contact_info_and_point(self) -> None:
        """Contact checks read sibling attributes."""
        assert check(organization.validate_contact_info, email="a@b.c", phone="1") == (GOOD, 10)
        assert check(organization.validate_contact_info, phone="1") == (WARNING, 5)
        assert check(organization.validate_contact_point, "sales", email="a@b.c") == (GOOD, 5)
        assert check(organization.validate_contact_point, None, email="a@b.c") == (WARNING, 2)
        assert check(organization.validate_contact_point, "sales") == (WARNING, 0)

    def test_address(self) -> None:
        """Street, city and country make a complete address."""
        validate = organization.validate_address
        full = {"address_street": "1 Main", "address_city": "Oslo", "address_country": "NO"}
        assert check(validate, **full) == (GOOD, 5)
        assert check(validate, address_city="Oslo") == (WARNING, 2)
        assert check(validate) == (INFO, 0)

    def test_alternate_name_and_slogan(self) -> None:
        """Optional brand details score only when they add information."""
        assert check(organization.validate_alternate_name, "Acme", name="Acme Ltd") == (GOOD, 5)
        assert check(organization.validate_alternate_name, "Acme", name="Acme") == (WARNING, 2)
        assert check(organization.validate_alternate_name, None) == (INFO, 0)
        assert check(organization.validate_slogan, "Built to last") == (GOOD, 5)
        assert check(organization.validate_slogan, "x" * 151) == (WARNING, 2)
        assert check(organization.validate_slogan, "") == (INFO, 0)

    def test_organization_type(self) -> None:
        """Known schema.org subtypes earn 5; anything else warns."""
        assert check(organization.validate_organization_type, "LocalBusiness") == (GOOD, 5)
        assert check(organization.validate_organization_type, "Shop") == (WARNING, 2)
        assert check(organization.validate_organization_type, None) == (INFO, 0)


class TestOrganizationRegistration:
    """Tests for registration, classification and national address checks."""

    def test_commercial_registration(self) -> None:
        """Ten digits earn 5; whitespace is ignored."""
        validate = organization.validate_commercial_registration
        assert check(validate, "1010 123456") == (GOOD, 5)
        assert check(validate, "10101") == (WARNING, 1)
        assert check(validate, None) == (INFO, 0)

    def test_vat_and_tax_ids(self) -> None:
        """VAT ids are 15 digits bounded by 3; tax ids are 10 digits."""
        assert check(organization.validate_vat_id, "300000000000003") == (GOOD, 5)
        assert check(organization.validate_vat_id, "100000000000003") == (WARNING, 1)
        assert check(organization.validate_tax_id, "3000000000") == (GOOD, 3)
        assert check(organization.validate_tax_id, "ABC") == (WARNING, 1)

    def test_legal_form(self) -> None:
        """A missing legal form warns once the entity is clearly registered."""
        validate = organization.validate_legal_form
        assert check(validate, "LLC") == (GOOD, 3)
        assert check(validate, None, legal_name="Acme LLC") == (WARNING, 0)
        assert check(validate, None) == (INFO, 0)

    def test_address_region(self) -> None:
        """Region is expected once other address parts are present."""
        validate = organization.validate_address_region
        assert check(validate, "Riyadh Province") == (GOOD, 3)
        assert check(validate, None, address_city="Riyadh") == (WARNING, 0)
        assert check(validate, None) == (INFO, 0)

    def test_national_address(self) -> None:
        """Postal code plus building and additional numbers complete the address."""
        validate = organization.validate_national_address
        numbers = {"address_building_number": "1234", "address_additional_number": "5678"}
        assert check(validate, "12345", **numbers) == (GOOD, 5)
        assert check(validate, "12345") == (WARNING, 3)
        assert check(validate, "123", **numbers) == (WARNING, 1)
        assert check(validate, None, **numbers) == (WARNING, 1)
        assert check(validate, None) == (INFO, 0)

    def test_classification(self) -> None:
        """ISIC v4 classes earn 5; divisions and activity codes score less."""
        validate = organization.validate_classification
        assert check(validate, "6201") == (GOOD, 5)
        assert check(validate, "62") == (WARNING, 3)
        assert check(validate, "IT") == (WARNING, 1)
        assert check(validate, None, business_activity_code="620101") == (WARNING, 2)
        assert check(validate, None) == (INFO, 0)

    def test_number_of_employees(self) -> None:
        """Counts and ranges are accepted."""
        validate = organization.validate_number_of_employees
        assert check(validate, 42) == (GOOD, 3)
        assert check(validate, "10-50") == (GOOD, 3)
        assert check(validate, "50-10") == (WARNING, 1)
        assert check(validate, "many") == (WARNING, 1)
        assert check(validate, None) == (INFO, 0)

    def test_license_info(self) -> None:
        """License number and authority belong together."""
        validate = organization.validate_license_info
        assert check(validate, "L-1", license_authority="CMA") == (GOOD, 3)
        assert check(validate, "L-1") == (WARNING, 2)
        assert check(validate, None, license_authority="CMA") == (WARNING, 1)
        assert check(validate, None) == (INFO, 0)


class TestAuthorValidators:
    """Tests for author-specific checks."""

    def test_eeat_strong(self) -> None:
        """Four or more signals earn up to 15."""
        assert check(
            author.validate_eeat_signals,
            job_title="Editor",
            credentials=["PhD"],
            qualifications=["Certified"],
            expertise_areas=["SEO"],
            verification_status=True,
        ) == (GOOD, 15)
        assert check(
            author.validate_eeat_signals,
            job_title="Editor",
            credentials=["PhD"],
            qualifications=["Certified"],
            expertise_areas=["SEO"],
        ) == (GOOD, 10)

    def test_eeat_partial_capped_at_ten(self) -> None:
        """Two or three signals earn up to 10."""
        assert check(
            author.validate_eeat_signals,
            credentials=["PhD"],
            qualifications=["Certified"],
            verification_status=True,
        ) == (WARNING, 10)
        assert check(author.validate_eeat_signals, job_title="Editor", expertise_areas=["SEO"]) == (
            WARNING,
            4,
        )

    def test_eeat_weak(self) -> None:
        """One signal is not enough."""
        assert check(author.validate_eeat_signals, job_title="Editor") == (WARNING, 0)

    def test_author_social_counts_all_sources(self) -> None:
        """Named profiles and sameAs entries are pooled."""
        result = check(author.validate_author_social, linked_in="li", same_as=["x", "y"])
        assert result == (GOOD, 10)
        assert check(author.validate_author_social, twitter="@a") == (WARNING, 5)

    def test_author_bio(self) -> None:
        """Bio length bands."""
        assert check(author.validate_author_bio, "a" * 100) == (GOOD, 10)
        assert check(author.validate_author_bio, "short") == (WARNING, 5)
        assert check(author.validate_author_bio, None) == (WARNING, 0)


class TestTaxonomyValidators:
    """Tests for tag, category and industry checks."""

    def test_industry_name_required(self) -> None:
        """Industry pages need a name."""
        assert check(taxonomy.validate_industry_name, "Fintech") == (GOOD, 5)
        assert check(taxonomy.validate_industry_name, "  ") == (ERROR, 0)

    def test_industry_description_bands(self) -> None:
        """Long descriptions earn 10, short ones 5."""
        assert check(taxonomy.validate_industry_description, "x" * 100) == (GOOD, 10)
        assert check(taxonomy.validate_industry_description, "short") == (WARNING, 5)
        assert check(taxonomy.validate_industry_description, None) == (WARNING, 0)
