"""Hydrated inputs for knowledge graph assembly.

The persistence layer hands over an article with every relation joined.
These dataclasses are the typed form of that payload; ``from_dict`` accepts
the plain mapping shape used on the wire.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from engine.entities import (
    EntitySnapshot,
    as_datetime,
    as_employee_count,
    as_number,
    as_organization_type,
    as_text,
)


class MissingRelationError(KeyError):
    """A relation the graph cannot be built without is absent."""

    def __init__(self, relation: str):
        self.relation = relation
        super().__init__(relation)

    def __str__(self) -> str:
        return f"article is missing required relation {self.relation!r}"


def _texts(values: Any) -> list[str]:
    if not isinstance(values, list | tuple):
        return []
    return [value for value in values if as_text(value)]


def _position(value: Any, default: int) -> int:
    number = as_number(value)
    return int(number) if number is not None else default


@dataclass(frozen=True)
class GraphSiteConfig:
    """Site-level values every document references."""

    site_url: str
    site_name: str
    home_label: str = "Home"
    default_language: str = "en"

    def __post_init__(self) -> None:
        object.__setattr__(self, "site_url", self.site_url.rstrip("/"))


@dataclass
class MediaAsset:
    """A stored media item."""

    url: str
    alt_text: str | None = None
    caption: str | None = None
    width: int | None = None
    height: int | None = None
    license: str | None = None
    creator: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> "MediaAsset | None":
        """Build from a mapping, or from a bare URL string."""
        if isinstance(value, str):
            return cls(url=value) if value.strip() else None
        if not isinstance(value, Mapping):
            return None
        data = EntitySnapshot(value)
        url = data.text("url")
        if url is None:
            return None
        width = data.number("width")
        height = data.number("height")
        return cls(
            url=url,
            alt_text=data.text("alt_text"),
            caption=data.text("caption"),
            width=int(width) if width is not None else None,
            height=int(height) if height is not None else None,
            license=data.text("license"),
            creator=data.text("creator"),
        )


@dataclass
class GalleryItem:
    """A media asset used in an article gallery, with per-usage overrides."""

    media: MediaAsset
    position: int
    caption: str | None = None
    alt_text: str | None = None

    @property
    def effective_caption(self) -> str | None:
        return self.caption or self.media.caption

    @property
    def effective_alt_text(self) -> str | None:
        return self.alt_text or self.media.alt_text

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_position: int = 0) -> "GalleryItem | None":
        media = MediaAsset.from_value(data.get("media"))
        if media is None:
            return None
        return cls(
            media=media,
            position=_position(data.get("position"), default_position),
            caption=as_text(data.get("caption")),
            alt_text=as_text(data.get("alt_text")),
        )


@dataclass
class FAQEntry:
    question: str
    answer: str
    position: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], default_position: int = 0) -> "FAQEntry | None":
        question = as_text(data.get("question"))
        answer = as_text(data.get("answer"))
        if question is None or answer is None:
            return None
        return cls(question, answer, _position(data.get("position"), default_position))


@dataclass
class AuthorRecord:
    """Article author; becomes the Person node."""

    name: str
    slug: str
    bio: str | None = None
    image: MediaAsset | None = None
    url: str | None = None
    job_title: str | None = None
    expertise_areas: list[str] = field(default_factory=list)
    credentials: list[str] = field(default_factory=list)
    member_of: list[str] = field(default_factory=list)
    linked_in: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    same_as: list[str] = field(default_factory=list)
    seo_title: str | None = None
    seo_description: str | None = None
    canonical_url: str | None = None

    @property
    def profile_links(self) -> list[str]:
        """linkedin, twitter, facebook, then the generic links."""
        links = [link for link in (self.linked_in, self.twitter, self.facebook) if link]
        return links + self.same_as

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthorRecord":
        return cls(
            name=as_text(data.get("name")) or "",
            slug=as_text(data.get("slug")) or "",
            bio=as_text(data.get("bio")),
            image=MediaAsset.from_value(data.get("image")),
            url=as_text(data.get("url")),
            job_title=as_text(data.get("job_title")),
            expertise_areas=_texts(data.get("expertise_areas")),
            credentials=_texts(data.get("credentials")),
            member_of=_texts(data.get("member_of")),
            linked_in=as_text(data.get("linked_in")),
            twitter=as_text(data.get("twitter")),
            facebook=as_text(data.get("facebook")),
            same_as=_texts(data.get("same_as")),
            seo_title=as_text(data.get("seo_title")),
            seo_description=as_text(data.get("seo_description")),
            canonical_url=as_text(data.get("canonical_url")),
        )


@dataclass
class ParentOrganization:
    name: str
    id: str | None = None
    url: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> "ParentOrganization | None":
        if not isinstance(value, Mapping):
            return None
        name = as_text(value.get("name"))
        if name is None:
            return None
        return cls(name, as_text(value.get("id")), as_text(value.get("url")))


@dataclass
class PublisherRecord:
    """A client organization; becomes the Organization node."""

    name: str
    slug: str
    organization_type: str | None = None
    legal_name: str | None = None
    alternate_name: str | None = None
    slogan: str | None = None
    url: str | None = None
    description: str | None = None
    logo: MediaAsset | None = None
    email: str | None = None
    phone: str | None = None
    contact_type: str | None = None
    address_street: str | None = None
    address_neighborhood: str | None = None
    address_city: str | None = None
    address_region: str | None = None
    address_country: str | None = None
    address_postal_code: str | None = None
    commercial_registration_number: str | None = None
    vat_id: str | None = None
    tax_id: str | None = None
    isic_v4: str | None = None
    number_of_employees: tuple[int, int] | None = None
    keywords: list[str] = field(default_factory=list)
    knows_language: list[str] = field(default_factory=list)
    parent_organization: ParentOrganization | None = None
    same_as: list[str] = field(default_factory=list)
    founding_date: date | None = None
    seo_title: str | None = None
    seo_description: str | None = None
    canonical_url: str | None = None

    @property
    def summary(self) -> str | None:
        return self.description or self.seo_description

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PublisherRecord":
        """Hydrate from a mapping; an unknown ``organization_type`` is dropped."""
        founded = as_datetime(data.get("founding_date"))
        return cls(
            name=as_text(data.get("name")) or "",
            slug=as_text(data.get("slug")) or "",
            organization_type=as_organization_type(data.get("organization_type")),
            legal_name=as_text(data.get("legal_name")),
            alternate_name=as_text(data.get("alternate_name")),
            slogan=as_text(data.get("slogan")),
            url=as_text(data.get("url")),
            description=as_text(data.get("description")),
            logo=MediaAsset.from_value(data.get("logo")),
            email=as_text(data.get("email")),
            phone=as_text(data.get("phone")),
            contact_type=as_text(data.get("contact_type")),
            address_street=as_text(data.get("address_street")),
            address_neighborhood=as_text(data.get("address_neighborhood")),
            address_city=as_text(data.get("address_city")),
            address_region=as_text(data.get("address_region")),
            address_country=as_text(data.get("address_country")),
            address_postal_code=as_text(data.get("address_postal_code")),
            commercial_registration_number=as_text(data.get("commercial_registration_number")),
            vat_id=as_text(data.get("vat_id")),
            tax_id=as_text(data.get("tax_id")),
            isic_v4=as_text(data.get("isic_v4")),
            number_of_employees=as_employee_count(data.get("number_of_employees")),
            keywords=_texts(data.get("keywords")),
            knows_language=_texts(data.get("knows_language")),
            parent_organization=ParentOrganization.from_value(data.get("parent_organization")),
            same_as=_texts(data.get("same_as")),
            founding_date=founded.date() if founded else None,
            seo_title=as_text(data.get("seo_title")),
            seo_description=as_text(data.get("seo_description")),
            canonical_url=as_text(data.get("canonical_url")),
        )


@dataclass
class CategoryRecord:
    name: str
    slug: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CategoryRecord | None":
        name = as_text(data.get("name"))
        slug = as_text(data.get("slug"))
        if name is None or slug is None:
            return None
        return cls(name, slug, as_text(data.get("description")))


def _tag_name(value: Any) -> str | None:
    if isinstance(value, Mapping):
        # join rows wrap the tag: {"tag": {"name": ...}}
        inner = value.get("tag")
        if isinstance(inner, Mapping):
            value = inner
        return as_text(value.get("name"))
    return as_text(value)


def _relation(data: Mapping[str, Any], *names: str) -> Mapping[str, Any]:
    for name in names:
        value = data.get(name)
        if isinstance(value, Mapping):
            return value
    raise MissingRelationError(names[0])


def _collect(values: Any, parse) -> list:
    """Parse each mapping entry, defaulting positions to list order."""
    if not isinstance(values, list):
        return []
    parsed = []
    for index, entry in enumerate(values):
        if not isinstance(entry, Mapping):
            continue
        item = parse(entry, default_position=index)
        if item is not None:
            parsed.append(item)
    return parsed


@dataclass
class ArticleRecord:
    """A fully hydrated article, ready for graph assembly."""

    title: str
    slug: str
    author: AuthorRecord
    publisher: PublisherRecord
    seo_title: str | None = None
    seo_description: str | None = None
    excerpt: str | None = None
    canonical_url: str | None = None
    in_language: str | None = None
    is_accessible_for_free: bool | None = None
    date_published: datetime | None = None
    date_modified: datetime | None = None
    last_reviewed: datetime | None = None
    content: str | None = None
    article_body_text: str | None = None
    word_count: int | None = None
    license: str | None = None
    category: CategoryRecord | None = None
    tags: list[str] = field(default_factory=list)
    citations: list[str] = field(default_factory=list)
    featured_image: MediaAsset | None = None
    gallery: list[GalleryItem] = field(default_factory=list)
    faqs: list[FAQEntry] = field(default_factory=list)

    @property
    def summary(self) -> str | None:
        """Description used for page and article nodes."""
        return self.seo_description or self.excerpt

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ArticleRecord":
        """
        Hydrate from a mapping.

        Raises:
            MissingRelationError: ``author`` or ``publisher`` (``client``) is absent
        """
        author = AuthorRecord.from_dict(_relation(data, "author"))
        publisher = PublisherRecord.from_dict(_relation(data, "publisher", "client"))

        category_data = data.get("category")
        category = (
            CategoryRecord.from_dict(category_data) if isinstance(category_data, Mapping) else None
        )

        gallery = _collect(data.get("gallery"), GalleryItem.from_dict)
        faqs = _collect(data.get("faqs"), FAQEntry.from_dict)
        raw_tags = data.get("tags")
        tags = [
            name
            for name in map(_tag_name, raw_tags if isinstance(raw_tags, list) else [])
            if name is not None
        ]

        free = data.get("is_accessible_for_free")
        word_count = as_number(data.get("word_count"))

        return cls(
            title=as_text(data.get("title")) or "",
            slug=as_text(data.get("slug")) or "",
            author=author,
            publisher=publisher,
            seo_title=as_text(data.get("seo_title")),
            seo_description=as_text(data.get("seo_description")),
            excerpt=as_text(data.get("excerpt")),
            canonical_url=as_text(data.get("canonical_url")),
            in_language=as_text(data.get("in_language")),
            is_accessible_for_free=free if isinstance(free, bool) else None,
            date_published=as_datetime(data.get("date_published")),
            date_modified=as_datetime(data.get("date_modified")),
            last_reviewed=as_datetime(data.get("last_reviewed")),
            content=as_text(data.get("content")),
            article_body_text=as_text(data.get("article_body_text")),
            word_count=int(word_count) if word_count is not None else None,
            license=as_text(data.get("license")),
            category=category,
            tags=tags,
            citations=_texts(data.get("citations")),
            featured_image=MediaAsset.from_value(data.get("featured_image")),
            gallery=gallery,
            faqs=faqs,
        )
