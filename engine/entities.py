"""Read-only entity snapshots with typed accessors.

Content records arrive from the persistence layer as plain mappings with all
relations already joined. Scorers never index those mappings directly: every
read goes through an accessor that returns the "absent" value for missing or
unexpectedly shaped data, so validators stay total.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any


class EntityType(str, Enum):
    """Content entity kinds that can be scored."""

    ARTICLE = "article"
    ORGANIZATION = "organization"
    AUTHOR = "author"
    TAG = "tag"
    CATEGORY = "category"
    INDUSTRY = "industry"


@dataclass(frozen=True)
class MediaInfo:
    """A media relation reduced to the attributes validators look at."""

    url: str
    alt_text: str | None = None
    width: int | float | None = None
    height: int | float | None = None

    @property
    def has_alt_text(self) -> bool:
        return self.alt_text is not None

    @property
    def has_dimensions(self) -> bool:
        return self.width is not None and self.height is not None


def as_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def as_number(value: Any) -> int | float | None:
    # bool is an int subclass but never a meaningful measurement
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    # NaN and infinities arrive from lenient JSON decoders
    if isinstance(value, float) and math.isfinite(value):
        return value
    return None


def as_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=UTC)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, str) and value.strip():
        candidate = value.strip()
        if candidate.endswith("Z"):
            candidate = candidate[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(candidate)
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=UTC)
    return None


# schema.org types a client organization may declare instead of Organization
ORGANIZATION_TYPES = frozenset(
    {
        "Organization",
        "Corporation",
        "LocalBusiness",
        "OnlineBusiness",
        "Store",
        "NGO",
        "EducationalOrganization",
        "GovernmentOrganization",
        "MedicalOrganization",
        "NewsMediaOrganization",
        "ProfessionalService",
        "SportsOrganization",
    }
)

EMPLOYEE_RANGE_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def as_organization_type(value: Any) -> str | None:
    text = as_text(value)
    if text is not None and text.strip() in ORGANIZATION_TYPES:
        return text.strip()
    return None


def as_employee_count(value: Any) -> tuple[int, int] | None:
    """
    Headcount as ``(minimum, maximum)``.

    Accepts a number, a numeric string, or a ``"min-max"`` range string;
    a single count returns the same value twice.
    """
    number = as_number(value)
    if number is not None:
        return (int(number), int(number)) if number >= 0 else None
    text = as_text(value)
    if text is None:
        return None
    if text.strip().isdigit():
        count = int(text.strip())
        return (count, count)
    match = EMPLOYEE_RANGE_PATTERN.match(text)
    if match is None:
        return None
    low, high = int(match.group(1)), int(match.group(2))
    if low > high:
        return None
    return (low, high)


class EntitySnapshot:
    """Immutable view over one hydrated content record."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None):
        if isinstance(data, EntitySnapshot):
            self._data = data._data
        elif isinstance(data, Mapping):
            self._data = MappingProxyType(dict(data))
        else:
            self._data = MappingProxyType({})

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __repr__(self) -> str:
        return f"EntitySnapshot({sorted(self._data)!r})"

    def as_dict(self) -> dict[str, Any]:
        """Shallow copy of the underlying mapping."""
        return dict(self._data)

    def raw(self, name: str) -> Any:
        """Raw attribute value, or None when missing."""
        return self._data.get(name)

    def text(self, name: str) -> str | None:
        """String value with at least one non-whitespace character."""
        return as_text(self._data.get(name))

    def number(self, name: str) -> int | float | None:
        """Numeric value (booleans excluded)."""
        return as_number(self._data.get(name))

    def flag(self, name: str) -> bool:
        """True only for a literal boolean True."""
        return self._data.get(name) is True

    def items(self, name: str) -> list[Any]:
        """List value, or an empty list for anything else."""
        value = self._data.get(name)
        if isinstance(value, list | tuple):
            return list(value)
        return []

    def texts(self, name: str) -> list[str]:
        """Non-blank strings from a list value."""
        return [item for item in self.items(name) if as_text(item)]

    def when(self, name: str) -> datetime | None:
        """Timezone-aware datetime from a datetime, date or ISO-8601 string."""
        return as_datetime(self._data.get(name))

    def nested(self, name: str) -> "EntitySnapshot":
        """Snapshot of a joined relation (empty when missing)."""
        value = self._data.get(name)
        return EntitySnapshot(value if isinstance(value, Mapping) else None)

    def media(self, name: str) -> MediaInfo | None:
        """
        Media relation with a usable URL.

        Args:
            name: Relation attribute holding ``{url, alt_text, width, height}``

        Returns:
            MediaInfo, or None when the relation is missing or has no URL
        """
        return as_media(self._data.get(name))


def as_media(value: Any) -> MediaInfo | None:
    """Media relation ``{url, alt_text, width, height}`` with a usable URL."""
    if isinstance(value, EntitySnapshot):
        relation = value
    elif isinstance(value, Mapping):
        relation = EntitySnapshot(value)
    else:
        return None
    url = relation.text("url")
    if url is None:
        return None
    return MediaInfo(
        url=url,
        alt_text=relation.text("alt_text"),
        width=relation.number("width"),
        height=relation.number("height"),
    )


def snapshot(data: Mapping[str, Any] | EntitySnapshot | None) -> EntitySnapshot:
    """Wrap a mapping (or pass an existing snapshot through)."""
    if isinstance(data, EntitySnapshot):
        return data
    return EntitySnapshot(data)
