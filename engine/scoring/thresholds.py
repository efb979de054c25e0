"""Tunable length thresholds consulted by configurable validators.

Values are owned by the settings collaborator; these defaults match the
platform's seeded settings.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SEOThresholds:
    """Length bounds and restrict flags for meta and social text fields.

    A ``*_restrict`` flag makes exceeding the maximum an error worth 0 points
    instead of a warning with partial credit.
    """

    seo_title_min: int = 30
    seo_title_max: int = 60
    seo_title_restrict: bool = False
    seo_description_min: int = 120
    seo_description_max: int = 160
    seo_description_restrict: bool = False
    twitter_title_max: int = 70
    twitter_title_restrict: bool = True
    twitter_description_max: int = 200
    twitter_description_restrict: bool = True
    og_title_max: int = 60
    og_title_restrict: bool = False
    og_description_max: int = 200
    og_description_restrict: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SEOThresholds":
        """Build from a settings mapping, ignoring unknown keys."""
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)


DEFAULT_THRESHOLDS = SEOThresholds()
