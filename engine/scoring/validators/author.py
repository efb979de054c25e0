"""Author (Person) validators."""

from typing import Any

from engine.entities import EntitySnapshot, as_text
from engine.scoring.contract import ValidationResult, good, warning
from engine.scoring.validators.common import (
    make_media_alt_validator,
    make_media_presence_validator,
    make_name_validator,
)

validate_author_name = make_name_validator("Author name")
validate_profile_image = make_media_presence_validator("Profile image", points=5)
validate_profile_image_alt = make_media_alt_validator("Profile image")

# Expertise, experience, authority and trust signals with their points
EEAT_SIGNALS = (
    ("job title", 2),
    ("credentials", 3),
    ("qualifications", 3),
    ("expertise areas", 2),
    ("verification", 5),
)


def validate_author_bio(value: Any, entity: EntitySnapshot) -> ValidationResult:
    bio = as_text(value)
    if bio is None:
        return warning("Author bio required (minimum 100 chars)")
    if len(bio.strip()) >= 100:
        return good(f"Comprehensive author bio ({len(bio)} chars)", 10)
    return warning(f"Author bio too short ({len(bio)} chars) - minimum 100 chars", 5)


def validate_eeat_signals(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """
    E-E-A-T signal coverage.

    Four or more signals earn up to 15 points, two or three earn up to 10,
    fewer earn nothing.
    """
    present = {
        "job title": entity.text("job_title") is not None,
        "credentials": bool(entity.items("credentials")),
        "qualifications": bool(entity.items("qualifications")),
        "expertise areas": bool(entity.items("expertise_areas")),
        "verification": entity.flag("verification_status"),
    }
    signals = [name for name, _ in EEAT_SIGNALS if present[name]]
    points = sum(weight for name, weight in EEAT_SIGNALS if present[name])

    if len(signals) >= 4:
        return good(f"Strong E-E-A-T signals: {', '.join(signals)}", min(points, 15))
    if len(signals) >= 2:
        return warning(f"Partial E-E-A-T signals: {', '.join(signals)}", min(points, 10))
    return warning("E-E-A-T signals recommended - add job title, credentials, expertise areas")


def validate_author_social(value: Any, entity: EntitySnapshot) -> ValidationResult:
    profiles = [entity.text(name) for name in ("linked_in", "twitter", "facebook")]
    total = sum(1 for profile in profiles if profile) + len(entity.texts("same_as"))
    if total >= 3:
        return good(f"{total} social profiles - strong sameAs coverage", 10)
    if total == 2:
        return good("2 social profiles added", 8)
    if total == 1:
        return warning("Only 1 social profile - add more for verification", 5)
    return warning("Social profiles recommended for the Person sameAs property")
