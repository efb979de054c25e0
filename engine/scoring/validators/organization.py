"""Organization (client) validators."""

import re
from typing import Any

from engine.entities import (
    EntitySnapshot,
    as_datetime,
    as_employee_count,
    as_media,
    as_number,
    as_organization_type,
    as_text,
)
from engine.scoring.contract import ValidationResult, Validator, good, info, warning
from engine.scoring.validators.common import (
    has_text,
    make_description_validator,
    make_media_alt_validator,
    make_media_presence_validator,
    make_name_validator,
)

LOGO_FORMAT_PATTERN = re.compile(r"\.(png|svg|jpg|jpeg|webp)$", re.IGNORECASE)

validate_name = make_name_validator("Client name")
validate_logo = make_media_presence_validator("Logo")
validate_logo_alt = make_media_alt_validator("Logo")
validate_description = make_description_validator("Organization description")


def validate_legal_name(value: Any, entity: EntitySnapshot) -> ValidationResult:
    if as_text(value):
        return good("Legal name set for the Organization node", 5)
    return warning("Legal name recommended for structured data")


def validate_logo_format(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """Logo file format, with a bonus for alt text."""
    media = as_media(value)
    if media is None:
        return warning("Logo recommended - use PNG/SVG/JPG, min 112x112px")
    if not LOGO_FORMAT_PATTERN.search(media.url):
        return warning("Logo should be PNG, SVG, JPG or WebP", 2)
    if media.has_alt_text:
        return good("Logo format valid - includes alt text", 8)
    return good("Logo format valid - add alt text for accessibility", 5)


def validate_social_profiles(value: Any, entity: EntitySnapshot) -> ValidationResult:
    count = len(entity.texts("same_as"))
    if count >= 3:
        return good(f"{count} social profiles added", 10)
    if count == 2:
        return good("2 social profiles added", 8)
    if count == 1:
        return warning("Only 1 social profile - add more for brand verification", 5)
    return warning("Social profiles recommended for the sameAs property")


def validate_contact_info(value: Any, entity: EntitySnapshot) -> ValidationResult:
    has_email = has_text(entity, "email")
    has_phone = has_text(entity, "phone")
    if has_email and has_phone:
        return good("Email and phone provided - complete contact info", 10)
    if has_email or has_phone:
        return warning("Partial contact info - add both email and phone", 5)
    return warning("Contact information recommended")


def validate_contact_point(value: Any, entity: EntitySnapshot) -> ValidationResult:
    has_contact = has_text(entity, "email", "phone")
    if as_text(value) and has_contact:
        return good("ContactPoint structured with contactType", 5)
    if has_contact:
        return warning("Add contactType (e.g. customer service) to the ContactPoint", 2)
    return warning("ContactPoint recommended - add contactType and contact info")


def validate_founding_date(value: Any, entity: EntitySnapshot) -> ValidationResult:
    if as_datetime(value) is not None:
        return good("Founding date set", 5)
    return warning("Founding date recommended for the Organization node")


def validate_address(value: Any, entity: EntitySnapshot) -> ValidationResult:
    parts = ("address_street", "address_city", "address_country")
    present = [name for name in parts if entity.text(name)]
    if len(present) == len(parts):
        return good("Complete address provided - enables local business data", 5)
    if present:
        return warning("Partial address - add street, city and country", 2)
    return info("Address optional - only needed for local businesses")


# Registration, classification and regional details. All of these are
# optional: a missing value is informational unless a sibling attribute
# shows the detail is expected.

COMMERCIAL_REGISTRATION_PATTERN = re.compile(r"^\d{10}$")
VAT_ID_PATTERN = re.compile(r"^3\d{13}3$")
TAX_ID_PATTERN = re.compile(r"^\d{10}$")
POSTAL_CODE_PATTERN = re.compile(r"^\d{5}$")
ADDRESS_NUMBER_PATTERN = re.compile(r"^\d{4}$")
ISIC_CLASS_PATTERN = re.compile(r"^\d{4}$")
ISIC_PREFIX_PATTERN = re.compile(r"^\d{2,3}$")

ADDRESS_PARTS = ("address_street", "address_city", "address_country")
SLOGAN_MAX_LENGTH = 150


def _compact(text: str) -> str:
    return re.sub(r"\s+", "", text)


def make_identifier_validator(
    noun: str, pattern: re.Pattern, expected: str, points: int
) -> Validator:
    """Registration identifier check: valid -> points, malformed -> 1, missing -> info."""

    def validate_identifier(value: Any, entity: EntitySnapshot) -> ValidationResult:
        identifier = as_text(value)
        if identifier is None:
            return info(f"{noun} optional - only for registered businesses")
        if pattern.match(_compact(identifier)):
            return good(f"{noun} valid", points)
        return warning(f"{noun} format invalid - expected {expected}", 1)

    return validate_identifier


validate_commercial_registration = make_identifier_validator(
    "Commercial registration number", COMMERCIAL_REGISTRATION_PATTERN, "10 digits", 5
)
validate_vat_id = make_identifier_validator(
    "VAT ID", VAT_ID_PATTERN, "15 digits starting and ending with 3", 5
)
validate_tax_id = make_identifier_validator("Tax ID", TAX_ID_PATTERN, "10 digits", 3)


def validate_legal_form(value: Any, entity: EntitySnapshot) -> ValidationResult:
    if as_text(value):
        return good("Legal form set", 3)
    if has_text(entity, "legal_name", "commercial_registration_number"):
        return warning("Legal form recommended alongside the registered legal name")
    return info("Legal form optional")


def validate_alternate_name(value: Any, entity: EntitySnapshot) -> ValidationResult:
    alternate = as_text(value)
    if alternate is None:
        return info("Alternate name optional - add a brand or trading name")
    if alternate.strip() == (entity.text("name") or "").strip():
        return warning("Alternate name repeats the client name", 2)
    return good("Alternate name set", 5)


def validate_slogan(value: Any, entity: EntitySnapshot) -> ValidationResult:
    slogan = as_text(value)
    if slogan is None:
        return info("Slogan optional")
    length = len(slogan.strip())
    if length > SLOGAN_MAX_LENGTH:
        return warning(f"Slogan long ({length} chars) - keep it under {SLOGAN_MAX_LENGTH}", 2)
    return good("Slogan set", 5)


def validate_organization_type(value: Any, entity: EntitySnapshot) -> ValidationResult:
    declared = as_text(value)
    if declared is None:
        return info("Organization type not set - structured data uses Organization")
    if as_organization_type(declared) is not None:
        return good(f"schema.org type set ({declared.strip()})", 5)
    return warning(
        f"Unknown organization type '{declared.strip()}' - use a schema.org Organization type", 2
    )


def validate_address_region(value: Any, entity: EntitySnapshot) -> ValidationResult:
    if as_text(value):
        return good("Region set for the PostalAddress", 3)
    if has_text(entity, *ADDRESS_PARTS):
        return warning("Add the region to complete the address")
    return info("Region optional - only needed for local businesses")


def validate_national_address(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """
    Postal code plus the building and additional numbers of a national address.

    Bands:
        5-digit postal code, 4-digit building and additional numbers -> good, 5
        valid postal code only                                       -> warning, 3
        malformed postal code, or numbers without a postal code      -> warning, 1
        nothing set                                                  -> info, 0
    """
    postal_code = as_text(value)
    numbers = [entity.text("address_building_number"), entity.text("address_additional_number")]
    if postal_code is None:
        if any(numbers):
            return warning("Postal code missing - national address is incomplete", 1)
        return info("National address optional - only needed for local businesses")
    if not POSTAL_CODE_PATTERN.match(_compact(postal_code)):
        return warning("Postal code should be 5 digits", 1)
    if all(number and ADDRESS_NUMBER_PATTERN.match(_compact(number)) for number in numbers):
        return good("Complete national address", 5)
    return warning("Postal code valid - add 4-digit building and additional numbers", 3)


def validate_classification(value: Any, entity: EntitySnapshot) -> ValidationResult:
    """ISIC v4 code, with the local business activity code as a weaker signal."""
    isic = as_text(value)
    if isic is None:
        if entity.text("business_activity_code") is not None:
            return warning("Business activity code set - add the ISIC v4 code", 2)
        return info("Industry classification optional (ISIC v4)")
    code = _compact(isic)
    if ISIC_CLASS_PATTERN.match(code):
        return good(f"ISIC v4 class set ({code})", 5)
    if ISIC_PREFIX_PATTERN.match(code):
        return warning(f"ISIC v4 code {code} is a division or group - use the 4-digit class", 3)
    return warning("ISIC v4 code should be numeric (e.g. 6201)", 1)


def validate_number_of_employees(value: Any, entity: EntitySnapshot) -> ValidationResult:
    if as_number(value) is None and as_text(value) is None:
        return info("Number of employees optional")
    count = as_employee_count(value)
    if count is None:
        return warning("Number of employees should be a number or a range like 10-50", 1)
    low, high = count
    label = str(low) if low == high else f"{low}-{high}"
    return good(f"Number of employees set ({label})", 3)


def validate_license_info(value: Any, entity: EntitySnapshot) -> ValidationResult:
    number = as_text(value)
    authority = entity.text("license_authority")
    if number and authority:
        return good("License number and issuing authority set", 3)
    if number:
        return warning("Add the authority that issued the license", 2)
    if authority:
        return warning("Licensing authority set without a license number", 1)
    return info("License details optional - only for regulated businesses")
