"""Tag, category and industry validators."""

from engine.scoring.validators.common import make_description_validator, make_name_validator

validate_tag_name = make_name_validator("Tag name")
validate_tag_description = make_description_validator("Tag description")
validate_category_name = make_name_validator("Category name")
validate_category_description = make_description_validator("Category description")
validate_industry_name = make_name_validator("Industry name")
validate_industry_description = make_description_validator("Industry description")
