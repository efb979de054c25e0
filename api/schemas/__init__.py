"""Pydantic schemas package."""

from api.schemas.responses import ErrorDetail, ErrorResponse

__all__ = ["ErrorDetail", "ErrorResponse"]
