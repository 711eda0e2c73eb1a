"""REST API error response models.

Shape of every non-2xx body produced by exception_handlers.py. Routes list
these in their ``responses=`` so the OpenAPI schema documents them.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """One failing field of a validation error."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "preferences",
                "message": "Please describe your preferences in at least 10 characters.",
                "code": "TOO_SHORT",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Car with identifier 'abc123' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "year", "message": "Must be between 1900 and 2027", "code": "OUT_OF_RANGE"},
                    {"field": "image_url", "message": "Must be a valid URL", "code": "INVALID_URL"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Car with identifier 'abc123' not found", "code": "NOT_FOUND"},
                {"detail": "Failed to fetch recommendations from AI.", "code": "UPSTREAM_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "year",
                            "message": "Must be between 1900 and 2027",
                            "code": "OUT_OF_RANGE",
                        },
                        {
                            "field": "image_url",
                            "message": "Must be a valid URL",
                            "code": "INVALID_URL",
                        },
                    ],
                },
            ]
        }
    )
