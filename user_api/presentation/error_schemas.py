"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every non-validation error response."""

    detail: str = Field(
        ...,
        description="Human-readable error message",
        examples=["User with ID 42 not found"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["USER_NOT_FOUND", "USER_ALREADY_EXISTS"],
    )


class ValidationErrorDetail(BaseModel):
    """A single field validation error."""

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body.email', 'query.limit')",
        examples=["body.email", "path.user_id", "query.limit"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=[
            "value is not a valid email address",
            "Input should be a valid integer, unable to parse string as an integer",
        ],
    )


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response produced by a request that failed validation.

    Matches the format returned by validation_error_handler in
    user_api/presentation/exception_handlers.py.
    """

    detail: str = Field(
        ...,
        description="High-level description of the error",
        examples=["Validation failed"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["INVALID_INPUT"],
    )
    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "INVALID_INPUT",
                "errors": [
                    {
                        "field": "path.user_id",
                        "message": "Input should be a valid integer, unable to parse string as an integer",
                    },
                ],
            }
        }
    }
