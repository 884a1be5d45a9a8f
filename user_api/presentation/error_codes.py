"""HTTP status for every error_code an exception can carry."""

from fastapi import status

ERROR_CODE_TO_HTTP_STATUS: dict[str, int] = {
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVALID_INPUT": status.HTTP_400_BAD_REQUEST,
    "USER_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "DATABASE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error_code(error_code: str) -> int:
    """Unmapped codes are client errors (400)."""
    return ERROR_CODE_TO_HTTP_STATUS.get(error_code, status.HTTP_400_BAD_REQUEST)
