# Standard library imports
from typing import Dict, Type

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BlogListError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


ERROR_STATUS_CODES: Dict[Type[BlogListError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
    AuthorizationError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
}


def to_http_exception(error: BlogListError) -> HTTPException:
    """
    Translate a domain error into the HTTPException returned to the client

    Args:
        error: Domain error raised by a use case

    Returns:
        HTTPException with the mapped status and the error message as detail
    """
    status_code = status.HTTP_400_BAD_REQUEST
    for error_type, code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            status_code = code
            break

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return HTTPException(status_code=status_code, detail=error.message, headers=headers)
