# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DevConnectError,
    ForbiddenError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)


# Checked in order; first match wins
_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_400_BAD_REQUEST),
    (RepositoryError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http_exception(exception: DevConnectError) -> HTTPException:
    """
    Translate a domain exception into the HTTPException returned to clients

    Args:
        exception: Exception raised by a use case or repository

    Returns:
        HTTPException with the status code of the exception's category
    """
    status_code = next(
        (code for error_class, code in _STATUS_BY_ERROR if isinstance(exception, error_class)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )

    if isinstance(exception, ValidationError):
        return HTTPException(status_code=status_code, detail={"errors": exception.errors})

    if isinstance(exception, AuthenticationError):
        return HTTPException(
            status_code=status_code,
            detail=exception.user_message,
            headers={"WWW-Authenticate": "Bearer"},
        )

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return HTTPException(status_code=status_code, detail="Server Error")

    return HTTPException(status_code=status_code, detail=exception.user_message)
