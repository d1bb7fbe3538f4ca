from fastapi import HTTPException, status

from kasiski.core.exceptions import (
    CryptanalysisError,
    EmptyCosetError,
    UnsupportedFactorError,
)


def to_http_exception(error: CryptanalysisError) -> HTTPException:
    """Map a domain error onto an HTTP error carrying the ErrorResponse shape."""
    if isinstance(error, (UnsupportedFactorError, EmptyCosetError)):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        code = status.HTTP_400_BAD_REQUEST

    return HTTPException(
        status_code=code,
        detail={
            "error": type(error).__name__,
            "message": error.message,
            "details": error.details,
        },
    )
