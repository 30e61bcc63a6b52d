from fastapi import HTTPException, status


class UnauthorizedError(HTTPException):
    """Raised when the session credential is missing, invalid or expired."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """Raised when a required request parameter is missing."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=message,
        )


class UpstreamError(HTTPException):
    """Raised when a call to GitLab fails.

    The detail is deliberately generic; the underlying cause is logged, not returned.
    """

    def __init__(self, message: str = "Error fetching data from GitLab"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        )
