from fastapi import HTTPException, status


class UnauthorizedError(HTTPException):
    """Raised when the request carries no credential."""

    def __init__(self, message: str = "No Authentication provided"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=message,
        )


class UpstreamUnavailableError(HTTPException):
    """Raised when stats could not be produced, not even as an estimate."""

    def __init__(self, message: str):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching repository stats: {message}",
        )
