"""Credential gate for stats endpoints.

The service does not validate the credential itself; GitHub does. This only
ensures one is present before any cache or network work happens.
"""

import logging
from typing import Annotated

from fastapi import Depends, Header

from repo_stats.core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)


async def require_authorization(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Return the raw Authorization header, or reject the request with 401."""
    if not authorization:
        logger.error("No Authentication provided")
        raise UnauthorizedError()
    return authorization


# Type alias for dependency injection
CallerCredential = Annotated[str, Depends(require_authorization)]
