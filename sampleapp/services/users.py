"""
User service - fetch user records from the backend API
Also hosts the French date formatter used next to user data

Logs through structlog; call sampleapp.logging_config.configure_logging()
at startup to set the level and renderer.
"""

from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Optional

import httpx
import structlog

from sampleapp.config import settings

logger = structlog.get_logger()


USER_PATH_TEMPLATE = "/api/users/{user_id}"

# French short date, e.g. 05/03/2024
FRENCH_DATE_FORMAT = "%d/%m/%Y"

# Reserved for API consumers; not used by fetch_user
API_URLS: Mapping[str, str] = MappingProxyType({
    "users": "/api/users",
    "posts": "/api/posts",
    "comments": "/api/comments",
})


class FetchError(Exception):
    """Raised when the API answers with a non-success status"""

    MESSAGE = "Failed to fetch user"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


async def fetch_user(user_id: str, client: Optional[httpx.AsyncClient] = None) -> Any:
    """
    Fetch a single user record.

    Makes exactly one GET request to /api/users/{user_id}. There is no retry
    and no timeout.

    Args:
        user_id: Identifier of the user, must be non-empty
        client: Optional client to send the request with. When omitted a
            client bound to settings.api_base_url is opened for this call.

    Returns:
        The decoded JSON body, unvalidated

    Raises:
        FetchError: the response status is not 2xx. Status and body are dropped.
        httpx.TransportError: connection level failures, left unwrapped
        json.JSONDecodeError: the success body is not valid JSON
    """
    if not user_id:
        raise ValueError("user_id must be a non-empty string")

    path = USER_PATH_TEMPLATE.format(user_id=user_id)

    if client is None:
        async with httpx.AsyncClient(
            base_url=settings.api_base_url, timeout=None, follow_redirects=True
        ) as own_client:
            return await _get_user(own_client, path)
    return await _get_user(client, path)


async def _get_user(client: httpx.AsyncClient, path: str) -> Any:
    logger.debug("Fetching user", path=path)
    response = await client.get(path)

    if not response.is_success:
        logger.warning("User fetch failed", path=path, status_code=response.status_code)
        raise FetchError()

    return response.json()


def format_date(value: date) -> str:
    """Format a date (or datetime) the French way: DD/MM/YYYY"""
    return value.strftime(FRENCH_DATE_FORMAT)
