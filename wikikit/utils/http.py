"""
HTTP utilities for WikiKit.
"""
import asyncio
import logging
from typing import Dict, Optional

import aiohttp
import async_timeout
from yarl import URL

from wikikit import __version__
from wikikit.core.errors import NetworkError, RateLimited, ServerError, WikipediaError

# Configure logging
logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10  # seconds
DEFAULT_USER_AGENT = f"wikikit/{__version__} (Python Wikipedia client)"


def error_for_status(status: int) -> WikipediaError:
    """
    Map a non-200 HTTP status to the matching error.

    404 stays a NetworkError carrying the status so callers can decide what a
    missing page means for them.

    Args:
        status: HTTP status code

    Returns:
        The error to raise
    """
    if status in (403, 429):
        return RateLimited(status)
    if status == 404:
        return NetworkError("404 - Not found", status=404)
    if 500 <= status <= 599:
        return ServerError(status)
    return NetworkError(f"HTTP {status}", status=status)


class RequestExecutor:
    """
    Issues GET requests against Wikipedia and maps the outcome to bytes or an error.

    No retries are attempted. A caller-supplied aiohttp session is used as-is
    and never closed here; otherwise each request opens and closes its own
    session so nothing outlives the call.
    """
    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.timeout = timeout
        self.session = session
        self.headers: Dict[str, str] = {
            'User-Agent': user_agent,
            'Accept': 'application/json',
            'Cache-Control': 'no-cache',
        }

    async def fetch(self, url: str) -> bytes:
        """
        Fetch a URL and return the response body.

        Args:
            url: Fully-qualified, already percent-encoded URL

        Returns:
            The body of a 200 response

        Raises:
            RateLimited: On HTTP 403 or 429
            ServerError: On HTTP 5xx
            NetworkError: On transport failure, timeout or any other status
        """
        logger.debug(f"GET {url}")
        try:
            async with async_timeout.timeout(self.timeout):
                if self.session is not None:
                    return await self._get(self.session, url)
                async with aiohttp.ClientSession() as session:
                    return await self._get(session, url)
        except asyncio.TimeoutError as e:
            logger.error(f"Request to {url} timed out after {self.timeout}s")
            raise NetworkError(f"Request timed out after {self.timeout} seconds") from e
        except aiohttp.ClientError as e:
            logger.error(f"Error fetching {url}: {e}")
            raise NetworkError(str(e) or e.__class__.__name__) from e

    async def _get(self, session: aiohttp.ClientSession, url: str) -> bytes:
        async with session.get(URL(url, encoded=True), headers=self.headers) as response:
            if response.status == 200:
                return await response.read()

            error = error_for_status(response.status)
            if isinstance(error, (RateLimited, ServerError)):
                logger.warning(f"{url} answered HTTP {response.status}")
            else:
                logger.debug(f"{url} answered HTTP {response.status}")
            raise error
