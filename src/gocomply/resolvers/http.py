import json
import logging
from typing import Any, Optional

import aiohttp

from gocomply.exceptions import FetchError
from gocomply.models import Credentials, ResolverConfig

logger = logging.getLogger(__name__)


class HttpResolver:
    """Base class for resolvers that make HTTP requests.

    Manages a shared aiohttp.ClientSession for connection pooling and reuse.
    Requests are awaited one at a time; nothing here runs concurrently.

    Attributes:
        config: Resolver configuration (timeouts, delays, credentials).
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        """Initialize the HttpResolver.

        Args:
            config: Optional resolver configuration. Defaults are used if omitted.
        """
        self.config = config or ResolverConfig()
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session.

        Returns:
            The shared aiohttp ClientSession.
        """
        if self._session is None or self._session.closed:
            self._session = self._create_session()
        return self._session

    def _create_session(self) -> aiohttp.ClientSession:
        """Create a new aiohttp.ClientSession.

        Subclasses can override this to provide custom session configuration.

        Returns:
            A new aiohttp.ClientSession instance.
        """
        return aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.config.timeout)
        )

    async def _http_get(self, url: str, auth: Optional[Credentials] = None) -> str:
        """Download a URL and return its body as text.

        Args:
            url: URL to fetch.
            auth: Optional credentials sent as HTTP basic auth when set.

        Returns:
            Response body decoded as UTF-8.

        Raises:
            FetchError: On a non-200 status, connection error or timeout.
        """
        session = await self._get_session()
        logger.debug("GET %s", url)

        try:
            async with session.get(url, auth=self._basic_auth(auth)) as response:
                if response.status != 200:
                    raise FetchError(url, f"http status code {response.status}")
                body = await response.read()
        except aiohttp.ClientError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
        except TimeoutError as e:
            raise FetchError(url, "timeout") from e
        except ValueError as e:
            raise FetchError(url, f"invalid url: {e}") from e

        return body.decode("utf-8", errors="replace")

    async def _http_get_json(self, url: str, auth: Optional[Credentials] = None) -> Any:
        """Download a URL and parse its body as JSON.

        Args:
            url: URL to fetch.
            auth: Optional credentials sent as HTTP basic auth when set.

        Returns:
            Parsed JSON document.

        Raises:
            FetchError: On a non-200 status, connection error, timeout or a
                body that is not JSON.
        """
        session = await self._get_session()
        logger.debug("GET %s", url)

        try:
            async with session.get(
                url,
                auth=self._basic_auth(auth),
                headers={"Accept": "application/vnd.github+json"},
            ) as response:
                if response.status != 200:
                    raise FetchError(url, f"http status code {response.status}")
                try:
                    return await response.json(content_type=None)
                except (json.JSONDecodeError, UnicodeDecodeError) as e:
                    raise FetchError(url, f"json decode error: {e}") from e
        except aiohttp.ClientError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
        except TimeoutError as e:
            raise FetchError(url, "timeout") from e
        except ValueError as e:
            raise FetchError(url, f"invalid url: {e}") from e

    @staticmethod
    def _basic_auth(auth: Optional[Credentials]) -> Optional[aiohttp.BasicAuth]:
        if auth is not None and auth.is_set:
            return aiohttp.BasicAuth(auth.username, auth.token)
        return None

    async def close(self) -> None:
        """Close the aiohttp session.

        Should be called when done using the resolver to release resources.
        """
        if self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> "HttpResolver":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
