"""License resolver downloading raw files by guessed URL.

Works for every supported provider, at the cost of one request per candidate
file name and branch.
"""

import asyncio
import logging
from typing import Optional

from gocomply.exceptions import FetchError, LicenseDecodeError, LicenseNotFoundError
from gocomply.models import (
    HTTP_LICENSE_FILES,
    ModuleLicense,
    RepositoryLocation,
    ResolverConfig,
    SourceBrowsingInfo,
)
from gocomply.providers import resolve_file_urls
from gocomply.resolvers.base import BaseResolver

logger = logging.getLogger(__name__)


class RawFileResolver(BaseResolver):
    """Resolver that tries conventional license file names one by one.

    For each file name in priority order, the provider's candidate URLs are
    fetched in order and the first successful download wins. Failed downloads
    only disqualify one URL. Resolver and decode errors abort the whole lookup.

    Attributes:
        filenames: Candidate file names, highest priority first.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        filenames: tuple[str, ...] = HTTP_LICENSE_FILES,
    ) -> None:
        """Initialize RawFileResolver.

        Args:
            config: Optional resolver configuration.
            filenames: Candidate file names, highest priority first.
        """
        super().__init__(config)
        self.filenames = filenames

    @property
    def name(self) -> str:
        return "raw"

    @property
    def priority(self) -> int:
        """Return resolver priority.

        Returns:
            100 (last resort, works for every provider)
        """
        return 100

    async def fetch_license(
        self,
        module: str,
        location: RepositoryLocation,
        source: Optional[SourceBrowsingInfo] = None,
    ) -> ModuleLicense:
        """Download the first license file found in the repository.

        Args:
            module: Module path, used in error messages.
            location: Repository location from discovery.
            source: Optional source browsing info from discovery.

        Returns:
            ModuleLicense with trimmed license text.

        Raises:
            ResolverError: If no URL can be built for the repository.
            LicenseDecodeError: If a downloaded file cannot be decoded.
            LicenseNotFoundError: If no candidate file could be downloaded.
        """
        for filename in self.filenames:
            # be a good citizen
            await asyncio.sleep(self.config.file_delay)

            resolved = resolve_file_urls(location, source, filename)

            for url in resolved.urls:
                try:
                    data = await self._http_get(url)
                except FetchError as e:
                    logger.debug("Skipping %s: %s", url, e)
                    continue

                try:
                    text = resolved.decoder(data)
                except LicenseDecodeError as e:
                    raise LicenseDecodeError(f"error decoding {url!r}: {e}") from e

                logger.debug("Found %s for %s at %s", filename, module, url)
                return ModuleLicense(module=module, text=text.strip(), source_url=url)

        raise LicenseNotFoundError(module)
