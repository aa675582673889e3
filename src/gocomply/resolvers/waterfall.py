"""Waterfall resolver chaining discovery, the GitHub API and raw downloads.

This module implements the per-module resolution flow and sequential batch
resolution with per-module failure isolation.
"""

import logging
from typing import Optional

from gocomply.exceptions import GitHubAPIError, GoComplyError, LicenseNotFoundError
from gocomply.models import ModuleLicense, ResolverConfig
from gocomply.resolvers.base import WaterfallResolverBase
from gocomply.resolvers.discovery import DiscoveryResolver
from gocomply.resolvers.github import GitHubTreeResolver
from gocomply.resolvers.raw import RawFileResolver

logger = logging.getLogger(__name__)


class WaterfallResolver(WaterfallResolverBase):
    """Orchestrates discovery and license resolvers for Go modules.

    Resolution strategy:
    1. Discovery: find the repository via ``?go-get=1`` meta tags
    2. GitHub API: if the repository is on GitHub and credentials are set,
       list the tree and download the license blob
    3. Raw: guess raw file URLs for each conventional license file name

    A GitHub API failure falls through to step 3. A GitHub listing without a
    license file does not, since the listing is authoritative.

    Attributes:
        discovery_resolver: Resolver for module discovery.
        github_resolver: Resolver using the GitHub tree API.
        raw_resolver: Resolver guessing raw file URLs.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        discovery_resolver: Optional[DiscoveryResolver] = None,
        github_resolver: Optional[GitHubTreeResolver] = None,
        raw_resolver: Optional[RawFileResolver] = None,
    ) -> None:
        """Initialize WaterfallResolver with optional custom resolvers.

        Args:
            config: Optional resolver configuration shared by default resolvers.
                Without credentials the GitHub API path is skipped.
            discovery_resolver: Optional custom DiscoveryResolver.
            github_resolver: Optional custom GitHubTreeResolver.
            raw_resolver: Optional custom RawFileResolver.
        """
        config = config or ResolverConfig()
        self.discovery_resolver = discovery_resolver or DiscoveryResolver(config)
        self.github_resolver = github_resolver or GitHubTreeResolver(config)
        self.raw_resolver = raw_resolver or RawFileResolver(config)

        super().__init__(
            resolvers=[self.github_resolver, self.raw_resolver], config=config
        )

    async def resolve(self, module: str) -> ModuleLicense:
        """Resolve the license of one module.

        Args:
            module: Module path.

        Returns:
            ModuleLicense for the module.

        Raises:
            ModuleLookupError: If discovery found no go-import tag.
            ResolverError: If the repository's host or VCS is unsupported.
            LicenseDecodeError: If a license file could not be decoded.
            LicenseNotFoundError: If no license file exists.
        """
        logger.debug("Starting waterfall resolution for %s", module)

        location, source = await self.discovery_resolver.lookup(module)

        for resolver in self.resolvers:
            if not resolver.can_resolve(location):
                continue
            try:
                return await resolver.fetch_license(module, location, source)
            except GitHubAPIError as e:
                logger.warning("api.github.com error: %s", e)

        raise LicenseNotFoundError(module)

    async def resolve_batch(self, modules: list[str]) -> dict[str, Optional[ModuleLicense]]:
        """Resolve several modules one after another.

        A failure for one module is logged and recorded as None without
        stopping the rest of the batch.

        Args:
            modules: Module paths, in output order.

        Returns:
            Dictionary mapping each module to its license (or None), in input
            order.
        """
        logger.info("Starting batch resolution of %d modules", len(modules))

        results: dict[str, Optional[ModuleLicense]] = {}
        for module in modules:
            try:
                results[module] = await self.resolve(module)
            except GoComplyError as e:
                logger.warning("unable to find a license for module %r: %s", module, e)
                results[module] = None

        successful = sum(1 for license in results.values() if license is not None)
        logger.info("Batch resolution complete: %d/%d successful", successful, len(modules))

        return results

    async def close(self) -> None:
        """Close the HTTP sessions of all resolvers."""
        await self.discovery_resolver.close()
        await self.github_resolver.close()
        await self.raw_resolver.close()

    async def __aenter__(self) -> "WaterfallResolver":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()
