"""Module discovery via the ``?go-get=1`` protocol.

Finds the repository backing a module path by reading the go-import and
go-source meta tags served for it.
"""

import logging
from typing import Optional

from gocomply.exceptions import FetchError, ModuleLookupError
from gocomply.meta import parse_go_import, parse_go_source
from gocomply.models import RepositoryLocation, SourceBrowsingInfo
from gocomply.resolvers.http import HttpResolver

logger = logging.getLogger(__name__)

# Path segments making up a conventional module root, e.g.
# github.com/go-gl/glfw/v3.3/glfw -> github.com/go-gl/glfw
MODULE_ROOT_SEGMENTS = 3


def discovery_url(module: str) -> str:
    """Return the discovery URL for a module path."""
    return f"https://{module}?go-get=1"


def module_root(module: str) -> Optional[str]:
    """Return the module root of a deep module path.

    Args:
        module: Module path.

    Returns:
        The first three path segments, or None if the path is not deeper
        than that.
    """
    parts = module.split("/")
    if len(parts) <= MODULE_ROOT_SEGMENTS:
        return None
    return "/".join(parts[:MODULE_ROOT_SEGMENTS])


class DiscoveryResolver(HttpResolver):
    """Resolves module paths to repository locations.

    Resolution strategy:
    1. Fetch the discovery page for the module path itself
    2. If that fails and the path is deep, fetch it for the module root
    3. If both fail, assume a private git repository at ``https://<module>.git``
    """

    async def lookup(
        self, module: str
    ) -> tuple[RepositoryLocation, Optional[SourceBrowsingInfo]]:
        """Find the repository for a module.

        Args:
            module: Module path (e.g., "golang.org/x/text").

        Returns:
            Tuple of (repository location, optional source browsing info).

        Raises:
            ModuleLookupError: If a discovery page was served but carries no
                go-import meta tag.
        """
        html = await self._fetch_discovery_page(module)
        if html is None:
            # TODO: consult GOPRIVATE before guessing, and before trying the module root
            logger.debug("No discovery page for %s, assuming a private repo", module)
            return RepositoryLocation.private_guess(module), None

        location = parse_go_import(html)
        if location is None:
            raise ModuleLookupError(module)

        source = parse_go_source(html)
        logger.debug(
            "Discovered %s: %s %s (go-source: %s)",
            module,
            location.vcs,
            location.repo_root,
            "yes" if source else "no",
        )
        return location, source

    async def _fetch_discovery_page(self, module: str) -> Optional[str]:
        """Fetch the discovery page for a module or, failing that, its root.

        Args:
            module: Module path.

        Returns:
            The HTML page, or None if neither request succeeded.
        """
        try:
            return await self._http_get(discovery_url(module))
        except FetchError as e:
            logger.debug("Discovery failed for %s: %s", module, e)

        root = module_root(module)
        if root is None:
            return None

        try:
            return await self._http_get(discovery_url(root))
        except FetchError as e:
            logger.debug("Discovery failed for module root %s: %s", root, e)
            return None
