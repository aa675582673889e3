"""Base interfaces for license resolvers.

Resolvers fetch the text of a module's license file from its repository,
once the repository has been located through Go module discovery.
"""

from abc import ABC, abstractmethod
from typing import Optional

from gocomply.models import (
    ModuleLicense,
    RepositoryLocation,
    ResolverConfig,
    SourceBrowsingInfo,
)
from gocomply.resolvers.http import HttpResolver


class BaseResolver(HttpResolver, ABC):
    """Abstract base class for license resolvers.

    Resolvers fetch license text for a module from an already located
    repository. Requests are made sequentially.
    """

    @abstractmethod
    async def fetch_license(
        self,
        module: str,
        location: RepositoryLocation,
        source: Optional[SourceBrowsingInfo] = None,
    ) -> ModuleLicense:
        """Fetch the license text for a module.

        Args:
            module: Module path, used in error messages.
            location: Repository location from discovery.
            source: Optional source browsing info from discovery.

        Returns:
            ModuleLicense with trimmed license text.

        Raises:
            GoComplyError: If no license could be retrieved.
        """
        ...

    def can_resolve(self, location: RepositoryLocation) -> bool:
        """Check if this resolver applies to a repository.

        Args:
            location: Repository location from discovery.

        Returns:
            True by default.
        """
        return True

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the resolver name for logging/debugging.

        Returns:
            Name like "raw", "GitHub API", etc.
        """
        ...

    @property
    def priority(self) -> int:
        """Return resolver priority for waterfall ordering.

        Lower numbers are tried first. Default is 100.

        Returns:
            Priority value.
        """
        return 100


class WaterfallResolverBase(ABC):
    """Abstract base for waterfall resolution strategy.

    Orchestrates license resolvers in priority order for one module at a
    time.
    """

    def __init__(
        self,
        resolvers: list[BaseResolver],
        config: Optional[ResolverConfig] = None,
    ) -> None:
        """Initialize with a list of resolvers.

        Args:
            resolvers: List of resolvers to try in order.
            config: Optional resolver configuration.
        """
        self.resolvers = sorted(resolvers, key=lambda r: r.priority)
        self.config = config or ResolverConfig()

    @abstractmethod
    async def resolve(self, module: str) -> ModuleLicense:
        """Resolve the license of one module.

        Args:
            module: Module path.

        Returns:
            ModuleLicense for the module.

        Raises:
            GoComplyError: If the module's license could not be resolved.
        """
        ...

    @abstractmethod
    async def resolve_batch(self, modules: list[str]) -> dict[str, Optional[ModuleLicense]]:
        """Resolve several modules one after another.

        Args:
            modules: Module paths, in output order.

        Returns:
            Dictionary mapping each module to its license (or None).
        """
        ...
