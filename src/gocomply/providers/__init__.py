"""Hosting providers for building raw license file URLs.

This module holds the registry of provider handlers. Handlers are evaluated
in order and the first whose prefix matches the repository root wins.
"""

from typing import Optional

from gocomply.exceptions import UnsupportedProviderError, UnsupportedVCSError
from gocomply.models import SUPPORTED_VCS, RepositoryLocation, SourceBrowsingInfo
from gocomply.providers.base import (
    BaseProvider,
    ResolvedFile,
    decode_base64,
    decode_identity,
)
from gocomply.providers.github import GitHubProvider
from gocomply.providers.gitlab import GitLabProvider
from gocomply.providers.googlesource import GoogleSourceProvider
from gocomply.providers.gopkgin import GopkgInProvider
from gocomply.providers.sourcehut import SourceHutProvider

__all__ = [
    "BaseProvider",
    "GitHubProvider",
    "GitLabProvider",
    "GoogleSourceProvider",
    "GopkgInProvider",
    "ResolvedFile",
    "SourceHutProvider",
    "decode_base64",
    "decode_identity",
    "get_provider",
    "resolve_file_urls",
]

# Registry of available providers in priority order
_PROVIDERS: list[type[BaseProvider]] = [
    GoogleSourceProvider,
    SourceHutProvider,
    GopkgInProvider,
    GitHubProvider,
    GitLabProvider,
]


def get_provider(
    location: RepositoryLocation,
    source: Optional[SourceBrowsingInfo] = None,
) -> BaseProvider:
    """Get the provider hosting a repository.

    Args:
        location: Repository location from the go-import tag.
        source: Optional source browsing info from the go-source tag.

    Returns:
        Provider instance bound to the repository.

    Raises:
        UnsupportedVCSError: If the repository is not a git repository.
        UnsupportedProviderError: If no provider recognises the repository root.
    """
    if location.vcs != SUPPORTED_VCS:
        raise UnsupportedVCSError(location.vcs)

    for provider_cls in _PROVIDERS:
        if provider_cls.can_handle(location.repo_root):
            return provider_cls(location, source)

    raise UnsupportedProviderError(location.repo_root)


def resolve_file_urls(
    location: RepositoryLocation,
    source: Optional[SourceBrowsingInfo],
    filename: str,
) -> ResolvedFile:
    """Build candidate raw URLs and a decoder for a file in a repository.

    Args:
        location: Repository location from the go-import tag.
        source: Optional source browsing info from the go-source tag.
        filename: File name at the repository root.

    Returns:
        ResolvedFile with URLs in the order they should be tried.

    Raises:
        ResolverError: If the VCS or host is unsupported, or a gopkg.in
            template cannot be parsed.
    """
    return get_provider(location, source).resolve(filename)
