"""License resolvers for Go modules.

This module provides module discovery and resolvers for fetching license
text through the GitHub API or by guessing raw file URLs.
"""

from gocomply.resolvers.base import BaseResolver, WaterfallResolverBase
from gocomply.resolvers.discovery import DiscoveryResolver
from gocomply.resolvers.github import GitHubTreeResolver
from gocomply.resolvers.http import HttpResolver
from gocomply.resolvers.raw import RawFileResolver
from gocomply.resolvers.waterfall import WaterfallResolver

__all__ = [
    "BaseResolver",
    "WaterfallResolverBase",
    "DiscoveryResolver",
    "GitHubTreeResolver",
    "HttpResolver",
    "RawFileResolver",
    "WaterfallResolver",
]
