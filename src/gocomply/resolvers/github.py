"""GitHub license resolver.

Lists the repository tree through GitHub's API and downloads the matching
license blob directly, instead of guessing raw URLs per branch and file name.
Requires credentials: anonymous access is limited to 60 requests/hour.
"""

import asyncio
import base64
import binascii
import logging
from typing import Any, Optional

from gocomply.exceptions import (
    FetchError,
    GitHubAPIError,
    LicenseDecodeError,
    LicenseNotFoundError,
)
from gocomply.models import (
    REPO_LICENSE_FILES,
    SUPPORTED_VCS,
    ModuleLicense,
    RepositoryLocation,
    ResolverConfig,
    SourceBrowsingInfo,
)
from gocomply.providers import GitHubProvider
from gocomply.resolvers.base import BaseResolver

logger = logging.getLogger(__name__)

API_ROOT = "https://api.github.com"


def decode_blob(blob: dict[str, Any]) -> str:
    """Decode the content of a GitHub git blob response.

    Args:
        blob: Parsed JSON from the blobs API.

    Returns:
        Decoded, trimmed content.

    Raises:
        GitHubAPIError: If the content field is not a string.
        LicenseDecodeError: If the encoding is unknown or the content is invalid.
    """
    content = blob.get("content") or ""
    if not isinstance(content, str):
        raise GitHubAPIError(f"unexpected blob content type {type(content).__name__}")

    encoding = str(blob.get("encoding") or "")

    if encoding.lower() == "utf-8":
        return content.strip()

    if encoding.lower() == "base64":
        try:
            raw = base64.b64decode("".join(content.split()), validate=True)
            return raw.decode("utf-8", errors="replace").strip()
        except (binascii.Error, ValueError) as e:
            raise LicenseDecodeError(f"base64 decode error: {e}") from e

    raise LicenseDecodeError(f"unknown encoding type {encoding!r}")


def find_license_entry(
    tree: list[dict[str, Any]], filenames: tuple[str, ...] = REPO_LICENSE_FILES
) -> Optional[dict[str, Any]]:
    """Pick the highest priority license blob from a tree listing.

    Args:
        tree: Entries of a git tree response.
        filenames: Candidate names, highest priority first, compared
            case-insensitively.

    Returns:
        The matching tree entry, or None.

    Raises:
        GitHubAPIError: If an entry is not a JSON object.
    """
    for entry in tree:
        if not isinstance(entry, dict):
            raise GitHubAPIError(f"unexpected tree entry {entry!r}")

    blobs = [entry for entry in tree if entry.get("type") == "blob"]
    for name in filenames:
        for entry in blobs:
            if str(entry.get("path", "")).casefold() == name.casefold():
                return entry
    return None


class GitHubTreeResolver(BaseResolver):
    """Resolver that uses GitHub's git trees and blobs API.

    Only used for git repositories on github.com when credentials are
    configured. A failed API call is reported as GitHubAPIError so that the
    caller can fall back to raw URLs. A successful listing without a license
    is authoritative and raises LicenseNotFoundError.

    Attributes:
        filenames: Candidate file names, highest priority first.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        filenames: tuple[str, ...] = REPO_LICENSE_FILES,
    ) -> None:
        """Initialize GitHubTreeResolver.

        Args:
            config: Optional resolver configuration carrying GitHub credentials.
            filenames: Candidate file names, highest priority first.
        """
        super().__init__(config)
        self.filenames = filenames

    @property
    def name(self) -> str:
        """Return the resolver name.

        Returns:
            "GitHub API"
        """
        return "GitHub API"

    @property
    def priority(self) -> int:
        """Return resolver priority.

        Returns:
            10 (tried before guessing raw URLs)
        """
        return 10

    def can_resolve(self, location: RepositoryLocation) -> bool:
        """Check if the API path applies to a repository.

        Args:
            location: Repository location from discovery.

        Returns:
            True for git repositories on github.com when credentials are set.
        """
        return (
            location.vcs == SUPPORTED_VCS
            and GitHubProvider.can_handle(location.repo_root)
            and self.config.has_credentials
        )

    async def _get_json(self, url: str) -> Any:
        """Fetch and parse a JSON API response.

        Raises:
            GitHubAPIError: If the request fails or the body is not JSON.
        """
        try:
            return await self._http_get_json(url, auth=self.config.credentials)
        except FetchError as e:
            raise GitHubAPIError(str(e)) from e

    async def fetch_license(
        self,
        module: str,
        location: RepositoryLocation,
        source: Optional[SourceBrowsingInfo] = None,
    ) -> ModuleLicense:
        """Find and download the license blob of a GitHub repository.

        Args:
            module: Module path, used in error messages.
            location: Repository location on github.com.
            source: Unused; accepted for interface compatibility.

        Returns:
            ModuleLicense with trimmed license text.

        Raises:
            GitHubAPIError: If listing the tree or fetching the blob failed.
            LicenseNotFoundError: If the tree holds no license file.
            LicenseDecodeError: If the blob cannot be decoded.
        """
        # 5000 requests/hour once authenticated
        await asyncio.sleep(self.config.api_delay)

        repo = GitHubProvider(location).repo_dir
        try:
            listing = await self._get_json(f"{API_ROOT}/repos/{repo}/git/trees/HEAD")
        except GitHubAPIError as e:
            raise GitHubAPIError(
                f"trouble getting listing for {location.repo_root}: {e}"
            ) from e

        tree = listing.get("tree") if isinstance(listing, dict) else None
        if not isinstance(tree, list):
            raise GitHubAPIError(f"unexpected listing format for {location.repo_root}")

        entry = find_license_entry(tree, self.filenames)
        if entry is None:
            raise LicenseNotFoundError(module, "api.github.com listing has no license file")

        blob_url = entry.get("url")
        if not blob_url or not isinstance(blob_url, str):
            raise GitHubAPIError(f"tree entry {entry.get('path')!r} has no blob url")

        try:
            blob = await self._get_json(blob_url)
        except GitHubAPIError as e:
            raise GitHubAPIError(f"trouble getting blob for {location.repo_root}: {e}") from e

        if not isinstance(blob, dict):
            raise GitHubAPIError(f"unexpected blob format for {location.repo_root}")

        logger.debug("Found %s for %s via GitHub API", entry.get("path"), module)
        return ModuleLicense(module=module, text=decode_blob(blob), source_url=blob_url)
