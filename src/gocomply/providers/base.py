"""Base interface for hosting providers.

Few git hosts support ``git archive`` for a single file, so every provider has
its own rule for turning a repository root and a file name into raw-content
URLs.
"""

import base64
import binascii
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from gocomply.exceptions import LicenseDecodeError
from gocomply.models import RepositoryLocation, SourceBrowsingInfo

Decoder = Callable[[str], str]


def decode_identity(data: str) -> str:
    """Return raw content unchanged."""
    return data


def decode_base64(data: str) -> str:
    """Decode base64-encoded raw content.

    Line breaks inside the payload are ignored.

    Raises:
        LicenseDecodeError: If the payload is not valid base64.
    """
    try:
        raw = base64.b64decode("".join(data.split()), validate=True)
        return raw.decode("utf-8", errors="replace")
    except (binascii.Error, ValueError) as e:
        raise LicenseDecodeError(f"base64 decode error: {e}") from e


@dataclass(frozen=True)
class ResolvedFile:
    """Candidate download locations for one file in a repository.

    Attributes:
        urls: URLs to try, in order.
        decoder: Function applied to the body of the first successful download.
    """

    urls: tuple[str, ...]
    decoder: Decoder = decode_identity


class BaseProvider(ABC):
    """Abstract base class for hosting providers.

    Attributes:
        location: Repository being resolved.
        source: Optional go-source templates for the module.
    """

    # Repository roots starting with this prefix belong to the provider.
    prefix: str = ""

    def __init__(
        self,
        location: RepositoryLocation,
        source: Optional[SourceBrowsingInfo] = None,
    ) -> None:
        """Initialize the provider.

        Args:
            location: Repository location from the go-import tag.
            source: Optional source browsing info from the go-source tag.
        """
        self.location = location
        self.source = source

    @classmethod
    def can_handle(cls, repo_root: str) -> bool:
        """Check if this provider hosts the given repository root.

        Args:
            repo_root: Repository root URL.

        Returns:
            True if the root starts with the provider's prefix.
        """
        return bool(cls.prefix) and repo_root.startswith(cls.prefix)

    @abstractmethod
    def resolve(self, filename: str) -> ResolvedFile:
        """Build candidate raw URLs for a file at the repository root.

        Args:
            filename: File name, e.g. "LICENSE".

        Returns:
            ResolvedFile with URLs in the order they should be tried.

        Raises:
            ResolverError: If no URL can be built for this repository.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a human-readable provider name for logging."""
        ...

    @property
    def repo_dir(self) -> str:
        """Return the repository root with the provider prefix and ".git" removed."""
        return self.location.repo_root.removeprefix(self.prefix).removesuffix(".git")
