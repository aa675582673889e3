"""Core data models for gocomply.

This module defines the data structures passed between the discovery,
resolution and reporting stages: repository locations parsed from
``go-import``/``go-source`` meta tags, credentials, resolver configuration
and resolved license texts.
"""

from dataclasses import dataclass
from typing import Optional

# Candidate names for the raw-URL strategy, in order. Each name costs one or
# more requests, and hosts may match case-sensitively, so keep this short.
HTTP_LICENSE_FILES: tuple[str, ...] = (
    "NOTICE",  # apache, must come first
    "LICENSE",
    "LICENSE.txt",
    "LICENSE.md",
    "COPYING",
    "COPYING.txt",
    "COPYING.md",
)

# Candidate names for a full repository listing, in order of precedence.
# Matched case-insensitively.
REPO_LICENSE_FILES: tuple[str, ...] = (
    "NOTICE",  # apache, must come first
    "NOTICE.txt",
    "LICENSE",
    "LICENSE.txt",
    "LICENSE.md",
    "LICENSE.markdown",
    "LICENSE.rst",
    "LICENCE",
    "LICENCE.txt",
    "LICENCE.md",
    "LICENCE.markdown",
    "LICENCE.rst",
    "COPYING",
    "COPYING.txt",
    "COPYING.md",
    "COPYRIGHT",
    "COPYRIGHT.txt",
    "MIT-LICENSE",
    "MIT-LICENSE.txt",
    "MIT-LICENCE",
    "MIT-LICENCE.txt",
)

SUPPORTED_VCS = "git"


@dataclass(frozen=True)
class RepositoryLocation:
    """Where a module's source lives, from a ``go-import`` meta tag.

    Attributes:
        import_prefix: Import path prefix served by the repository.
        vcs: Version control system identifier (only "git" is supported).
        repo_root: Repository root URL (e.g., "https://github.com/owner/repo").
    """

    import_prefix: str
    vcs: str
    repo_root: str

    @classmethod
    def private_guess(cls, module: str) -> "RepositoryLocation":
        """Guess a location for a module that has no discovery page.

        Args:
            module: Module path (e.g., "git.example.org/team/tool").

        Returns:
            A git location rooted at ``https://<module>.git``.
        """
        return cls(
            import_prefix=module,
            vcs=SUPPORTED_VCS,
            repo_root=f"https://{module}.git",
        )


@dataclass(frozen=True)
class SourceBrowsingInfo:
    """URL templates for browsing a module's source, from a ``go-source`` tag.

    Attributes:
        import_prefix: Import path prefix the templates apply to.
        home: Home page URL (often "_" for none).
        directory: Directory browsing template, e.g.
            "https://github.com/natefinch/lumberjack/tree/v2.1{/dir}".
        file: File browsing template.
    """

    import_prefix: str
    home: str
    directory: str
    file: str


@dataclass(frozen=True)
class Credentials:
    """HTTP basic auth credentials for a single host.

    Attributes:
        username: Account login.
        token: Password or personal access token.
    """

    username: str
    token: str

    @property
    def is_set(self) -> bool:
        """Return True only if both username and token are non-empty."""
        return bool(self.username) and bool(self.token)


@dataclass(frozen=True)
class ResolverConfig:
    """Settings shared by every resolver for a run.

    Attributes:
        credentials: Optional GitHub credentials. Enables the tree API path.
        timeout: Per-request timeout in seconds.
        file_delay: Pause before each candidate file name, in seconds.
        api_delay: Pause before each GitHub API listing, in seconds. The
            authenticated budget is 5000 requests per hour.
    """

    credentials: Optional[Credentials] = None
    timeout: float = 10.0
    file_delay: float = 1.0
    api_delay: float = 2.46

    @property
    def has_credentials(self) -> bool:
        """Return True if usable credentials are configured."""
        return self.credentials is not None and self.credentials.is_set


@dataclass(frozen=True)
class ModuleSpec:
    """A module dependency reported by a scanner.

    Attributes:
        path: Module path (e.g., "golang.org/x/text").
        version: Optional version string (e.g., "v0.3.3").
        source: Optional source identifier (e.g., "go list").
    """

    path: str
    version: Optional[str] = None
    source: Optional[str] = None


@dataclass
class ModuleLicense:
    """License text resolved for one module.

    Attributes:
        module: Module path the license belongs to.
        text: License text with surrounding whitespace removed.
        source_url: URL the text was downloaded from.
    """

    module: str
    text: str
    source_url: Optional[str] = None
