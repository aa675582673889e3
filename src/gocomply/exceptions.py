"""Exception hierarchy for gocomply.

Every failure raised while resolving a module derives from GoComplyError so
that callers can isolate one module's failure from the rest of a batch.
"""


class GoComplyError(Exception):
    """Base class for all gocomply errors."""


class FetchError(GoComplyError):
    """A single HTTP request failed (status, connection error or timeout)."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"{reason} when downloading {url!r}")


class ModuleLookupError(GoComplyError):
    """The discovery page answered but named no go-import repository."""

    def __init__(self, module: str) -> None:
        self.module = module
        super().__init__(f"unrecognised import {module!r} (no go-import meta tags)")


class ResolverError(GoComplyError):
    """No raw file URL can be built for a repository."""


class UnsupportedVCSError(ResolverError):
    """The repository uses a version control system other than git."""

    def __init__(self, vcs: str) -> None:
        self.vcs = vcs
        super().__init__(f"vcs {vcs!r} not implemented")


class UnsupportedProviderError(ResolverError):
    """No provider handler recognises the repository root."""

    def __init__(self, repo_root: str) -> None:
        self.repo_root = repo_root
        super().__init__(f"repo {repo_root!r} not supported (please open an issue)")


class TemplateParseError(ResolverError):
    """A go-source directory template could not be parsed."""


class LicenseDecodeError(GoComplyError):
    """A license file was downloaded but its content could not be decoded."""


class LicenseNotFoundError(GoComplyError):
    """No candidate license file exists for a module."""

    def __init__(self, module: str, detail: str = "") -> None:
        self.module = module
        message = f"no license found for module {module!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class GitHubAPIError(GoComplyError):
    """The GitHub tree API could not be queried."""
