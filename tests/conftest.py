"""Pytest configuration and fixtures."""

import pytest

from gocomply.models import Credentials, RepositoryLocation, ResolverConfig, SourceBrowsingInfo


@pytest.fixture
def fast_config() -> ResolverConfig:
    """Return a config without politeness delays or credentials."""
    return ResolverConfig(file_delay=0, api_delay=0, timeout=5)


@pytest.fixture
def credentials() -> Credentials:
    """Return sample GitHub credentials."""
    return Credentials(username="octocat", token="ghp_test123token")


@pytest.fixture
def authed_config(credentials: Credentials) -> ResolverConfig:
    """Return a config with GitHub credentials and no delays."""
    return ResolverConfig(credentials=credentials, file_delay=0, api_delay=0, timeout=5)


@pytest.fixture
def github_location() -> RepositoryLocation:
    """Return a repository location hosted on GitHub."""
    return RepositoryLocation(
        import_prefix="example.org/foo",
        vcs="git",
        repo_root="https://github.com/example/foo",
    )


@pytest.fixture
def lumberjack_source() -> SourceBrowsingInfo:
    """Return the go-source info served by gopkg.in for lumberjack.v2."""
    return SourceBrowsingInfo(
        import_prefix="gopkg.in/natefinch/lumberjack.v2",
        home="_",
        directory="https://github.com/natefinch/lumberjack/tree/v2.1{/dir}",
        file="https://github.com/natefinch/lumberjack/blob/v2.1{/dir}/{file}#L{line}",
    )


@pytest.fixture
def discovery_html() -> str:
    """Return a discovery page for example.org/foo backed by GitHub."""
    return (
        "<!DOCTYPE html><html><head>"
        '<meta name="go-import" content="example.org/foo git https://github.com/example/foo">'
        "</head><body>go get example.org/foo</body></html>"
    )
