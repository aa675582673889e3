"""Tests for the GitHub tree API license resolver."""

import base64
from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, patch

import aiohttp
import pytest
from aioresponses import aioresponses
from yarl import URL

from gocomply.exceptions import GitHubAPIError, LicenseDecodeError, LicenseNotFoundError
from gocomply.models import Credentials, RepositoryLocation, ResolverConfig
from gocomply.resolvers.github import GitHubTreeResolver, decode_blob, find_license_entry

TREE_URL = "https://api.github.com/repos/example/foo/git/trees/HEAD"
BLOB_URL = "https://api.github.com/repos/example/foo/git/blobs/"

APACHE_NOTICE = "Example Foo\nCopyright 2021 The Example Authors"


def _entry(path: str, sha: str, type_: str = "blob") -> dict[str, Any]:
    return {"path": path, "mode": "100644", "type": type_, "sha": sha, "url": BLOB_URL + sha}


def _blob(text: str) -> dict[str, Any]:
    encoded = base64.encodebytes(text.encode("utf-8")).decode("ascii")
    return {"sha": "x", "encoding": "base64", "content": encoded}


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """Return a tree listing holding both LICENSE and NOTICE."""
    return {
        "sha": "HEAD",
        "tree": [
            _entry(".github", "t1", type_="tree"),
            _entry("LICENSE", "b1"),
            _entry("NOTICE", "b2"),
            _entry("go.mod", "b3"),
        ],
        "truncated": False,
    }


@pytest.fixture
async def github_resolver(
    authed_config: ResolverConfig,
) -> AsyncGenerator[GitHubTreeResolver, None]:
    """Return a GitHubTreeResolver with credentials and no delays."""
    resolver = GitHubTreeResolver(authed_config)
    yield resolver
    await resolver.close()


class TestFindLicenseEntry:
    """Test suite for tree entry matching."""

    def test_priority_order_not_tree_order(self, sample_tree: dict[str, Any]) -> None:
        """Test that NOTICE wins even though LICENSE is listed first."""
        entry = find_license_entry(sample_tree["tree"])
        assert entry is not None and entry["path"] == "NOTICE"

    def test_case_insensitive(self) -> None:
        """Test that names match regardless of case."""
        entry = find_license_entry([_entry("go.sum", "a"), _entry("License.Md", "b")])
        assert entry is not None and entry["sha"] == "b"

    def test_directories_ignored(self) -> None:
        """Test that a directory called LICENSE is not a match."""
        assert find_license_entry([_entry("LICENSE", "t", type_="tree")]) is None

    def test_extended_names(self) -> None:
        """Test names only present in the API candidate list."""
        entry = find_license_entry([_entry("MIT-LICENSE.txt", "m")])
        assert entry is not None and entry["sha"] == "m"

    def test_non_object_entry(self) -> None:
        """Test that a malformed tree entry is reported as an API error."""
        with pytest.raises(GitHubAPIError, match="unexpected tree entry"):
            find_license_entry(["LICENSE", _entry("NOTICE", "n")])


class TestDecodeBlob:
    """Test suite for blob decoding."""

    def test_base64_with_line_breaks(self) -> None:
        assert decode_blob(_blob(APACHE_NOTICE + "\n")) == APACHE_NOTICE

    def test_utf8(self) -> None:
        blob = {"encoding": "UTF-8", "content": "  MIT License\n"}
        assert decode_blob(blob) == "MIT License"

    def test_unknown_encoding(self) -> None:
        with pytest.raises(LicenseDecodeError, match="unknown encoding type"):
            decode_blob({"encoding": "rot13", "content": "ZVG"})

    def test_missing_encoding(self) -> None:
        with pytest.raises(LicenseDecodeError):
            decode_blob({"content": "MIT"})

    def test_invalid_base64(self) -> None:
        with pytest.raises(LicenseDecodeError, match="base64 decode error"):
            decode_blob({"encoding": "base64", "content": "!!not base64!!"})

    def test_base64_latin1_text(self) -> None:
        """Test that valid base64 holding non UTF-8 text still decodes."""
        content = base64.b64encode("Copyright © Jürgen".encode("latin-1")).decode("ascii")

        text = decode_blob({"encoding": "base64", "content": content})

        assert text.startswith("Copyright ")
        assert "\ufffd" in text

    def test_non_string_content(self) -> None:
        with pytest.raises(GitHubAPIError, match="unexpected blob content"):
            decode_blob({"encoding": "base64", "content": ["TUlU"]})


class TestGitHubTreeResolver:
    """Test suite for GitHubTreeResolver."""

    def test_resolver_name(self, authed_config: ResolverConfig) -> None:
        assert GitHubTreeResolver(authed_config).name == "GitHub API"

    def test_resolver_priority(self, authed_config: ResolverConfig) -> None:
        assert GitHubTreeResolver(authed_config).priority == 10

    def test_can_resolve_github_with_credentials(
        self, authed_config: ResolverConfig, github_location: RepositoryLocation
    ) -> None:
        assert GitHubTreeResolver(authed_config).can_resolve(github_location)

    def test_cannot_resolve_without_credentials(
        self, fast_config: ResolverConfig, github_location: RepositoryLocation
    ) -> None:
        assert not GitHubTreeResolver(fast_config).can_resolve(github_location)
        partial = ResolverConfig(credentials=Credentials(username="octocat", token=""))
        assert not GitHubTreeResolver(partial).can_resolve(github_location)

    @pytest.mark.parametrize(
        ("vcs", "repo_root"),
        [
            ("git", "https://gitlab.com/example/foo"),
            ("git", "https://gopkg.in/yaml.v3"),
            ("hg", "https://github.com/example/foo"),
        ],
    )
    def test_cannot_resolve_other_repos(
        self, authed_config: ResolverConfig, vcs: str, repo_root: str
    ) -> None:
        location = RepositoryLocation(import_prefix="example.org/foo", vcs=vcs, repo_root=repo_root)
        assert not GitHubTreeResolver(authed_config).can_resolve(location)

    @pytest.mark.asyncio
    async def test_fetch_license_successful(
        self,
        github_resolver: GitHubTreeResolver,
        github_location: RepositoryLocation,
        sample_tree: dict[str, Any],
    ) -> None:
        """Test listing the tree and downloading the NOTICE blob."""
        with aioresponses() as m:
            m.get(TREE_URL, payload=sample_tree)
            m.get(BLOB_URL + "b2", payload=_blob(APACHE_NOTICE))

            result = await github_resolver.fetch_license("example.org/foo", github_location)

        assert result.module == "example.org/foo"
        assert result.text == APACHE_NOTICE
        assert result.source_url == BLOB_URL + "b2"

    @pytest.mark.asyncio
    async def test_fetch_license_sends_basic_auth(
        self,
        github_resolver: GitHubTreeResolver,
        github_location: RepositoryLocation,
        sample_tree: dict[str, Any],
    ) -> None:
        """Test that both API requests carry the configured credentials."""
        with aioresponses() as m:
            m.get(TREE_URL, payload=sample_tree)
            m.get(BLOB_URL + "b2", payload=_blob(APACHE_NOTICE))

            await github_resolver.fetch_license("example.org/foo", github_location)

            expected = aiohttp.BasicAuth("octocat", "ghp_test123token")
            for url in (TREE_URL, BLOB_URL + "b2"):
                request = m.requests[("GET", URL(url))][0]
                assert request.kwargs["auth"] == expected

    @pytest.mark.asyncio
    async def test_fetch_license_strips_git_suffix(
        self, github_resolver: GitHubTreeResolver, sample_tree: dict[str, Any]
    ) -> None:
        location = RepositoryLocation(
            import_prefix="example.org/foo",
            vcs="git",
            repo_root="https://github.com/example/foo.git",
        )

        with aioresponses() as m:
            m.get(TREE_URL, payload=sample_tree)
            m.get(BLOB_URL + "b2", payload=_blob(APACHE_NOTICE))

            result = await github_resolver.fetch_license("example.org/foo", location)

        assert result.text == APACHE_NOTICE

    @pytest.mark.asyncio
    async def test_listing_without_license_is_not_found(
        self, github_resolver: GitHubTreeResolver, github_location: RepositoryLocation
    ) -> None:
        """Test that an authoritative listing without a match is terminal."""
        with aioresponses() as m:
            m.get(TREE_URL, payload={"tree": [_entry("README.md", "r"), _entry("main.go", "g")]})

            with pytest.raises(LicenseNotFoundError, match="example.org/foo"):
                await github_resolver.fetch_license("example.org/foo", github_location)

    @pytest.mark.asyncio
    async def test_listing_failure_is_api_error(
        self, github_resolver: GitHubTreeResolver, github_location: RepositoryLocation
    ) -> None:
        """Test that a failed listing request is reported as an API error."""
        with aioresponses() as m:
            m.get(TREE_URL, status=401)

            with pytest.raises(GitHubAPIError, match="trouble getting listing"):
                await github_resolver.fetch_license("example.org/foo", github_location)

    @pytest.mark.asyncio
    async def test_invalid_json_is_api_error(
        self, github_resolver: GitHubTreeResolver, github_location: RepositoryLocation
    ) -> None:
        with aioresponses() as m:
            m.get(TREE_URL, body="<html>rate limited</html>")

            with pytest.raises(GitHubAPIError, match="json decode error"):
                await github_resolver.fetch_license("example.org/foo", github_location)

    @pytest.mark.asyncio
    async def test_malformed_tree_entry_is_api_error(
        self, github_resolver: GitHubTreeResolver, github_location: RepositoryLocation
    ) -> None:
        with aioresponses() as m:
            m.get(TREE_URL, payload={"tree": ["LICENSE"]})

            with pytest.raises(GitHubAPIError, match="unexpected tree entry"):
                await github_resolver.fetch_license("example.org/foo", github_location)

    @pytest.mark.asyncio
    async def test_blob_failure_is_api_error(
        self,
        github_resolver: GitHubTreeResolver,
        github_location: RepositoryLocation,
        sample_tree: dict[str, Any],
    ) -> None:
        with aioresponses() as m:
            m.get(TREE_URL, payload=sample_tree)
            m.get(BLOB_URL + "b2", status=502)

            with pytest.raises(GitHubAPIError, match="trouble getting blob"):
                await github_resolver.fetch_license("example.org/foo", github_location)

    @pytest.mark.asyncio
    async def test_unknown_blob_encoding_is_terminal(
        self,
        github_resolver: GitHubTreeResolver,
        github_location: RepositoryLocation,
        sample_tree: dict[str, Any],
    ) -> None:
        with aioresponses() as m:
            m.get(TREE_URL, payload=sample_tree)
            m.get(BLOB_URL + "b2", payload={"encoding": "binary", "content": "..."})

            with pytest.raises(LicenseDecodeError):
                await github_resolver.fetch_license("example.org/foo", github_location)

    @pytest.mark.asyncio
    async def test_api_delay_before_listing(
        self,
        credentials: Credentials,
        github_location: RepositoryLocation,
        sample_tree: dict[str, Any],
    ) -> None:
        """Test that the rate limit delay precedes the listing call."""
        resolver = GitHubTreeResolver(ResolverConfig(credentials=credentials, api_delay=2.46))

        with patch("gocomply.resolvers.github.asyncio.sleep", new_callable=AsyncMock) as sleep:
            with aioresponses() as m:
                m.get(TREE_URL, payload=sample_tree)
                m.get(BLOB_URL + "b2", payload=_blob(APACHE_NOTICE))

                await resolver.fetch_license("example.org/foo", github_location)

        await resolver.close()
        sleep.assert_awaited_once_with(2.46)
