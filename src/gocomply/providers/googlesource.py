"""Provider for repositories on go.googlesource.com (Gitiles)."""

from gocomply.providers.base import BaseProvider, ResolvedFile, decode_base64


class GoogleSourceProvider(BaseProvider):
    """Gitiles only serves raw file content base64-encoded via ``?format=text``."""

    prefix = "https://go.googlesource.com/"

    def resolve(self, filename: str) -> ResolvedFile:
        url = f"{self.location.repo_root}/+/refs/heads/master/{filename}?format=text"
        return ResolvedFile(urls=(url,), decoder=decode_base64)

    @property
    def name(self) -> str:
        return "go.googlesource.com"
