"""Provider for repositories on git.sr.ht."""

from gocomply.providers.base import BaseProvider, ResolvedFile


class SourceHutProvider(BaseProvider):
    """SourceHut serves file blobs from a browsing URL on a fixed branch."""

    prefix = "https://git.sr.ht/"

    def resolve(self, filename: str) -> ResolvedFile:
        root = self.location.repo_root.removesuffix(".git")
        return ResolvedFile(urls=(f"{root}/blob/master/{filename}",))

    @property
    def name(self) -> str:
        return "SourceHut"
