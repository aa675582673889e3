"""Provider for repositories on gitlab.com."""

from gocomply.providers.base import BaseProvider, ResolvedFile


class GitLabProvider(BaseProvider):
    """GitLab raw content, trying the current then the historical default branch."""

    prefix = "https://gitlab.com/"

    def resolve(self, filename: str) -> ResolvedFile:
        root = self.location.repo_root.removesuffix(".git")
        return ResolvedFile(
            urls=(
                f"{root}/-/raw/main/{filename}",
                f"{root}/-/raw/master/{filename}",  # historical
            )
        )

    @property
    def name(self) -> str:
        return "GitLab"
