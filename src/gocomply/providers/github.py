"""Provider for repositories on github.com."""

from gocomply.providers.base import BaseProvider, ResolvedFile

RAW_HOST = "https://raw.githubusercontent.com"


class GitHubProvider(BaseProvider):
    """GitHub raw content, trying the current then the historical default branch.

    Which of "main" or "master" a repository uses cannot be known without an
    API call, so both are offered.
    """

    prefix = "https://github.com/"

    def resolve(self, filename: str) -> ResolvedFile:
        return ResolvedFile(
            urls=(
                f"{RAW_HOST}/{self.repo_dir}/main/{filename}",
                f"{RAW_HOST}/{self.repo_dir}/master/{filename}",  # historical
            )
        )

    @property
    def name(self) -> str:
        return "GitHub"
