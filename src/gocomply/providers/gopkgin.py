"""Provider for gopkg.in versioned import paths.

gopkg.in redirects to a GitHub repository at a branch or tag named after the
major (and possibly minor) version. The go-source meta tag is the simplest
place this is exposed over HTTP without speaking the git protocol, e.g.::

    https://github.com/natefinch/lumberjack/tree/v2.1{/dir}
"""

from typing import NamedTuple

from gocomply.exceptions import TemplateParseError
from gocomply.providers.base import BaseProvider, ResolvedFile
from gocomply.providers.github import RAW_HOST

GITHUB_PREFIX = "https://github.com/"


class GitHubTree(NamedTuple):
    owner: str
    repo: str
    branch: str


def parse_directory_template(template: str) -> GitHubTree:
    """Split a go-source directory template into owner, repo and branch.

    Args:
        template: Directory template such as
            "https://github.com/OWNER/REPO/tree/BRANCH{/dir}".

    Returns:
        GitHubTree with the extracted parts.

    Raises:
        TemplateParseError: If the template does not have that shape.
    """
    parts = template.removeprefix(GITHUB_PREFIX).split("/", 3)
    if len(parts) != 4:
        raise TemplateParseError(f"gopkg.in parse error: {template!r}")

    owner, repo, _, rest = parts
    brace = rest.find("{")
    if brace < 0:
        raise TemplateParseError(f"gopkg.in parse error: {template!r}")

    return GitHubTree(owner=owner, repo=repo, branch=rest[:brace])


class GopkgInProvider(BaseProvider):
    """Resolves gopkg.in modules to raw GitHub content on the versioned branch."""

    prefix = "https://gopkg.in/"

    def resolve(self, filename: str) -> ResolvedFile:
        if self.source is None:
            raise TemplateParseError(
                f"gopkg.in parse error: no go-source tag for {self.location.import_prefix!r}"
            )

        tree = parse_directory_template(self.source.directory)
        return ResolvedFile(
            urls=(f"{RAW_HOST}/{tree.owner}/{tree.repo}/{tree.branch}/{filename}",)
        )

    @property
    def name(self) -> str:
        return "gopkg.in"
