"""Extraction of Go discovery meta tags from HTML.

A host serving ``https://<module>?go-get=1`` answers with an HTML page holding
``<meta name="go-import" content="prefix vcs repo-root">`` and optionally
``<meta name="go-source" content="prefix home directory file">``. Full HTML
parsing is not needed for two flat tags, so regular expressions are used.
"""

import re
from typing import Optional

from gocomply.models import RepositoryLocation, SourceBrowsingInfo


def _meta_patterns(name: str, groups: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    """Build patterns for a meta tag in both attribute orders.

    Args:
        name: Value of the ``name`` attribute (e.g., "go-import").
        groups: Group names for the whitespace-delimited content tokens.

    Returns:
        Patterns for ``name ... content`` and ``content ... name`` ordering.
    """
    content = r"\s+".join(rf"(?P<{group}>\S+)" for group in groups)
    name_attr = rf'name\s*=\s*"{re.escape(name)}"'
    content_attr = rf'content\s*=\s*"{content}"'
    return (
        re.compile(rf"<\s*meta\s*{name_attr}\s*{content_attr}\s*/?>", re.IGNORECASE),
        # sourcehut emits the attributes the other way round
        re.compile(rf"<\s*meta\s*{content_attr}\s*{name_attr}\s*/?>", re.IGNORECASE),
    )


_GO_IMPORT_PATTERNS = _meta_patterns("go-import", ("import_prefix", "vcs", "repo_root"))
_GO_SOURCE_PATTERNS = _meta_patterns(
    "go-source", ("import_prefix", "home", "directory", "file")
)


def _search(patterns: tuple[re.Pattern[str], ...], html: str) -> Optional[re.Match[str]]:
    for pattern in patterns:
        match = pattern.search(html)
        if match is not None:
            return match
    return None


def parse_go_import(html: str) -> Optional[RepositoryLocation]:
    """Extract the go-import directive from a discovery page.

    Args:
        html: HTML document returned by a ``?go-get=1`` request.

    Returns:
        RepositoryLocation, or None if no well-formed directive is present.
    """
    match = _search(_GO_IMPORT_PATTERNS, html)
    if match is None:
        return None
    return RepositoryLocation(
        import_prefix=match.group("import_prefix"),
        vcs=match.group("vcs"),
        repo_root=match.group("repo_root"),
    )


def parse_go_source(html: str) -> Optional[SourceBrowsingInfo]:
    """Extract the go-source directive from a discovery page.

    Args:
        html: HTML document returned by a ``?go-get=1`` request.

    Returns:
        SourceBrowsingInfo, or None if no well-formed directive is present.
    """
    match = _search(_GO_SOURCE_PATTERNS, html)
    if match is None:
        return None
    return SourceBrowsingInfo(
        import_prefix=match.group("import_prefix"),
        home=match.group("home"),
        directory=match.group("directory"),
        file=match.group("file"),
    )
