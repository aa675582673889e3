"""Credential lookup from a netrc file.

The GitHub tree API is only used when credentials for github.com are found,
either in ``$NETRC`` / ``~/.netrc`` or given on the command line.
"""

import logging
import netrc
import os
from pathlib import Path
from typing import Optional

from gocomply.models import Credentials

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"


def default_netrc_path() -> Path:
    """Return the netrc path, honouring the NETRC environment variable."""
    env_path = os.environ.get("NETRC")
    if env_path:
        return Path(env_path)
    return Path.home() / ".netrc"


def load_credentials(
    host: str = GITHUB_HOST,
    netrc_path: Optional[Path] = None,
) -> Optional[Credentials]:
    """Read credentials for a host from a netrc file.

    Args:
        host: Machine name to look up.
        netrc_path: Optional netrc path. Defaults to default_netrc_path().

    Returns:
        Credentials for the host, or None if the file or entry is missing.

    Raises:
        ValueError: If the netrc file cannot be parsed.
    """
    path = netrc_path or default_netrc_path()
    if not path.exists():
        logger.debug("No netrc file at %s", path)
        return None

    try:
        entries = netrc.netrc(str(path))
    except netrc.NetrcParseError as e:
        raise ValueError(f".netrc parse error: {e}") from e

    auth = entries.authenticators(host)
    if auth is None:
        logger.debug("No netrc entry for %s in %s", host, path)
        return None

    login, _, password = auth
    return Credentials(username=login or "", token=password or "")
