"""Dependency scanners for Go projects.

This module provides scanners for listing the modules a Go project
depends on.
"""

from pathlib import Path

from gocomply.scanners.base import BaseScanner
from gocomply.scanners.golist import GoModScanner
from gocomply.scanners.modlist import ModuleListScanner

__all__ = [
    "BaseScanner",
    "GoModScanner",
    "ModuleListScanner",
    "get_scanner",
]

# Registry of available scanners in priority order
_SCANNERS: list[type[BaseScanner]] = [
    GoModScanner,
    ModuleListScanner,
]


def get_scanner(path: Path) -> BaseScanner:
    """Get the appropriate scanner for a given path.

    Args:
        path: Module directory, go.mod file or module list file.

    Returns:
        Scanner instance configured for the given path.

    Raises:
        ValueError: If no scanner can handle the given path.
    """
    for scanner_cls in _SCANNERS:
        if scanner_cls.can_handle(path):
            return scanner_cls(path)

    raise ValueError(
        f"No scanner available for '{path}'. "
        f"Supported: a directory with go.mod, go.mod, or a *.txt module list"
    )
