"""Base interface for dependency scanners.

Scanners list the Go modules a project depends on, either by asking the go
tool or by reading a saved module list.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from gocomply.models import ModuleSpec


class BaseScanner(ABC):
    """Abstract base class for dependency scanners.

    Attributes:
        source_path: Optional path to the module directory or list file.
    """

    def __init__(self, source_path: Optional[Path] = None) -> None:
        """Initialize the scanner.

        Args:
            source_path: Optional path to the source (module directory, go.mod,
                module list file).
        """
        self.source_path = source_path

    @abstractmethod
    def scan(self) -> list[ModuleSpec]:
        """Scan the source and list module dependencies.

        Returns:
            List of ModuleSpec objects in the order reported by the source.

        Raises:
            FileNotFoundError: If the source does not exist.
            ValueError: If the source output or format is invalid.
        """
        ...

    @classmethod
    @abstractmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given path.

        Args:
            path: Path to check.

        Returns:
            True if this scanner can process the path, False otherwise.
        """
        ...

    @property
    @abstractmethod
    def source_name(self) -> str:
        """Return a human-readable name for this scanner's source type.

        Returns:
            Name like "go list", "module list", etc.
        """
        ...
