"""Scanner for saved module lists.

Reads text files holding ``go list -m all`` style output, one module per
line. The list is taken as complete: no ``go mod why`` filtering is done.
"""

from pathlib import Path

from gocomply.models import ModuleSpec
from gocomply.scanners.base import BaseScanner


class ModuleListScanner(BaseScanner):
    """Scanner for text files listing one module path (and version) per line."""

    def scan(self) -> list[ModuleSpec]:
        """Read module specifications from the list file.

        Blank lines and lines starting with "#" are ignored.

        Returns:
            List of ModuleSpec objects in file order.

        Raises:
            FileNotFoundError: If the source file does not exist.
            ValueError: If source_path is not set or a line is malformed.
        """
        if self.source_path is None:
            raise ValueError("source_path must be set before calling scan()")

        if not self.source_path.exists():
            raise FileNotFoundError(f"Module list not found: {self.source_path}")

        modules: list[ModuleSpec] = []
        content = self.source_path.read_text(encoding="utf-8")

        for line_num, raw_line in enumerate(content.splitlines(), start=1):
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue

            words = line.split()
            if words[0].startswith("-"):
                raise ValueError(
                    f"Invalid module path {words[0]!r} on line {line_num} "
                    f"of {self.source_path}"
                )

            version = words[1] if len(words) > 1 else None
            modules.append(
                ModuleSpec(path=words[0], version=version, source="module list")
            )

        return modules

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given file.

        Args:
            path: Path to check.

        Returns:
            True for ".txt" files, False otherwise.
        """
        return path.suffix == ".txt"

    @property
    def source_name(self) -> str:
        return "module list"
