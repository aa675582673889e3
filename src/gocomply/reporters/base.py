"""Base interface for output reporters.

Reporters generate the attribution document from resolved module licenses.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from gocomply.models import ModuleLicense


class BaseReporter(ABC):
    """Abstract base class for output reporters.

    Reporters take resolved module licenses and generate formatted
    output documents.
    """

    @abstractmethod
    def render(self, licenses: list[ModuleLicense]) -> str:
        """Render module licenses to formatted output.

        Args:
            licenses: Resolved module licenses, in output order.

        Returns:
            Rendered output as a string.
        """
        ...

    def write(self, licenses: list[ModuleLicense], output_path: Path) -> None:
        """Render and write output to a file.

        Args:
            licenses: Resolved module licenses, in output order.
            output_path: Path to write the output file.
        """
        content = self.render(licenses)
        output_path.write_text(content, encoding="utf-8")

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Return the output format name.

        Returns:
            Format name like "text".
        """
        ...

    @property
    @abstractmethod
    def default_extension(self) -> str:
        """Return the default file extension for this format.

        Returns:
            Extension like ".txt".
        """
        ...
