"""Plain text reporter for third-party license files.

Each module becomes one block: the module path, a blank line, the license
text, a blank line, a divider, and a blank line.
"""

from importlib.resources import files
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, Template

from gocomply.models import ModuleLicense
from gocomply.reporters.base import BaseReporter

DIVIDER = "-" * 80


class TextReporter(BaseReporter):
    """Reporter that generates a plain text license bundle.

    Attributes:
        template: The Jinja2 template to use for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the text reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the default bundled template.
        """
        if template_path:
            env = Environment(
                loader=FileSystemLoader(template_path.parent),
                autoescape=False,
            )
            self.template = env.get_template(template_path.name)
        else:
            self.template = self._load_default_template()

    def _load_default_template(self) -> Template:
        """Load the default bundled Jinja2 template.

        Returns:
            The default template loaded from package resources.
        """
        template_content = (
            files("gocomply.templates")
            .joinpath("licenses.txt.j2")
            .read_text(encoding="utf-8")
        )
        # License texts are not markup
        env = Environment(autoescape=False)
        return env.from_string(template_content)

    def render(self, licenses: list[ModuleLicense]) -> str:
        """Render module licenses as plain text blocks.

        Args:
            licenses: Resolved module licenses, in output order.

        Returns:
            Rendered document as a string.
        """
        return self.template.render(licenses=licenses, divider=DIVIDER)

    @property
    def format_name(self) -> str:
        return "text"

    @property
    def default_extension(self) -> str:
        return ".txt"
