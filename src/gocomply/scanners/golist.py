"""Scanner asking the go tool for a module's dependencies.

Runs ``go list -m all`` and keeps only the modules that ``go mod why`` reports
as needed by the main module. Modules needed only for tests of dependencies,
or only on other operating systems, have their go.mod downloaded but not their
code, and are left out.
"""

import logging
import subprocess
from pathlib import Path

from gocomply.models import ModuleSpec
from gocomply.scanners.base import BaseScanner

logger = logging.getLogger(__name__)


class GoModScanner(BaseScanner):
    """Scanner for a Go module directory (or its go.mod file)."""

    def _module_dir(self) -> Path:
        if self.source_path is None:
            raise ValueError("source_path must be set before calling scan()")

        path = self.source_path
        if path.name == "go.mod":
            path = path.parent

        if not (path / "go.mod").exists():
            raise FileNotFoundError(f"go.mod not found in {path}")

        return path

    def _run_go(self, *args: str) -> str:
        """Run the go tool in the module directory and return its stdout.

        Raises:
            ValueError: If the command exits with a non-zero status.
        """
        try:
            result = subprocess.run(
                ["go", *args],
                cwd=self._module_dir(),
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise ValueError(f"go {args[0]} error: {e}: {e.stderr.strip()}") from e
        return result.stdout

    def scan(self) -> list[ModuleSpec]:
        """List the modules the main module actually builds against.

        Returns:
            List of ModuleSpec objects, excluding the main module.

        Raises:
            FileNotFoundError: If there is no go.mod or no go tool.
            ValueError: If the go tool fails or prints unexpected output.
        """
        lines = self._run_go("list", "-m", "all").strip().splitlines()
        if not lines:
            raise ValueError("empty go list output")

        modules: list[ModuleSpec] = []

        # The first line is the main module itself
        for line in lines[1:]:
            # e.g. golang.org/x/text v0.3.3
            words = line.split(" ", 1)
            if len(words) != 2:
                raise ValueError(f"invalid go list output format (line {line!r})")
            name, version = words

            if not self.is_required_module(name):
                logger.debug("Skipping %s: not needed by the main module", name)
                continue

            modules.append(ModuleSpec(path=name, version=version, source="go list"))

        return modules

    def is_required_module(self, name: str) -> bool:
        """Check whether the main module needs a module's code.

        ``go mod why -m -vendor`` excludes tests of dependencies and answers
        with a parenthesised note when the main module does not need it.

        Args:
            name: Module path.

        Returns:
            True if the module is used by the main module.

        Raises:
            ValueError: If the go tool fails or prints unexpected output.
        """
        lines = self._run_go("mod", "why", "-m", "-vendor", name).split("\n")
        if len(lines) < 2:
            raise ValueError("unexpected go why output format")

        # "# golang.org/x/text"
        if lines[0].strip() != f"# {name}":
            raise ValueError("unexpected go why output format")

        # "(main module does not need module golang.org/x/text)"
        note = lines[1].strip()
        if len(note) > 2 and note.startswith("(") and note.endswith(")"):
            return False

        return True

    @classmethod
    def can_handle(cls, path: Path) -> bool:
        """Check if this scanner can handle the given path.

        Args:
            path: Path to check.

        Returns:
            True for a go.mod file or a directory containing one.
        """
        if path.name == "go.mod":
            return True
        return path.is_dir() and (path / "go.mod").exists()

    @property
    def source_name(self) -> str:
        return "go list"
