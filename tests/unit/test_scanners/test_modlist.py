"""Tests for the saved module list scanner."""

from pathlib import Path

import pytest

from gocomply.models import ModuleSpec
from gocomply.scanners.modlist import ModuleListScanner


class TestModuleListScanner:
    """Test suite for ModuleListScanner."""

    def test_can_handle(self, tmp_path: Path) -> None:
        assert ModuleListScanner.can_handle(tmp_path / "modules.txt")
        assert not ModuleListScanner.can_handle(tmp_path / "go.sum")

    def test_scan_go_list_output(self, tmp_path: Path) -> None:
        """Test that saved go list output is read in order."""
        path = tmp_path / "modules.txt"
        path.write_text(
            "# go list -m all, trimmed\n"
            "golang.org/x/text v0.3.3\n"
            "\n"
            "github.com/russross/blackfriday/v2 v2.1.0\n"
            "git.sr.ht/~sircmpwn/getopt\n"
        )

        assert ModuleListScanner(path).scan() == [
            ModuleSpec("golang.org/x/text", "v0.3.3", "module list"),
            ModuleSpec("github.com/russross/blackfriday/v2", "v2.1.0", "module list"),
            ModuleSpec("git.sr.ht/~sircmpwn/getopt", None, "module list"),
        ]

    def test_scan_rejects_flags(self, tmp_path: Path) -> None:
        path = tmp_path / "modules.txt"
        path.write_text("golang.org/x/text v0.3.3\n--verbose\n")

        with pytest.raises(ValueError, match="line 2"):
            ModuleListScanner(path).scan()

    def test_scan_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ModuleListScanner(tmp_path / "missing.txt").scan()

    def test_source_name(self, tmp_path: Path) -> None:
        assert ModuleListScanner(tmp_path / "m.txt").source_name == "module list"
