"""Tests for README discovery."""
from pathlib import Path

from license_auditor.inputs.readme import find_readme, read_documentation


class TestFindReadme:
    """Tests for find_readme function."""

    def test_finds_markdown_readme(self, tmp_path: Path) -> None:
        """Test that README.md is found."""
        (tmp_path / "README.md").write_text("# mod-search")
        assert find_readme(tmp_path) == tmp_path / "README.md"

    def test_prefers_markdown(self, tmp_path: Path) -> None:
        """Test that README.md wins over README.rst."""
        (tmp_path / "README.rst").write_text("rst")
        (tmp_path / "README.md").write_text("md")
        assert find_readme(tmp_path) == tmp_path / "README.md"

    def test_finds_plain_readme(self, tmp_path: Path) -> None:
        """Test that an extension-less README is found."""
        (tmp_path / "README").write_text("plain")
        assert find_readme(tmp_path) == tmp_path / "README"

    def test_ignores_directories(self, tmp_path: Path) -> None:
        """Test that a directory named README.md is skipped."""
        (tmp_path / "README.md").mkdir()
        assert find_readme(tmp_path) is None

    def test_no_readme(self, tmp_path: Path) -> None:
        """Test that None is returned without a README."""
        assert find_readme(tmp_path) is None


class TestReadDocumentation:
    """Tests for read_documentation function."""

    def test_reads_content(self, tmp_path: Path) -> None:
        """Test that README content is returned."""
        (tmp_path / "README.md").write_text("Uses LGPL libraries.")
        assert read_documentation(tmp_path) == "Uses LGPL libraries."

    def test_missing_readme_is_empty(self, tmp_path: Path) -> None:
        """Test that a module without README has empty documentation."""
        assert read_documentation(tmp_path) == ""

    def test_invalid_utf8_replaced(self, tmp_path: Path) -> None:
        """Test that undecodable bytes do not fail the read."""
        (tmp_path / "README.md").write_bytes(b"MPL \xff notice")
        assert read_documentation(tmp_path).startswith("MPL ")
