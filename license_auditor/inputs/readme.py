"""README discovery for Category B documentation checks."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from license_auditor.exceptions import InputError

# Common README file names to try, in order
README_FILES = ["README.md", "README.rst", "README.txt", "README", "readme.md"]


def find_readme(directory: Path) -> Optional[Path]:
    """Find the README file of a module checkout.

    Args:
        directory: Root directory of the module.

    Returns:
        Path to the first README found, or None.
    """
    for name in README_FILES:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def read_documentation(directory: Path) -> str:
    """Read the README content of a module checkout.

    Args:
        directory: Root directory of the module.

    Returns:
        README content, or "" if the module has no README.

    Raises:
        InputError: If a README exists but cannot be read.
    """
    readme = find_readme(directory)
    if readme is None:
        return ""
    try:
        return readme.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise InputError(f"Cannot read README '{readme}': {e}") from e
