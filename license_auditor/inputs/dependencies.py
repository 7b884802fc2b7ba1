"""Loading dependency lists produced by build-tool license reports."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from license_auditor.exceptions import InputError
from license_auditor.models.compliance import Dependency


def deduplicate_dependencies(dependencies: list[Dependency]) -> list[Dependency]:
    """Remove duplicate dependencies based on name and version.

    Args:
        dependencies: Dependencies, possibly merged from several build tools.

    Returns:
        Dependencies with the first occurrence of each name:version kept,
        in original order.
    """
    seen: set[tuple[str, str]] = set()
    unique: list[Dependency] = []
    for dep in dependencies:
        key = (dep.name, dep.version)
        if key not in seen:
            seen.add(key)
            unique.append(dep)
    return unique


def _parse(content: str, path: Path) -> Any:
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise InputError(f"Invalid YAML syntax in '{path}': {e}") from e
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise InputError(f"Invalid JSON syntax in '{path}': {e}") from e


def load_dependencies(path: Path) -> list[Dependency]:
    """Load a dependency list from a JSON or YAML file.

    The file holds either a list of ``{name, version, licenses}`` objects
    or a mapping with such a list under ``dependencies``.

    Args:
        path: Path to the dependency file.

    Returns:
        De-duplicated list of dependencies.

    Raises:
        InputError: If the file cannot be read or does not hold a valid
            dependency list.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"Cannot read dependency file '{path}': {e}") from e

    if not content.strip():
        return []

    data = _parse(content, path)
    if isinstance(data, dict):
        data = data.get("dependencies", [])
    if data is None:
        return []
    if not isinstance(data, list):
        raise InputError(
            f"Invalid dependency file '{path}': "
            f"expected a list of dependencies, got {type(data).__name__}"
        )

    dependencies: list[Dependency] = []
    for index, entry in enumerate(data):
        try:
            dependencies.append(Dependency.model_validate(entry))
        except ValidationError as e:
            raise InputError(
                f"Invalid dependency #{index} in '{path}': {e.error_count()} error(s)"
            ) from e
    return deduplicate_dependencies(dependencies)
