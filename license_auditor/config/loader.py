"""Policy file discovery and loading for license-auditor.

The three policy tables are read from JSON (or YAML) files. Read and parse
failures never propagate out of the ``load_*`` functions: categories and
variations degrade to empty tables, exceptions degrade to a built-in
fallback list.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from license_auditor.config.defaults import (
    BUNDLED_CONFIG_DIR,
    CATEGORIES_FILE,
    EXCEPTIONS_FILE,
    LOCAL_CONFIG_DIR_NAME,
    POLICY_FILE_NAMES,
    POLICY_FILE_SUFFIXES,
    VARIATIONS_FILE,
    get_fallback_exceptions,
)
from license_auditor.exceptions import ConfigurationError
from license_auditor.logging import get_logger
from license_auditor.models.policy import (
    LicenseCategoriesFile,
    LicenseCategory,
    LicenseVariationsFile,
    SpecialException,
    SpecialExceptionsFile,
)

PathLike = Union[str, Path]

log = get_logger(__name__)


def find_policy_dir(
    config_dir: Optional[PathLike] = None,
    start_dir: Optional[Path] = None,
) -> Path:
    """Find the directory holding the policy files.

    Search order: the explicit ``config_dir``, then a ``config/`` directory
    under ``start_dir`` that contains at least one policy file, then the
    policy data bundled with the package.

    Args:
        config_dir: Explicit policy directory. Returned as-is when given.
        start_dir: Directory to search for ``config/``. Defaults to the
            current working directory.

    Returns:
        Path to the policy directory.
    """
    if config_dir is not None:
        return Path(config_dir)

    local_dir = (start_dir or Path.cwd()) / LOCAL_CONFIG_DIR_NAME
    if any(policy_file_path(local_dir, name).is_file() for name in POLICY_FILE_NAMES):
        return local_dir

    return BUNDLED_CONFIG_DIR


def policy_file_path(directory: Path, file_name: str) -> Path:
    """Locate a policy file, accepting a YAML variant of its name.

    Args:
        directory: Policy directory.
        file_name: Default file name, e.g. "license-categories.json".

    Returns:
        The first existing of ``<stem>.json``, ``<stem>.yaml`` and
        ``<stem>.yml``, or the default path if none exists.
    """
    stem = Path(file_name).stem
    for suffix in POLICY_FILE_SUFFIXES:
        candidate = directory / f"{stem}{suffix}"
        if candidate.is_file():
            return candidate
    return directory / file_name


def read_policy_file(path: Path) -> Any:
    """Read and parse a single policy file.

    ``.yaml`` and ``.yml`` files are parsed with PyYAML, anything else as JSON.

    Args:
        path: Path to the policy file.

    Returns:
        The parsed document.

    Raises:
        ConfigurationError: If the file cannot be read, cannot be parsed,
            or is empty.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read policy file '{path}': {e}") from e

    if not content.strip():
        raise ConfigurationError(f"Policy file '{path}' is empty")

    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON syntax in '{path}': {e}") from e


def _format_validation_errors(error: ValidationError) -> str:
    """Format Pydantic validation errors into a readable string.

    Args:
        error: The Pydantic ValidationError.

    Returns:
        Formatted error message string.
    """
    messages: list[str] = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"]) if err["loc"] else "root"
        messages.append(f"{loc}: {err['msg']}")
    return "; ".join(messages)


def _unwrap(data: Any, key: str, path: Path) -> Any:
    """Return the table under ``key``, accepting a bare table as well."""
    if isinstance(data, dict) and key in data:
        return data
    if key == "exceptions" and isinstance(data, list):
        return {key: data}
    if isinstance(data, dict):
        return {key: data}
    raise ConfigurationError(
        f"Invalid policy file '{path}': expected a mapping at root level, "
        f"got {type(data).__name__}"
    )


def _parse_categories(data: Any, path: Path) -> dict[str, LicenseCategory]:
    try:
        parsed = LicenseCategoriesFile.model_validate(_unwrap(data, "categories", path))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid policy file '{path}': {_format_validation_errors(e)}"
        ) from e

    categories: dict[str, LicenseCategory] = {}
    for license_name, value in parsed.categories.items():
        if not isinstance(license_name, str):
            log.warning(
                "skipping license with non-string name",
                license=license_name,
                path=str(path),
            )
            continue
        if license_name.startswith("_"):
            continue
        try:
            categories[license_name] = LicenseCategory(value)
        except ValueError:
            log.warning(
                "skipping license with invalid category",
                license=license_name,
                category=value,
                path=str(path),
            )
    return categories


def _parse_variations(data: Any, path: Path) -> dict[str, str]:
    try:
        parsed = LicenseVariationsFile.model_validate(_unwrap(data, "variations", path))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid policy file '{path}': {_format_validation_errors(e)}"
        ) from e

    variations: dict[str, str] = {}
    for variant, canonical in parsed.variations.items():
        if not isinstance(variant, str):
            log.warning(
                "skipping license variation with non-string name",
                variation=variant,
                path=str(path),
            )
            continue
        if variant.startswith("_"):
            continue
        if not isinstance(canonical, str) or not canonical.strip():
            log.warning(
                "skipping license variation with invalid target",
                variation=variant,
                target=canonical,
                path=str(path),
            )
            continue
        variations[variant] = canonical
    return variations


def _parse_exceptions(data: Any, path: Path) -> tuple[SpecialException, ...]:
    try:
        parsed = SpecialExceptionsFile.model_validate(_unwrap(data, "exceptions", path))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid policy file '{path}': {_format_validation_errors(e)}"
        ) from e

    exceptions: list[SpecialException] = []
    for index, entry in enumerate(parsed.exceptions):
        try:
            exceptions.append(SpecialException.model_validate(entry))
        except ValidationError as e:
            log.warning(
                "skipping invalid special exception",
                index=index,
                error=_format_validation_errors(e),
                path=str(path),
            )
    return tuple(exceptions)


def load_categories(config_dir: Optional[PathLike] = None) -> dict[str, LicenseCategory]:
    """Load the license category table.

    Args:
        config_dir: Optional policy directory (see find_policy_dir).

    Returns:
        Mapping of canonical license name to category. Empty if the file
        cannot be loaded.
    """
    path = policy_file_path(find_policy_dir(config_dir), CATEGORIES_FILE)
    try:
        categories = _parse_categories(read_policy_file(path), path)
    except ConfigurationError as e:
        log.error("failed to load license categories", error=str(e))
        return {}
    log.debug("loaded license categories", count=len(categories), path=str(path))
    return categories


def load_aliases(config_dir: Optional[PathLike] = None) -> dict[str, str]:
    """Load the license variation (alias) table.

    Args:
        config_dir: Optional policy directory (see find_policy_dir).

    Returns:
        Mapping of raw license spelling to canonical name. Empty if the
        file cannot be loaded.
    """
    path = policy_file_path(find_policy_dir(config_dir), VARIATIONS_FILE)
    try:
        variations = _parse_variations(read_policy_file(path), path)
    except ConfigurationError as e:
        log.error("failed to load license variations", error=str(e))
        return {}
    log.debug("loaded license variations", count=len(variations), path=str(path))
    return variations


def load_exceptions(
    config_dir: Optional[PathLike] = None,
) -> tuple[SpecialException, ...]:
    """Load the special exception list.

    Args:
        config_dir: Optional policy directory (see find_policy_dir).

    Returns:
        Special exceptions in file order. Falls back to a built-in minimal
        list if the file cannot be loaded, since a missing exception hides
        a known special case.
    """
    path = policy_file_path(find_policy_dir(config_dir), EXCEPTIONS_FILE)
    try:
        exceptions = _parse_exceptions(read_policy_file(path), path)
    except ConfigurationError as e:
        log.error(
            "failed to load special exceptions, using built-in fallback",
            error=str(e),
        )
        return get_fallback_exceptions()
    log.debug("loaded special exceptions", count=len(exceptions), path=str(path))
    return exceptions
