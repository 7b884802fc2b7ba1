"""Shared fixtures for license-auditor tests."""

import json
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner

from license_auditor.analysis.policy import PolicyStore, get_policy_store
from license_auditor.models.policy import LicenseCategory, SpecialException

CATEGORIES = {
    "Apache-2.0": "A",
    "MIT": "A",
    "MIT License": "A",
    "BSD-3-Clause": "A",
    "LGPL-2.1": "B",
    "GNU Lesser General Public License v2.1": "B",
    "MPL-2.0": "B",
    "Mozilla Public License 2.0": "B",
    "EPL-2.0": "B",
    "GPL-3.0": "X",
}

VARIATIONS = {
    "Apache 2.0": "Apache-2.0",
    "The MIT License": "MIT License",
    "LGPL": "LGPL-2.1",
    "GNU Lesser General Public License, Version 2.1": "GNU Lesser General Public License v2.1",
    "MPL 2.0": "MPL-2.0",
    "Mozilla Public License, Version 2.0": "Mozilla Public License 2.0",
    "Eclipse Public License v2.0": "EPL-2.0",
}

EXCEPTIONS = [
    {"name": "org.hibernate", "description": "Hibernate ORM", "matchType": "prefix"},
    {"name": "org.marc4j:marc4j", "matchType": "exact"},
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> PolicyStore:
    """Provide a small, explicit policy store independent of bundled data."""
    return PolicyStore(
        categories={name: LicenseCategory(cat) for name, cat in CATEGORIES.items()},
        aliases=VARIATIONS,
        exceptions=[SpecialException.model_validate(e) for e in EXCEPTIONS],
    )


@pytest.fixture
def policy_dir(tmp_path: Path) -> Path:
    """Write the fixture policy tables to a directory."""
    directory = tmp_path / "policy"
    directory.mkdir()
    (directory / "license-categories.json").write_text(
        json.dumps({"_description": "test", "categories": CATEGORIES})
    )
    (directory / "license-variations.json").write_text(
        json.dumps({"variations": VARIATIONS})
    )
    (directory / "special-exceptions.json").write_text(
        json.dumps({"exceptions": EXCEPTIONS})
    )
    return directory


@pytest.fixture(autouse=True)
def clear_policy_cache() -> Iterator[None]:
    """Reset the process-wide policy store between tests."""
    get_policy_store.cache_clear()
    yield
    get_policy_store.cache_clear()

