"""Default policy locations and fallbacks for license-auditor."""

from __future__ import annotations

from pathlib import Path

from license_auditor.models.policy import MatchType, SpecialException

CATEGORIES_FILE = "license-categories.json"
VARIATIONS_FILE = "license-variations.json"
EXCEPTIONS_FILE = "special-exceptions.json"

POLICY_FILE_NAMES = [CATEGORIES_FILE, VARIATIONS_FILE, EXCEPTIONS_FILE]

# Tried in order when looking for each policy file
POLICY_FILE_SUFFIXES = (".json", ".yaml", ".yml")

# Directory name searched for under the current working directory
LOCAL_CONFIG_DIR_NAME = "config"

# Policy data shipped with the package
BUNDLED_CONFIG_DIR = Path(__file__).parent / "data"


def get_fallback_exceptions() -> tuple[SpecialException, ...]:
    """Get the exception list used when special-exceptions.json is unusable.

    Returns:
        Minimal built-in list of known Category B special cases.
    """
    return (
        SpecialException(
            name="org.hibernate",
            description="Hibernate ORM libraries",
            match_type=MatchType.PREFIX,
        ),
    )
