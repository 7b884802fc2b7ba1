"""Policy configuration handling for license-auditor."""
from __future__ import annotations

from license_auditor.config.defaults import (
    BUNDLED_CONFIG_DIR,
    POLICY_FILE_NAMES,
    get_fallback_exceptions,
)
from license_auditor.config.loader import (
    find_policy_dir,
    load_aliases,
    load_categories,
    load_exceptions,
    policy_file_path,
    read_policy_file,
)

__all__ = [
    "BUNDLED_CONFIG_DIR",
    "POLICY_FILE_NAMES",
    "find_policy_dir",
    "get_fallback_exceptions",
    "load_aliases",
    "load_categories",
    "load_exceptions",
    "policy_file_path",
    "read_policy_file",
]
