"""Resolve raw license strings to policy categories."""
from __future__ import annotations

from typing import Optional

from license_auditor.analysis.normalizer import normalize_license_name
from license_auditor.analysis.policy import PolicyStore, get_policy_store
from license_auditor.models.policy import LicenseCategory


def canonical_license_name(raw: str, store: Optional[PolicyStore] = None) -> str:
    """Get the name used for the category lookup of a raw license string.

    Args:
        raw: Raw license string.
        store: Policy store. Defaults to the process-wide store.

    Returns:
        ``raw`` itself if it is already a category key, otherwise its
        normalized form.
    """
    if store is None:
        store = get_policy_store()
    if raw in store.categories:
        return raw
    return normalize_license_name(raw, store)


def resolve_category(
    raw: str, store: Optional[PolicyStore] = None
) -> Optional[LicenseCategory]:
    """Resolve a raw license string to its policy category.

    An exact match on the raw string wins; otherwise the normalized
    string is looked up.

    Args:
        raw: Raw license string.
        store: Policy store. Defaults to the process-wide store.

    Returns:
        The LicenseCategory, or None if the license is unknown. Unknown is
        never treated as ALLOWED.
    """
    if store is None:
        store = get_policy_store()
    return store.get_category(canonical_license_name(raw, store))
