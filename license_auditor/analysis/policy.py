"""ASF license policy store.

Holds the three policy tables (license categories, license name
variations, special exceptions) as one immutable snapshot. A store is
loaded once and shared read-only by every compliance check.

Categories:
- Category A (ALLOWED): compatible with the Apache License 2.0
- Category B (RESTRICTED): may be included but must be documented
- Category X (PROHIBITED): may not be included
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Optional

from license_auditor.config.loader import (
    PathLike,
    load_aliases,
    load_categories,
    load_exceptions,
)
from license_auditor.logging import get_logger
from license_auditor.models.policy import LicenseCategory, SpecialException

log = get_logger(__name__)


class PolicyStore:
    """Immutable snapshot of the license policy tables.

    Args:
        categories: Canonical license name to category.
        aliases: Raw license spelling to canonical license name.
        exceptions: Special exceptions, in configured order.
    """

    __slots__ = ("_categories", "_aliases", "_exceptions")

    def __init__(
        self,
        categories: Optional[Mapping[str, LicenseCategory]] = None,
        aliases: Optional[Mapping[str, str]] = None,
        exceptions: Iterable[SpecialException] = (),
    ) -> None:
        object.__setattr__(self, "_categories", MappingProxyType(dict(categories or {})))
        object.__setattr__(self, "_aliases", MappingProxyType(dict(aliases or {})))
        object.__setattr__(self, "_exceptions", tuple(exceptions))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(categories={len(self._categories)}, "
            f"aliases={len(self._aliases)}, exceptions={len(self._exceptions)})"
        )

    @property
    def categories(self) -> Mapping[str, LicenseCategory]:
        """Read-only category table."""
        return self._categories

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only alias (variation) table."""
        return self._aliases

    @property
    def exceptions(self) -> tuple[SpecialException, ...]:
        """Special exceptions in configured order."""
        return self._exceptions

    def get_category(self, license_name: str) -> Optional[LicenseCategory]:
        """Look up a license by exact canonical name.

        Args:
            license_name: License name to look up, without normalization.

        Returns:
            The category, or None if the name is not in the table.
        """
        return self._categories.get(license_name)

    def is_license_in_category(
        self, license_name: str, category: LicenseCategory
    ) -> bool:
        """Check whether a license (exact name) belongs to a category."""
        return self._categories.get(license_name) == category

    def licenses_in_category(self, category: LicenseCategory) -> frozenset[str]:
        """Get all canonical license names in a category.

        Args:
            category: The category to filter by.

        Returns:
            Set of license names from the live category table.
        """
        return frozenset(
            name for name, cat in self._categories.items() if cat == category
        )

    def is_exception(self, dependency_name: str) -> bool:
        """Check whether a dependency is a listed special exception.

        Args:
            dependency_name: Full dependency name, e.g. "org.hibernate:hibernate-core".

        Returns:
            True if any exception entry matches the name.
        """
        return any(exc.matches(dependency_name) for exc in self._exceptions)

    def unreachable_aliases(self) -> dict[str, str]:
        """Find aliases whose target is not a key of the category table.

        Returns:
            Mapping of alias to missing canonical name.
        """
        return {
            variant: canonical
            for variant, canonical in self._aliases.items()
            if canonical not in self._categories
        }


def load_policy_store(config_dir: Optional[PathLike] = None) -> PolicyStore:
    """Load all policy tables into a new PolicyStore.

    Aliases pointing at a license missing from the category table are kept
    but reported, since lookups through them can never find a category.

    Args:
        config_dir: Optional policy directory. Defaults to discovery via
            find_policy_dir.

    Returns:
        A freshly loaded PolicyStore.
    """
    store = PolicyStore(
        categories=load_categories(config_dir),
        aliases=load_aliases(config_dir),
        exceptions=load_exceptions(config_dir),
    )
    for variant, canonical in sorted(store.unreachable_aliases().items()):
        log.warning(
            "license variation maps to a license with no category",
            variation=variant,
            target=canonical,
        )
    return store


@lru_cache(maxsize=None)
def get_policy_store(config_dir: Optional[str] = None) -> PolicyStore:
    """Get the process-wide PolicyStore, loading it on first use.

    Args:
        config_dir: Optional policy directory. Each distinct value is
            loaded once.

    Returns:
        The cached PolicyStore for that directory.
    """
    return load_policy_store(config_dir)
