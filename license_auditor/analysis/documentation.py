"""Category B documentation checks.

A Category B dependency is acceptable only when the module's README
discloses it, either by naming the dependency or by naming its license
family. License families and their keywords are derived from the
Category B entries of the policy store, so adding a restricted license
to the policy configuration extends detection without code changes.

Keywords for a family come from every name that reaches one of its
canonical licenses (the canonical name and its aliases):

- identifier-style names ("LGPL-2.1", "MPL 2.0") contribute the
  lowercase identifier ("lgpl", "mpl")
- descriptive names ("GNU Lesser General Public License, Version 2.1")
  contribute the version-free phrase ("lesser general public license")
  and, when it is distinctive, the leading word ("mozilla", "eclipse")

Licenses whose names share an acronym ("LGPL-2.1" and "GNU Lesser General
Public License v2.1" both give "lgpl") share one keyword set. Matching is
case-insensitive and anchored at the start of a word.
"""
from __future__ import annotations

import re
from collections.abc import Iterable
from typing import NamedTuple, Optional

from license_auditor.analysis.normalizer import clean_license_name
from license_auditor.analysis.policy import PolicyStore, get_policy_store
from license_auditor.analysis.resolver import canonical_license_name
from license_auditor.models.compliance import Dependency
from license_auditor.models.policy import LicenseCategory

_IDENTIFIER = re.compile(r"^([a-z]+)(?:[-\s]*v?\d[\w.+-]*)?$")
_WORD = re.compile(r"[a-z]+")
_SEPARATOR = re.compile(r"[-\s]+")

# Words dropped before building phrases and acronyms
_IGNORED_WORDS = frozenset({"the", "gnu", "version", "v", "or", "later", "only"})
# Words left out of acronyms ("common development and distribution" -> cddl)
_ACRONYM_SKIP = frozenset({"and", "of", "for"})
# Leading words too generic to identify a family on their own
_GENERIC_WORDS = frozenset(
    {
        "academic",
        "common",
        "development",
        "distribution",
        "free",
        "general",
        "lesser",
        "library",
        "licence",
        "license",
        "open",
        "public",
        "software",
        "standard",
    }
)

MIN_KEYWORD_LENGTH = 3


def mentions(content: str, keyword: str) -> bool:
    """Check whether lowercase text mentions a keyword.

    Stricter than a plain substring search: the keyword must start at a
    word boundary so that "mpl" is not found in "example". It may be
    followed by anything ("LGPLv2", "LGPL-licensed"). Words of a
    multi-word keyword may be separated by any run of spaces or hyphens,
    so "cc by sa" matches "CC-BY-SA" and "CC BY-SA".

    Args:
        content: Lowercased text to search.
        keyword: Lowercase keyword.

    Returns:
        True if the keyword occurs at the start of a word.
    """
    parts = _SEPARATOR.split(keyword.strip())
    pattern = _SEPARATOR.pattern.join(re.escape(part) for part in parts)
    return re.search(r"(?<![a-z0-9])" + pattern, content) is not None


class LicenseNameKeywords(NamedTuple):
    """Keywords derived from a single license name.

    Attributes:
        acronym: Family identifier, e.g. "lgpl". Empty if none.
        keywords: Lowercase strings that identify the family in free text.
    """

    acronym: str
    keywords: frozenset[str]


def describe_license_name(name: str) -> LicenseNameKeywords:
    """Derive the family acronym and documentation keywords for a name.

    Args:
        name: A license name, canonical or alias.

    Returns:
        LicenseNameKeywords for the name.
    """
    lowered = name.strip().lower()

    identifier = _IDENTIFIER.match(lowered)
    if identifier:
        acronym = identifier.group(1)
        keywords = {acronym} if len(acronym) >= MIN_KEYWORD_LENGTH else set()
        return LicenseNameKeywords(acronym, frozenset(keywords))

    # Parenthesized abbreviations such as "(CDDL)" repeat the acronym
    lowered = re.sub(r"\([^)]*\)", " ", lowered)
    words = [w for w in _WORD.findall(lowered) if w not in _IGNORED_WORDS]
    if not words:
        return LicenseNameKeywords("", frozenset())

    acronym = "".join(w[0] for w in words if w not in _ACRONYM_SKIP)
    keywords = {" ".join(words)}
    if words[0] not in _GENERIC_WORDS and len(words[0]) > MIN_KEYWORD_LENGTH:
        keywords.add(words[0])
    return LicenseNameKeywords(acronym, frozenset(keywords))


def build_keyword_families(store: PolicyStore) -> dict[str, frozenset[str]]:
    """Build documentation keywords for every Category B license.

    Args:
        store: Policy store supplying categories and aliases.

    Returns:
        Mapping of canonical Category B license name to its family keywords.
    """
    restricted = store.licenses_in_category(LicenseCategory.RESTRICTED)

    names: dict[str, set[str]] = {canonical: {canonical} for canonical in restricted}
    for variant, canonical in store.aliases.items():
        if canonical in names:
            names[canonical].add(variant)

    acronyms: dict[str, set[str]] = {}
    keywords_by_acronym: dict[str, set[str]] = {}
    own_keywords: dict[str, set[str]] = {}
    for canonical, spellings in names.items():
        acronyms[canonical] = set()
        own_keywords[canonical] = set()
        for spelling in spellings:
            described = describe_license_name(spelling)
            own_keywords[canonical] |= described.keywords
            if described.acronym:
                acronyms[canonical].add(described.acronym)
                keywords_by_acronym.setdefault(described.acronym, set()).update(
                    described.keywords
                )

    families: dict[str, frozenset[str]] = {}
    for canonical in names:
        keywords = set(own_keywords[canonical])
        for acronym in acronyms[canonical]:
            keywords |= keywords_by_acronym[acronym]
        families[canonical] = frozenset(keywords)
    return families


class DocumentationChecker:
    """Decides whether a Category B dependency is disclosed in documentation.

    Family keywords are computed once per checker from the policy store.
    """

    def __init__(self, store: Optional[PolicyStore] = None) -> None:
        """Initialize the checker.

        Args:
            store: Policy store. Defaults to the process-wide store.
        """
        self._store = store if store is not None else get_policy_store()
        self._families = build_keyword_families(self._store)

    @property
    def families(self) -> dict[str, frozenset[str]]:
        """Keyword sets by canonical Category B license name."""
        return dict(self._families)

    def keywords_for(self, license_name: str) -> frozenset[str]:
        """Get documentation keywords for a raw license string.

        Args:
            license_name: Raw license string as declared by a dependency.

        Returns:
            Keywords of the license's family, plus any derived from the
            cleaned raw string itself. Empty if the license is not
            Category B.
        """
        canonical = canonical_license_name(license_name, self._store)
        if self._store.get_category(canonical) != LicenseCategory.RESTRICTED:
            return frozenset()

        keywords = set(self._families.get(canonical, ()))
        described = describe_license_name(clean_license_name(license_name))
        keywords |= described.keywords
        for family_keywords in self._families.values():
            if described.acronym and described.acronym in family_keywords:
                keywords |= family_keywords
        return frozenset(keywords)

    def restricted_keywords(self, licenses: Iterable[str]) -> frozenset[str]:
        """Union of documentation keywords across declared licenses."""
        keywords: set[str] = set()
        for license_name in licenses:
            keywords |= self.keywords_for(license_name)
        return frozenset(keywords)

    def is_documented(self, dependency: Dependency, doc_text: str) -> bool:
        """Check whether documentation discloses a dependency.

        Args:
            dependency: The dependency to look for.
            doc_text: README (or similar) content. Empty means undocumented.

        Returns:
            True if the text names the dependency, or names the family of
            any Category B license it declares (case-insensitive).
        """
        if not doc_text:
            return False

        content = doc_text.lower()
        if dependency.name and dependency.name.lower() in content:
            return True

        keywords = self.restricted_keywords(dependency.licenses or ())
        return any(mentions(content, keyword) for keyword in keywords)


def is_documented(
    dependency: Dependency,
    doc_text: str,
    store: Optional[PolicyStore] = None,
) -> bool:
    """Check whether documentation discloses a dependency.

    Convenience wrapper around DocumentationChecker.is_documented.
    """
    return DocumentationChecker(store).is_documented(dependency, doc_text)
