"""License name normalization.

Build-tool license reports rarely emit bare license names. The Maven
license plugin, for example, writes lines such as::

    (Apache License, Version 2.0) folio-spring-base (org.folio

The normalizer cleans such strings into a candidate canonical name in a
fixed order of steps, which do not commute:

1. extract_parenthetical - keep only a leading "(...)" group
2. strip_trailing_decoration - drop coordinate fragments and " - url" tails
3. trim whitespace
4. apply_alias - map known spellings onto canonical names

Unknown licenses come out cleaned but unmapped.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Optional

from license_auditor.analysis.policy import PolicyStore, get_policy_store

_LEADING_PARENTHETICAL = re.compile(r"^\((.*?)\)")

# Applied in order; any subset may match.
TRAILING_DECORATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\s+\([^)]*$"),  # unclosed "(..." fragment
    re.compile(r"\s+-\s+.*$"),  # " - url or description"
    re.compile(r"\s+\([\w.-]+:[\w.-]+.*$"),  # "(groupId:artifactId..."
)


def extract_parenthetical(value: str) -> str:
    """Extract the license name from a leading parenthesized group.

    Args:
        value: Raw license string.

    Returns:
        The trimmed content of a leading "(...)" group, or the trimmed
        input if it does not start with one.
    """
    value = value.strip()
    match = _LEADING_PARENTHETICAL.match(value)
    if match:
        return match.group(1).strip()
    return value


def strip_trailing_decoration(value: str) -> str:
    """Remove artifact coordinates and URL suffixes after a license name."""
    for pattern in TRAILING_DECORATION_PATTERNS:
        value = pattern.sub("", value)
    return value


def apply_alias(value: str, aliases: Mapping[str, str]) -> str:
    """Map a cleaned license name through the alias table."""
    return aliases.get(value, value)


def clean_license_name(raw: str) -> str:
    """Run the cleaning steps of normalization without alias lookup.

    Args:
        raw: Raw license string.

    Returns:
        Cleaned license string, possibly empty.
    """
    if not raw:
        return ""
    return strip_trailing_decoration(extract_parenthetical(raw)).strip()


def normalize_license_name(raw: str, store: Optional[PolicyStore] = None) -> str:
    """Normalize a raw license string to a canonical policy name.

    Args:
        raw: License string as reported by a build tool.
        store: Policy store providing the alias table. Defaults to the
            process-wide store.

    Returns:
        The canonical name if the cleaned string is a known alias,
        otherwise the cleaned string. Empty and blank input, including
        "()" and "(   )", yields "".
    """
    cleaned = clean_license_name(raw)
    if not cleaned:
        return ""
    if store is None:
        store = get_policy_store()
    return apply_alias(cleaned, store.aliases)
