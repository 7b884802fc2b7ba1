"""Policy-related Pydantic models for license-auditor."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class LicenseCategory(Enum):
    """ASF third-party license categories.

    The values are the letters used in the policy configuration files.
    """

    ALLOWED = "A"
    RESTRICTED = "B"
    PROHIBITED = "X"


class MatchType(Enum):
    """How a special exception is matched against a dependency name."""

    EXACT = "exact"
    PREFIX = "prefix"


class SpecialException(BaseModel):
    """A dependency tracked as a known Category B special case.

    Being listed here never makes a dependency compliant; it only changes
    the wording of the issue raised when its license is undocumented.
    """

    model_config = {"extra": "ignore", "frozen": True, "populate_by_name": True}

    name: str = Field(min_length=1, description="Dependency name or name prefix")
    description: Optional[str] = Field(
        default=None, description="Why this dependency is a special case"
    )
    match_type: MatchType = Field(
        alias="matchType",
        description="Whether name must equal or prefix the dependency name",
    )

    def matches(self, dependency_name: str) -> bool:
        """Check whether this exception applies to a dependency name.

        Args:
            dependency_name: Full dependency name, e.g. "org.hibernate:hibernate-core".

        Returns:
            True if the name matches according to match_type.
        """
        if self.match_type == MatchType.EXACT:
            return dependency_name == self.name
        return dependency_name.startswith(self.name)


class LicenseCategoriesFile(BaseModel):
    """On-disk shape of license-categories.json."""

    model_config = {"extra": "ignore"}

    categories: dict[Any, Any] = Field(
        default_factory=dict,
        description="License name to category letter (A, B or X)",
    )


class LicenseVariationsFile(BaseModel):
    """On-disk shape of license-variations.json."""

    model_config = {"extra": "ignore"}

    variations: dict[Any, Any] = Field(
        default_factory=dict,
        description="Raw license spelling to canonical license name",
    )


class SpecialExceptionsFile(BaseModel):
    """On-disk shape of special-exceptions.json."""

    model_config = {"extra": "ignore"}

    exceptions: list[Any] = Field(
        default_factory=list,
        description="Special exception entries with name and matchType",
    )
