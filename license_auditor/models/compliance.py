"""Compliance-related Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from license_auditor.models.policy import LicenseCategory


class Dependency(BaseModel):
    """A resolved third-party dependency and its declared licenses.

    ``licenses`` of None and ``[]`` both mean no license metadata was
    available.
    """

    model_config = {"extra": "ignore", "frozen": True}

    name: str = Field(description="Dependency name, e.g. 'groupId:artifactId'")
    version: str = Field(description="Dependency version")
    licenses: Optional[list[str]] = Field(
        default=None, description="Raw license strings as reported by the build tool"
    )

    @property
    def has_license_info(self) -> bool:
        """Check whether any license strings were declared.

        Returns:
            True if licenses is a non-empty list.
        """
        return bool(self.licenses)


class ComplianceIssue(BaseModel):
    """A single non-compliant (dependency, license) finding."""

    model_config = {"extra": "forbid"}

    dependency: Dependency = Field(description="The dependency with the issue")
    reason: str = Field(description="Human-readable explanation of the issue")
    license: Optional[str] = Field(
        default=None,
        description="Raw license string implicated (None if none declared)",
    )
    category: Optional[LicenseCategory] = Field(
        default=None,
        description="Resolved category of the license (None if unknown)",
    )


class ComplianceResult(BaseModel):
    """Outcome of a compliance check over a dependency set."""

    model_config = {"extra": "forbid"}

    issues: list[ComplianceIssue] = Field(
        default_factory=list,
        description="Issues in dependency order, then declared-license order",
    )
    input_valid: bool = Field(
        default=True,
        description="False when the check was given malformed input",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def compliant(self) -> bool:
        """Overall verdict.

        Malformed input is never compliant, even though it yields no issues.
        """
        return self.input_valid and not self.issues
