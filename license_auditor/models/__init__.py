"""Pydantic data models for license-auditor."""

from license_auditor.models.compliance import (
    ComplianceIssue,
    ComplianceResult,
    Dependency,
)
from license_auditor.models.policy import (
    LicenseCategory,
    MatchType,
    SpecialException,
)

__all__ = [
    "ComplianceIssue",
    "ComplianceResult",
    "Dependency",
    "LicenseCategory",
    "MatchType",
    "SpecialException",
]
