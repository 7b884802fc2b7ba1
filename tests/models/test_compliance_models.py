"""Tests for compliance Pydantic models."""
import pytest
from pydantic import ValidationError

from license_auditor.models.compliance import (
    ComplianceIssue,
    ComplianceResult,
    Dependency,
)


class TestDependency:
    """Tests for Dependency model."""

    def test_licenses_default_none(self) -> None:
        """Test that licenses are optional."""
        dep = Dependency(name="a:b", version="1.0")
        assert dep.licenses is None
        assert dep.has_license_info is False

    def test_empty_licenses_no_info(self) -> None:
        """Test that an empty list also means no license info."""
        assert Dependency(name="a:b", version="1", licenses=[]).has_license_info is False
        assert Dependency(name="a:b", version="1", licenses=["MIT"]).has_license_info

    def test_requires_name_and_version(self) -> None:
        """Test that name and version are required."""
        with pytest.raises(ValidationError):
            Dependency.model_validate({"name": "a:b"})
        with pytest.raises(ValidationError):
            Dependency.model_validate({"version": "1"})

    def test_frozen(self) -> None:
        """Test that dependencies are read-only."""
        dep = Dependency(name="a:b", version="1")
        with pytest.raises(ValidationError):
            dep.version = "2"  # type: ignore[misc]

    def test_extra_fields_ignored(self) -> None:
        """Test that extra keys from report tools are ignored."""
        dep = Dependency.model_validate(
            {"name": "a:b", "version": "1", "licenses": ["MIT"], "url": "https://x"}
        )
        assert dep.licenses == ["MIT"]


class TestComplianceResult:
    """Tests for ComplianceResult model."""

    def test_compliant_when_no_issues(self) -> None:
        """Test that an empty result is compliant."""
        assert ComplianceResult().compliant is True

    def test_not_compliant_with_issues(self) -> None:
        """Test that any issue makes the result non-compliant."""
        issue = ComplianceIssue(
            dependency=Dependency(name="a:b", version="1"),
            reason="No license information available",
        )
        assert ComplianceResult(issues=[issue]).compliant is False

    def test_invalid_input_not_compliant(self) -> None:
        """Test that invalid input is never compliant."""
        assert ComplianceResult(input_valid=False).compliant is False

    def test_compliant_is_serialized(self) -> None:
        """Test that the computed verdict appears in dumps."""
        data = ComplianceResult().model_dump()
        assert data["compliant"] is True
        assert data["issues"] == []

    def test_compliant_not_settable(self) -> None:
        """Test that compliant cannot be passed in."""
        with pytest.raises(ValidationError):
            ComplianceResult.model_validate({"issues": [], "compliant": False})
