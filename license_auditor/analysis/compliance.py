"""ASF license compliance checking for third-party dependencies."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from pydantic import ValidationError

from license_auditor.analysis.documentation import DocumentationChecker
from license_auditor.analysis.policy import PolicyStore, get_policy_store
from license_auditor.analysis.resolver import resolve_category
from license_auditor.logging import get_logger
from license_auditor.models.compliance import (
    ComplianceIssue,
    ComplianceResult,
    Dependency,
)
from license_auditor.models.policy import LicenseCategory

log = get_logger(__name__)

NO_LICENSE_REASON = "No license information available"

DependencyInput = Union[Dependency, Mapping[str, Any]]


def _coerce_dependencies(
    dependencies: Any,
) -> Optional[list[Dependency]]:
    """Validate the dependency input, returning None if it is malformed."""
    if isinstance(dependencies, (str, bytes)) or not isinstance(dependencies, Sequence):
        log.warning(
            "dependency list is not a sequence",
            type=type(dependencies).__name__,
        )
        return None

    coerced: list[Dependency] = []
    for index, item in enumerate(dependencies):
        if isinstance(item, Dependency):
            coerced.append(item)
            continue
        try:
            coerced.append(Dependency.model_validate(item))
        except ValidationError as e:
            log.warning("invalid dependency entry", index=index, error=str(e))
            return None
    return coerced


def check_dependency(
    dependency: Dependency,
    doc_text: str,
    store: PolicyStore,
    checker: Optional[DocumentationChecker] = None,
) -> list[ComplianceIssue]:
    """Check a single dependency against the license policy.

    Every declared license is evaluated on its own, so a dual-licensed
    dependency with one permissive and one prohibited license still gets
    an issue for the prohibited one.

    Args:
        dependency: The dependency to check.
        doc_text: README content used for Category B documentation checks.
        store: Policy store.
        checker: Documentation checker built from ``store``. Created on
            demand if omitted.

    Returns:
        Issues for this dependency, in declared-license order.
    """
    if not dependency.has_license_info:
        return [ComplianceIssue(dependency=dependency, reason=NO_LICENSE_REASON)]

    issues: list[ComplianceIssue] = []
    documented: Optional[bool] = None

    for license_name in dependency.licenses:
        category = resolve_category(license_name, store)

        if category is None:
            issues.append(
                ComplianceIssue(
                    dependency=dependency,
                    license=license_name,
                    reason=f"Unknown license '{license_name}' - requires manual review",
                )
            )
        elif category == LicenseCategory.PROHIBITED:
            issues.append(
                ComplianceIssue(
                    dependency=dependency,
                    license=license_name,
                    category=category,
                    reason=f"License '{license_name}' is in Category X (prohibited)",
                )
            )
        elif category == LicenseCategory.RESTRICTED:
            if documented is None:
                if checker is None:
                    checker = DocumentationChecker(store)
                documented = checker.is_documented(dependency, doc_text)
            if documented:
                continue

            reason = f"Category B license '{license_name}' not documented in README"
            # A special exception still needs documentation; only the message differs
            if store.is_exception(dependency.name):
                reason += f" (special exception: {dependency.name})"
            issues.append(
                ComplianceIssue(
                    dependency=dependency,
                    license=license_name,
                    category=category,
                    reason=reason,
                )
            )

    return issues


def check_license_compliance(
    dependencies: Sequence[DependencyInput],
    doc_text: str,
    store: Optional[PolicyStore] = None,
) -> ComplianceResult:
    """Check license compliance of a dependency set according to ASF policy.

    Args:
        dependencies: Dependencies as Dependency models or mappings with
            name, version and optional licenses.
        doc_text: README content for Category B validation. Use "" when the
            module has no README.
        store: Policy store. Defaults to the process-wide store.

    Returns:
        ComplianceResult listing every issue. Malformed input never raises;
        it yields a result with no issues that is not compliant.
    """
    if not isinstance(doc_text, str):
        log.warning("documentation text is not a string", type=type(doc_text).__name__)
        return ComplianceResult(input_valid=False)

    coerced = _coerce_dependencies(dependencies)
    if coerced is None:
        return ComplianceResult(input_valid=False)

    if store is None:
        store = get_policy_store()
    checker = DocumentationChecker(store)

    issues: list[ComplianceIssue] = []
    for dependency in coerced:
        issues.extend(check_dependency(dependency, doc_text, store, checker))

    return ComplianceResult(issues=issues)
