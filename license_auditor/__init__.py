"""License Auditor - ASF license policy compliance for third-party dependencies."""

__version__ = "0.1.0"

from license_auditor.analysis.compliance import check_license_compliance
from license_auditor.analysis.normalizer import normalize_license_name
from license_auditor.analysis.resolver import resolve_category

__all__ = [
    "__version__",
    "check_license_compliance",
    "normalize_license_name",
    "resolve_category",
]
