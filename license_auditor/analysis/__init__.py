"""License policy analysis for license-auditor."""
from license_auditor.analysis.compliance import (
    check_dependency,
    check_license_compliance,
)
from license_auditor.analysis.documentation import (
    DocumentationChecker,
    build_keyword_families,
    is_documented,
)
from license_auditor.analysis.normalizer import (
    clean_license_name,
    normalize_license_name,
)
from license_auditor.analysis.policy import (
    PolicyStore,
    get_policy_store,
    load_policy_store,
)
from license_auditor.analysis.resolver import canonical_license_name, resolve_category

__all__ = [
    "DocumentationChecker",
    "PolicyStore",
    "build_keyword_families",
    "canonical_license_name",
    "check_dependency",
    "check_license_compliance",
    "clean_license_name",
    "get_policy_store",
    "is_documented",
    "load_policy_store",
    "normalize_license_name",
    "resolve_category",
]
