"""Input collaborators: dependency lists and module documentation."""
from license_auditor.inputs.dependencies import (
    deduplicate_dependencies,
    load_dependencies,
)
from license_auditor.inputs.readme import README_FILES, find_readme, read_documentation

__all__ = [
    "README_FILES",
    "deduplicate_dependencies",
    "find_readme",
    "load_dependencies",
    "read_documentation",
]
