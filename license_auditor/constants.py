"""Constants for license-auditor."""

# Exit codes
EXIT_SUCCESS = 0  # All dependencies compliant
EXIT_ISSUES = 1  # Compliance issues found
EXIT_ERROR = 2  # Audit failed due to error

LEGAL_DISCLAIMER = (
    "This tool provides license information for informational purposes only. "
    "It does not constitute legal advice. Consult a qualified attorney for "
    "legal guidance on license compliance."
)
