"""Custom exceptions for license-auditor."""


class LicenseAuditorError(Exception):
    """Base exception for all license-auditor errors."""

    pass


class ConfigurationError(LicenseAuditorError):
    """Exception raised when a policy file cannot be read or is invalid."""

    pass


class InputError(LicenseAuditorError):
    """Exception raised when a dependency list or README cannot be read."""

    pass
