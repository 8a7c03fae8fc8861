"""Custom exceptions for pub-license-audit."""


class LicenseAuditError(Exception):
    """Base exception for all pub-license-audit errors."""

    pass


class ConfigurationError(LicenseAuditError):
    """Exception raised when the policy configuration is invalid."""

    pass


class ManifestNotFoundError(LicenseAuditError):
    """Exception raised when the project's pubspec.yaml is missing."""

    pass


class PackageManifestNotFoundError(LicenseAuditError):
    """Exception raised when a dependency's pubspec.yaml is missing.

    This means the dependency graph points at a package tree that does
    not match what is on disk.
    """

    pass


class ManifestFormatError(LicenseAuditError):
    """Exception raised when a pubspec.yaml cannot be parsed."""

    pass


class DependencyGraphNotFoundError(LicenseAuditError):
    """Exception raised when .dart_tool/package_config.json is missing."""

    pass


class DependencyGraphFormatError(LicenseAuditError):
    """Exception raised when the dependency graph has an unexpected shape."""

    pass


class ScanError(LicenseAuditError):
    """Exception raised when a package's files cannot be read."""

    pass
