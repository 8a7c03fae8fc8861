"""Constants for pub-license-audit."""

# Exit codes: any non-compliant package or fatal error exits with 1
EXIT_SUCCESS = 0  # All packages compliant
EXIT_ISSUES = 1  # Non-compliant packages found
EXIT_ERROR = 1  # Audit aborted due to error

# Sentinel values used when evidence cannot be determined
NO_FILE_LICENSE = "no-file"
UNKNOWN_LICENSE = "unknown-license"
UNKNOWN_COPYRIGHT = "unknown-copyright"
UNKNOWN_SOURCE = "unknown-source"

# Minimum classifier confidence for a license match
CLASSIFIER_THRESHOLD = 0.9

# Project layout
MANIFEST_FILE_NAME = "pubspec.yaml"
DEPENDENCY_GRAPH_PATH = ".dart_tool/package_config.json"

# Legal disclaimer
LEGAL_DISCLAIMER = (
    "This tool reports license information for informational purposes only. "
    "It does not constitute legal advice. Consult a qualified attorney for "
    "legal guidance on license compliance."
)

# Short disclaimer for terminal display
LEGAL_DISCLAIMER_SHORT = (
    "This tool reports license information for informational purposes only. "
    "It does not constitute legal advice."
)
