"""License policy resolution."""
from __future__ import annotations

from pub_license_audit.constants import NO_FILE_LICENSE, UNKNOWN_LICENSE
from pub_license_audit.models.config import PolicyConfig
from pub_license_audit.models.policy import ComplianceStatus


def resolve_status(
    identifier: str,
    package_name: str,
    config: PolicyConfig,
) -> ComplianceStatus:
    """Map a detected license to a compliance status.

    Rules are checked in order and the first match wins:

    1. ``no-file``: approved if listed under ``no-file`` in approved
       packages, otherwise no license.
    2. ``unknown-license``: unknown. There is no override for this case.
    3. Permitted licenses.
    4. Rejected licenses.
    5. Packages approved under the identifier.
    6. Everything else needs approval.

    The global permitted and rejected lists take precedence over
    per-package approvals, except for the two sentinel identifiers.

    Args:
        identifier: Detected license identifier or sentinel.
        package_name: Name of the package being checked.
        config: Policy configuration for the run.

    Returns:
        The compliance status for the package.
    """
    if identifier == NO_FILE_LICENSE:
        if config.is_approved(NO_FILE_LICENSE, package_name):
            return ComplianceStatus.APPROVED
        return ComplianceStatus.NO_LICENSE

    if identifier == UNKNOWN_LICENSE:
        return ComplianceStatus.UNKNOWN

    if identifier in config.permitted_licenses:
        return ComplianceStatus.PERMITTED

    if identifier in config.rejected_licenses:
        return ComplianceStatus.REJECTED

    if config.is_approved(identifier, package_name):
        return ComplianceStatus.APPROVED

    return ComplianceStatus.NEEDS_APPROVAL
