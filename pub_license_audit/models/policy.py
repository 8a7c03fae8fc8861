"""Policy-related models for pub-license-audit."""

from __future__ import annotations

from enum import Enum


class ComplianceStatus(Enum):
    """Outcome of checking a package's license against the policy."""

    UNKNOWN = "unknown"
    APPROVED = "approved"
    PERMITTED = "permitted"
    REJECTED = "rejected"
    NEEDS_APPROVAL = "needsApproval"
    NO_LICENSE = "noLicense"

    @property
    def is_compliant(self) -> bool:
        """Check whether this status passes the audit.

        Returns:
            True for approved and permitted, False for everything else.
        """
        return self in (ComplianceStatus.APPROVED, ComplianceStatus.PERMITTED)
