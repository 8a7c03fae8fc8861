"""Pydantic data models for pub-license-audit."""

from pub_license_audit.models.config import PolicyConfig
from pub_license_audit.models.package import (
    LicenseEvidence,
    LicenseMatch,
    Manifest,
    Package,
)
from pub_license_audit.models.policy import ComplianceStatus
from pub_license_audit.models.report import ComplianceReport, PackageReport

__all__ = [
    "ComplianceReport",
    "ComplianceStatus",
    "LicenseEvidence",
    "LicenseMatch",
    "Manifest",
    "Package",
    "PackageReport",
    "PolicyConfig",
]
