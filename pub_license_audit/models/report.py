"""Report models for pub-license-audit."""

from __future__ import annotations

from collections import Counter

from pydantic import BaseModel, Field

from pub_license_audit.models.policy import ComplianceStatus


class PackageReport(BaseModel):
    """One row of the compliance report."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Package name")
    is_direct: bool = Field(default=False, description="Declared in pubspec.yaml")
    status: ComplianceStatus = Field(description="Policy verdict")
    license: str = Field(description="License identifier or sentinel")
    copyright: str = Field(description="Copyright text or sentinel")
    source_location: str = Field(description="Source location or sentinel")


class ComplianceReport(BaseModel):
    """Result of a license audit.

    ``packages`` holds every audited package. The problematic filter only
    affects ``displayed_packages``; ``has_issues`` always looks at the full
    set so hiding rows never hides a failure.
    """

    model_config = {"extra": "forbid"}

    packages: list[PackageReport] = Field(
        default_factory=list,
        description="All audited packages, sorted by name",
    )
    direct_only: bool = Field(default=False, description="Only direct deps audited")
    problematic_only: bool = Field(
        default=False, description="Only non-compliant rows displayed"
    )

    @property
    def displayed_packages(self) -> list[PackageReport]:
        """Rows to show, after the problematic filter."""
        if self.problematic_only:
            return self.problematic_packages
        return list(self.packages)

    @property
    def problematic_packages(self) -> list[PackageReport]:
        """Rows whose status is neither approved nor permitted."""
        return [pkg for pkg in self.packages if not pkg.status.is_compliant]

    @property
    def has_issues(self) -> bool:
        """Check if any audited package fails the policy.

        Returns:
            True if at least one package is not approved or permitted.
        """
        return len(self.problematic_packages) > 0

    @property
    def total_packages(self) -> int:
        """Number of audited packages."""
        return len(self.packages)

    def status_counts(self) -> dict[ComplianceStatus, int]:
        """Count audited packages per status, in enum order."""
        counts = Counter(pkg.status for pkg in self.packages)
        return {status: counts[status] for status in ComplianceStatus if counts[status]}
