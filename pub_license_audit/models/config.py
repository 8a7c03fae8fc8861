"""Configuration Pydantic models for pub-license-audit."""
from __future__ import annotations

from typing import Annotated, Dict, FrozenSet

from pydantic import BaseModel, Field

# License identifiers must not be blank
LicenseId = Annotated[str, Field(min_length=1)]


class PolicyConfig(BaseModel):
    """License policy for an audit run.

    Field names are snake_case in Python and camelCase in the YAML file.
    The model is frozen so the same instance can be shared by every
    concurrent package resolution.
    """

    model_config = {"extra": "forbid", "frozen": True, "populate_by_name": True}

    permitted_licenses: FrozenSet[str] = Field(
        default_factory=frozenset,
        alias="permittedLicenses",
        description="License identifiers that are always acceptable.",
    )
    rejected_licenses: FrozenSet[str] = Field(
        default_factory=frozenset,
        alias="rejectedLicenses",
        description="License identifiers that are never acceptable.",
    )
    approved_packages: Dict[str, FrozenSet[str]] = Field(
        default_factory=dict,
        alias="approvedPackages",
        description="Packages explicitly approved under a license identifier. "
        "Use 'no-file' for packages that ship no license file.",
    )
    package_license_override: Dict[str, LicenseId] = Field(
        default_factory=dict,
        alias="packageLicenseOverride",
        description="License identifier to use instead of detection, by package name.",
    )
    package_source_override: Dict[str, str] = Field(
        default_factory=dict,
        alias="packageSourceOverride",
        description="Source location to report, by package name.",
    )
    copyright_notice: Dict[str, str] = Field(
        default_factory=dict,
        alias="copyrightNotice",
        description="Copyright text to report, by package name.",
    )

    def is_approved(self, identifier: str, package_name: str) -> bool:
        """Check whether a package is explicitly approved under an identifier."""
        return package_name in self.approved_packages.get(identifier, frozenset())
