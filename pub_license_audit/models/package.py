"""Package and license evidence Pydantic models."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Optional

from pydantic import BaseModel, Field


class Package(BaseModel):
    """A resolved dependency of the project being audited."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Package name, unique within a run")
    root_path: Path = Field(description="Root directory of the package on disk")
    is_direct: bool = Field(
        default=False,
        description="Whether the package is declared in the project's pubspec.yaml",
    )


class Manifest(BaseModel):
    """The parts of a pubspec.yaml used by the audit."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Declared package name")
    dependencies: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Names listed under the dependencies key",
    )
    repository: Optional[str] = Field(default=None, description="Repository URL")
    homepage: Optional[str] = Field(default=None, description="Homepage URL")

    @property
    def repository_or_homepage(self) -> Optional[str]:
        """Return the repository URL, falling back to the homepage."""
        return self.repository or self.homepage


class LicenseEvidence(BaseModel):
    """License information extracted for a single package.

    Every field holds either the detected value or one of the sentinel
    strings from pub_license_audit.constants.
    """

    model_config = {"extra": "forbid", "frozen": True}

    identifier: str = Field(min_length=1, description="License identifier or sentinel")
    copyright: str = Field(description="Copyright year and holders, or sentinel")
    source_location: str = Field(description="Repository/homepage URL, or sentinel")


class LicenseMatch(BaseModel):
    """A single ranked classifier result."""

    model_config = {"extra": "forbid", "frozen": True}

    identifier: str = Field(description="License identifier")
    confidence: float = Field(ge=0.0, le=1.0, description="Match confidence (0.0-1.0)")
