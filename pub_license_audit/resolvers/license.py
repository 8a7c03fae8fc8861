"""Local license evidence resolution for a single package."""
from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from pub_license_audit.constants import (
    CLASSIFIER_THRESHOLD,
    MANIFEST_FILE_NAME,
    NO_FILE_LICENSE,
    UNKNOWN_COPYRIGHT,
    UNKNOWN_LICENSE,
    UNKNOWN_SOURCE,
)
from pub_license_audit.exceptions import PackageManifestNotFoundError, ScanError
from pub_license_audit.models.config import PolicyConfig
from pub_license_audit.models.package import LicenseEvidence, Package
from pub_license_audit.resolvers.classifier import BaseClassifier, TemplateClassifier
from pub_license_audit.resolvers.manifest import read_manifest

# Canonical license file stems, in lookup order
LICENSE_FILE_STEMS = [
    "LICENSE",
    "LICENCE",
    "COPYING",
    "UNLICENSE",
    "License",
    "Licence",
    "Copying",
    "Unlicense",
    "license",
    "licence",
    "copying",
    "unlicense",
]

# Plain-text file name conventions tried for each stem
TEXT_FILE_SUFFIXES = ["", ".md", ".markdown", ".mkdown", ".txt"]

COPYRIGHT_PATTERN = re.compile(
    r"Copyright\s(?:\(c\)\s)*(?P<date>[0-9]{4})(?P<holders>.+)",
    re.IGNORECASE,
)


def text_file_name_candidates(stem: str) -> list[str]:
    """Return the plain-text file names for a stem, e.g. LICENSE.md."""
    return [f"{stem}{suffix}" for suffix in TEXT_FILE_SUFFIXES]


LICENSE_FILE_NAMES = [
    name for stem in LICENSE_FILE_STEMS for name in text_file_name_candidates(stem)
]


def find_license_file(root: Path) -> Optional[Path]:
    """Find the license file in a package root.

    Candidates are tried in LICENSE_FILE_NAMES order and the first one
    that exists wins.

    Args:
        root: Package root directory.

    Returns:
        Path to the license file, or None if there is none.
    """
    for file_name in LICENSE_FILE_NAMES:
        candidate = root / file_name
        if candidate.is_file():
            return candidate
    return None


def extract_copyright(text: str) -> str:
    """Extract the first "Copyright <year> <holders>" line from text.

    Args:
        text: License file content.

    Returns:
        Year followed by holder text, or the unknown-copyright sentinel.
    """
    match = COPYRIGHT_PATTERN.search(text)
    if match is None:
        return UNKNOWN_COPYRIGHT
    return match.group("date") + match.group("holders").rstrip()


class LicenseResolver:
    """Resolves license evidence for packages from their files on disk.

    The resolver holds no per-package state, so one instance can resolve
    many packages concurrently.
    """

    def __init__(
        self,
        config: PolicyConfig,
        classifier: Optional[BaseClassifier] = None,
        threshold: float = CLASSIFIER_THRESHOLD,
    ) -> None:
        """Initialize with the run's policy and a classifier.

        Args:
            config: Policy configuration; only its overrides are used here.
            classifier: License text classifier. Defaults to TemplateClassifier.
            threshold: Minimum classifier confidence for a match.
        """
        self._config = config
        self._classifier = classifier if classifier is not None else TemplateClassifier()
        self._threshold = threshold

    def resolve(self, package: Package) -> LicenseEvidence:
        """Resolve license, copyright and source location for a package.

        Args:
            package: The package to resolve.

        Returns:
            Immutable evidence record for the package.

        Raises:
            PackageManifestNotFoundError: If the package has no pubspec.yaml
                and no source override.
            ScanError: If the license file exists but cannot be read.
        """
        license_override = self._config.package_license_override.get(package.name)

        identifier = NO_FILE_LICENSE
        copyright_text = UNKNOWN_COPYRIGHT

        license_file = find_license_file(package.root_path)
        if license_file is not None:
            content = self._read_license_text(license_file)
            copyright_text = extract_copyright(content)
            # Overridden packages skip classification
            if license_override is None:
                identifier = self.detect_license(content)

        if license_override is not None:
            identifier = license_override
        copyright_text = self._config.copyright_notice.get(package.name, copyright_text)

        return LicenseEvidence(
            identifier=identifier,
            copyright=copyright_text,
            source_location=self.resolve_source_location(package),
        )

    def detect_license(self, content: str) -> str:
        """Identify the license in a license file's content.

        Args:
            content: Full license file text.

        Returns:
            Identifier of the highest-confidence match at or above the
            threshold, or the unknown-license sentinel.
        """
        matches = [
            match
            for match in self._classifier.classify(content, self._threshold)
            if match.confidence >= self._threshold
        ]
        if not matches:
            return UNKNOWN_LICENSE
        best = max(matches, key=lambda match: match.confidence)
        return best.identifier

    def resolve_source_location(self, package: Package) -> str:
        """Find where the package's source is published.

        Args:
            package: The package to look up.

        Returns:
            Repository URL, else homepage URL, else the unknown-source sentinel.

        Raises:
            PackageManifestNotFoundError: If the package has no pubspec.yaml.
        """
        override = self._config.package_source_override.get(package.name)
        if override is not None:
            return override

        manifest_path = package.root_path / MANIFEST_FILE_NAME
        if not manifest_path.is_file():
            raise PackageManifestNotFoundError(
                f"pubspec.yaml file not found in package {package.name}."
            )
        return read_manifest(manifest_path).repository_or_homepage or UNKNOWN_SOURCE

    @staticmethod
    def _read_license_text(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ScanError(f"Cannot read license file '{path}': {e}") from e
