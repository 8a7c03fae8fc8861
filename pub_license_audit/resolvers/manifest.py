"""pubspec.yaml parsing."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml

from pub_license_audit.exceptions import ManifestFormatError
from pub_license_audit.models.package import Manifest


def parse_manifest(content: str, source: str = "pubspec.yaml") -> Manifest:
    """Parse pubspec.yaml content.

    Only the fields needed for the audit are read; everything else in the
    file is ignored.

    Args:
        content: Raw YAML text.
        source: Name used in error messages.

    Returns:
        The parsed Manifest.

    Raises:
        ManifestFormatError: If the YAML is invalid, the root is not a
            mapping, the name is missing, or dependencies is not a mapping.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ManifestFormatError(f"Invalid YAML syntax in '{source}': {e}") from e

    if not isinstance(data, dict):
        raise ManifestFormatError(
            f"Invalid manifest '{source}': expected a mapping at root level"
        )

    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ManifestFormatError(f"Invalid manifest '{source}': missing package name")

    dependencies = data.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        raise ManifestFormatError(
            f"Invalid manifest '{source}': dependencies must be a mapping"
        )

    return Manifest(
        name=name,
        dependencies=frozenset(str(dep) for dep in dependencies),
        repository=_optional_url(data.get("repository")),
        homepage=_optional_url(data.get("homepage")),
    )


def read_manifest(path: Path) -> Manifest:
    """Read and parse a pubspec.yaml file.

    Callers check for existence first so they can raise the error that
    matches their context.

    Args:
        path: Path to the pubspec.yaml file.

    Returns:
        The parsed Manifest.

    Raises:
        ManifestFormatError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestFormatError(f"Cannot read manifest '{path}': {e}") from e
    return parse_manifest(content, source=str(path))


def _optional_url(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None
