"""Dependency enumeration from pub's resolved package config.

Reads the project's pubspec.yaml and .dart_tool/package_config.json and
produces the set of packages to audit.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional
from urllib.parse import unquote

from pub_license_audit.exceptions import (
    DependencyGraphFormatError,
    DependencyGraphNotFoundError,
    ManifestNotFoundError,
)
from pub_license_audit.models.package import Manifest, Package
from pub_license_audit.resolvers.manifest import read_manifest

FILE_URI_PREFIX = "file://"

IS_WINDOWS = os.name == "nt"


def strip_file_uri(uri: str, windows: Optional[bool] = None) -> str:
    """Convert a file URI into a plain filesystem path.

    POSIX URIs look like ``file:///home/me/pkg`` and keep their leading
    slash. Windows URIs look like ``file:///C:/pkg`` and lose it, so one
    more character is stripped.

    Args:
        uri: Root URI as written in package_config.json.
        windows: Strip using Windows rules. Defaults to the running platform.

    Returns:
        The decoded path, or the input unchanged if it is not a file URI.
    """
    if not uri.startswith(FILE_URI_PREFIX):
        return uri

    if windows is None:
        windows = IS_WINDOWS
    prefix_length = len(FILE_URI_PREFIX) + 1 if windows else len(FILE_URI_PREFIX)
    return unquote(uri[prefix_length:])


def parse_dependency_graph(
    data: Any,
    manifest: Manifest,
    graph_dir: Path,
    windows: Optional[bool] = None,
) -> list[Package]:
    """Build the package list from decoded package_config.json data.

    Args:
        data: Decoded JSON document.
        manifest: The project's own manifest.
        graph_dir: Directory holding package_config.json; relative root
            URIs are resolved against it.
        windows: Passed through to strip_file_uri.

    Returns:
        Packages in graph order, without the project itself.

    Raises:
        DependencyGraphFormatError: If the document does not have the
            expected structure.
    """
    if not isinstance(data, dict):
        raise DependencyGraphFormatError(
            "Invalid package_config.json: expected a mapping at root level, "
            f"got {type(data).__name__}"
        )

    entries = data.get("packages") or []
    if not isinstance(entries, list):
        raise DependencyGraphFormatError(
            "Invalid package_config.json: 'packages' must be a list"
        )

    packages: list[Package] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise DependencyGraphFormatError(
                f"Invalid package_config.json: packages[{index}] is not a mapping"
            )
        name = entry.get("name")
        root_uri = entry.get("rootUri")
        if not isinstance(name, str) or not name:
            raise DependencyGraphFormatError(
                f"Invalid package_config.json: packages[{index}] has no name"
            )
        if not isinstance(root_uri, str) or not root_uri:
            raise DependencyGraphFormatError(
                f"Invalid package_config.json: package '{name}' has no rootUri"
            )

        # Don't check self
        if name == manifest.name:
            continue

        if root_uri.startswith(FILE_URI_PREFIX):
            root_path = Path(strip_file_uri(root_uri, windows=windows))
        else:
            # Relative URI, e.g. a path dependency
            root_path = graph_dir / unquote(root_uri)

        packages.append(
            Package(
                name=name,
                root_path=root_path,
                is_direct=name in manifest.dependencies,
            )
        )

    return packages


def load_packages(manifest_path: Path, graph_path: Path) -> list[Package]:
    """Enumerate the project's resolved dependencies.

    Args:
        manifest_path: Path to the project's pubspec.yaml.
        graph_path: Path to .dart_tool/package_config.json.

    Returns:
        Packages in graph order, without the project itself.

    Raises:
        ManifestNotFoundError: If pubspec.yaml does not exist.
        DependencyGraphNotFoundError: If package_config.json does not exist.
        DependencyGraphFormatError: If package_config.json is malformed.
        ManifestFormatError: If pubspec.yaml is malformed.
    """
    if not manifest_path.is_file():
        raise ManifestNotFoundError(
            f"pubspec.yaml file not found in {manifest_path.parent}."
        )

    if not graph_path.is_file():
        raise DependencyGraphNotFoundError(
            f"{graph_path} file not found. You may need to run "
            '"dart pub get" or "flutter pub get".'
        )

    manifest = read_manifest(manifest_path)

    try:
        data = json.loads(graph_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise DependencyGraphFormatError(f"Cannot read '{graph_path}': {e}") from e
    except json.JSONDecodeError as e:
        raise DependencyGraphFormatError(
            f"Invalid JSON in '{graph_path}': {e}. "
            'Try running "dart pub get" again.'
        ) from e

    return parse_dependency_graph(data, manifest, graph_path.parent)
