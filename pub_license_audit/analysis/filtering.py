"""Filter for direct dependencies."""

from __future__ import annotations

from typing import Sequence, TypeVar

from pub_license_audit.models.package import Package
from pub_license_audit.models.report import PackageReport

_T = TypeVar("_T", Package, PackageReport)


def filter_direct(packages: Sequence[_T]) -> list[_T]:
    """Keep only packages declared in the project's pubspec.yaml.

    Args:
        packages: Packages or report rows to filter.

    Returns:
        Items whose ``is_direct`` flag is set, in their original order.
    """
    return [pkg for pkg in packages if pkg.is_direct]

