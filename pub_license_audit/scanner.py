"""Scanner module for dependency discovery and license compliance checks."""
import asyncio
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from pub_license_audit.analysis.filtering import filter_direct
from pub_license_audit.analysis.policy import resolve_status
from pub_license_audit.constants import DEPENDENCY_GRAPH_PATH, MANIFEST_FILE_NAME
from pub_license_audit.models.config import PolicyConfig
from pub_license_audit.models.package import LicenseEvidence, Package
from pub_license_audit.models.report import ComplianceReport, PackageReport
from pub_license_audit.resolvers.classifier import BaseClassifier
from pub_license_audit.resolvers.dependency import load_packages
from pub_license_audit.resolvers.license import LicenseResolver

# Limit on packages resolved at the same time (each one reads files in a thread)
MAX_CONCURRENT_RESOLUTIONS = 10


def discover_packages(project_dir: Path) -> list[Package]:
    """Discover the resolved dependencies of a pub project.

    Args:
        project_dir: Directory holding pubspec.yaml and .dart_tool/.

    Returns:
        Packages in dependency graph order, without the project itself.
    """
    return load_packages(
        project_dir / MANIFEST_FILE_NAME,
        project_dir / DEPENDENCY_GRAPH_PATH,
    )


def check_package(
    package: Package,
    evidence: LicenseEvidence,
    config: PolicyConfig,
) -> PackageReport:
    """Apply the policy to a package's evidence.

    Args:
        package: The audited package.
        evidence: Resolved license evidence for the package.
        config: Policy configuration for the run.

    Returns:
        The report row for the package.
    """
    return PackageReport(
        name=package.name,
        is_direct=package.is_direct,
        status=resolve_status(evidence.identifier, package.name, config),
        license=evidence.identifier,
        copyright=evidence.copyright,
        source_location=evidence.source_location,
    )


async def resolve_packages(
    packages: list[Package],
    config: PolicyConfig,
    classifier: Optional[BaseClassifier] = None,
    console: Optional[Console] = None,
    show_progress: bool = True,
) -> list[PackageReport]:
    """Resolve evidence and compliance status for all packages concurrently.

    Args:
        packages: Packages to check.
        config: Policy configuration for the run.
        classifier: Optional license classifier (defaults to TemplateClassifier).
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator (default: True).

    Returns:
        Report rows sorted by package name.

    Raises:
        LicenseAuditError: Any fatal error from a package aborts the run.
    """
    resolver = LicenseResolver(config, classifier=classifier)
    semaphore = asyncio.Semaphore(MAX_CONCURRENT_RESOLUTIONS)

    async def check_one(pkg: Package) -> PackageReport:
        async with semaphore:
            evidence = await asyncio.to_thread(resolver.resolve, pkg)
        return check_package(pkg, evidence, config)

    rows: list[PackageReport] = []
    if console is not None and show_progress and len(packages) > 0:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task_id = progress.add_task(
                f"Checking licenses for {len(packages)} packages...",
                total=len(packages),
            )
            for coro in asyncio.as_completed([check_one(pkg) for pkg in packages]):
                rows.append(await coro)
                progress.advance(task_id)
    else:
        rows = list(await asyncio.gather(*(check_one(pkg) for pkg in packages)))

    # Completion order varies, output must not
    return sorted(rows, key=lambda row: row.name)


def build_report(
    rows: list[PackageReport],
    direct_only: bool = False,
    problematic_only: bool = False,
) -> ComplianceReport:
    """Build the compliance report from resolved rows.

    Args:
        rows: Resolved report rows.
        direct_only: Audit only direct dependencies.
        problematic_only: Display only rows that are not approved or permitted.
            This never changes the overall outcome.

    Returns:
        ComplianceReport with rows sorted by package name.
    """
    audited = filter_direct(rows) if direct_only else list(rows)
    return ComplianceReport(
        packages=sorted(audited, key=lambda row: row.name),
        direct_only=direct_only,
        problematic_only=problematic_only,
    )


async def audit_project(
    project_dir: Path,
    config: PolicyConfig,
    direct_only: bool = False,
    problematic_only: bool = False,
    classifier: Optional[BaseClassifier] = None,
    console: Optional[Console] = None,
    show_progress: bool = True,
) -> ComplianceReport:
    """Run a full license audit of a pub project.

    Args:
        project_dir: Directory holding pubspec.yaml and .dart_tool/.
        config: Policy configuration for the run.
        direct_only: Audit only direct dependencies.
        problematic_only: Display only non-compliant rows.
        classifier: Optional license classifier.
        console: Optional Rich Console for progress display.
        show_progress: Whether to show progress indicator.

    Returns:
        The compliance report.
    """
    packages = discover_packages(project_dir)

    # Transitive packages are not resolved at all when only direct ones count
    if direct_only:
        packages = filter_direct(packages)

    rows = await resolve_packages(
        packages,
        config,
        classifier=classifier,
        console=console,
        show_progress=show_progress,
    )
    return build_report(rows, direct_only=direct_only, problematic_only=problematic_only)
