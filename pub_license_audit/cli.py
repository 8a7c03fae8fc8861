"""CLI entry point for pub-license-audit."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from pub_license_audit import __version__
from pub_license_audit.config import find_config_file, load_config
from pub_license_audit.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from pub_license_audit.exceptions import LicenseAuditError
from pub_license_audit.models.report import ComplianceReport
from pub_license_audit.output.report_json import ReportJsonFormatter
from pub_license_audit.output.terminal import TerminalFormatter
from pub_license_audit.scanner import audit_project

# Report and progress output
_console = Console()
# Fatal errors (stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Pub License Audit - Check dependency licenses against a policy.

    Audits every resolved dependency of a Dart/Flutter project and reports
    whether its license is permitted, rejected, approved for that package,
    or still needs approval.

    \b
    Examples:
        pub-license-audit check-licenses
        pub-license-audit check-licenses --problematic
        pub-license-audit check-licenses --direct --config policy.yaml
    """
    pass


@main.command("check-licenses")
@click.option(
    "--direct",
    "direct_only",
    is_flag=True,
    default=False,
    help="Check only direct dependencies declared in pubspec.yaml.",
)
@click.option(
    "--problematic",
    "-p",
    "problematic_only",
    is_flag=True,
    default=False,
    help="Show only packages with problematic license statuses "
    "(hide approved and permitted packages).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to the license policy file (default: license_checker.yaml).",
)
@click.option(
    "--directory",
    "-d",
    "project_dir",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    help="Project directory containing pubspec.yaml (default: current directory).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for the report (default: terminal).",
)
def check_licenses(
    direct_only: bool,
    problematic_only: bool,
    config_path: str | None,
    project_dir: str,
    output_format: str,
) -> None:
    """Check licenses of all dependencies for compliance.

    Exits with 0 when every checked package is approved or permitted,
    and with 1 when any package is not, or when the check cannot run.
    Hiding packages with --problematic never changes the exit code.

    \b
    Examples:
        pub-license-audit check-licenses
        pub-license-audit check-licenses -p
        pub-license-audit check-licenses --direct
        pub-license-audit check-licenses --format json
        pub-license-audit check-licenses -d path/to/app -c policy.yaml
    """
    format_value = output_format.lower()
    is_terminal = format_value == "terminal"
    project_path = Path(project_dir)

    try:
        config = load_config(config_path, start_dir=project_path)
        if is_terminal:
            if config_path is None and find_config_file(project_path) is None:
                _console.print(
                    "[yellow]No configuration file found, "
                    "using an empty policy.[/yellow]"
                )
            if problematic_only:
                _console.print("Filtering out approved packages ...")
            scope = "direct" if direct_only else "all"
            _console.print(f"Checking {scope} dependencies...")

        report = asyncio.run(
            audit_project(
                project_path,
                config,
                direct_only=direct_only,
                problematic_only=problematic_only,
                console=_console if is_terminal else None,
                show_progress=is_terminal,
            )
        )
        _display_report(report, format_value)

        # Decided on every audited package, not only the displayed ones
        if report.has_issues:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except LicenseAuditError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)


def _display_report(report: ComplianceReport, format_type: str) -> None:
    """Display the compliance report in the specified format.

    Args:
        report: The report to display.
        format_type: Output format (terminal, json).
    """
    if format_type == "json":
        click.echo(ReportJsonFormatter().format_report(report))
    else:
        TerminalFormatter(console=_console).format_report(report)


def _display_error(error: LicenseAuditError, format_type: str) -> None:
    """Report a fatal audit error on stderr.

    Args:
        error: The error that stopped the audit.
        format_type: Output format; only the terminal format is styled.
    """
    message = f"Error: {type(error).__name__}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()
