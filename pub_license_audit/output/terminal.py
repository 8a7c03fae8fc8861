"""Terminal output formatter using Rich."""
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pub_license_audit.constants import LEGAL_DISCLAIMER_SHORT
from pub_license_audit.models.policy import ComplianceStatus
from pub_license_audit.models.report import ComplianceReport

# Rich style per compliance status
STATUS_STYLES: dict[ComplianceStatus, str] = {
    ComplianceStatus.APPROVED: "green",
    ComplianceStatus.PERMITTED: "green",
    ComplianceStatus.REJECTED: "red",
    ComplianceStatus.NEEDS_APPROVAL: "yellow",
    ComplianceStatus.NO_LICENSE: "red",
    ComplianceStatus.UNKNOWN: "magenta",
}


class TerminalFormatter:
    """Format compliance reports for terminal display using Rich."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def format_report(self, report: ComplianceReport) -> None:
        """Display the report as a Rich table followed by a summary.

        Args:
            report: The compliance report to display.
        """
        self._print_disclaimer()

        if report.total_packages == 0:
            self._console.print("[yellow]No packages found[/yellow]")
            return

        rows = report.displayed_packages
        if rows:
            self._console.print(self._build_table(report))
        else:
            self._console.print("[green]No problematic packages found[/green]")

        self._print_summary(report)

    def _build_table(self, report: ComplianceReport) -> Table:
        table = Table(title="License Compliance Results")

        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("Status")
        table.add_column("License")
        table.add_column("Copyright")
        table.add_column("Source", overflow="fold")

        for row in report.displayed_packages:
            style = STATUS_STYLES[row.status]
            table.add_row(
                escape(row.name),
                f"[{style}]{row.status.value}[/{style}]",
                escape(row.license),
                escape(row.copyright),
                escape(row.source_location),
            )
        return table

    def _print_disclaimer(self) -> None:
        """Print legal disclaimer panel."""
        panel = Panel(
            LEGAL_DISCLAIMER_SHORT,
            title="[bold yellow]NOT LEGAL ADVICE[/bold yellow]",
            border_style="yellow",
        )
        self._console.print(panel)
        self._console.print("")

    def _print_summary(self, report: ComplianceReport) -> None:
        """Print per-status counts and the overall outcome.

        Args:
            report: The report to summarize.
        """
        scope = "direct" if report.direct_only else "all"
        self._console.print(
            f"\n[bold]Packages checked ({scope}):[/bold] {report.total_packages}"
        )
        for status, count in report.status_counts().items():
            style = STATUS_STYLES[status]
            self._console.print(f"  [{style}]{status.value}[/{style}]: {count}")

        if report.has_issues:
            self._console.print(
                f"\n[red bold]FAIL[/red bold] - "
                f"{len(report.problematic_packages)} package(s) require attention"
            )
        else:
            self._console.print(
                f"\n[green bold]PASS[/green bold] - "
                f"All {report.total_packages} packages compliant"
            )
