"""JSON output formatter for compliance reports."""
import json
from datetime import datetime, timezone
from typing import Any

from pub_license_audit import __version__
from pub_license_audit.constants import LEGAL_DISCLAIMER
from pub_license_audit.models.report import ComplianceReport, PackageReport


class ReportJsonFormatter:
    """Format compliance reports as JSON for CI/CD integration."""

    def format_report(self, report: ComplianceReport) -> str:
        """Format the report as a JSON string.

        Args:
            report: The compliance report to format.

        Returns:
            JSON string representation of the report.
        """
        output = {
            "scan_metadata": self._build_scan_metadata(),
            "summary": self._build_summary(report),
            "packages": [
                self._build_package(row) for row in report.displayed_packages
            ],
        }
        return json.dumps(output, indent=2)

    def _build_scan_metadata(self) -> dict[str, Any]:
        timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        return {
            "generated_at": timestamp,
            "tool_version": __version__,
            "disclaimer": LEGAL_DISCLAIMER,
        }

    def _build_summary(self, report: ComplianceReport) -> dict[str, Any]:
        """Build summary section.

        Counts cover every audited package, including rows hidden by the
        problematic filter.
        """
        return {
            "total_packages": report.total_packages,
            "direct_only": report.direct_only,
            "problematic_only": report.problematic_only,
            "status_counts": {
                status.value: count for status, count in report.status_counts().items()
            },
            "overall_status": "FAIL" if report.has_issues else "PASS",
        }

    def _build_package(self, row: PackageReport) -> dict[str, Any]:
        return {
            "name": row.name,
            "status": row.status.value,
            "license": row.license,
            "copyright": row.copyright,
            "source": row.source_location,
            "direct": row.is_direct,
        }
