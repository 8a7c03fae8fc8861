"""Output formatters for pub-license-audit."""

from pub_license_audit.output.report_json import ReportJsonFormatter
from pub_license_audit.output.terminal import TerminalFormatter

__all__ = [
    "ReportJsonFormatter",
    "TerminalFormatter",
]
