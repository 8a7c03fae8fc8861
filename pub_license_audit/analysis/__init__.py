"""License policy analysis for pub-license-audit."""
from pub_license_audit.analysis.filtering import filter_direct
from pub_license_audit.analysis.policy import resolve_status

__all__ = [
    "filter_direct",
    "resolve_status",
]
