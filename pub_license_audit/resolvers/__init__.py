"""License evidence resolvers package."""

from pub_license_audit.resolvers.classifier import BaseClassifier, TemplateClassifier
from pub_license_audit.resolvers.dependency import load_packages, strip_file_uri
from pub_license_audit.resolvers.license import LicenseResolver
from pub_license_audit.resolvers.manifest import parse_manifest, read_manifest

__all__ = [
    "BaseClassifier",
    "LicenseResolver",
    "TemplateClassifier",
    "load_packages",
    "parse_manifest",
    "read_manifest",
    "strip_file_uri",
]
