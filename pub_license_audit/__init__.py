"""Dependency license compliance auditing for Dart/pub projects."""

__version__ = "0.1.0"
