"""Tests for constants module."""
from pub_license_audit.constants import (
    CLASSIFIER_THRESHOLD,
    EXIT_ERROR,
    EXIT_ISSUES,
    EXIT_SUCCESS,
    LEGAL_DISCLAIMER,
    LEGAL_DISCLAIMER_SHORT,
    NO_FILE_LICENSE,
    UNKNOWN_COPYRIGHT,
    UNKNOWN_LICENSE,
    UNKNOWN_SOURCE,
)


class TestSentinels:
    """Tests for sentinel values."""

    def test_sentinel_values(self) -> None:
        """Test sentinel strings match the documented values."""
        assert NO_FILE_LICENSE == "no-file"
        assert UNKNOWN_LICENSE == "unknown-license"
        assert UNKNOWN_COPYRIGHT == "unknown-copyright"
        assert UNKNOWN_SOURCE == "unknown-source"

    def test_classifier_threshold(self) -> None:
        """Test classifier threshold is 0.9."""
        assert CLASSIFIER_THRESHOLD == 0.9


class TestExitCodes:
    """Tests for exit codes."""

    def test_success_is_zero(self) -> None:
        """Test a compliant run exits with 0."""
        assert EXIT_SUCCESS == 0

    def test_issues_and_errors_exit_with_one(self) -> None:
        """Test non-compliance and fatal errors share exit code 1."""
        assert EXIT_ISSUES == 1
        assert EXIT_ERROR == 1


class TestLegalDisclaimer:
    """Tests for disclaimer constants."""

    def test_disclaimer_contains_not_legal_advice(self) -> None:
        """Test LEGAL_DISCLAIMER says it is not legal advice."""
        assert "legal advice" in LEGAL_DISCLAIMER.lower()

    def test_short_disclaimer_is_shorter(self) -> None:
        """Test LEGAL_DISCLAIMER_SHORT is shorter than full version."""
        assert len(LEGAL_DISCLAIMER_SHORT) < len(LEGAL_DISCLAIMER)
