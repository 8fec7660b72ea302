"""Custom exception hierarchy for buildcalc."""

from __future__ import annotations


class BuildCalcError(Exception):
    """Base exception for all buildcalc errors."""


class InvalidRequestError(BuildCalcError):
    """Raised when a request is rejected before any work is done."""


class InvalidBuildingParametersError(InvalidRequestError):
    """Raised when building input is missing, out of range or unrecognized."""


class ReportRenderingError(BuildCalcError):
    """Raised when the PDF report cannot be rendered."""


class EmailDispatchError(BuildCalcError):
    """Raised when an estimate email cannot be sent."""


class EmailNotConfiguredError(EmailDispatchError):
    """Raised when no SMTP server is configured."""


class InvalidEmailAddressError(InvalidRequestError):
    """Raised when an estimate email names a malformed recipient."""
