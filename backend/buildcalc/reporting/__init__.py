"""Report rendering for buildcalc estimates."""

from buildcalc.reporting.pdf_report import REPORT_FILENAME, render_estimate_pdf

__all__ = ["REPORT_FILENAME", "render_estimate_pdf"]
