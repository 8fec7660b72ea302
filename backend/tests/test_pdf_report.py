"""Tests for the PDF estimate report."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import patch

import fitz  # type: ignore[import-untyped]
import pytest
from fpdf.errors import FPDFException

from buildcalc.engine import estimate
from buildcalc.exceptions import ReportRenderingError
from buildcalc.models.building import BuildingParameters
from buildcalc.models.enums import BuildingType, ConcreteGrade
from buildcalc.models.estimate import EstimationResult
from buildcalc.reporting.pdf_report import REPORT_TITLE, SECTION_TITLES, render_estimate_pdf


@pytest.fixture()
def result() -> EstimationResult:
    return estimate(
        BuildingParameters(
            length=20,
            width=15,
            floors=3,
            building_type=BuildingType.RESIDENTIAL,
            concrete_grade=ConcreteGrade.M25,
        ),
    )


def _pdf_text(pdf_bytes: bytes) -> str:
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        return "\n".join(page.get_text() for page in doc)


class TestRenderEstimatePdf:
    def test_returns_pdf_bytes(self, result: EstimationResult) -> None:
        pdf_bytes = render_estimate_pdf(result)
        assert isinstance(pdf_bytes, bytes)
        assert pdf_bytes.startswith(b"%PDF")

    def test_title_and_date(self, result: EstimationResult) -> None:
        text = _pdf_text(render_estimate_pdf(result, generated_at=datetime(2024, 3, 9, 14, 30)))
        assert REPORT_TITLE in text
        assert "Date: 2024-03-09" in text

    def test_sections_in_fixed_order(self, result: EstimationResult) -> None:
        text = _pdf_text(render_estimate_pdf(result))
        positions = [text.index(title) for title in SECTION_TITLES]
        assert positions == sorted(positions)

    def test_values_formatted_to_two_decimals(self, result: EstimationResult) -> None:
        text = _pdf_text(render_estimate_pdf(result))
        assert "581.61 m³" in text
        assert "209.38 tons" in text
        assert "9,261,246.34" in text
        assert "50,000.00 kN" in text
        assert "One-way slab" in text

    def test_suggestions_numbered(self, result: EstimationResult) -> None:
        text = _pdf_text(render_estimate_pdf(result))
        assert "1. Consider using recycled concrete aggregates" in text
        assert "3. Use fly ash" in text

    def test_currency_in_cost_heading(self, result: EstimationResult) -> None:
        text = _pdf_text(render_estimate_pdf(result, currency="USD"))
        assert "Cost (USD)" in text

    def test_labor_cost_carries_currency(self, result: EstimationResult) -> None:
        text = _pdf_text(render_estimate_pdf(result, currency="USD"))
        assert "USD 3,600,000.00" in text

    def test_fpdf_failure_wrapped(self, result: EstimationResult) -> None:
        with (
            patch(
                "buildcalc.reporting.pdf_report.EstimateReportPDF.output",
                side_effect=FPDFException("boom"),
            ),
            pytest.raises(ReportRenderingError, match="boom"),
        ):
            render_estimate_pdf(result)
