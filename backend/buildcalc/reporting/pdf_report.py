"""PDF report for a building material estimate.

Uses fpdf2 (pure Python, built-in Helvetica). Sections always appear in
this order:

1. Building Dimensions
2. Material Quantities
3. Costs
4. Labor Details
5. Structural Details
6. Sustainability Suggestions
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from fpdf import FPDF
from fpdf.errors import FPDFException

from buildcalc.exceptions import ReportRenderingError
from buildcalc.formatting import DEFAULT_CURRENCY, format_amount, format_currency, format_quantity

if TYPE_CHECKING:
    from buildcalc.models.estimate import EstimationResult

REPORT_TITLE = "Building Material Calculation Report"
REPORT_FILENAME = "building_material_calculation.pdf"

SECTION_TITLES = (
    "Building Dimensions",
    "Material Quantities",
    "Costs",
    "Labor Details",
    "Structural Details",
    "Sustainability Suggestions",
)

_LABEL_WIDTH = 90
_VALUE_WIDTH = 90


def _safe(text: str) -> str:
    """Replace characters the built-in PDF fonts (latin-1) cannot render."""
    return (
        text
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")  # en dash
        .replace("\u2019", "'")  # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class EstimateReportPDF(FPDF):
    """A4 report with section bars and two-column tables."""

    def __init__(self) -> None:
        super().__init__(format="A4")
        self.set_auto_page_break(auto=True, margin=20)

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")
        self.set_text_color(0, 0, 0)

    def section_header(self, title: str) -> None:
        self.ln(4)
        self.set_font("Helvetica", "B", 12)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(1)

    def table_header(self, label: str, value: str) -> None:
        self.set_font("Helvetica", "B", 9)
        self.set_fill_color(240, 240, 240)
        self.cell(_LABEL_WIDTH, 6, label, border="B", fill=True)
        self.cell(_VALUE_WIDTH, 6, value, border="B", fill=True, align="R")
        self.ln()

    def table_row(self, label: str, value: str, bold: bool = False) -> None:
        self.set_font("Helvetica", "B" if bold else "", 9)
        self.cell(_LABEL_WIDTH, 5.5, _safe(label))
        self.cell(_VALUE_WIDTH, 5.5, _safe(value), align="R")
        self.ln()


def render_estimate_pdf(
    result: EstimationResult,
    generated_at: datetime | None = None,
    currency: str = DEFAULT_CURRENCY,
) -> bytes:
    """Render an estimate as a PDF document.

    Args:
        result: The estimate to render.
        generated_at: Timestamp printed under the title; defaults to now.
        currency: Currency code shown in the cost table headings.

    Returns:
        The PDF file contents.

    Raises:
        ReportRenderingError: If fpdf2 fails to lay out the document.
    """
    generated_at = generated_at or datetime.now()
    try:
        return bytes(_build_document(result, generated_at, currency).output())
    except FPDFException as exc:
        msg = f"Failed to render estimate report: {exc}"
        raise ReportRenderingError(msg) from exc


def _build_document(
    result: EstimationResult,
    generated_at: datetime,
    currency: str,
) -> EstimateReportPDF:
    pdf = EstimateReportPDF()
    pdf.set_title(REPORT_TITLE)
    pdf.add_page()

    pdf.set_font("Helvetica", "B", 18)
    pdf.cell(0, 10, REPORT_TITLE, new_x="LMARGIN", new_y="NEXT")
    pdf.set_font("Helvetica", "", 11)
    pdf.cell(0, 6, f"Date: {generated_at:%Y-%m-%d}", new_x="LMARGIN", new_y="NEXT")

    dims, quantities, costs = result.dimensions, result.quantities, result.costs
    labor, structure = result.labor, result.structural_details
    dimensions_title, quantities_title, costs_title, labor_title, structure_title, tips_title = (
        SECTION_TITLES
    )

    pdf.section_header(dimensions_title)
    pdf.table_header("Dimension", "Value")
    pdf.table_row("Length", format_quantity(dims.length, "m"))
    pdf.table_row("Width", format_quantity(dims.width, "m"))
    pdf.table_row("Floors", str(dims.floors))
    pdf.table_row("Height", format_quantity(dims.building_height, "m"))

    pdf.section_header(quantities_title)
    pdf.table_header("Material", "Quantity")
    pdf.table_row("Concrete", format_quantity(quantities.total_concrete_volume, "m³"))
    pdf.table_row("Cement", format_quantity(quantities.cement, "tons"))
    pdf.table_row("Sand", format_quantity(quantities.sand, "tons"))
    pdf.table_row("Aggregate", format_quantity(quantities.aggregate, "tons"))
    pdf.table_row("Steel", format_quantity(quantities.steel, "kg"))
    pdf.table_row("Water", format_quantity(quantities.water, "m³"))

    pdf.section_header(costs_title)
    pdf.table_header("Item", f"Cost ({currency})")
    pdf.table_row("Cement", format_amount(costs.cement))
    pdf.table_row("Sand", format_amount(costs.sand))
    pdf.table_row("Aggregate", format_amount(costs.aggregate))
    pdf.table_row("Steel", format_amount(costs.steel))
    pdf.table_row("Water", format_amount(costs.water))
    pdf.table_row("Labor", format_amount(costs.labor))
    pdf.table_row("Total", format_amount(costs.total), bold=True)

    pdf.section_header(labor_title)
    pdf.table_header("Item", "Value")
    pdf.table_row("Number of Laborers", str(labor.number_of_laborers))
    pdf.table_row("Total Labor Days", format_amount(labor.labor_days_required))
    pdf.table_row("Total Labor Cost", format_currency(labor.total_labor_cost, currency))

    pdf.section_header(structure_title)
    pdf.table_header("Item", "Value")
    pdf.table_row("Number of Columns", str(structure.num_columns))
    pdf.table_row("Number of Beams", str(structure.num_beams))
    pdf.table_row("Beam Spacing", format_quantity(structure.beam_spacing, "m"))
    pdf.table_row("Slab Type", structure.slab_type.value)
    pdf.table_row("Load Bearing Capacity", format_quantity(structure.load_bearing_capacity, "kN"))

    pdf.section_header(tips_title)
    pdf.set_font("Helvetica", "", 9)
    width = pdf.w - pdf.l_margin - pdf.r_margin
    for index, suggestion in enumerate(result.sustainability_suggestions, start=1):
        pdf.multi_cell(width, 5, _safe(f"{index}. {suggestion}"), new_x="LMARGIN", new_y="NEXT")

    pdf.ln(4)
    pdf.set_font("Helvetica", "I", 8)
    pdf.set_text_color(100, 100, 100)
    refs = result.is_code_references
    pdf.multi_cell(
        width,
        4,
        f"Design references: {refs.concrete_design} (concrete design), "
        f"{refs.mix_design} (mix design). Figures are rule-of-thumb estimates, "
        "not a structural design.",
        new_x="LMARGIN",
        new_y="NEXT",
    )
    pdf.set_text_color(0, 0, 0)
    return pdf
