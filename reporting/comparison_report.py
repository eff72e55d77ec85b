"""
Sale Options Comparison Report (v1.0)

Generates a client-ready PDF from a property description, its valuation
and the three-way sale options comparison.
Uses ReportLab for deterministic PDF generation.

Library Choice: ReportLab
- Pure Python, no external dependencies
- Deterministic output (same input = same PDF, via invariant mode)
- Fine-grained control over layout

Output Structure:
1. Header, Property Details, Estimated Value, Equity Position
2. One page per sale option (Traditional, Cash Offer, Short Sale)
3. Next Steps, Contact & Disclaimer
"""

from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Final, Optional, Union

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import (
    HRFlowable,
    PageBreak,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from core.errors import RenderFailure
from core.models import (
    ComparisonResult,
    PropertyDescription,
    SaleOption,
    ValuationResult,
)
from utils.config import Config
from utils.formatting import format_currency, format_percent


GENERATOR_VERSION: Final[str] = "1.0"

RECOMMENDED_BADGE: Final[str] = "RECOMMENDED OPTION"

DISCLAIMER_TEXT: Final[str] = (
    "Disclaimer: This report is for informational purposes only and does not "
    "constitute a professional appraisal or financial advice. Property values and "
    "sale proceeds are estimates based on general market data and may vary based on "
    "specific property features, market conditions, and other factors."
)


# =============================================================================
# Color Palette - Clean, print-friendly
# =============================================================================

class ReportPalette:
    """
    Print-friendly colour palette.
    White background with charcoal text, navy accent.
    """
    BLACK = colors.Color(0.1, 0.1, 0.1)
    CHARCOAL = colors.Color(0.2, 0.2, 0.22)
    SLATE = colors.Color(0.35, 0.38, 0.42)
    GRAY = colors.Color(0.5, 0.5, 0.5)
    LIGHT_GRAY = colors.Color(0.85, 0.85, 0.85)
    PALE_GRAY = colors.Color(0.95, 0.95, 0.95)
    WHITE = colors.white

    ACCENT = colors.Color(0.12, 0.25, 0.69)
    ACCENT_LIGHT = colors.Color(0.94, 0.96, 1.0)

    POSITIVE = colors.Color(0.02, 0.59, 0.41)
    NEGATIVE = colors.Color(0.86, 0.15, 0.15)


# =============================================================================
# Style Configuration
# =============================================================================

def get_report_styles() -> dict:
    """
    Create paragraph styles for the comparison report.
    """
    styles = getSampleStyleSheet()

    styles.add(ParagraphStyle(
        name="ReportTitle",
        parent=styles["Normal"],
        fontSize=22,
        leading=28,
        textColor=ReportPalette.ACCENT,
        alignment=TA_CENTER,
        fontName="Helvetica-Bold",
        spaceAfter=4,
    ))

    styles.add(ParagraphStyle(
        name="ReportSubtitle",
        parent=styles["Normal"],
        fontSize=11,
        leading=15,
        textColor=ReportPalette.SLATE,
        alignment=TA_CENTER,
        fontName="Helvetica",
        spaceAfter=2,
    ))

    styles.add(ParagraphStyle(
        name="ReportTimestamp",
        parent=styles["Normal"],
        fontSize=9,
        leading=12,
        textColor=ReportPalette.GRAY,
        alignment=TA_CENTER,
        fontName="Helvetica",
        spaceAfter=8 * mm,
    ))

    styles.add(ParagraphStyle(
        name="SectionTitle",
        parent=styles["Normal"],
        fontSize=14,
        leading=18,
        textColor=ReportPalette.CHARCOAL,
        fontName="Helvetica-Bold",
        spaceBefore=14,
        spaceAfter=8,
    ))

    styles.add(ParagraphStyle(
        name="SubsectionTitle",
        parent=styles["Normal"],
        fontSize=11,
        leading=14,
        textColor=ReportPalette.SLATE,
        fontName="Helvetica-Bold",
        spaceBefore=10,
        spaceAfter=4,
    ))

    styles.add(ParagraphStyle(
        name="ReportBody",
        parent=styles["Normal"],
        fontSize=9.5,
        leading=14.25,  # 9.5 * 1.5
        textColor=ReportPalette.CHARCOAL,
        spaceAfter=6,
        alignment=TA_JUSTIFY,
        fontName="Helvetica",
    ))

    styles.add(ParagraphStyle(
        name="ReportBodyCentered",
        parent=styles["ReportBody"],
        alignment=TA_CENTER,
    ))

    styles.add(ParagraphStyle(
        name="ReportBullet",
        parent=styles["Normal"],
        fontSize=9,
        leading=13,
        leftIndent=6 * mm,
        bulletIndent=2 * mm,
        spaceAfter=3,
        textColor=ReportPalette.CHARCOAL,
        fontName="Helvetica",
    ))

    styles.add(ParagraphStyle(
        name="MetricValue",
        parent=styles["Normal"],
        fontSize=26,
        leading=32,
        textColor=ReportPalette.ACCENT,
        alignment=TA_CENTER,
        fontName="Helvetica-Bold",
        spaceAfter=4,
    ))

    styles.add(ParagraphStyle(
        name="MetricLabel",
        parent=styles["Normal"],
        fontSize=9,
        leading=12,
        textColor=ReportPalette.SLATE,
        alignment=TA_CENTER,
        fontName="Helvetica",
    ))

    styles.add(ParagraphStyle(
        name="RecommendedBadge",
        parent=styles["Normal"],
        fontSize=12,
        leading=16,
        textColor=ReportPalette.POSITIVE,
        alignment=TA_CENTER,
        fontName="Helvetica-Bold",
        spaceAfter=6,
    ))

    styles.add(ParagraphStyle(
        name="OptionTitle",
        parent=styles["Normal"],
        fontSize=18,
        leading=22,
        textColor=ReportPalette.ACCENT,
        alignment=TA_CENTER,
        fontName="Helvetica-Bold",
        spaceAfter=4,
    ))

    styles.add(ParagraphStyle(
        name="TableCell",
        parent=styles["Normal"],
        fontSize=9.5,
        leading=12,
        textColor=ReportPalette.CHARCOAL,
        fontName="Helvetica",
        alignment=TA_LEFT,
    ))

    styles.add(ParagraphStyle(
        name="Disclaimer",
        parent=styles["Normal"],
        fontSize=7.5,
        leading=11.25,  # 7.5 * 1.5
        textColor=ReportPalette.GRAY,
        alignment=TA_JUSTIFY,
        fontName="Helvetica",
        spaceBefore=14,
        leftIndent=5 * mm,
        rightIndent=5 * mm,
    ))

    return styles


def report_filename(generated_at: datetime) -> str:
    """Attachment filename, e.g. sale-options-comparison-1729350000000.pdf."""
    return f"sale-options-comparison-{int(generated_at.timestamp() * 1000)}.pdf"


# =============================================================================
# Report Generator Class
# =============================================================================

class ComparisonReportGenerator:
    """
    Generates Sale Options Comparison PDFs.

    Usage:
        generator = ComparisonReportGenerator()
        pdf_bytes = generator.render(valuation, details, comparison, generated_at)

    The generator produces deterministic output - the same input will
    always produce the same PDF bytes.
    """

    PAGE_WIDTH, PAGE_HEIGHT = LETTER
    MARGIN_LEFT = 18 * mm
    MARGIN_RIGHT = 18 * mm
    MARGIN_TOP = 18 * mm
    MARGIN_BOTTOM = 22 * mm

    def __init__(self, config: Optional[Config] = None):
        """Initialize the report generator with styles and branding."""
        self.config = config or Config.load()
        self.styles = get_report_styles()

    def render(
        self,
        valuation: Union[ValuationResult, float],
        details: PropertyDescription,
        comparison: ComparisonResult,
        generated_at: datetime,
    ) -> bytes:
        """
        Render the comparison report.

        Args:
            valuation: Full valuation result, or just the property value
            details: Property attributes shown on the first page
            comparison: Sale options comparison
            generated_at: Timestamp printed in the header

        Returns:
            Complete PDF bytes

        Raises:
            RenderFailure: If any part of the document fails to build
        """
        buffer = BytesIO()
        try:
            story = self.build_story(valuation, details, comparison, generated_at)
            self._build_document(story, buffer)
        except Exception as exc:
            raise RenderFailure(f"Failed to render comparison report: {exc}", exc) from exc
        return buffer.getvalue()

    def generate_to_file(
        self,
        path: Path,
        valuation: Union[ValuationResult, float],
        details: PropertyDescription,
        comparison: ComparisonResult,
        generated_at: datetime,
    ) -> Path:
        """Render and write the PDF to disk. Returns the written path."""
        pdf_bytes = self.render(valuation, details, comparison, generated_at)
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(pdf_bytes)
        return path

    def build_story(
        self,
        valuation: Union[ValuationResult, float],
        details: PropertyDescription,
        comparison: ComparisonResult,
        generated_at: datetime,
    ) -> list:
        """Build the flowables for the whole document, in page order."""
        story = []

        story.extend(self._build_header(generated_at))
        story.extend(self._build_property_details(details))
        story.extend(self._build_estimated_value(valuation))
        story.extend(self._build_equity_summary(comparison))
        story.append(PageBreak())

        # One page per option
        for option in comparison.options:
            story.extend(self._build_option_page(option))
            story.append(PageBreak())

        story.extend(self._build_closing_page())

        return story

    def _build_document(self, story: list, buffer: BytesIO):
        """Build the complete PDF document."""
        doc = SimpleDocTemplate(
            buffer,
            pagesize=LETTER,
            leftMargin=self.MARGIN_LEFT,
            rightMargin=self.MARGIN_RIGHT,
            topMargin=self.MARGIN_TOP,
            bottomMargin=self.MARGIN_BOTTOM,
            title="Property Sale Options Comparison",
            author=self.config.brand_name,
            subject="Sale Options Comparison",
            invariant=1,
        )

        # Cover page carries no footer
        doc.build(story, onLaterPages=self._draw_page_frame)

    # =========================================================================
    # Page Drawing
    # =========================================================================

    def _draw_page_frame(self, canvas_obj: canvas.Canvas, doc):
        """Draw footer - wordmark left, page number right."""
        canvas_obj.saveState()
        canvas_obj.setFont("Helvetica", 7)
        canvas_obj.setFillColor(ReportPalette.GRAY)

        canvas_obj.drawString(
            self.MARGIN_LEFT,
            self.MARGIN_BOTTOM - 10 * mm,
            self.config.brand_name.upper(),
        )

        canvas_obj.drawRightString(
            self.PAGE_WIDTH - self.MARGIN_RIGHT,
            self.MARGIN_BOTTOM - 10 * mm,
            f"{doc.page}",
        )

        canvas_obj.restoreState()

    # =========================================================================
    # Section 1: Header
    # =========================================================================

    def _build_header(self, generated_at: datetime) -> list:
        elements = []

        elements.append(Paragraph(
            "Property Sale Options Comparison",
            self.styles["ReportTitle"],
        ))
        elements.append(Paragraph(
            f"{self.config.brand_name} - Your Trusted Real Estate Partner",
            self.styles["ReportSubtitle"],
        ))

        generated = generated_at.strftime("%B %d, %Y at %I:%M %p")
        elements.append(Paragraph(
            f"Generated: {generated}",
            self.styles["ReportTimestamp"],
        ))

        return elements

    # =========================================================================
    # Section 2: Property Details
    # =========================================================================

    def _build_property_details(self, details: PropertyDescription) -> list:
        elements = []

        elements.append(Paragraph("Property Details", self.styles["SectionTitle"]))

        rows = []
        if details.address:
            rows.append(("Address", details.address))
        rows.extend([
            ("ZIP Code", details.zip_code),
            ("Property Type", details.property_type.label),
            ("Square Feet", f"{details.square_feet:,}"),
            ("Bedrooms", str(details.bedrooms)),
            ("Bathrooms", f"{details.bathrooms:g}"),
            ("Condition", details.condition.label),
        ])

        elements.append(self._key_value_table(rows))
        return elements

    # =========================================================================
    # Section 3: Estimated Value
    # =========================================================================

    def _build_estimated_value(self, valuation: Union[ValuationResult, float]) -> list:
        elements = []

        elements.append(Paragraph("Estimated Property Value", self.styles["SectionTitle"]))

        if isinstance(valuation, ValuationResult):
            value = valuation.estimated_value
        else:
            value = valuation

        elements.append(Paragraph(format_currency(value), self.styles["MetricValue"]))

        if isinstance(valuation, ValuationResult):
            value_range = valuation.valuation_range
            elements.append(Paragraph(
                f"Estimated range: {format_currency(value_range.low)} - "
                f"{format_currency(value_range.high)}",
                self.styles["MetricLabel"],
            ))
            elements.append(Paragraph(
                f"Confidence: {valuation.confidence.value.capitalize()}",
                self.styles["MetricLabel"],
            ))

        elements.append(Spacer(1, 4 * mm))
        return elements

    # =========================================================================
    # Section 4: Equity Summary
    # =========================================================================

    def _build_equity_summary(self, comparison: ComparisonResult) -> list:
        elements = []

        elements.append(Paragraph("Your Equity Position", self.styles["SectionTitle"]))

        equity_text = (
            f"{format_currency(comparison.equity)} "
            f"({format_percent(comparison.equity_percentage)})"
        )
        rows = [
            ("Property Value", format_currency(comparison.property_value)),
            ("Mortgage Balance", f"-{format_currency(comparison.mortgage_balance)}"),
            ("Your Equity", equity_text),
        ]
        table = self._key_value_table(rows)
        equity_colour = ReportPalette.POSITIVE if comparison.equity >= 0 else ReportPalette.NEGATIVE
        table.setStyle(TableStyle([
            ("FONTNAME", (0, 2), (-1, 2), "Helvetica-Bold"),
            ("TEXTCOLOR", (1, 2), (1, 2), equity_colour),
        ]))
        elements.append(table)

        recommended = comparison.recommended_option
        elements.append(Spacer(1, 4 * mm))
        elements.append(Paragraph(
            f"Based on your equity position, the recommended option is "
            f"<b>{recommended.name}</b>. Each option is detailed on the following pages.",
            self.styles["ReportBody"],
        ))

        return elements

    # =========================================================================
    # Section 5: Sale Option Pages
    # =========================================================================

    def _build_option_page(self, option: SaleOption) -> list:
        elements = []

        if option.recommended:
            elements.append(Paragraph(RECOMMENDED_BADGE, self.styles["RecommendedBadge"]))

        elements.append(Paragraph(option.name, self.styles["OptionTitle"]))
        elements.append(Paragraph(option.description, self.styles["ReportBodyCentered"]))
        elements.append(HRFlowable(
            width="100%", thickness=0.5, color=ReportPalette.LIGHT_GRAY,
            spaceBefore=4, spaceAfter=6,
        ))

        # Timeline
        elements.append(Paragraph("Timeline to Close", self.styles["SubsectionTitle"]))
        elements.append(Paragraph(
            f"{option.timeline} (about {option.timeline_days} days)",
            self.styles["ReportBody"],
        ))

        # Costs - zero rows omitted
        elements.append(Paragraph("Costs Breakdown", self.styles["SubsectionTitle"]))
        rows = [("Gross Proceeds", format_currency(option.gross_proceeds))]
        if option.costs.agent_commission > 0:
            rows.append(("Agent Commission", f"-{format_currency(option.costs.agent_commission)}"))
        if option.costs.closing_costs > 0:
            rows.append(("Closing Costs", f"-{format_currency(option.costs.closing_costs)}"))
        if option.costs.repairs > 0:
            rows.append(("Repairs/Staging", f"-{format_currency(option.costs.repairs)}"))
        rows.append(("Total Costs", f"-{format_currency(option.costs.total)}"))
        table = self._key_value_table(rows)
        table.setStyle(TableStyle([
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
            ("TEXTCOLOR", (1, -1), (1, -1), ReportPalette.NEGATIVE),
        ]))
        elements.append(table)

        # Net proceeds
        elements.append(Paragraph("Your Net Proceeds", self.styles["SubsectionTitle"]))
        net_colour = "#059669" if option.net_proceeds >= 0 else "#dc2626"
        elements.append(Paragraph(
            f'<font color="{net_colour}">{format_currency(option.net_proceeds)}</font>',
            self.styles["MetricValue"],
        ))

        # Pros / cons
        elements.append(Paragraph("Advantages", self.styles["SubsectionTitle"]))
        for pro in option.pros:
            elements.append(Paragraph(f"• {pro}", self.styles["ReportBullet"]))

        elements.append(Paragraph("Considerations", self.styles["SubsectionTitle"]))
        for con in option.cons:
            elements.append(Paragraph(f"• {con}", self.styles["ReportBullet"]))

        return elements

    # =========================================================================
    # Section 6: Next Steps, Contact & Disclaimer
    # =========================================================================

    def _build_closing_page(self) -> list:
        elements = []

        elements.append(Paragraph("Next Steps", self.styles["SectionTitle"]))
        elements.append(Paragraph(
            "Every situation is unique. The estimates in this report are based on general "
            "market data and should be verified with a professional appraisal.",
            self.styles["ReportBody"],
        ))

        steps = [
            "Review the three sale options in this report",
            "Consider which option aligns with your timeline and goals",
            "Call us to discuss your specific situation",
            "Get a professional appraisal for the most accurate value",
        ]
        for i, step in enumerate(steps, 1):
            elements.append(Paragraph(f"{i}. {step}", self.styles["ReportBullet"]))

        elements.append(Spacer(1, 6 * mm))

        elements.append(Paragraph("Schedule Your Free Consultation", self.styles["SubsectionTitle"]))
        elements.append(Paragraph(self.config.brand_name, self.styles["ReportBody"]))
        elements.append(Paragraph(f"Phone: {self.config.contact_phone}", self.styles["ReportBody"]))
        elements.append(Paragraph(f"Email: {self.config.contact_email}", self.styles["ReportBody"]))

        elements.append(Paragraph(DISCLAIMER_TEXT, self.styles["Disclaimer"]))

        return elements

    # =========================================================================
    # Table Helper
    # =========================================================================

    def _key_value_table(self, rows: list) -> Table:
        data = [
            [Paragraph(f"<b>{label}</b>", self.styles["TableCell"]), value]
            for label, value in rows
        ]
        table = Table(data, colWidths=[60 * mm, 100 * mm], hAlign="LEFT")
        table.setStyle(TableStyle([
            ("FONTNAME", (1, 0), (1, -1), "Helvetica"),
            ("FONTSIZE", (1, 0), (1, -1), 9.5),
            ("TEXTCOLOR", (1, 0), (1, -1), ReportPalette.CHARCOAL),
            ("LINEBELOW", (0, 0), (-1, -1), 0.25, ReportPalette.LIGHT_GRAY),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]))
        return table


# =============================================================================
# Convenience Function
# =============================================================================

def render(
    valuation: Union[ValuationResult, float],
    details: PropertyDescription,
    comparison: ComparisonResult,
    generated_at: datetime,
) -> bytes:
    """
    Render a Sale Options Comparison PDF.

    This is the primary entry point for report generation.

    Example:
        from core import PropertyAnalyzer
        from reporting import render

        analysis = PropertyAnalyzer().analyze(description)
        pdf_bytes = render(
            analysis.valuation, description, analysis.comparison, datetime.now()
        )
    """
    return ComparisonReportGenerator().render(valuation, details, comparison, generated_at)
