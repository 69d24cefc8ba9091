"""PDF investment report.

Renders a ``SimulationReport`` as an A4 document with reportlab's platypus
flowables: executive summary, calculation details, financial analysis and
an optional recommendations page.
"""

from __future__ import annotations

import io
import re
from pathlib import Path
from typing import Any

from reportlab.lib import colors
from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from amcapital.core.exceptions import ReportExportError
from amcapital.core.formatting import display_city, format_euro, format_pct, format_years
from amcapital.core.logging import get_logger
from amcapital.core.settings import AppSettings, get_settings
from amcapital.domain.calculator.recommendation import get_detailed_recommendations
from amcapital.domain.calculator.resolver import normalize_city
from amcapital.domain.models.report import SimulationReport
from amcapital.domain.models.simulation import ExploitationMode

log = get_logger(__name__)

NAVY = colors.Color(18 / 255, 31 / 255, 62 / 255)
LEVEL_COLORS = {
    "excellent": colors.Color(34 / 255, 197 / 255, 94 / 255),
    "good": colors.Color(59 / 255, 130 / 255, 246 / 255),
    "fair": colors.Color(245 / 255, 158 / 255, 11 / 255),
    "weak": colors.Color(239 / 255, 68 / 255, 68 / 255),
}
MODE_LABELS = {
    ExploitationMode.LONG_TERM: "Location longue durée",
    ExploitationMode.SHORT_TERM: "Location courte durée (Airbnb)",
}

ASSUMPTIONS = [
    "Taux de vacance: 5% du loyer annuel",
    "Frais de gestion: 8% du loyer",
    "Frais d'entretien: 2% de la valeur du bien par an",
    "Taux d'imposition: 30% (TMI moyen)",
]
RISK_FACTORS = [
    "Évolution des prix immobiliers",
    "Changements réglementaires (encadrement des loyers)",
    "Évolution des taux d'intérêt",
    "Situation économique locale",
]
DISCLAIMER = (
    "Ce rapport est fourni à titre informatif uniquement et ne constitue pas un "
    "conseil en investissement."
)


_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-z0-9]+")


def report_filename(report: SimulationReport) -> str:
    """``AM-Capital-Simulation-{city}-{YYYY-MM-DD}.pdf``, city as an ASCII slug."""
    city = _UNSAFE_FILENAME_CHARS.sub("-", normalize_city(report.config.city)).strip("-") or "ville"
    return f"AM-Capital-Simulation-{city}-{report.generated_at.date().isoformat()}.pdf"


class PDFReportGenerator:
    """Builds investment report PDFs."""

    def __init__(self, settings: AppSettings | None = None, include_recommendations: bool = True):
        self.settings = settings or get_settings()
        self.include_recommendations = include_recommendations
        self.styles = getSampleStyleSheet()
        self.styles.add(ParagraphStyle(
            "SectionTitle", parent=self.styles["Heading2"], textColor=NAVY, spaceAfter=6,
        ))
        self.styles.add(ParagraphStyle(
            "Body", parent=self.styles["Normal"], fontSize=10, leading=14, alignment=TA_LEFT,
        ))

    # --- Public API ---

    def render_bytes(self, report: SimulationReport) -> bytes:
        """Render the report in memory, for downloads."""
        buffer = io.BytesIO()
        self._build(report, buffer)
        return buffer.getvalue()

    def generate(self, report: SimulationReport, output_path: str | Path) -> Path:
        """Write the report to ``output_path``; a directory gets the default filename.

        Raises:
            ReportExportError: If the file cannot be written
        """
        path = Path(output_path)
        if path.is_dir():
            path = path / report_filename(report)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                self._build(report, f)
        except OSError as e:
            log.error("pdf_report_failed", path=str(path), error=str(e))
            raise ReportExportError(f"Cannot write PDF report {path}: {e}") from e

        log.info("pdf_report_saved", path=str(path), report_id=report.report_id)
        return path

    # --- Document ---

    def _build(self, report: SimulationReport, target: Any) -> None:
        doc = SimpleDocTemplate(
            target,
            pagesize=A4,
            leftMargin=2 * cm,
            rightMargin=2 * cm,
            topMargin=2 * cm,
            bottomMargin=2.5 * cm,
            title=f"Simulation {report.report_id}",
            author=self.settings.company_name,
        )
        story: list[Any] = []
        story += self._executive_summary(report)
        story.append(PageBreak())
        story += self._calculation_details(report)
        story.append(PageBreak())
        story += self._financial_analysis(report)
        if self.include_recommendations:
            story.append(PageBreak())
            story += self._recommendations(report)

        doc.build(story, onFirstPage=self._decorate_page, onLaterPages=self._decorate_page)

    def _decorate_page(self, canvas: Any, doc: Any) -> None:
        width, height = A4
        canvas.saveState()

        # Header band
        canvas.setFillColor(NAVY)
        canvas.rect(0, height - 1.6 * cm, width, 1.6 * cm, fill=1, stroke=0)
        canvas.setFillColor(colors.white)
        canvas.setFont("Helvetica-Bold", 14)
        canvas.drawString(2 * cm, height - 1.0 * cm, self.settings.company_name.upper())
        canvas.setFont("Helvetica", 9)
        canvas.drawRightString(width - 2 * cm, height - 1.0 * cm, "Simulateur d'Investissement Locatif")

        # Footer
        canvas.setStrokeColor(colors.lightgrey)
        canvas.line(2 * cm, 2.0 * cm, width - 2 * cm, 2.0 * cm)
        canvas.setFillColor(colors.grey)
        canvas.setFont("Helvetica", 7)
        canvas.drawString(2 * cm, 1.6 * cm, DISCLAIMER)
        canvas.setFont("Helvetica", 8)
        canvas.drawString(
            2 * cm, 1.2 * cm,
            f"{self.settings.company_name} - {self.settings.company_address}",
        )
        canvas.drawString(
            2 * cm, 0.8 * cm,
            f"Tél: {self.settings.company_phone} - Email: {self.settings.company_email}",
        )
        canvas.drawRightString(width - 2 * cm, 1.2 * cm, f"Page {doc.page}")
        canvas.restoreState()

    def _table(self, rows: list[tuple[str, str]], total_rows: tuple[int, ...] = ()) -> Table:
        table = Table(rows, colWidths=[9 * cm, 5 * cm])
        style = [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("ALIGN", (1, 0), (1, -1), "RIGHT"),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
        for row in total_rows:
            style += [
                ("FONTNAME", (0, row), (-1, row), "Helvetica-Bold"),
                ("LINEABOVE", (0, row), (-1, row), 1, NAVY),
            ]
        table.setStyle(TableStyle(style))
        return table

    # --- Sections ---

    def _executive_summary(self, report: SimulationReport) -> list[Any]:
        config, result = report.config, report.result
        generated = report.generated_at.strftime("%d/%m/%Y %H:%M")

        story: list[Any] = [
            Spacer(1, 0.6 * cm),
            Paragraph("RÉSUMÉ EXÉCUTIF", self.styles["Title"]),
            Paragraph(f"Rapport {report.report_id} - généré le {generated}", self.styles["Body"]),
            Spacer(1, 0.4 * cm),
            Paragraph("Caractéristiques du bien", self.styles["SectionTitle"]),
            self._table([
                ("Ville", display_city(config.city)),
                ("Surface", f"{config.surface:g} m²"),
                ("Type", config.unit_type.upper()),
                ("Prix d'acquisition", format_euro(config.price)),
                ("Type d'exploitation", MODE_LABELS[config.exploitation_mode]),
            ]),
            Spacer(1, 0.4 * cm),
            Paragraph("Résultats de la simulation", self.styles["SectionTitle"]),
            self._table([
                ("Rendement brut annuel", format_pct(result.gross_return)),
                ("Loyer mensuel", format_euro(result.monthly_rent)),
                ("Cash-flow mensuel", format_euro(report.display_cashflow)),
                ("Coût total d'acquisition", format_euro(result.total_costs)),
            ]),
            Spacer(1, 0.4 * cm),
            Paragraph("Recommandation", self.styles["SectionTitle"]),
        ]

        verdict_style = ParagraphStyle(
            "Verdict", parent=self.styles["Body"],
            textColor=LEVEL_COLORS[report.recommendation.level],
        )
        story.append(Paragraph(report.recommendation.message, verdict_style))
        return story

    def _calculation_details(self, report: SimulationReport) -> list[Any]:
        config, result = report.config, report.result
        return [
            Spacer(1, 0.6 * cm),
            Paragraph("DÉTAIL DES CALCULS", self.styles["Title"]),
            Paragraph("Coûts d'acquisition", self.styles["SectionTitle"]),
            self._table([
                ("Prix du bien", format_euro(config.price)),
                ("Frais de notaire (9%)", format_euro(result.notary_fees)),
                ("Commission A&M Capital (8,5%)", format_euro(result.commission_fees)),
                ("Frais d'architecte", format_euro(result.architect_fees)),
                ("TOTAL", format_euro(result.total_costs)),
            ], total_rows=(4,)),
            Spacer(1, 0.4 * cm),
            Paragraph("Revenus et charges mensuelles", self.styles["SectionTitle"]),
            self._table([
                ("Loyer mensuel", format_euro(result.monthly_rent)),
                ("Charges mensuelles", format_euro(-result.monthly_charges)),
                ("Cash-flow net", format_euro(result.cashflow)),
            ], total_rows=(2,)),
            Spacer(1, 0.4 * cm),
            Paragraph("Indicateurs de performance", self.styles["SectionTitle"]),
            self._table([
                ("Rendement brut", format_pct(result.gross_return)),
                ("Rendement net", format_pct(result.net_return)),
                ("ROI sur fonds propres", format_pct(result.roi)),
                ("Temps de retour", format_years(result.payback_period)),
            ]),
        ]

    def _financial_analysis(self, report: SimulationReport) -> list[Any]:
        result = report.result
        story: list[Any] = [
            Spacer(1, 0.6 * cm),
            Paragraph("ANALYSE FINANCIÈRE", self.styles["Title"]),
            Paragraph("Répartition des charges mensuelles", self.styles["SectionTitle"]),
            self._table([
                ("Frais de gestion", format_euro(result.management_fees)),
                ("Provision vacance locative", format_euro(result.vacancy_loss)),
                ("Taxes et assurances", format_euro(result.taxes_and_insurance)),
                ("TOTAL CHARGES", format_euro(result.monthly_charges)),
            ], total_rows=(3,)),
            Spacer(1, 0.4 * cm),
            Paragraph("Analyse de sensibilité", self.styles["SectionTitle"]),
            Paragraph("Cette simulation est basée sur les hypothèses suivantes:", self.styles["Body"]),
        ]
        story += [Paragraph(f"• {line}", self.styles["Body"]) for line in ASSUMPTIONS]
        story.append(Spacer(1, 0.3 * cm))
        story.append(Paragraph("Facteurs de risque à considérer:", self.styles["Body"]))
        story += [Paragraph(f"• {line}", self.styles["Body"]) for line in RISK_FACTORS]
        return story

    def _recommendations(self, report: SimulationReport) -> list[Any]:
        story: list[Any] = [
            Spacer(1, 0.6 * cm),
            Paragraph("RECOMMANDATIONS", self.styles["Title"]),
        ]
        for title, content in get_detailed_recommendations(report.config, report.result):
            story.append(Paragraph(title, self.styles["SectionTitle"]))
            story.append(Paragraph(content, self.styles["Body"]))
            story.append(Spacer(1, 0.3 * cm))
        return story
