"""Unit tests for the PDF report."""

import pytest

from amcapital.application.services.simulation import simulate_investment
from amcapital.core.exceptions import ReportExportError
from amcapital.domain.models import ShortTermMarketData
from amcapital.services.pdf_report import PDFReportGenerator, report_filename


@pytest.fixture
def report(long_term_config, fixed_now):
    return simulate_investment(long_term_config, clock=lambda: fixed_now)


class TestReportFilename:
    def test_filename(self, report):
        assert report_filename(report) == "AM-Capital-Simulation-paris-2024-03-15.pdf"

    @pytest.mark.parametrize("city,slug", [
        ("Saint Étienne", "saint-etienne"),
        ("a/b", "a-b"),
        ("../..", "ville"),
    ])
    def test_city_is_slugified(self, long_term_config, fixed_now, city, slug):
        config = long_term_config.model_copy(update={"city": city})
        report = simulate_investment(config, clock=lambda: fixed_now)
        name = report_filename(report)
        assert name == f"AM-Capital-Simulation-{slug}-2024-03-15.pdf"
        assert "/" not in name

    def test_generate_stays_in_directory(self, long_term_config, fixed_now, settings, tmp_path):
        config = long_term_config.model_copy(update={"city": "a/b"})
        report = simulate_investment(config, clock=lambda: fixed_now)
        path = PDFReportGenerator(settings=settings).generate(report, tmp_path)
        assert path.parent == tmp_path


class TestPDFReportGenerator:
    def test_render_bytes(self, report, settings):
        pdf = PDFReportGenerator(settings=settings).render_bytes(report)
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 1000

    def test_without_recommendations_is_smaller(self, report, settings):
        full = PDFReportGenerator(settings=settings).render_bytes(report)
        short = PDFReportGenerator(settings=settings, include_recommendations=False).render_bytes(report)
        assert len(short) < len(full)

    def test_short_term_report(self, short_term_config, settings):
        data = ShortTermMarketData(monthly_revenue=3200)
        report = simulate_investment(short_term_config, data)
        assert PDFReportGenerator(settings=settings).render_bytes(report).startswith(b"%PDF")

    def test_generate_into_directory(self, report, settings, tmp_path):
        path = PDFReportGenerator(settings=settings).generate(report, tmp_path)
        assert path.name == report_filename(report)
        assert path.read_bytes().startswith(b"%PDF")

    def test_generate_to_file(self, report, settings, tmp_path):
        target = tmp_path / "nested" / "rapport.pdf"
        path = PDFReportGenerator(settings=settings).generate(report, target)
        assert path == target
        assert target.exists()

    def test_unwritable_target(self, report, settings, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        with pytest.raises(ReportExportError):
            PDFReportGenerator(settings=settings).generate(report, blocker / "rapport.pdf")
