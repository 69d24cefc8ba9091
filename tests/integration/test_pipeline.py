"""End-to-end pipeline: raw input to exported reports."""

import json

import pytest

from amcapital.application.services.market_data import MarketDataService
from amcapital.application.services.projections import (
    calculate_yearly_projections,
    projections_to_dataframe,
)
from amcapital.application.services.simulation import calculate_comparison, simulate_from_input
from amcapital.application.services.taxation import calculate_taxes
from amcapital.core.cache import TTLCache
from amcapital.core.exceptions import InvalidConfigurationError
from amcapital.core.settings import AppSettings
from amcapital.domain.models import DataSource, ShortTermMarketData
from amcapital.services.exporter import ResultExporter
from amcapital.services.pdf_report import PDFReportGenerator


@pytest.fixture
def market_service():
    return MarketDataService(settings=AppSettings(), cache=TTLCache())


class TestFullPipeline:
    def test_long_term_with_market_data(self, valid_input, market_service, tmp_path, settings):
        report = simulate_from_input(valid_input, market_service)
        assert report.data_source is DataSource.API_RENT

        taxes = calculate_taxes(
            report.result.monthly_rent * 12,
            report.result.monthly_charges * 12,
            mode=report.config.exploitation_mode,
        )
        assert taxes.micro.taxable_income == round(report.result.monthly_rent * 12 * 0.7)

        df = projections_to_dataframe(calculate_yearly_projections(report.config, report.result))
        assert len(df) == 10

        path = ResultExporter(output_dir=str(tmp_path)).save_results([report])
        with open(path, encoding="utf-8") as f:
            saved = json.load(f)
        assert saved["reports"][0]["result"]["monthlyRent"] == report.result.monthly_rent

        pdf = PDFReportGenerator(settings=settings).render_bytes(report)
        assert pdf.startswith(b"%PDF")

    def test_short_term_with_market_data(self, valid_input, market_service):
        report = simulate_from_input({**valid_input, "exploitationMode": "short"}, market_service)
        assert report.data_source is DataSource.API_AIRBNB
        assert isinstance(report.market_data, ShortTermMarketData)
        assert report.result.vacancy_loss == 0
        assert len(report.market_data.seasonal_revenues) == 12

    def test_comparison_with_market_data(self, long_term_config, market_service):
        cfg = long_term_config
        comparison = calculate_comparison(
            cfg,
            market_service.get_rent_data(cfg.city, cfg.unit_type, cfg.surface),
            market_service.get_airbnb_data(cfg.city, cfg.unit_type, cfg.surface),
        )
        assert comparison.long_term.monthly_rent == 2188
        assert comparison.short_term.monthly_rent == 5738

    def test_invalid_input_stops_before_engine(self, valid_input, market_service):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            simulate_from_input({**valid_input, "city": ""}, market_service)
        assert exc_info.value.messages == ["Ville requise"]
        assert len(market_service.cache) == 0
