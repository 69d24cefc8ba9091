"""Unit tests for the market-rate resolver."""

import pytest

from amcapital.core.constants import ReferenceTables
from amcapital.domain.calculator.resolver import (
    get_city_profile,
    local_long_term_rent,
    normalize_city,
    resolve_monthly_revenue,
    unit_coefficient,
)
from amcapital.domain.models import (
    DataSource,
    LongTermMarketData,
    ShortTermMarketData,
    SimulationConfig,
)


class TestNormalizeCity:
    @pytest.mark.parametrize("raw,expected", [
        ("Paris", "paris"),
        ("  LYON ", "lyon"),
        ("Saint Étienne", "saint-etienne"),
        ("saint_malo", "saint-malo"),
        ("Clermont-Ferrand", "clermont-ferrand"),
        ("Nîmes", "nimes"),
    ])
    def test_normalization(self, raw, expected):
        assert normalize_city(raw) == expected

    def test_empty(self):
        assert normalize_city("") == ""
        assert normalize_city(None) == ""


class TestLookups:
    def test_known_city(self):
        assert get_city_profile("Lyon").rent_per_square_meter == 18

    def test_unknown_city_falls_back_to_default(self):
        assert get_city_profile("Gotham") == get_city_profile("paris")

    def test_unit_coefficients(self):
        assert unit_coefficient("studio") == 1.39
        assert unit_coefficient("T3") == 0.81
        assert unit_coefficient("loft") == 1.0


class TestLongTermResolution:
    def test_local_fallback(self, long_term_config):
        resolved = resolve_monthly_revenue(long_term_config)
        assert resolved.source is DataSource.LOCAL
        assert resolved.monthly_revenue == pytest.approx(1750)

    def test_total_monthly_rent_first(self, long_term_config):
        data = LongTermMarketData(total_monthly_rent=1900, monthly_rent=1800, rent_per_square_meter=40)
        resolved = resolve_monthly_revenue(long_term_config, data)
        assert resolved.source is DataSource.API_RENT
        assert resolved.monthly_revenue == 1900

    def test_monthly_rent_second(self, long_term_config):
        data = LongTermMarketData(monthly_rent=1800, rent_per_square_meter=40)
        resolved = resolve_monthly_revenue(long_term_config, data)
        assert resolved.source is DataSource.API_RENT_BASE
        assert resolved.monthly_revenue == 1800

    def test_rent_per_square_meter_times_surface(self, long_term_config):
        data = LongTermMarketData(rent_per_square_meter=40)
        resolved = resolve_monthly_revenue(long_term_config, data)
        assert resolved.source is DataSource.API_RENT_CALCULATED
        assert resolved.monthly_revenue == 2000

    def test_zero_counts_as_absent(self, long_term_config):
        data = LongTermMarketData(total_monthly_rent=0, monthly_rent=1600)
        resolved = resolve_monthly_revenue(long_term_config, data)
        assert resolved.source is DataSource.API_RENT_BASE

    def test_empty_payload_falls_back(self, long_term_config):
        resolved = resolve_monthly_revenue(long_term_config, LongTermMarketData())
        assert resolved.source is DataSource.LOCAL

    def test_unit_coefficient_applied(self):
        config = SimulationConfig(price=150000, surface=20, unit_type="studio", city="lyon")
        assert local_long_term_rent(config) == pytest.approx(18 * 20 * 1.39)


class TestShortTermResolution:
    def test_local_fallback(self, short_term_config):
        resolved = resolve_monthly_revenue(short_term_config)
        assert resolved.source is DataSource.LOCAL
        assert resolved.monthly_revenue == pytest.approx(1750 * 3.0 * 0.70)

    def test_monthly_revenue_first(self, short_term_config):
        data = ShortTermMarketData(monthly_revenue=3200, net_monthly_revenue=2500)
        resolved = resolve_monthly_revenue(short_term_config, data)
        assert resolved.source is DataSource.API_AIRBNB
        assert resolved.monthly_revenue == 3200

    def test_net_revenue_second(self, short_term_config):
        data = ShortTermMarketData(net_monthly_revenue=2500)
        resolved = resolve_monthly_revenue(short_term_config, data)
        assert resolved.source is DataSource.API_AIRBNB_NET
        assert resolved.monthly_revenue == 2500


class TestModeMismatch:
    def test_long_term_payload_ignored_for_short_term(self, short_term_config):
        data = LongTermMarketData(total_monthly_rent=5000)
        resolved = resolve_monthly_revenue(short_term_config, data)
        assert resolved.source is DataSource.LOCAL

    def test_short_term_payload_ignored_for_long_term(self, long_term_config):
        data = ShortTermMarketData(monthly_revenue=5000)
        resolved = resolve_monthly_revenue(long_term_config, data)
        assert resolved.source is DataSource.LOCAL
        assert resolved.monthly_revenue == pytest.approx(1750)


class TestCustomTables:
    def test_resolution_reads_given_tables(self, long_term_config):
        from amcapital.core.constants import CityMarketProfile

        tables = ReferenceTables(city_profiles={"paris": CityMarketProfile(40)})
        resolved = resolve_monthly_revenue(long_term_config, tables=tables)
        assert resolved.monthly_revenue == pytest.approx(2000)


class TestResolverLogging:
    def test_mode_mismatch_event_carries_logger_name(self, short_term_config):
        from structlog.testing import capture_logs

        with capture_logs() as events:
            resolve_monthly_revenue(short_term_config, LongTermMarketData(total_monthly_rent=5000))

        mismatch = [e for e in events if e["event"] == "market_data_mode_mismatch"]
        assert len(mismatch) == 1
        assert mismatch[0]["logger_name"] == "amcapital.domain.calculator.resolver"
        assert mismatch[0]["log_level"] == "warning"
