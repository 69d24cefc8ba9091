"""Unit tests for the market data layer."""

from datetime import datetime, timezone

import pytest

from amcapital.application.services.market_data import (
    AirbnbEstimator,
    MarketDataService,
    RentEstimator,
)
from amcapital.core.cache import TTLCache
from amcapital.core.exceptions import MarketDataError
from amcapital.core.settings import AppSettings
from amcapital.domain.models import LongTermMarketData, ShortTermMarketData

NOW = datetime(2024, 3, 15, tzinfo=timezone.utc)


def fixed_clock():
    return NOW


class CountingRentEstimator(RentEstimator):
    def __init__(self):
        super().__init__(clock=fixed_clock)
        self.calls = 0

    def estimate(self, city, unit_type, surface):
        self.calls += 1
        return super().estimate(city, unit_type, surface)


class TestRentEstimator:
    def test_paris_t2(self):
        data = RentEstimator(clock=fixed_clock).estimate("Paris", "t2", 50)
        assert isinstance(data, LongTermMarketData)
        assert data.monthly_rent_per_square_meter == 43.75
        assert data.total_monthly_rent == 2188
        assert data.price_per_square_meter == 10500
        assert data.city == "Paris"
        assert data.unit_type == "T2"
        assert data.last_updated == NOW

    def test_unit_coefficient_applied(self):
        t2 = RentEstimator().estimate("lyon", "t2", 40)
        studio = RentEstimator().estimate("lyon", "studio", 40)
        assert studio.total_monthly_rent > t2.total_monthly_rent
        assert studio.coefficient == 1.39

    def test_unknown_city_uses_default_price(self):
        data = RentEstimator().estimate("Gotham", "t2", 50)
        assert data.price_per_square_meter == 3500

    def test_invalid_surface(self):
        with pytest.raises(MarketDataError):
            RentEstimator().estimate("paris", "t2", 0)


class TestAirbnbEstimator:
    def test_paris_estimate(self):
        data = AirbnbEstimator(clock=fixed_clock).estimate("paris", "t2", 50, base_monthly_rent=2188)
        assert isinstance(data, ShortTermMarketData)
        assert data.nightly_rate == 255
        assert data.monthly_revenue == 5738
        assert data.occupancy_rate == pytest.approx(75)
        assert data.annual_revenue == 5738 * 12

    def test_fees(self):
        data = AirbnbEstimator().estimate("paris", "t2", 50, base_monthly_rent=2188)
        assert data.fees.cleaning == 100
        assert data.fees.management == pytest.approx(1147.6)
        assert data.fees.total == pytest.approx(100 * 4 + 1147.6 + 50 + 100)
        assert data.net_monthly_revenue == pytest.approx(5738 - data.fees.total)

    def test_seasonality(self):
        data = AirbnbEstimator().estimate("paris", "t2", 50, base_monthly_rent=2188)
        assert [s.month for s in data.seasonal_revenues] == list(range(1, 13))
        july = data.seasonal_revenues[6]
        january = data.seasonal_revenues[0]
        assert july.revenue > january.revenue

    def test_default_base_rent(self):
        data = AirbnbEstimator().estimate("somewhere", "t2", 50)
        # 1750 x 3.0 / 30 = 175 per night, 70% occupancy
        assert data.nightly_rate == 175
        assert data.monthly_revenue == 3675

    def test_invalid_surface(self):
        with pytest.raises(MarketDataError):
            AirbnbEstimator().estimate("paris", "t2", -5)


class TestMarketDataService:
    @pytest.fixture
    def clock(self):
        class Clock:
            now = 0.0

            def __call__(self):
                return self.now

        return Clock()

    @pytest.fixture
    def service(self, clock):
        settings = AppSettings(rent_data_ttl_seconds=600, airbnb_data_ttl_seconds=900)
        return MarketDataService(
            settings=settings,
            cache=TTLCache(default_ttl=600, clock=clock),
            rent_estimator=CountingRentEstimator(),
        )

    def test_rent_data_is_cached(self, service):
        first = service.get_rent_data("Paris", "T2", 50)
        second = service.get_rent_data("paris", "t2", 50)
        assert first is second
        assert service.rent_estimator.calls == 1

    def test_fractional_surfaces_cached_separately(self, service):
        small = service.get_rent_data("paris", "t2", 45.2)
        large = service.get_rent_data("paris", "t2", 45.9)
        assert small.total_monthly_rent == 1978
        assert large.total_monthly_rent == 2008
        assert service.rent_estimator.calls == 2

    def test_fractional_surfaces_simulate_independently(self, service, valid_input):
        from amcapital.application.services.simulation import simulate_from_input

        small = simulate_from_input({**valid_input, "surface": 45.2}, service)
        large = simulate_from_input({**valid_input, "surface": 45.9}, service)
        assert small.result.monthly_rent == 1978
        assert large.result.monthly_rent == 2008

    def test_cache_expiry_refetches(self, service, clock):
        service.get_rent_data("paris", "t2", 50)
        clock.now = 601
        service.get_rent_data("paris", "t2", 50)
        assert service.rent_estimator.calls == 2

    def test_airbnb_uses_rent_estimate(self, service):
        data = service.get_airbnb_data("paris", "t2", 50)
        assert data.nightly_rate == 255

    def test_get_market_data_matches_mode(self, service, long_term_config, short_term_config):
        assert isinstance(service.get_market_data(long_term_config), LongTermMarketData)
        assert isinstance(service.get_market_data(short_term_config), ShortTermMarketData)

    def test_sweep_expired(self, service, clock):
        service.get_rent_data("paris", "t2", 50)
        service.get_airbnb_data("lyon", "t2", 50)
        clock.now = 700
        # rent entries (600s) expired, airbnb entry (900s) still valid
        assert service.sweep_expired() == 2
        assert len(service.cache) == 1

    def test_unavailable_returns_none(self, service):
        from amcapital.domain.models import SimulationConfig

        config = SimulationConfig(price=100000, surface=0, city="paris")
        assert service.get_market_data(config) is None
