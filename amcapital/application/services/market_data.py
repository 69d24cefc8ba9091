"""Market data layer.

Deterministic estimators standing in for external rent and short-term
rental providers, fronted by a TTL cache. Their payloads feed the
resolver, which still falls back to its own tables when they are absent.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from amcapital.core import market_constants as mc
from amcapital.core.cache import TTLCache
from amcapital.core.exceptions import MarketDataError
from amcapital.core.financial import round_half_up
from amcapital.core.logging import get_logger
from amcapital.core.settings import AppSettings, get_settings
from amcapital.domain.calculator.resolver import normalize_city, unit_coefficient
from amcapital.domain.models.market import (
    AirbnbFees,
    LongTermMarketData,
    SeasonalRevenue,
    ShortTermMarketData,
)
from amcapital.domain.models.simulation import SimulationConfig

log = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _display_city(city_key: str) -> str:
    return city_key[:1].upper() + city_key[1:]


class RentEstimator:
    """Long-term rent estimate from purchase price per m²."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock

    def estimate(self, city: str, unit_type: str, surface: float) -> LongTermMarketData:
        """Estimate the rent of a unit.

        Args:
            city: City name (normalized internally)
            unit_type: studio, t2, t3 or t4
            surface: Surface in m²

        Returns:
            Long-term payload with ``total_monthly_rent`` set

        Raises:
            MarketDataError: If the surface is not positive
        """
        if surface is None or surface <= 0:
            raise MarketDataError(f"Cannot estimate rent for surface {surface!r}")

        city_key = normalize_city(city) or "paris"
        unit_key = (unit_type or "t2").strip().lower()
        price_per_sqm = mc.CITY_PRICES_PER_SQM.get(city_key, mc.DEFAULT_PRICE_PER_SQM)
        coefficient = unit_coefficient(unit_key)

        rent_per_sqm = round_half_up((price_per_sqm / mc.PRICE_TO_RENT_DIVISOR / 12) * coefficient, 2)
        total_monthly_rent = round_half_up(rent_per_sqm * surface)

        return LongTermMarketData(
            total_monthly_rent=total_monthly_rent,
            monthly_rent_per_square_meter=rent_per_sqm,
            price_per_square_meter=price_per_sqm,
            coefficient=coefficient,
            city=_display_city(city_key),
            unit_type=unit_key.upper(),
            surface=surface,
            data_source="local",
            last_updated=self._clock(),
        )


class AirbnbEstimator:
    """Short-term revenue estimate: nightly rate x occupancy, with seasonality."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock

    def estimate(
        self,
        city: str,
        unit_type: str,
        surface: float,
        base_monthly_rent: float | None = None,
    ) -> ShortTermMarketData:
        """Estimate short-term revenue for a unit.

        Args:
            city: City name (normalized internally)
            unit_type: studio, t2, t3 or t4
            surface: Surface in m²
            base_monthly_rent: Long-term rent of the same unit in €/month

        Returns:
            Short-term payload with revenue, fees and monthly breakdown

        Raises:
            MarketDataError: If the surface is not positive
        """
        if surface is None or surface <= 0:
            raise MarketDataError(f"Cannot estimate short-term revenue for surface {surface!r}")

        city_key = normalize_city(city) or "paris"
        base_rent = base_monthly_rent or mc.DEFAULT_BASE_MONTHLY_RENT
        multiplier = mc.SHORT_TERM_CITY_MULTIPLIERS.get(city_key, mc.DEFAULT_SHORT_TERM_MULTIPLIER)
        occupancy = mc.OCCUPANCY_RATES.get(city_key, mc.DEFAULT_OCCUPANCY_RATE) / 100

        nightly_rate = round_half_up((base_rent * multiplier) / 30)
        monthly_revenue = round_half_up(nightly_rate * 30 * occupancy)

        seasonal = tuple(
            SeasonalRevenue(
                month=index + 1,
                revenue=round_half_up(monthly_revenue * factor),
                occupancy=round_half_up(occupancy * 100 * factor),
            )
            for index, factor in enumerate(mc.SEASONALITY)
        )

        cleaning = round_half_up(surface * mc.CLEANING_COST_PER_SQM)
        management = monthly_revenue * mc.SHORT_TERM_MANAGEMENT_RATE
        fees = AirbnbFees(
            cleaning=cleaning,
            management=management,
            supplies=mc.MONTHLY_SUPPLIES,
            utilities=mc.MONTHLY_UTILITIES,
            total=cleaning * mc.CLEANINGS_PER_MONTH + management + mc.MONTHLY_SUPPLIES + mc.MONTHLY_UTILITIES,
        )

        return ShortTermMarketData(
            monthly_revenue=monthly_revenue,
            net_monthly_revenue=monthly_revenue - fees.total,
            fees=fees,
            seasonal_revenues=seasonal,
            city=_display_city(city_key),
            unit_type=(unit_type or "t2").strip().upper(),
            surface=surface,
            nightly_rate=nightly_rate,
            occupancy_rate=occupancy * 100,
            annual_revenue=monthly_revenue * 12,
            multiplier_vs_long_term=multiplier,
            data_source="estimation",
            last_updated=self._clock(),
        )


class MarketDataService:
    """Cached access to rent and short-term estimates."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        cache: TTLCache | None = None,
        rent_estimator: RentEstimator | None = None,
        airbnb_estimator: AirbnbEstimator | None = None,
    ):
        self.settings = settings or get_settings()
        self.cache = cache or TTLCache(
            default_ttl=self.settings.rent_data_ttl_seconds,
            max_entries=self.settings.cache_max_entries,
        )
        self.rent_estimator = rent_estimator or RentEstimator()
        self.airbnb_estimator = airbnb_estimator or AirbnbEstimator()

    def get_rent_data(self, city: str, unit_type: str, surface: float) -> LongTermMarketData:
        key = ("rent", normalize_city(city), unit_type.lower(), float(surface))
        cached = self.cache.get(key)
        if cached is not None:
            log.debug("market_data_cache_hit", key=key)
            return cached

        data = self.rent_estimator.estimate(city, unit_type, surface)
        self.cache.set(key, data, ttl=self.settings.rent_data_ttl_seconds)
        return data

    def get_airbnb_data(self, city: str, unit_type: str, surface: float) -> ShortTermMarketData:
        key = ("airbnb", normalize_city(city), unit_type.lower(), float(surface))
        cached = self.cache.get(key)
        if cached is not None:
            log.debug("market_data_cache_hit", key=key)
            return cached

        rent = self.get_rent_data(city, unit_type, surface)
        data = self.airbnb_estimator.estimate(city, unit_type, surface, rent.total_monthly_rent)
        self.cache.set(key, data, ttl=self.settings.airbnb_data_ttl_seconds)
        return data

    def get_market_data(
        self, config: SimulationConfig
    ) -> LongTermMarketData | ShortTermMarketData | None:
        """Payload for the configuration's mode, or None when unavailable."""
        try:
            if config.is_short_term:
                return self.get_airbnb_data(config.city, config.unit_type, config.surface)
            return self.get_rent_data(config.city, config.unit_type, config.surface)
        except MarketDataError as e:
            log.warning(
                "market_data_unavailable",
                city=config.city,
                mode=config.exploitation_mode.value,
                error=str(e),
            )
            return None

    def sweep_expired(self) -> int:
        """Drop expired cache entries; meant for a periodic scheduler."""
        removed = self.cache.sweep()
        if removed:
            log.info("market_data_cache_swept", removed=removed)
        return removed
