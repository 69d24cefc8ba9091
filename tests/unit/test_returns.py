"""Unit tests for the investment return calculator."""

import pytest

from amcapital.domain.calculator.returns import (
    additional_short_term_fees,
    calculate_investment_returns,
    total_investment_cost,
)
from amcapital.domain.models import AirbnbFees, ShortTermMarketData, SimulationConfig


class TestAcquisitionCosts:
    def test_long_term_costs(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        assert result.notary_fees == 22500
        assert result.commission_fees == 21250
        assert result.architect_fees == 4500
        assert result.total_costs == 298250

    def test_short_term_architect_rate(self, short_term_config):
        result = calculate_investment_returns(short_term_config, 3675)
        assert result.architect_fees == 6000
        assert result.total_costs == 299750

    def test_total_investment_cost_unrounded(self, long_term_config):
        assert total_investment_cost(long_term_config) == pytest.approx(298250)


class TestMonthlyCharges:
    def test_long_term_breakdown(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        assert result.management_fees == 140
        assert result.vacancy_loss == 88
        assert result.taxes_and_insurance == 346
        assert result.monthly_charges == 990

    def test_no_vacancy_short_term(self, short_term_config):
        result = calculate_investment_returns(short_term_config, 3000)
        assert result.vacancy_loss == 0
        assert result.management_fees == 240

    def test_short_term_market_fees_added(self, short_term_config):
        data = ShortTermMarketData(monthly_revenue=3000, fees=AirbnbFees(total=1200))
        without = calculate_investment_returns(short_term_config, 3000)
        with_fees = calculate_investment_returns(short_term_config, 3000, data)
        assert with_fees.monthly_charges - without.monthly_charges == pytest.approx(100, abs=1)

    def test_additional_fees_ignored_for_long_term(self, long_term_config):
        data = ShortTermMarketData(monthly_revenue=3000, fees=AirbnbFees(total=1200))
        assert additional_short_term_fees(long_term_config, data) == 0.0


class TestReturns:
    def test_yields(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        assert result.gross_return == 7.04
        assert result.net_return == 3.06

    def test_cashflow_keeps_sign(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        assert result.cashflow < 0
        assert -800 < result.cashflow < -770

    def test_roi_follows_cashflow(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        assert result.roi < 0
        expected = result.cashflow * 12 / (298250 * 0.2) * 100
        assert result.roi == pytest.approx(expected, abs=0.05)

    def test_payback_period(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        assert result.payback_period == 6.54

    def test_payback_floor_when_income_negative(self):
        config = SimulationConfig(price=500000, surface=20, city="limoges")
        result = calculate_investment_returns(config, 100)
        # Denominator is floored at 1
        assert result.payback_period == pytest.approx(500000 * 1.175 * 0.2 + 20 * 90 * 0.2, rel=1e-3)

    def test_zero_revenue(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 0)
        assert result.monthly_rent == 0
        assert result.gross_return == 0.0
        assert result.net_return < 0
        assert result.cashflow < 0

    def test_higher_rent_improves_everything(self, long_term_config):
        low = calculate_investment_returns(long_term_config, 1500)
        high = calculate_investment_returns(long_term_config, 2500)
        assert high.gross_return > low.gross_return
        assert high.net_return > low.net_return
        assert high.cashflow > low.cashflow

    def test_outputs_are_rounded(self, short_term_config):
        result = calculate_investment_returns(short_term_config, 3674.9999999999995)
        assert isinstance(result.monthly_rent, int)
        assert result.monthly_rent == 3675
        assert result.gross_return == 14.71
