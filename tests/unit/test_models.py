"""Unit tests for pydantic domain models."""

import pytest
from pydantic import ValidationError

from amcapital.domain.models import (
    CalculationResult,
    ContactRequest,
    ExploitationMode,
    LongTermMarketData,
    ShortTermMarketData,
    SimulationConfig,
    parse_market_data,
)


class TestSimulationConfig:
    def test_accepts_camel_case_and_aliases(self):
        config = SimulationConfig.model_validate({
            "price": 200000,
            "surface": 40,
            "rooms": "T3",
            "exploitationType": "short",
            "city": "Lyon",
        })
        assert config.unit_type == "t3"
        assert config.exploitation_mode is ExploitationMode.SHORT_TERM
        assert config.is_short_term

    def test_defaults(self):
        config = SimulationConfig(price=100000, surface=30)
        assert config.unit_type == "t2"
        assert config.exploitation_mode is ExploitationMode.LONG_TERM
        assert config.city == "paris"

    def test_is_frozen(self, long_term_config):
        with pytest.raises(ValidationError):
            long_term_config.price = 1

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            SimulationConfig(price=100000, surface=30, exploitation_mode="seasonal")


class TestMarketData:
    def test_camel_case_payload(self):
        data = parse_market_data(
            {"totalMonthlyRent": 1900, "rentPerSqm": 30, "dataSource": "api"},
            "long",
        )
        assert isinstance(data, LongTermMarketData)
        assert data.total_monthly_rent == 1900
        assert data.rent_per_square_meter == 30
        assert data.data_source == "api"

    def test_short_term_variant(self):
        data = parse_market_data(
            {"monthlyRevenue": 3200, "fees": {"cleaning": 100, "total": 720}},
            ExploitationMode.SHORT_TERM,
        )
        assert isinstance(data, ShortTermMarketData)
        assert data.fees.total == 720

    def test_mode_in_payload_wins(self):
        data = parse_market_data({"mode": "short_term", "monthlyRevenue": 3000}, "long_term")
        assert isinstance(data, ShortTermMarketData)

    def test_unknown_keys_ignored(self):
        data = parse_market_data({"monthlyRent": 1500, "provider": "x"}, "long_term")
        assert data.monthly_rent == 1500


class TestCalculationResult:
    def test_payload_is_camel_case(self):
        result = CalculationResult(
            monthly_rent=1750, gross_return=7.04, net_return=3.06, cashflow=-788,
            total_costs=298250, notary_fees=22500, commission_fees=21250,
            architect_fees=4500, monthly_charges=990, taxes_and_insurance=346,
            management_fees=140, vacancy_loss=88, roi=-15.85, payback_period=6.54,
        )
        payload = result.to_payload()
        assert payload["monthlyRent"] == 1750
        assert payload["grossReturn"] == 7.04
        assert payload["taxesAndInsurance"] == 346
        assert payload["paybackPeriod"] == 6.54


class TestContactRequest:
    def test_aliases_and_strip(self, valid_contact):
        request = ContactRequest.model_validate({**valid_contact, "firstName": "  Claire "})
        assert request.first_name == "Claire"
        assert request.project_type == "investment"

    def test_invalid_email(self, valid_contact):
        with pytest.raises(ValidationError):
            ContactRequest.model_validate({**valid_contact, "email": "claire@"})
