"""Unit tests for multi-year projections."""

from amcapital.application.services.projections import (
    PROJECTION_COLUMNS,
    calculate_yearly_projections,
    projections_to_dataframe,
)
from amcapital.domain.calculator.returns import calculate_investment_returns


class TestYearlyProjections:
    def test_first_year(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        first = calculate_yearly_projections(long_term_config, result)[0]
        assert first.year == 1
        assert first.rent == 21420
        assert first.charges == 12118
        assert first.net_income == 9302
        assert first.cumulative_return == 9302
        assert first.property_value == 257500

    def test_length_and_growth(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        projections = calculate_yearly_projections(long_term_config, result, years=15)
        assert len(projections) == 15
        assert [p.year for p in projections] == list(range(1, 16))
        assert all(b.rent > a.rent for a, b in zip(projections, projections[1:]))
        assert all(b.property_value > a.property_value for a, b in zip(projections, projections[1:]))

    def test_cumulative_is_running_sum(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        projections = calculate_yearly_projections(long_term_config, result, years=5)
        assert abs(projections[-1].cumulative_return - sum(p.net_income for p in projections)) <= 2

    def test_no_growth(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        projections = calculate_yearly_projections(
            long_term_config, result, years=3, rent_growth=0.0, property_growth=0.0
        )
        assert {p.rent for p in projections} == {21000}
        assert {p.property_value for p in projections} == {250000}

    def test_zero_years(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        assert calculate_yearly_projections(long_term_config, result, years=0) == []


class TestProjectionsDataFrame:
    def test_french_columns(self, long_term_config):
        result = calculate_investment_returns(long_term_config, 1750)
        df = projections_to_dataframe(calculate_yearly_projections(long_term_config, result, years=4))
        assert list(df.columns) == list(PROJECTION_COLUMNS.values())
        assert len(df) == 4
        assert df["Année"].tolist() == [1, 2, 3, 4]

    def test_empty(self):
        df = projections_to_dataframe([])
        assert df.empty
        assert "Loyers" in df.columns
