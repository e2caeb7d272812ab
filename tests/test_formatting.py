"""Tests for display formatting, the results table and summary cards."""

import math

import pytest

from cba.config import ReportConfig
from cba.results.formatting import (
    TABLE_COLUMNS,
    format_currency,
    format_ratio,
    results_table,
    summary_cards,
)
from cba.results.metrics import rank


class TestFormatCurrency:
    """Tests for format_currency()."""

    def test_thousands_grouping(self):
        """Whole numbers with grouping."""
        assert format_currency(1234567.4) == "1,234,567"

    def test_symbol(self):
        """Symbol prefixes the value."""
        assert format_currency(300000.0, "$") == "$300,000"

    def test_negative(self):
        """Sign goes before the symbol."""
        assert format_currency(-5000.0, "$") == "-$5,000"

    def test_negative_rounding_to_zero(self):
        """Tiny negatives do not render as -0."""
        assert format_currency(-0.2) == "0"

    @pytest.mark.parametrize("value", [None, math.nan, math.inf, -math.inf])
    def test_non_finite_is_empty(self, value):
        """None, NaN and infinities render as an empty string."""
        assert format_currency(value) == ""


class TestFormatRatio:
    """Tests for format_ratio()."""

    def test_two_decimals(self):
        """Ratios use two decimals."""
        assert format_ratio(1.9375) == "1.94"
        assert format_ratio(2.0) == "2.00"

    @pytest.mark.parametrize("value", [None, math.nan, math.inf])
    def test_absent_is_empty(self, value):
        """Absent ratios never render as n/a."""
        assert format_ratio(value) == ""


class TestResultsTable:
    """Tests for results_table()."""

    def test_columns_and_order(self, demo_store):
        """Table rows follow the ranking."""
        table = results_table(rank(demo_store.list()))

        assert list(table.columns) == TABLE_COLUMNS
        assert list(table["Rank"]) == [1, 2, 3, 4]
        assert table.iloc[0]["Treatment"] == "Precision irrigation upgrade"
        assert table.iloc[0]["NPV"] == "300,000"
        assert table.iloc[0]["BCR"] == "1.94"

    def test_absent_ratios_blank(self, demo_store):
        """Zero-cost control shows empty BCR and ROI cells."""
        control = results_table(rank(demo_store.list())).iloc[-1]

        assert control["BCR"] == ""
        assert control["ROI"] == ""

    def test_empty(self):
        """No treatments gives an empty table with the columns."""
        table = results_table([])

        assert table.empty
        assert list(table.columns) == TABLE_COLUMNS


class TestSummaryCards:
    """Tests for summary_cards()."""

    def test_one_card_per_treatment(self, demo_store):
        """Cards follow the ranking."""
        cards = summary_cards(rank(demo_store.list()))

        assert [c.treatment_id for c in cards] == [3, 4, 2, 1]
        assert [c.rank for c in cards] == [1, 2, 3, 4]

    def test_card_values(self, empty_store):
        """Single record card values."""
        empty_store.add(name="Solo", pv_benefits=100.0, pv_costs=50.0)
        card = summary_cards(rank(empty_store.list()))[0]

        assert card.name == "Solo"
        assert card.npv == "50"
        assert card.bcr == "2.00"
        assert card.roi == "1.00"
        assert card.npv_positive is True

    def test_zero_cost_card(self, empty_store):
        """Zero-cost card has empty ratio fields."""
        empty_store.add(name="Free", pv_benefits=10.0)
        card = summary_cards(rank(empty_store.list()))[0]

        assert card.bcr == ""
        assert card.roi == ""

    def test_stale_records_derived(self, empty_store):
        """Cards and table rows never show a blank NPV after an edit."""
        treatment_id = empty_store.add(name="A", pv_benefits=100.0, pv_costs=50.0)
        rank(empty_store.list())
        empty_store.update(treatment_id, pv_benefits=150.0)

        card = summary_cards(empty_store.list())[0]
        row = results_table(empty_store.list()).iloc[0]

        assert card.npv == "100"
        assert card.bcr == "3.00"
        assert row["NPV"] == "100"

    def test_config_symbol(self, demo_store):
        """Currency symbol comes from config."""
        cards = summary_cards(rank(demo_store.list()), ReportConfig(currency_symbol="$"))

        assert cards[0].pv_benefits == "$620,000"
