"""Tests for combo tables, KPIs and summaries."""

from __future__ import annotations

import math

import pytest

from options_journal.analysis import (
    combos_to_frame,
    compute_kpis,
    export_frame,
    generate_weekly_summary,
    summarize_by_strategy,
)
from options_journal.processing.combos import group_into_combos


@pytest.fixture
def combos(trade):
    return group_into_combos([
        # SPY call spread, +148 after commissions, both legs on 2024-03-01
        trade(date="2024-03-01", strike=500, quantity=-1, proceeds=200, commission=1),
        trade(date="2024-03-01", strike=505, quantity=1, proceeds=-50, commission=1),
        # QQQ single put, -60, closes week of 2024-03-18
        trade(date="2024-03-05", underlying="QQQ", strike=430, type="PUT",
              quantity=1, proceeds=-100),
        trade(date="2024-03-20", underlying="QQQ", strike=430, type="PUT",
              quantity=-1, proceeds=40),
    ])


class TestFrames:
    def test_combos_to_frame(self, combos):
        df = combos_to_frame(combos)
        assert list(df["NAME"]) == ["SPY 500/505 CALL Spread", "QQQ 430 PUT"]
        assert list(df["DAYS_HELD"]) == [0, 15]
        assert list(df["LEGS"]) == [2, 2]

    def test_export_total_row(self, combos):
        df = export_frame(combos)
        assert len(df) == 3
        assert df.iloc[-1]["Net Realized ($)"] == "88.00"
        assert df.iloc[0]["Commission ($)"] == "2.00"

    def test_empty(self):
        df = combos_to_frame([])
        assert df.empty
        assert export_frame([]).iloc[0]["Net Realized ($)"] == "0.00"


class TestKpis:
    def test_values(self, combos):
        kpis = compute_kpis(combos_to_frame(combos))
        assert kpis["total_combos"] == 2
        assert kpis["net_realized"] == 88.0
        assert kpis["total_commission"] == 2.0
        assert kpis["win_rate"] == 50.0

    def test_empty_is_nan(self):
        kpis = compute_kpis(combos_to_frame([]))
        assert kpis["total_combos"] == 0
        assert kpis["net_realized"] == 0.0
        assert math.isnan(kpis["win_rate"])


class TestSummaries:
    def test_by_strategy(self, combos):
        summary = summarize_by_strategy(combos_to_frame(combos))
        assert list(summary["STRATEGY"]) == ["Call Spread", "Single Put"]
        assert list(summary["COMBOS"]) == [1, 1]
        assert list(summary["WIN RATE"]) == [100.0, 0.0]

    def test_weekly_fills_gaps(self, combos):
        weekly = generate_weekly_summary(combos_to_frame(combos))
        assert [str(w) for w in weekly["WEEK"]] == ["2024-02-26", "2024-03-04",
                                                    "2024-03-11", "2024-03-18"]
        assert list(weekly["COMBOS"]) == [1, 0, 0, 1]
        assert list(weekly["NET REALIZED"]) == [148.0, 0.0, 0.0, -60.0]
        assert math.isnan(weekly["WIN RATE"].iloc[1])

    def test_weekly_empty(self):
        assert generate_weekly_summary(combos_to_frame([])).empty
