"""Unit tests for option symbol decoding."""

from __future__ import annotations

import pytest

from options_journal.models import OptionInfo
from options_journal.parsers.symbols import decode


# ---------------------------------------------------------------------------
# Compact (OSI) form
# ---------------------------------------------------------------------------

class TestCompactForm:
    def test_spy_call(self):
        info = decode("SPY 240315C00500000")
        assert info == OptionInfo("SPY", "2024-03-15", 500.0, "CALL")

    def test_fractional_strike(self):
        info = decode("QQQ 250620P00432500")
        assert info.strike == 432.5
        assert info.type == "PUT"
        assert info.expiry == "2025-06-20"

    def test_extra_whitespace_collapsed(self):
        info = decode("  SPY    240315C00500000 ")
        assert info.underlying == "SPY"

    @pytest.mark.parametrize("symbol", [
        "SPY 240315C00500000",
        "IWM 251219P00187500",
        "TSLA 260116C01250000",
    ])
    def test_reencode_round_trip(self, symbol):
        info = decode(symbol)
        again = decode(info.osi_symbol)
        assert again.underlying == info.underlying
        assert again.type == info.type
        assert round(again.strike, 2) == round(info.strike, 2)
        assert info.osi_symbol == symbol


# ---------------------------------------------------------------------------
# Spaced forms
# ---------------------------------------------------------------------------

class TestSpacedForms:
    def test_spaced_put(self):
        assert decode("DE 15JAN27 300 P") == OptionInfo("DE", "2027-01-15", 300.0, "PUT")

    def test_index_root_with_digits(self):
        info = decode("SPXW 27JAN26 6845 P")
        assert info.underlying == "SPXW"
        assert info.expiry == "2026-01-27"
        assert info.strike == 6845.0

    def test_contiguous_token(self):
        info = decode("AAPL 06JUN25 220 P")
        assert info == OptionInfo("AAPL", "2025-06-06", 220.0, "PUT")

    def test_single_digit_day(self):
        info = decode("AAPL 6JUN25 220.5 C")
        assert info.expiry == "2025-06-06"
        assert info.strike == 220.5
        assert info.type == "CALL"

    def test_unknown_month_rejected(self):
        assert decode("DE 15XYZ27 300 P") is None


# ---------------------------------------------------------------------------
# Non-option text
# ---------------------------------------------------------------------------

class TestNoMatch:
    @pytest.mark.parametrize("symbol", [
        "", None, "AAPL", "EUR.USD", "SPY 240315X00500000", "SPY 15JAN27 300",
        "SPY 240315C500",
    ])
    def test_returns_none(self, symbol):
        assert decode(symbol) is None
