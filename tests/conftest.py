"""Shared fixtures: trade factory and a small IB statement."""

from __future__ import annotations

import pytest

from options_journal.models import Trade


def make_trade(
    date: str = "2024-03-01",
    underlying: str = "SPY",
    expiry: str = "2024-03-15",
    strike: float = 500.0,
    type: str = "CALL",
    quantity: float = 1,
    proceeds: float = 0.0,
    commission: float = 0.0,
    price: float = 0.0,
) -> Trade:
    symbol = f"{underlying} {expiry[2:4]}{expiry[5:7]}{expiry[8:10]}{type[0]}{int(strike * 1000):08d}"
    return Trade(
        date=date,
        symbol=symbol,
        underlying=underlying,
        quantity=quantity,
        price=price,
        commission=commission,
        type=type,
        strike=strike,
        expiry=expiry,
        action="BUY" if quantity > 0 else "SELL",
        proceeds=proceeds,
    )


@pytest.fixture
def trade():
    return make_trade


TRADES_HEADER = [
    "Trades", "Header", "DataDiscriminator", "Asset Category", "Currency",
    "Symbol", "Date/Time", "Quantity", "T. Price", "C. Price", "Proceeds",
    "Comm/Fee", "Basis", "Realized P/L", "MTM P/L", "Code",
]


def trade_row(symbol, when, qty, price, proceeds, comm,
              category="Equity and Index Options", kind="Order"):
    return [
        "Trades", "Data", kind, category, "USD", symbol, when, qty, price,
        "0", proceeds, comm, "0", "0", "0", "O",
    ]


@pytest.fixture
def statement_rows():
    """A call spread that closes, a put that stays open, and noise rows."""
    return [
        ["Statement", "Header", "Field Name", "Field Value"],
        ["Statement", "Data", "Title", "Activity Statement"],
        TRADES_HEADER,
        trade_row("AAPL", "2024-03-01, 09:45:00", "10", "170.5", "-1705", "-1",
                  category="Stocks"),
        trade_row("SPY 240315C00500000", "2024-03-01, 10:02:11", "-1", "2.00", "200", "-1.05"),
        trade_row("SPY 240315C00505000", "2024-03-01, 10:02:11", "1", "0.50", "-50", "-1.05"),
        trade_row("SPY 240315C00500000", "2024-03-08, 14:30:00", "1", "0.20", "-20", "-1.05"),
        trade_row("SPY 240315C00505000", "2024-03-08, 14:30:00", "-1", "0.05", "5", "-1.05"),
        trade_row("DE 15JAN27 300 P", "2024-03-04, 11:00:00", "-1", "4.50", "450", "-0.70"),
        ["Trades", "SubTotal", "", "Equity and Index Options", "USD", "SPY", "", "0"],
        ["Trades", "Total", "", "Equity and Index Options", "USD", "", "", ""],
        ["Open Positions", "Header", "DataDiscriminator", "Asset Category", "Symbol"],
        ["Open Positions", "Data", "Summary", "Equity and Index Options", "DE 15JAN27 300 P"],
    ]
