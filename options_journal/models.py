"""Data models for option trades and realized combos."""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Optional, Tuple

from options_journal.config import OSI_STRIKE_SCALE


@dataclass(frozen=True)
class OptionInfo:
    """Structured attributes decoded from an option symbol."""
    underlying: str
    expiry: str  # YYYY-MM-DD
    strike: float
    type: str  # "CALL" or "PUT"

    @property
    def osi_symbol(self) -> str:
        """Re-encode as 'ROOT YYMMDD{C|P}SSSSSSSS', e.g. 'SPY 240315C00500000'."""
        yy, mm, dd = self.expiry[2:4], self.expiry[5:7], self.expiry[8:10]
        strike = int(round(self.strike * OSI_STRIKE_SCALE))
        return f"{self.underlying} {yy}{mm}{dd}{self.type[0]}{strike:08d}"


@dataclass(frozen=True)
class Trade:
    """A single option execution extracted from a statement."""
    date: str  # YYYY-MM-DD, time discarded
    symbol: str  # raw identifier as it appeared in the source
    underlying: str
    quantity: float  # + bought, - sold
    price: float
    commission: float  # always >= 0
    type: str  # "CALL" or "PUT"
    strike: float
    expiry: str  # YYYY-MM-DD
    action: str  # "BUY" or "SELL"
    proceeds: float  # + cash in, - cash out

    @property
    def series_key(self) -> Tuple[str, str, float, str]:
        return (self.underlying, self.expiry, self.strike, self.type)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Trade":
        return cls(
            date=data["date"],
            symbol=data["symbol"],
            underlying=data["underlying"],
            quantity=float(data["quantity"]),
            price=float(data["price"]),
            commission=float(data["commission"]),
            type=data["type"],
            strike=float(data["strike"]),
            expiry=data["expiry"],
            action=data["action"],
            proceeds=float(data["proceeds"]),
        )


@dataclass(frozen=True)
class ComboMetrics:
    """Aggregate cash figures for one combo."""
    total_proceeds: float
    total_commission: float
    net_realized: float
    entry_type: str  # "Credit" or "Debit"
    entry_amount: float


@dataclass(frozen=True)
class Combo:
    """A group of realized trades on one underlying and expiry."""
    id: str
    name: str  # e.g. "SPY 500/505 CALL Spread"
    strategy: str  # e.g. "Call Spread", "Iron Condor"
    underlying: str
    entry_type: str
    entry_amount: float
    credit_day: str
    debit_day: str
    commission: float
    net_realized: float
    legs: Tuple[Trade, ...]  # date-ascending
    open_date: str
    close_date: str

    # Stored field name -> attribute name
    _STORED_FIELDS = (
        ("id", "id"),
        ("name", "name"),
        ("strategy", "strategy"),
        ("underlying", "underlying"),
        ("entryType", "entry_type"),
        ("entryAmount", "entry_amount"),
        ("creditDay", "credit_day"),
        ("debitDay", "debit_day"),
        ("commission", "commission"),
        ("netRealized", "net_realized"),
        ("openDate", "open_date"),
        ("closeDate", "close_date"),
    )

    @property
    def expiry(self) -> Optional[str]:
        return self.legs[0].expiry if self.legs else None

    def to_dict(self) -> dict:
        """
        Serialize with the stored camelCase field names so saved combos can
        be handed back to `from_dict` unchanged.
        """
        data = {stored: getattr(self, attr) for stored, attr in self._STORED_FIELDS}
        data["legs"] = [leg.to_dict() for leg in self.legs]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Combo":
        kwargs = {attr: data[stored] for stored, attr in cls._STORED_FIELDS}
        kwargs["legs"] = tuple(Trade.from_dict(leg) for leg in data.get("legs", []))
        return cls(**kwargs)
