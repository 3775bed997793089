"""
Interactive Brokers (IB) activity statement parser: option executions from
the Trades section.
"""
import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from options_journal import config
from options_journal.models import Trade
from .base import BaseBrokerParser, normalize_date, parse_currency
from .symbols import decode

logger = logging.getLogger(__name__)


def read_statement_rows(csv_path) -> List[List[str]]:
    """Read an IB CSV into rows of text cells, skipping blank lines."""
    csv_path = Path(csv_path)
    with csv_path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        return [row for row in reader if any(cell.strip() for cell in row)]


class IBTradeExtractor(BaseBrokerParser):
    """
    Walks statement rows in order. A Trades header row names the columns
    of every Trades data row after it, until the next header replaces it.

        Trades,Header,DataDiscriminator,Asset Category,Currency,Symbol,Date/Time,...
        Trades,Data,Order,Equity and Index Options,USD,SPY 240315C00500000,"2024-03-01, 10:02:11",...

    The header is the only state kept, so rows may be fed in several
    batches as long as they arrive in file order.
    """

    def __init__(self, section: str = config.TRADES_SECTION):
        self.section = section
        self.headers: List[str] = []

    def feed(self, rows: Iterable[Sequence[str]]) -> List[Trade]:
        trades = []
        for row in rows:
            trade = self.parse_row(row)
            if trade is not None:
                trades.append(trade)
        return trades

    def parse_row(self, row):
        if not row or len(row) < 2 or row[0] != self.section:
            return None
        if row[1] == config.HEADER_ROW:
            self.headers = [str(cell).strip() for cell in row]
            return None
        if row[1] != config.DATA_ROW:
            return None
        if len(row) < 3 or row[2] not in config.DATA_SUBTYPES:
            return None

        data = self._map_row(row)
        category = str(data.get(config.COL_ASSET_CATEGORY) or "")
        if config.OPTION_ASSET_MARKER not in category.lower():
            return None
        return self._to_trade(data)

    def _map_row(self, row) -> Dict[str, str]:
        """Pair header names with cell values by position."""
        data = {}
        for idx, header in enumerate(self.headers):
            data[header] = row[idx] if idx < len(row) else ""
        return data

    def _to_trade(self, data: Dict[str, str]) -> Optional[Trade]:
        symbol = (data.get(config.COL_SYMBOL) or "").strip()
        info = decode(symbol)
        if info is None:
            logger.debug("Skipping row with undecodable symbol %r", symbol)
            return None

        date = normalize_date(data.get(config.COL_DATE_TIME))
        if date is None:
            logger.debug("Skipping %s: missing or unreadable date", symbol)
            return None

        qty = parse_currency(data.get(config.COL_QUANTITY))
        if qty == 0:
            logger.debug("Skipping %s on %s: zero quantity", symbol, date)
            return None

        return Trade(
            date=date,
            symbol=symbol,
            underlying=info.underlying,
            quantity=qty,
            price=parse_currency(data.get(config.COL_PRICE)),
            commission=abs(parse_currency(data.get(config.COL_COMMISSION))),
            type=info.type,
            strike=info.strike,
            expiry=info.expiry,
            action="BUY" if qty > 0 else "SELL",
            proceeds=parse_currency(data.get(config.COL_PROCEEDS)),
        )


def extract(rows: Iterable[Sequence[str]]) -> List[Trade]:
    """Return the option executions found in *rows*, in file order."""
    trades = IBTradeExtractor().feed(rows)
    logger.info("Extracted %d option trades", len(trades))
    return trades
