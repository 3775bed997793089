"""
transactions.py
---------------
Position tracking over extracted option trades: keep only contract series
that are fully closed by the end of the statement.
"""
import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from options_journal.config import FLAT_TOLERANCE
from options_journal.models import Trade

logger = logging.getLogger(__name__)

SeriesKey = Tuple[str, str, float, str]


def is_flat(position: float) -> bool:
    return abs(position) < FLAT_TOLERANCE


def _is_tentatively_realized(before: float, qty: float, after: float) -> bool:
    """
    True if the trade belongs to a position lifecycle:
    opens from flat, adds to, reduces/flips, or closes a position.
    """
    if is_flat(before):
        return not is_flat(qty)  # opening
    if (before > 0) != (qty > 0):
        return True  # reducing, flipping or closing
    if is_flat(after):
        return True
    return not is_flat(qty)  # adding to an open position


def final_positions(trades: Sequence[Trade]) -> Dict[SeriesKey, float]:
    """Net signed quantity per contract series over all *trades*."""
    totals: Dict[SeriesKey, float] = defaultdict(float)
    for trade in trades:
        totals[trade.series_key] += trade.quantity
    return dict(totals)


def filter_realized(trades: Sequence[Trade]) -> List[Trade]:
    """
    Return the trades of every contract series that ends flat, in input order.
    *trades* must be date-ascending for the running positions to be meaningful.

    Two passes: first mark each trade against the running position of its
    series, then drop whole series whose final position is not flat. A
    series can look closed mid-stream and reopen later, so the second pass
    cannot be folded into the first.
    """
    running: Dict[SeriesKey, float] = defaultdict(float)
    tentative = []
    for trade in trades:
        key = trade.series_key
        before = running[key]
        after = before + trade.quantity
        running[key] = after
        if _is_tentatively_realized(before, trade.quantity, after):
            tentative.append(trade)

    finals = final_positions(trades)
    realized = [t for t in tentative if is_flat(finals.get(t.series_key, 0.0))]

    open_series = sum(1 for pos in finals.values() if not is_flat(pos))
    logger.info(
        "Realized %d of %d trades (%d series still open)",
        len(realized), len(trades), open_series,
    )
    return realized
