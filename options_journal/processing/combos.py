"""
combos.py
---------
Group realized trades into combos (one underlying + expiry), compute their
cash metrics, classify the strategy and build a readable name.
"""
import logging
from collections import defaultdict
from typing import Dict, List, Sequence, Tuple

from options_journal.models import Combo, ComboMetrics, Trade

logger = logging.getLogger(__name__)


def format_strike(strike) -> str:
    """Return strike as integer text if whole, else rounded to 2 decimals."""
    f = float(strike)
    return str(int(f)) if f.is_integer() else str(round(f, 2))


def calculate_combo_metrics(legs: Sequence[Trade]) -> ComboMetrics:
    """
    Net realized = proceeds - commission over every leg. The entry is the net
    proceeds of the legs traded on the opening day: positive is a Credit.
    """
    total_proceeds = sum(t.proceeds for t in legs)
    total_commission = sum(t.commission for t in legs)
    net_realized = total_proceeds - total_commission

    open_date = min(t.date for t in legs)
    opening_proceeds = sum(t.proceeds for t in legs if t.date == open_date)

    return ComboMetrics(
        total_proceeds=total_proceeds,
        total_commission=total_commission,
        net_realized=net_realized,
        entry_type="Credit" if opening_proceeds > 0 else "Debit",
        entry_amount=abs(opening_proceeds),
    )


def _leg_keys(legs: Sequence[Trade]) -> Dict[Tuple[float, str], float]:
    """Distinct (strike, type) legs with their net quantity."""
    net: Dict[Tuple[float, str], float] = defaultdict(float)
    for t in legs:
        net[(t.strike, t.type)] += t.quantity
    return dict(net)


def determine_strategy(legs: Sequence[Trade]) -> str:
    # A leg netting to zero quantity still counts: closed legs are the norm here
    keys = list(_leg_keys(legs))
    num_calls = sum(1 for _, opt_type in keys if opt_type == "CALL")
    num_puts = sum(1 for _, opt_type in keys if opt_type == "PUT")
    num_legs = num_calls + num_puts

    if num_legs == 1:
        return "Single Call" if num_calls == 1 else "Single Put"

    if num_legs == 2:
        if num_calls == 2:
            return "Call Spread"
        if num_puts == 2:
            return "Put Spread"
        strikes = {strike for strike, _ in keys}
        return "Straddle" if len(strikes) == 1 else "Strangle"

    if num_legs == 4:
        if num_calls == 2 and num_puts == 2:
            return "Iron Condor"
        if num_calls == 4:
            return "Call Condor"
        if num_puts == 4:
            return "Put Condor"

    return "Multi-leg Combo" if num_legs > 2 else "Complex Strategy"


def generate_combo_name(legs: Sequence[Trade]) -> str:
    """
    'SPY 500 CALL', 'SPY 500/505 CALL Spread', 'SPY 480/490/510/520 Iron Condor'
    or 'SPY 480/500/510 Combo'. Four strikes always read as an Iron Condor,
    whatever the call/put mix; the strategy field carries the exact label.
    """
    underlying = legs[0].underlying
    keys = list(_leg_keys(legs))
    strikes = sorted({strike for strike, _ in keys})
    types = sorted({opt_type for _, opt_type in keys})
    joined = "/".join(format_strike(s) for s in strikes)

    if len(keys) == 1:
        strike, opt_type = keys[0]
        return f"{underlying} {format_strike(strike)} {opt_type}"
    if len(strikes) == 2 and len(types) == 1:
        return f"{underlying} {joined} {types[0]} Spread"
    if len(strikes) == 4:
        return f"{underlying} {joined} Iron Condor"
    return f"{underlying} {joined} Combo"


def build_combo(combo_id: str, group_trades: Sequence[Trade]) -> Combo:
    legs = sorted(group_trades, key=lambda t: t.date)  # stable on ties
    metrics = calculate_combo_metrics(legs)

    open_date = legs[0].date
    close_date = legs[-1].date
    credits = [t for t in legs if t.proceeds > 0]
    debits = [t for t in legs if t.proceeds < 0]

    return Combo(
        id=combo_id,
        name=generate_combo_name(legs),
        strategy=determine_strategy(legs),
        underlying=legs[0].underlying,
        entry_type=metrics.entry_type,
        entry_amount=metrics.entry_amount,
        credit_day=credits[0].date if credits else open_date,
        debit_day=debits[-1].date if debits else close_date,
        commission=metrics.total_commission,
        net_realized=metrics.net_realized,
        legs=tuple(legs),
        open_date=open_date,
        close_date=close_date,
    )


def group_into_combos(trades: Sequence[Trade]) -> List[Combo]:
    """Partition trades by (underlying, expiry), first-seen order, one Combo each."""
    groups: Dict[Tuple[str, str], List[Trade]] = {}
    for trade in trades:
        groups.setdefault((trade.underlying, trade.expiry), []).append(trade)

    combos = [
        build_combo(f"combo_{n}", group_trades)
        for n, group_trades in enumerate(groups.values(), start=1)
    ]
    logger.info("Grouped %d trades into %d combos", len(trades), len(combos))
    return combos
