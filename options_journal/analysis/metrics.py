"""
metrics.py
----------
Combo tables and portfolio KPIs.
"""
from typing import Sequence

import numpy as np
import pandas as pd

from options_journal import config
from options_journal.models import Combo

COMBO_COLUMNS = [
    "ID", "NAME", "STRATEGY", "UNDERLYING", "EXPIRATION", "ENTRY TYPE",
    "ENTRY AMOUNT", "CREDIT DAY", "DEBIT DAY", "OPEN DATE", "CLOSE DATE",
    "DAYS_HELD", "LEGS", "COMMISSION", "NET REALIZED",
]

LEG_COLUMNS = [
    "COMBO ID", "DATE", "SYMBOL", "UNDERLYING", "EXPIRATION", "STRIKE",
    "OPTION TYPE", "ACTION", "QTY", "PRICE", "COMMISSION", "PROCEEDS",
]


def combos_to_frame(combos: Sequence[Combo]) -> pd.DataFrame:
    """One row per combo with parsed dates and DAYS_HELD."""
    rows = [
        [
            c.id, c.name, c.strategy, c.underlying, c.expiry, c.entry_type,
            c.entry_amount, c.credit_day, c.debit_day, c.open_date,
            c.close_date, None, len(c.legs), c.commission, c.net_realized,
        ]
        for c in combos
    ]
    df = pd.DataFrame(rows, columns=COMBO_COLUMNS)
    for col in ["OPEN DATE", "CLOSE DATE", "CREDIT DAY", "DEBIT DAY"]:
        df[col] = pd.to_datetime(df[col])
    df["DAYS_HELD"] = (df["CLOSE DATE"] - df["OPEN DATE"]).dt.days
    return df


def legs_to_frame(combos: Sequence[Combo]) -> pd.DataFrame:
    """Every leg of every combo, tagged with its combo id."""
    rows = [
        [
            c.id, t.date, t.symbol, t.underlying, t.expiry, t.strike,
            t.type, t.action, t.quantity, t.price, t.commission, t.proceeds,
        ]
        for c in combos
        for t in c.legs
    ]
    return pd.DataFrame(rows, columns=LEG_COLUMNS)


def export_frame(combos: Sequence[Combo]) -> pd.DataFrame:
    """
    The combo export table: formatted amounts plus a closing
    'Total Net Realized' row.
    """
    rows = [
        [
            c.name, c.strategy, c.entry_type, f"{c.entry_amount:.2f}",
            c.open_date, c.close_date, f"{c.commission:.2f}",
            f"{c.net_realized:.2f}",
        ]
        for c in combos
    ]
    total = sum(c.net_realized for c in combos)
    rows.append(["", "", "", "", "", "", config.TOTAL_LABEL, f"{total:.2f}"])
    return pd.DataFrame(rows, columns=config.EXPORT_COLUMNS)


def compute_kpis(df: pd.DataFrame) -> dict:
    """
    Count, net realized, commission, win rate and average result per combo
    from a `combos_to_frame` table. Ratios are NaN for an empty table.
    """
    total_combos = len(df)
    net_realized = df["NET REALIZED"].sum() if total_combos else 0.0
    total_commission = df["COMMISSION"].sum() if total_combos else 0.0
    if total_combos:
        win_rate = (df["NET REALIZED"] > 0).mean() * 100
        avg_net = df["NET REALIZED"].mean()
        avg_days_held = df["DAYS_HELD"].mean()
    else:
        win_rate = avg_net = avg_days_held = np.nan
    return {
        "total_combos": total_combos,
        "net_realized": float(net_realized),
        "total_commission": float(total_commission),
        "win_rate": win_rate,
        "avg_net_realized": avg_net,
        "avg_days_held": avg_days_held,
    }


def summarize_by_strategy(df: pd.DataFrame) -> pd.DataFrame:
    """Combo count, net realized and win rate per strategy label."""
    if df.empty:
        return pd.DataFrame(columns=["STRATEGY", "COMBOS", "NET REALIZED", "WIN RATE"])
    summary = df.groupby("STRATEGY").agg(
        COMBOS=("NET REALIZED", "count"),
        NET_REALIZED=("NET REALIZED", "sum"),
        WINS=("NET REALIZED", lambda x: (x > 0).sum()),
    )
    summary["WIN RATE"] = (summary["WINS"] / summary["COMBOS"] * 100).round(2)
    summary = summary.rename(columns={"NET_REALIZED": "NET REALIZED"})
    summary["NET REALIZED"] = summary["NET REALIZED"].round(2)
    summary = summary.drop(columns="WINS").reset_index()
    return summary.sort_values("NET REALIZED", ascending=False, ignore_index=True)
