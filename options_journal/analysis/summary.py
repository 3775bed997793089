"""
summary.py
----------
Weekly realized P&L table keyed on combo close dates.
"""
import numpy as np
import pandas as pd


def generate_weekly_summary(df: pd.DataFrame) -> pd.DataFrame:
    """
    Group combos by the Monday of the week they closed in. Every week from
    the first close through the last close appears, even without closes.
    """
    columns = ["WEEK", "NET REALIZED", "COMBOS", "WINS", "WIN RATE"]
    if df.empty:
        return pd.DataFrame(columns=columns)

    df = df.copy()
    df["WEEK"] = df["CLOSE DATE"].dt.to_period("W").apply(lambda p: p.start_time.date())

    all_weeks = (
        pd.period_range(start=df["WEEK"].min(), end=df["WEEK"].max(), freq="W")
        .map(lambda p: p.start_time.date())
    )

    weekly = df.groupby("WEEK").agg(
        net_realized=("NET REALIZED", "sum"),
        combos=("NET REALIZED", "count"),
        wins=("NET REALIZED", lambda x: (x > 0).sum()),
    )
    weekly = weekly.reindex(all_weeks)
    weekly["net_realized"] = weekly["net_realized"].fillna(0).round(2)
    weekly["combos"] = weekly["combos"].fillna(0).astype(int)
    weekly["wins"] = weekly["wins"].fillna(0).astype(int)
    # NaN for weeks without closes
    weekly["win_rate"] = np.where(
        weekly["combos"] > 0,
        weekly["wins"] / weekly["combos"].replace(0, np.nan) * 100,
        np.nan,
    )
    weekly["win_rate"] = weekly["win_rate"].round(2)

    weekly.index.name = "WEEK"
    weekly = weekly.reset_index()
    weekly.columns = columns
    return weekly
