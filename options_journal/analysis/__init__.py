"""
options_journal.analysis: combo tables, KPIs and weekly summaries.
"""
from .metrics import (
    combos_to_frame,
    legs_to_frame,
    export_frame,
    compute_kpis,
    summarize_by_strategy,
)
from .summary import generate_weekly_summary
