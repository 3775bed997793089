"""
process_activity.py
-------------------
Orchestrates one statement: extract option trades, keep realized series,
group into combos, and optionally write cleaned CSVs.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence

from options_journal import config
from options_journal.analysis.metrics import export_frame, legs_to_frame
from options_journal.models import Combo, Trade
from options_journal.parsers.ib import extract, read_statement_rows
from options_journal.processing.combos import group_into_combos
from options_journal.processing.transactions import filter_realized

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_NO_OPTION_TRADES = "no_option_trades"
STATUS_NO_REALIZED = "no_realized_positions"


@dataclass
class StatementResult:
    """Output of every pipeline stage for one statement."""
    trades: List[Trade] = field(default_factory=list)
    realized: List[Trade] = field(default_factory=list)
    combos: List[Combo] = field(default_factory=list)

    @property
    def status(self) -> str:
        if not self.trades:
            return STATUS_NO_OPTION_TRADES
        if not self.realized:
            return STATUS_NO_REALIZED
        return STATUS_OK

    @property
    def message(self) -> str:
        if self.status == STATUS_NO_OPTION_TRADES:
            return config.MSG_NO_OPTION_TRADES
        if self.status == STATUS_NO_REALIZED:
            return config.MSG_NO_REALIZED
        return f"{len(self.combos)} realized combos"


def process_rows(rows: Iterable[Sequence[str]]) -> StatementResult:
    """Run the pipeline over already-tokenized statement rows."""
    trades = extract(rows)
    if not trades:
        return StatementResult()
    realized = filter_realized(trades)
    if not realized:
        return StatementResult(trades=trades)
    return StatementResult(trades, realized, group_into_combos(realized))


def write_outputs(combos: Sequence[Combo], out_dir) -> List[Path]:
    """Write combos.csv and legs.csv into *out_dir*; return the paths written."""
    out_path = Path(out_dir)
    out_path.mkdir(parents=True, exist_ok=True)

    combos_file = out_path / config.COMBOS_FILE
    export_frame(combos).to_csv(combos_file, index=False)
    legs_file = out_path / config.LEGS_FILE
    legs_to_frame(combos).to_csv(legs_file, index=False)
    return [combos_file, legs_file]


def process_statement(csv_file, out_dir=None) -> StatementResult:
    """
    Read one IB activity statement CSV and run the pipeline. When *out_dir*
    is given and combos were found, the combo and leg CSVs are written there.
    """
    csv_path = Path(csv_file)
    if not csv_path.is_file():
        raise FileNotFoundError(f"Statement not found at {csv_path}")

    logger.info("Processing %s", csv_path)
    result = process_rows(read_statement_rows(csv_path))
    if result.status != STATUS_OK:
        logger.warning(result.message)
        return result

    if out_dir is not None:
        for path in write_outputs(result.combos, out_dir):
            print(f"✔ {path.name} written to {path}")
    return result
