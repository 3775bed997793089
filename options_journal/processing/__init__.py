# options_journal.processing package
from .transactions import filter_realized, final_positions
from .combos import (
    group_into_combos,
    calculate_combo_metrics,
    determine_strategy,
    generate_combo_name,
)
from .process_activity import (
    StatementResult,
    process_rows,
    process_statement,
    write_outputs,
)
