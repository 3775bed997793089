"""
CLI: turn one IB activity statement into realized option combos.

Usage:
    options-journal data/IB/activity.csv [-o data/cleaned] [-v]
"""
import argparse
import logging
import sys

from options_journal.analysis import (
    combos_to_frame,
    compute_kpis,
    summarize_by_strategy,
)
from options_journal.processing import process_statement
from options_journal.processing.process_activity import STATUS_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Realized P&L of option combos from an IB activity statement."
    )
    parser.add_argument("statement", help="IB activity statement CSV")
    parser.add_argument(
        "-o", "--out-dir", default="data/cleaned",
        help="directory for combos.csv and legs.csv (default: data/cleaned)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = process_statement(args.statement, args.out_dir)
    except FileNotFoundError as exc:
        print(f"Error: {exc}")
        return 1

    if result.status != STATUS_OK:
        print(result.message)
        return 1

    df = combos_to_frame(result.combos)
    kpis = compute_kpis(df)
    print(f"Total combos:      {kpis['total_combos']}")
    print(f"Net realized P&L:  ${kpis['net_realized']:,.2f}")
    print(f"Commission:        ${kpis['total_commission']:,.2f}")
    print(f"Win rate:          {kpis['win_rate']:.1f}%")
    print()
    print(summarize_by_strategy(df).to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
