"""
options_journal: realized P&L of option combos from IB activity statements.
"""
__version__ = "0.1.0"
