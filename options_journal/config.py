"""
config.py
---------
Centralized constants for statement parsing, realization and output.
"""
# IB activity statement layout: section name, row kinds, data subtypes
TRADES_SECTION = "Trades"
HEADER_ROW = "Header"
DATA_ROW = "Data"
DATA_SUBTYPES = ("Order", "Trade")

# Column names inside the Trades section header
COL_ASSET_CATEGORY = "Asset Category"
COL_SYMBOL = "Symbol"
COL_DATE_TIME = "Date/Time"
COL_QUANTITY = "Quantity"
COL_PROCEEDS = "Proceeds"
COL_PRICE = "T. Price"
COL_COMMISSION = "Comm/Fee"

# Substring (case-insensitive) that marks an option asset category
OPTION_ASSET_MARKER = "option"

# Positions within this distance of zero count as flat
FLAT_TOLERANCE = 0.01

# Three-letter month codes used by spaced option symbols
MONTHS = dict(
    JAN="01", FEB="02", MAR="03", APR="04", MAY="05", JUN="06",
    JUL="07", AUG="08", SEP="09", OCT="10", NOV="11", DEC="12",
)

# Compact (OSI) strikes are stored as strike * 1000
OSI_STRIKE_SCALE = 1000

# --- Output ---
COMBOS_FILE = "combos.csv"
LEGS_FILE = "legs.csv"
EXPORT_COLUMNS = [
    "Combo (Full Name)",
    "Strategy",
    "Entry Type",
    "Entry Amount ($)",
    "Open (Day)",
    "Close (Day)",
    "Commission ($)",
    "Net Realized ($)",
]
TOTAL_LABEL = "Total Net Realized"

# User-facing messages for the stage that came up empty
MSG_NO_OPTION_TRADES = (
    "No options trades found in the CSV file. Please check the file format."
)
MSG_NO_REALIZED = "No realized (closed) options positions found in the CSV file."
