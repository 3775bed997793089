# options_journal/parsers package
from .base import BaseBrokerParser, parse_currency, normalize_date
from .symbols import decode
from .ib import IBTradeExtractor, extract, read_statement_rows
