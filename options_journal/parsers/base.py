"""
Base parser abstraction and shared field helpers for broker statement rows.
"""
import re
from abc import ABC, abstractmethod
from typing import Optional

import pandas as pd

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
US_DATE_RE = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")


def parse_currency(val) -> float:
    """
    Convert strings like '$1,234.50', '-3.2' or '(12.00)' into a float.
    Returns 0.0 if the input can't be parsed.
    """
    s = str(val if val is not None else "").strip()
    s = s.replace("$", "").replace(",", "")
    if s.startswith("(") and s.endswith(")"):
        s = "-" + s[1:-1]
    try:
        return float(s)
    except ValueError:
        return 0.0


def normalize_date(val) -> Optional[str]:
    """
    Normalize a statement date to 'YYYY-MM-DD'.
      '2024-03-15'            -> as is
      '2024-03-15, 09:30:00'  -> time discarded
      '03/15/2024'            -> reordered
    Anything else goes through pandas; None if that fails too.
    """
    s = str(val if val is not None else "").split(",")[0].strip()
    if not s:
        return None
    if ISO_DATE_RE.match(s):
        return s
    m = US_DATE_RE.match(s)
    if m:
        month, day, year = m.groups()
        return f"{year}-{month}-{day}"
    try:
        ts = pd.to_datetime(s, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    return ts.strftime("%Y-%m-%d")


class BaseBrokerParser(ABC):
    @abstractmethod
    def parse_row(self, row: list):  # noqa: U100
        """
        Consume one raw statement row and return a Trade,
        or None if the row is not an option execution.
        """
        pass
