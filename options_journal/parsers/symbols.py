"""
Option symbol decoding for the encodings found in IB statements.

    'SPY 240315C00500000'  compact (OSI) form
    'DE 15JAN27 300 P'     spaced form
    'AAPL 6JUN25 220 P'    spaced form, date as one token
"""
import logging
import re
from typing import Optional

from options_journal.config import MONTHS, OSI_STRIKE_SCALE
from options_journal.models import OptionInfo

logger = logging.getLogger(__name__)

COMPACT_RE = re.compile(r"^([A-Z]+) (\d{2})(\d{2})(\d{2})([CP])(\d{8})$")
SPACED_RE = re.compile(
    r"^([A-Z.0-9]+) (\d{2})([A-Z]{3})(\d{2}) (\d+(?:\.\d+)?) ([CP])$"
)
CONTIGUOUS_RE = re.compile(
    r"^([A-Z.0-9]+) (\d{1,2}[A-Z]{3}\d{2}) (\d+(?:\.\d+)?) ([CP])$"
)


def _option_type(flag: str) -> str:
    return "CALL" if flag == "C" else "PUT"


def _expiry(day: str, mon3: str, yy: str) -> Optional[str]:
    """Build YYYY-MM-DD from '15', 'JAN', '27'; None for an unknown month."""
    month = MONTHS.get(mon3)
    if month is None:
        logger.debug("Unknown month code %r", mon3)
        return None
    return f"{2000 + int(yy)}-{month}-{int(day):02d}"


def _decode_compact(text: str) -> Optional[OptionInfo]:
    m = COMPACT_RE.match(text)
    if not m:
        return None
    root, yy, mm, dd, pc, strike = m.groups()
    return OptionInfo(
        underlying=root,
        expiry=f"{2000 + int(yy)}-{mm}-{dd}",
        strike=int(strike) / OSI_STRIKE_SCALE,
        type=_option_type(pc),
    )


def _decode_spaced(text: str) -> Optional[OptionInfo]:
    m = SPACED_RE.match(text)
    if not m:
        return None
    root, day, mon3, yy, strike, pc = m.groups()
    expiry = _expiry(day, mon3, yy)
    if expiry is None:
        return None
    return OptionInfo(root, expiry, float(strike), _option_type(pc))


def _decode_contiguous(text: str) -> Optional[OptionInfo]:
    m = CONTIGUOUS_RE.match(text)
    if not m:
        return None
    root, date_part, strike, pc = m.groups()
    # day is one or two digits, month and year are fixed width
    day, mon3, yy = date_part[:-5], date_part[-5:-2], date_part[-2:]
    expiry = _expiry(day, mon3, yy)
    if expiry is None:
        return None
    return OptionInfo(root, expiry, float(strike), _option_type(pc))


# Tried in order, first match wins
DECODERS = (_decode_compact, _decode_spaced, _decode_contiguous)


def decode(symbol: str) -> Optional[OptionInfo]:
    """
    Decode an option symbol into an OptionInfo.
    Returns None when no known encoding matches; never raises on bad text.
    """
    if not symbol:
        return None
    text = " ".join(str(symbol).split()).upper()
    for decoder in DECODERS:
        info = decoder(text)
        if info is not None:
            return info
    return None
