"""
Display helpers shared by report and UI callers.

Currency is US dollars with no cents; amounts round half away from zero.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

_STRIP_PATTERN = re.compile(r"[$,\s]")
_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

NOT_AVAILABLE = "N/A"


def _whole(value: float) -> Optional[int]:
    if not math.isfinite(value):
        return None
    return int(Decimal(repr(float(value))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """1234567.4 -> '1,234,567'"""
    whole = _whole(value)
    if whole is None:
        return NOT_AVAILABLE
    return f"{whole:,}"


def format_currency(value: float) -> str:
    """1234567 -> '$1,234,567'; negatives render as '-$1,234'."""
    whole = _whole(value)
    if whole is None:
        return NOT_AVAILABLE
    if whole < 0:
        return f"-${-whole:,}"
    return f"${whole:,}"


def format_percent(value: float, decimals: int = 1) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{value:.{decimals}f}%"


def parse_currency(value: str) -> float:
    """
    Parse user-typed money such as '$1,234.56' or '32%'.

    Dollar signs, commas and whitespace are stripped and the leading number is
    read; anything unparseable, or too large to be finite ('1e400'), yields
    0.0 rather than raising.
    """
    cleaned = _STRIP_PATTERN.sub("", value)
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return 0.0
    number = float(match.group(0))
    return number if math.isfinite(number) else 0.0


def clamp(value: float, minimum: float, maximum: float) -> float:
    return min(max(value, minimum), maximum)
