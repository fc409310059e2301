"""Utility helpers."""

from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation, ROUND_FLOOR
import math
from typing import Any, List, Optional, Union

from .models import Number


def parse_iso_date(value: Union[str, date, None]) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` (or a full ISO timestamp) into a date, else None."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        if "T" in text:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None


def make_date_list(start_date_str: str, count: int) -> List[str]:
    start = datetime.strptime(start_date_str, "%Y-%m-%d").date()
    return [(start + timedelta(days=offset)).isoformat() for offset in range(count)]


def coerce_number(value: Any) -> Optional[Number]:
    """Return ``value`` as an int or float, or None when it is not numeric.

    Numeric strings are accepted the way form posts deliver them. Booleans,
    NaN and infinities are rejected.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return int(number) if number.is_integer() else number


def percent_of(total: Number, percent: int) -> int:
    """Whole units of ``percent``% of ``total``, rounded down."""

    try:
        exact = Decimal(str(total)) * Decimal(percent) / Decimal(100)
    except InvalidOperation:
        return 0
    return int(exact.to_integral_value(rounding=ROUND_FLOOR))


def format_amount(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)
