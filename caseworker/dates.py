from __future__ import annotations

from datetime import date, timedelta
from typing import Optional


INVALID_DATE = "Invalid Date"


def normalized_date(year: int, month: int, day: int) -> Optional[date]:
    """
    Build a date the lenient way: out-of-range months roll into the next or
    previous year and out-of-range days roll across months, so 31.02.2023
    becomes 03.03.2023 and 00.03.2024 becomes 29.02.2024.
    Returns None when the result falls outside the supported year range.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return None


def parse_ddmmyyyy(value: Optional[str]) -> Optional[date]:
    """Parse 'DD.MM.YYYY'. Anything that doesn't split into three integers gives None."""
    if not value:
        return None
    parts = value.split(".")
    if len(parts) != 3:
        return None
    try:
        d, m, y = (int(p) for p in parts)
    except ValueError:
        return None
    return normalized_date(y, m, d)


def parse_date_parts(value: Optional[str]) -> Optional[date]:
    """
    Looser reading used for date arithmetic: the first three dot-separated
    parts are day, month and year, anything after them is ignored and a
    blank part counts as 0. Years 0-99 mean 1900-1999.
    """
    if not value:
        return None
    parts = value.split(".")
    if len(parts) < 3:
        return None
    try:
        d, m, y = (int(p) if p.strip() else 0 for p in parts[:3])
    except ValueError:
        return None
    if 0 <= y <= 99:
        y += 1900
    return normalized_date(y, m, d)


def format_ddmmyyyy(d: date) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    return f"{d.day:02d}.{d.month:02d}.{d.year:04d}"


def day_before(value: str) -> str:
    """Date one calendar day before value, or INVALID_DATE if value can't be read as a date."""
    d = parse_date_parts(value)
    if d is None:
        return INVALID_DATE
    try:
        return format_ddmmyyyy(d - timedelta(days=1))
    except OverflowError:
        return INVALID_DATE


def is_later(candidate: Optional[str], current: Optional[str]) -> bool:
    """True only when both parse and candidate is strictly after current."""
    c = parse_ddmmyyyy(candidate)
    cur = parse_ddmmyyyy(current)
    if c is None or cur is None:
        return False
    return c > cur
