"""Resolving the date argument of reminder commands."""

from __future__ import annotations

from datetime import date, timedelta


class DateError(ValueError):
    """The date argument is malformed or lies in the past."""


def _normalize(year: int, month: int, day: int) -> date:
    """Build a date, rolling day overflow or underflow into nearby months."""
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError) as exc:
        raise DateError(f"date out of range: {day}-{month}-{year}") from exc


def _fields(text: str) -> tuple[int, int, int]:
    if not text or not (text[0].isascii() and (text[0].isdigit() or text[0] == "-")):
        raise DateError(f"invalid date: {text!r}")
    parts = text.split("-")
    if len(parts) > 4 or (len(parts) == 4 and parts[3]):
        raise DateError(f"too many date fields: {text!r}")
    values = []
    for part in parts[:3]:
        if any(ch not in "0123456789" for ch in part):
            raise DateError(f"invalid date: {text!r}")
        values.append(int(part) if part else 0)
    values.extend([0] * (3 - len(values)))
    return values[0], values[1], values[2]


def resolve_date(text: str, today: date) -> date:
    """Turn a "day-month-year" argument into a date on or after today.

    Missing or zero fields fall back to today's values.
    """
    day, month, year = _fields(text)

    if day > 31:
        raise DateError(f"invalid day: {day}")
    if month > 12:
        raise DateError(f"invalid month: {month}")
    if year != 0 and year < today.year:
        raise DateError(f"year {year} has already passed")

    if year > today.year:
        if month == 0:
            return _normalize(year, today.month, today.day)
        return _normalize(year, month, day)
    if month > today.month:
        return _normalize(today.year, month, day)
    if month != 0 and month < today.month:
        raise DateError(f"month {month} has already passed")
    if day != 0 and day < today.day:
        raise DateError(f"day {day} has already passed")
    return _normalize(today.year, today.month, day if day else today.day)