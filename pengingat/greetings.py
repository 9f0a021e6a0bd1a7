"""A greeting for the shell that mentions today's reminders."""

from __future__ import annotations

import os
import sys
from datetime import date, datetime
from typing import Sequence

from pengingat.store import MONTHS, WEEKDAYS, Reminder, ReminderStore, default_root

EARLY_MORNING = "dini hari"


def day_period(hour: int, minute: int) -> str:
    """Name the part of the day an hour and minute fall in."""
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"not a time of day: {hour}:{minute}")
    if hour <= 2:
        return EARLY_MORNING
    if hour <= 9:
        return "pagi"
    if hour <= 13:
        return "siang"
    if hour <= 17:
        return "sore"
    return "malam"


def find_today(store: ReminderStore, today: date) -> list[Reminder]:
    """Collect the saved reminders for today and record them."""
    matches = [reminder for reminder in store.load() if reminder.matches(today)]
    store.write_found(matches)
    return matches


def greeting(now: datetime, user: str, found: int) -> str:
    """The greeting text, ending in a newline."""
    period = day_period(now.hour, now.minute)
    if period == EARLY_MORNING:
        head = f"Halo, {user}.\nSekarang adalah Dini hari.\n"
    else:
        head = f"Selamat {period}, {user}\n"
    weekday = WEEKDAYS[now.isoweekday() % 7]
    line = f"({weekday}) {now.day} {MONTHS[now.month - 1]} \t"
    if found:
        line += f"(*{found}), gunakan `reminder lookup`."
    return f"{head}{line}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and record today's reminders."""
    now = datetime.now()
    user = os.environ.get("USER", "Anon")
    found = find_today(ReminderStore(default_root()), now.date())
    sys.stdout.write(greeting(now, user, len(found)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())