# pengingat

A small reminder book for the terminal, with Indonesian messages. You file short
notes under a label and a date. A separate greeting command says hello by time
of day and tells you how many reminders fall due today.

## Installation

```
pip install .
```

This installs two commands, `reminder` and `greetings`. The same entry points
can also be run as `python -m pengingat.cli` and `python -m pengingat.greetings`.

## Where data is kept

All files live in one data directory. It is the directory named by the
`PENGINGAT_HOME` environment variable, or `~/.pengingat` when that variable is
unset or empty. The directory contains:

- `reminder.save`: every reminder, as fixed-size binary records in the order
  they were added.
- `reminder_today.found`: today's reminders, as written by `greetings`.
- `lookup.see`: the reminders listed by the last `reminder lookup`.
- `.reminders/<label>`: the text of each note.

## Dates

`add` and `lookup` take an optional date of the form `day-month-year`. A part
that is missing or zero takes today's value, and a missing date means today.
Examples:

- `25`: the 25th of this month.
- `3-12`: 3 December of this year.
- `1-1-2030`: 1 January 2030.

The day may be at most 31 and the month at most 12. A year, month or day that
has already passed is rejected. A day past the end of its month rolls over into
the next month, so `31-2` becomes 3 March (or 2 March in a leap year). When
only a later year is given and the month is zero, today's day and month in that
year are used.

## reminder add [DATE]

```
reminder add 25-12
```

This command asks for two things:

- a **label**. It must be shorter than 50 bytes in UTF-8, must not be empty,
  must not contain `/`, and must not be `.` or `..`. If the label is already in
  use, you are asked again. The label becomes the note's file name.
- a **note** of at most 100 bytes. An empty line stores `(leaved blank)`.

The reminder is then appended to `reminder.save` and the note is written to
`.reminders/<label>`.

## reminder lookup [DATE]

This lists the reminders for the date, numbered from 1, and keeps the list in
`lookup.see` for `see`.

When the date is today, the list is read from `reminder_today.found`, so it
shows what `greetings` last recorded. Otherwise the list comes from the saved
reminders. If nothing has been saved at all, the command prints
`Not saved anything yet.`.

## reminder see INDEX

This prints the note of the `INDEX`-th reminder from the last lookup. `INDEX`
must be made of decimal digits only.

## Exit status

| Status | Meaning |
| ------ | ------- |
| 0 | success |
| 1 | invalid date, or a date in the past |
| 4 | `see` was given an index that is not a number |
| 9 | label too long |
| 157 | no command, unknown command, or `see` without an index |
| 255 | any other failure, for example an empty lookup buffer, an index out of range, an invalid label or a note that is too long |

## greetings

This greets `$USER` (or `Anon` if it is unset) according to the hour:

| Hours | Greeting |
| ----- | -------- |
| 0–2 | `Halo, <user>.` followed by `Sekarang adalah Dini hari.` |
| 3–9 | `Selamat pagi` |
| 10–13 | `Selamat siang` |
| 14–17 | `Selamat sore` |
| 18–23 | `Selamat malam` |

It then prints the weekday, the day of the month and the month name in
Indonesian. If reminders fall due today, it adds their count, for example
``(*2), gunakan `reminder lookup`.``. The command also records today's
reminders in `reminder_today.found`, so it fits well at the end of a shell
start-up file.

## Use from Python

```python
import datetime

from pengingat.dates import resolve_date
from pengingat.store import ReminderStore, default_root

store = ReminderStore(default_root())
day = resolve_date("25-12", datetime.date.today())
for reminder in store.load():
    if reminder.matches(day):
        print(reminder.label, store.read_note(reminder.label))
```

`pengingat.cli` provides `add_reminder`, `lookup` and `see_note`, which take a
store and text streams. `pengingat.greetings` provides `day_period`,
`find_today` and `greeting`.

## What it does not do

There is no command to edit or delete reminders or notes, and no alerts or
notifications. Reminders are only shown when you run `greetings` or
`reminder lookup`.