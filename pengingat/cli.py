"""The ``reminder`` command: add, look up and read dated notes."""

from __future__ import annotations

import sys
from datetime import date
from typing import Sequence, TextIO

from pengingat.dates import DateError, resolve_date
from pengingat.store import (
    LABEL_SIZE,
    NOTE_SIZE,
    Reminder,
    ReminderStore,
    default_root,
    parse_index,
)

PROG = "reminder"
BLANK_NOTE = "(leaved blank)"

USAGE_STATUS = 157
CONTROLLER_STATUS = 4
LABEL_STATUS = 9
FAILURE_STATUS = 255
DATE_STATUS = 1


class ReminderError(Exception):
    """A command could not be carried out."""

    def __init__(self, message: str, status: int = FAILURE_STATUS) -> None:
        super().__init__(message)
        self.status = status


class UsageError(ReminderError):
    """The command line was not understood."""

    def __init__(self, message: str, status: int = USAGE_STATUS) -> None:
        super().__init__(message, status)


def _line(stream: TextIO) -> str | None:
    line = stream.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def read_label(stream: TextIO) -> str:
    """Read one label line; it must fit in a record."""
    label = _line(stream)
    if label is None:
        raise ReminderError("no label given")
    if len(label.encode("utf-8")) >= LABEL_SIZE:
        raise ReminderError(
            f"lable length can't more than {LABEL_SIZE} chars", LABEL_STATUS
        )
    if not label or "/" in label or label in (".", ".."):
        raise ReminderError(f"invalid lable: {label!r}")
    return label


def read_note(stream: TextIO) -> str:
    """Read one note line; an empty line gives a placeholder note."""
    note = _line(stream) or ""
    if not note:
        return BLANK_NOTE
    if len(note.encode("utf-8")) > NOTE_SIZE:
        raise ReminderError(f"char exceed {NOTE_SIZE}, bad input.")
    return note


def add_reminder(
    store: ReminderStore, day: date, stdin: TextIO, stdout: TextIO
) -> Reminder:
    """Ask for a unique label and a note, then save a reminder for ``day``."""
    print(f"[note saved] on {day.day}-{day.month}-{day.year}", file=stdout)
    saved = store.load()
    labels = {reminder.label for reminder in saved}

    while True:
        print("lable: ", end="", file=stdout, flush=True)
        label = read_label(stdin)
        if label not in labels:
            break
        print("the same lable already saved", file=stdout)
    print(f"lable : {label} saved", file=stdout)

    print("note: ", end="", file=stdout, flush=True)
    note = read_note(stdin)
    if note == BLANK_NOTE:
        print("leave blank", file=stdout)

    reminder = Reminder(label, day.day, day.month, day.year)
    store.save([*saved, reminder])
    print("...saving note", file=stdout)
    store.write_note(label, note)
    print("(saving complete)", file=stdout)
    return reminder


def _print_listing(day: date, reminders: Sequence[Reminder], stdout: TextIO) -> None:
    print(f"note: {day.day}-{day.month}-{day.year}\n", file=stdout)
    for number, reminder in enumerate(reminders, start=1):
        print(f"[{number}] {reminder.label}", file=stdout)


def lookup(
    store: ReminderStore, day: date, today: date, stdout: TextIO
) -> list[Reminder]:
    """List the reminders for ``day`` and remember them for ``see``."""
    if day == today:
        found = store.read_found()
        _print_listing(day, found, stdout)
        store.write_lookup(found)
        return found

    saved = store.load()
    if not saved:
        print("Not saved anything yet.", file=stdout)
        return []

    matches = [reminder for reminder in saved if reminder.matches(day)]
    store.write_lookup(matches)
    if not matches:
        print(f"note with date {day.day}-{day.month}-{day.year} not found", file=stdout)
        return matches
    _print_listing(day, matches, stdout)
    return matches


def see_note(store: ReminderStore, index: int, stdout: TextIO) -> str:
    """Show the note of the ``index``-th reminder of the last lookup."""
    listed = store.read_lookup()
    if not listed:
        raise ReminderError("file empty please lookup first :)")
    if not 1 <= index <= len(listed):
        raise ReminderError("bad index, try update lookup buffer")
    label = listed[index - 1].label
    try:
        note = store.read_note(label)
    except FileNotFoundError as exc:
        raise ReminderError(f"no note saved for {label!r}") from exc
    print(note, file=stdout)
    return note


def _resolve(rest: Sequence[str], today: date) -> date:
    text = rest[0] if rest else "-"
    try:
        return resolve_date(text, today)
    except DateError as exc:
        raise ReminderError(str(exc), DATE_STATUS) from exc


def _run(args: Sequence[str]) -> int:
    if not args:
        raise UsageError(f"usage: {PROG} options [argumen]")
    command, rest = args[0], args[1:]
    store = ReminderStore(default_root())
    today = date.today()

    if command == "add":
        add_reminder(store, _resolve(rest, today), sys.stdin, sys.stdout)
        return 0
    if command == "lookup":
        lookup(store, _resolve(rest, today), today, sys.stdout)
        return 0
    if command == "see":
        if not rest:
            raise UsageError("see need an index")
        try:
            index = parse_index(rest[0])
        except ValueError as exc:
            raise UsageError("invalid index", CONTROLLER_STATUS) from exc
        see_note(store, index, sys.stdout)
        return 0
    raise UsageError(f"{command}: command '{command}' not found")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        return _run(args)
    except UsageError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        return exc.status
    except ReminderError as exc:
        print(exc, file=sys.stderr)
        return exc.status


if __name__ == "__main__":
    raise SystemExit(main())