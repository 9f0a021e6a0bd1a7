"""Reminder records and the files they are kept in."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable

LABEL_SIZE = 50
NOTE_SIZE = 100

_RECORD = struct.Struct("<50s2x3i")
RECORD_SIZE = _RECORD.size

WEEKDAYS = ("Minggu", "Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu")
MONTHS = (
    "Januari", "Februari", "Maret",
    "April", "Mei", "Juni",
    "Juli", "Agustus", "September",
    "Oktober", "November", "Desember",
)

SAVE_FILE = "reminder.save"
FOUND_FILE = "reminder_today.found"
LOOKUP_FILE = "lookup.see"
NOTES_DIR = ".reminders"


@dataclass(frozen=True)
class Reminder:
    """A labelled reminder for one calendar day."""

    label: str
    date: int
    month: int
    year: int

    def to_bytes(self) -> bytes:
        """Encode the reminder as one fixed-size record."""
        encoded = self.label.encode("utf-8")
        if len(encoded) > LABEL_SIZE:
            raise ValueError(f"label longer than {LABEL_SIZE} bytes: {self.label!r}")
        return _RECORD.pack(encoded, self.date, self.month, self.year)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Reminder":
        """Decode one fixed-size record."""
        if len(data) != RECORD_SIZE:
            raise ValueError(f"a record is {RECORD_SIZE} bytes, got {len(data)}")
        raw_label, day, month, year = _RECORD.unpack(data)
        label = raw_label.split(b"\0", 1)[0].decode("utf-8", errors="replace")
        return cls(label, day, month, year)

    def matches(self, day: date) -> bool:
        """Whether the reminder falls on the given day."""
        return (self.date, self.month, self.year) == (day.day, day.month, day.year)


def decode_reminders(data: bytes) -> list[Reminder]:
    """Decode consecutive records; a trailing partial record is ignored."""
    whole = len(data) - len(data) % RECORD_SIZE
    return [
        Reminder.from_bytes(data[start:start + RECORD_SIZE])
        for start in range(0, whole, RECORD_SIZE)
    ]


def encode_reminders(reminders: Iterable[Reminder]) -> bytes:
    """Encode reminders as consecutive records."""
    return b"".join(reminder.to_bytes() for reminder in reminders)


def parse_index(text: str) -> int:
    """Parse a string of decimal digits; anything else is rejected."""
    if any(ch not in "0123456789" for ch in text):
        raise ValueError(f"not a valid index: {text!r}")
    return int(text) if text else 0


def default_root() -> Path:
    """Directory holding the reminder files."""
    configured = os.environ.get("PENGINGAT_HOME")
    if configured:
        return Path(configured)
    return Path.home() / ".pengingat"


class ReminderStore:
    """The saved reminders, the day's matches, the lookup buffer and notes."""

    def __init__(self, root: str | os.PathLike[str]) -> None:
        self.root = Path(root)

    def _read(self, name: str) -> list[Reminder]:
        path = self.root / name
        if not path.exists():
            return []
        return decode_reminders(path.read_bytes())

    def _write(self, name: str, reminders: Iterable[Reminder]) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        (self.root / name).write_bytes(encode_reminders(reminders))

    def load(self) -> list[Reminder]:
        """All saved reminders, in the order they were added."""
        return self._read(SAVE_FILE)

    def save(self, reminders: Iterable[Reminder]) -> None:
        """Replace the saved reminders."""
        self._write(SAVE_FILE, reminders)

    def read_found(self) -> list[Reminder]:
        """Reminders recorded as falling on today."""
        return self._read(FOUND_FILE)

    def write_found(self, reminders: Iterable[Reminder]) -> None:
        """Record the reminders that fall on today."""
        self._write(FOUND_FILE, reminders)

    def read_lookup(self) -> list[Reminder]:
        """Reminders listed by the most recent lookup."""
        return self._read(LOOKUP_FILE)

    def write_lookup(self, reminders: Iterable[Reminder]) -> None:
        """Remember the reminders listed by a lookup."""
        self._write(LOOKUP_FILE, reminders)

    def _note_path(self, label: str) -> Path:
        return self.root / NOTES_DIR / label

    def read_note(self, label: str) -> str:
        """The note stored under a label."""
        data = self._note_path(label).read_bytes()
        return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")

    def write_note(self, label: str, note: str) -> None:
        """Store a note under a label, padded to a fixed size."""
        encoded = note.encode("utf-8")
        if len(encoded) > NOTE_SIZE:
            raise ValueError(f"note longer than {NOTE_SIZE} bytes")
        path = self._note_path(label)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(encoded.ljust(NOTE_SIZE, b"\0"))