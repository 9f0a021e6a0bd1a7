import io
from datetime import date

import pytest

from pengingat.cli import (
    BLANK_NOTE,
    ReminderError,
    UsageError,
    add_reminder,
    lookup,
    main,
    read_label,
    read_note,
    see_note,
)
from pengingat.store import Reminder, ReminderStore


@pytest.fixture
def store(tmp_path):
    return ReminderStore(tmp_path)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("PENGINGAT_HOME", str(tmp_path))
    return ReminderStore(tmp_path)


def test_read_label_strips_newline():
    assert read_label(io.StringIO("groceries\nrest\n")) == "groceries"


def test_read_label_without_newline():
    assert read_label(io.StringIO("groceries")) == "groceries"


def test_read_label_accepts_49_chars():
    assert read_label(io.StringIO("a" * 49 + "\n")) == "a" * 49


def test_read_label_too_long():
    with pytest.raises(ReminderError) as info:
        read_label(io.StringIO("a" * 50 + "\n"))
    assert info.value.status == 9


def test_read_label_at_end_of_input():
    with pytest.raises(ReminderError):
        read_label(io.StringIO(""))


def test_read_label_rejects_path():
    with pytest.raises(ReminderError):
        read_label(io.StringIO("a/b\n"))


def test_read_note_blank():
    assert read_note(io.StringIO("\n")) == BLANK_NOTE


def test_read_note_text():
    assert read_note(io.StringIO("buy milk\n")) == "buy milk"


def test_read_note_limit():
    assert read_note(io.StringIO("n" * 100 + "\n")) == "n" * 100
    with pytest.raises(ReminderError):
        read_note(io.StringIO("n" * 101 + "\n"))


def test_add_reminder_saves_record_and_note(store):
    out = io.StringIO()
    day = date(2030, 6, 5)
    reminder = add_reminder(store, day, io.StringIO("shop\nbuy milk\n"), out)
    assert reminder == Reminder("shop", 5, 6, 2030)
    assert store.load() == [reminder]
    assert store.read_note("shop") == "buy milk"
    text = out.getvalue()
    assert "[note saved] on 5-6-2030" in text
    assert "(saving complete)" in text


def test_add_reminder_asks_again_on_duplicate(store):
    existing = Reminder("shop", 1, 1, 2030)
    store.save([existing])
    out = io.StringIO()
    added = add_reminder(store, date(2030, 6, 5), io.StringIO("shop\nother\nnote\n"), out)
    assert added.label == "other"
    assert store.load() == [existing, added]
    assert "the same lable already saved" in out.getvalue()


def test_add_reminder_blank_note(store):
    out = io.StringIO()
    add_reminder(store, date(2030, 6, 5), io.StringIO("x\n\n"), out)
    assert store.read_note("x") == BLANK_NOTE
    assert "leave blank" in out.getvalue()


def test_lookup_other_day(store):
    a = Reminder("a", 5, 6, 2030)
    b = Reminder("b", 6, 6, 2030)
    c = Reminder("c", 5, 6, 2030)
    store.save([a, b, c])
    out = io.StringIO()
    found = lookup(store, date(2030, 6, 5), date(2030, 1, 1), out)
    assert found == [a, c]
    assert store.read_lookup() == [a, c]
    assert "[1] a" in out.getvalue()
    assert "[2] c" in out.getvalue()


def test_lookup_not_found(store):
    store.save([Reminder("a", 5, 6, 2030)])
    out = io.StringIO()
    assert lookup(store, date(2030, 7, 5), date(2030, 1, 1), out) == []
    assert "not found" in out.getvalue()
    assert store.read_lookup() == []


def test_lookup_nothing_saved(store):
    out = io.StringIO()
    assert lookup(store, date(2030, 7, 5), date(2030, 1, 1), out) == []
    assert "Not saved anything yet" in out.getvalue()


def test_lookup_today_uses_found_file(store):
    today = date(2030, 6, 5)
    todays = Reminder("today", 5, 6, 2030)
    store.save([todays, Reminder("other", 5, 6, 2030)])
    store.write_found([todays])
    out = io.StringIO()
    assert lookup(store, today, today, out) == [todays]
    assert store.read_lookup() == [todays]


def test_see_note(store):
    store.write_lookup([Reminder("a", 5, 6, 2030), Reminder("b", 5, 6, 2030)])
    store.write_note("b", "second note")
    out = io.StringIO()
    assert see_note(store, 2, out) == "second note"
    assert out.getvalue() == "second note\n"


def test_see_note_empty_buffer(store):
    with pytest.raises(ReminderError):
        see_note(store, 1, io.StringIO())


def test_see_note_bad_index(store):
    store.write_lookup([Reminder("a", 5, 6, 2030)])
    with pytest.raises(ReminderError):
        see_note(store, 2, io.StringIO())
    with pytest.raises(ReminderError):
        see_note(store, 0, io.StringIO())


def test_usage_error_is_reminder_error():
    error = UsageError("bad")
    assert isinstance(error, ReminderError)
    assert error.status == 157


def test_main_without_arguments(home, capsys):
    assert main([]) == 157
    assert "usage: reminder" in capsys.readouterr().err


def test_main_unknown_command(home, capsys):
    assert main(["bogus"]) == 157
    assert "command 'bogus' not found" in capsys.readouterr().err


def test_main_see_needs_index(home, capsys):
    assert main(["see"]) == 157
    assert "see need an index" in capsys.readouterr().err


def test_main_see_invalid_index(home):
    assert main(["see", "x1"]) == 4


def test_main_see_prints_note(home, capsys):
    home.write_lookup([Reminder("a", 5, 6, 2030)])
    home.write_note("a", "hello")
    assert main(["see", "1"]) == 0
    assert capsys.readouterr().out == "hello\n"


def test_main_add_today(home, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("task\nsome note\n"))
    assert main(["add"]) == 0
    today = date.today()
    assert home.load() == [Reminder("task", today.day, today.month, today.year)]
    assert home.read_note("task") == "some note"


def test_main_add_past_year_fails(home):
    assert main(["add", "1-1-1999"]) == 1
    assert home.load() == []