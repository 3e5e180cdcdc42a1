# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from tasklet.core.errors import EmptyDescription, InvalidDateFormat, InvalidEventOrder
from tasklet.tasks.task_models import (
    Deadline,
    Event,
    TaskKind,
    Todo,
    format_datetime_record,
    parse_date,
    parse_datetime,
)


def test_todo_display_and_record() -> None:
    t = Todo("  read book ")
    assert t.description == "read book"
    assert t.kind is TaskKind.TODO
    assert t.to_display() == "[T][ ] read book"
    assert t.to_record() == "T | 0 | read book"

    t.mark_done()
    assert t.to_display() == "[T][X] read book"
    assert t.to_record() == "T | 1 | read book"
    assert str(t) == t.to_display()


def test_mark_and_unmark_are_idempotent() -> None:
    t = Todo("x")
    t.mark_done()
    t.mark_done()
    assert t.done is True
    t.mark_not_done()
    t.mark_not_done()
    assert t.done is False
    assert t.status_icon == "[ ]"


@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_blank_description_is_rejected(blank: str) -> None:
    with pytest.raises(EmptyDescription) as exc:
        Todo(blank)
    assert exc.value.kind == "todo"

    assert Deadline.create(blank, "2025-08-29") == EmptyDescription(kind="deadline")
    assert Event.create(blank, "2025-01-01T10:00", "2025-01-01T11:00") == EmptyDescription(kind="event")


def test_deadline_formats_human_and_machine_dates() -> None:
    d = Deadline.from_text("return book", "2025-08-29")
    assert d.due == date(2025, 8, 29)
    assert d.to_display() == "[D][ ] return book (by: Aug 29 2025)"
    assert d.to_record() == "D | 0 | return book | 2025-08-29"


def test_deadline_day_is_not_zero_padded() -> None:
    d = Deadline("pay rent", due=date(2025, 3, 1))
    assert "(by: Mar 1 2025)" in d.to_display()


def test_early_years_are_shown_with_four_digits() -> None:
    assert "(by: Jan 1 0005)" in Deadline("old", due=date(5, 1, 1)).to_display()
    e = Event.from_text("older", "0042-03-04T09:00", "0042-03-04T10:00")
    assert "(from: Mar 4 0042 09:00 to: Mar 4 0042 10:00)" in e.to_display()


@pytest.mark.parametrize("raw", ["tomorrow", "2025-02-30", "2025-8-29", "29/08/2025", "2025-08-29T10:00"])
def test_deadline_rejects_non_canonical_dates(raw: str) -> None:
    result = Deadline.create("x", raw)
    assert isinstance(result, InvalidDateFormat)
    assert result.raw == raw


def test_event_display_and_record() -> None:
    e = Event.from_text("project meeting", "2025-08-29T14:00", "2025-08-29T16:30:15")
    assert e.to_display() == (
        "[E][ ] project meeting (from: Aug 29 2025 14:00 to: Aug 29 2025 16:30)"
    )
    assert e.to_record() == "E | 0 | project meeting | 2025-08-29T14:00 | 2025-08-29T16:30:15"


def test_event_end_before_start_is_rejected() -> None:
    result = Event.create("foo", "2025-01-02T10:00", "2025-01-01T10:00")
    assert result == InvalidEventOrder()

    with pytest.raises(InvalidEventOrder):
        Event("foo", start=datetime(2025, 1, 2, 10, 0), end=datetime(2025, 1, 1, 10, 0))


def test_event_may_end_when_it_starts() -> None:
    result = Event.create("standup", "2025-01-01T09:00", "2025-01-01T09:00")
    assert isinstance(result, Event)


def test_event_reports_the_bad_timestamp() -> None:
    result = Event.create("foo", "2025-01-01T10:00", "noon")
    assert isinstance(result, InvalidDateFormat)
    assert result.raw == "noon"


def test_equality_is_full_field_per_variant_and_ignores_done() -> None:
    a = Todo("buy milk")
    b = Todo("buy milk", done=True)
    assert a == b

    assert Deadline.from_text("x", "2025-01-01") == Deadline.from_text("x", "2025-01-01")
    assert Deadline.from_text("x", "2025-01-01") != Deadline.from_text("x", "2025-01-02")

    e1 = Event.from_text("x", "2025-01-01T10:00", "2025-01-01T11:00")
    e2 = Event.from_text("x", "2025-01-01T10:00", "2025-01-01T12:00")
    assert e1 != e2

    # Same description, different variant.
    assert Todo("x") != Deadline.from_text("x", "2025-01-01")


def test_parse_helpers() -> None:
    assert parse_date(" 2024-02-29 ") == date(2024, 2, 29)
    assert parse_datetime("2015-02-20T06:30") == datetime(2015, 2, 20, 6, 30)
    assert parse_datetime("2015-02-20T06:30:45") == datetime(2015, 2, 20, 6, 30, 45)
    with pytest.raises(InvalidDateFormat):
        parse_datetime("2015-02-20 06:30")
    with pytest.raises(InvalidDateFormat):
        parse_datetime("2015-02-20T25:00")


def test_format_datetime_record_omits_zero_seconds() -> None:
    assert format_datetime_record(datetime(2025, 1, 1, 8, 5)) == "2025-01-01T08:05"
    assert format_datetime_record(datetime(2025, 1, 1, 8, 5, 9)) == "2025-01-01T08:05:09"
