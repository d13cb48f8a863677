from __future__ import annotations

import pytest

from src.looply.looply.core.exceptions import InvalidTimeFormat, ValidationError
from src.looply.looply.shifts.hours import compute_hours, parse_hhmm, shift_minutes
from src.looply.looply.shifts.model import WorkShift
from tests.factories import make_shift


def test_day_shift_with_break():
    assert compute_hours([make_shift("08:00", "16:00", 60)]) == 7.0


def test_overnight_shift_wraps_past_midnight():
    assert compute_hours([make_shift("22:00", "06:00", 30)]) == 7.5


def test_empty_shift_list_is_zero():
    assert compute_hours([]) == 0


def test_same_start_and_end_is_zero_not_full_day():
    assert compute_hours([make_shift("09:00", "09:00")]) == 0


@pytest.mark.parametrize("break_minutes", [0, 30, 480, 10_000])
def test_hours_never_negative(break_minutes):
    assert compute_hours([make_shift("09:00", "17:00", break_minutes)]) >= 0


def test_break_longer_than_shift_clamps_to_zero():
    assert shift_minutes(make_shift("09:00", "10:00", 90)) == 0


def test_split_shifts_are_summed():
    shifts = [
        make_shift("09:00", "12:00", id="a"),
        make_shift("14:00", "18:00", 15, id="b"),
    ]
    assert compute_hours(shifts) == pytest.approx(6.75)


def test_compute_hours_is_repeatable_and_leaves_input_alone():
    shifts = [make_shift("08:30", "17:15", 45)]
    before = list(shifts)
    assert compute_hours(shifts) == compute_hours(shifts)
    assert shifts == before


@pytest.mark.parametrize("value", ["", "9", "24:00", "12:60", "ab:cd", "12-30", "1:2", None])
def test_parse_rejects_malformed_times(value):
    with pytest.raises(InvalidTimeFormat):
        parse_hhmm(value)


def test_parse_accepts_single_digit_hour():
    assert parse_hhmm("7:05") == 7 * 60 + 5


def test_malformed_shift_fails_fast():
    with pytest.raises(InvalidTimeFormat):
        compute_hours([make_shift("08:00", "late")])


def test_invalid_time_is_a_validation_error():
    assert issubclass(InvalidTimeFormat, ValidationError)


def test_shift_from_dict_rejects_negative_break():
    with pytest.raises(ValidationError):
        WorkShift.from_dict({"startTime": "08:00", "endTime": "09:00", "breakMinutes": -5})


def test_shift_label_omits_empty_clauses():
    assert make_shift("09:00", "17:00").label() == "09:00-17:00"
    assert make_shift("09:00", "17:00", 30).label() == "09:00-17:00 (30min break)"
    assert make_shift("09:00", "17:00", 0, "Regular day").label() == "09:00-17:00 - Regular day"
    assert make_shift("22:00", "06:00", 30, "Night").label() == "22:00-06:00 (30min break) - Night"
