from datetime import date, time, timedelta
from decimal import Decimal

import pytest

from ojt_dtr.core.enums import HalfDaySession
from ojt_dtr.students.model import StudentConfig
from ojt_dtr.timekeeping.calculator.standard_calculator import StandardHoursCalculator
from ojt_dtr.timekeeping.hours import compute_hours
from ojt_dtr.timelogs.model import Absent, DayRecord, HalfDay, Present

DAY = date(2026, 2, 2)


def _present(time_in, time_out, lunch_start="12:00", lunch_end="13:00") -> DayRecord:
    return DayRecord(log_date=DAY, status=Present(time_in, time_out, lunch_start, lunch_end))


def test_full_day_subtracts_lunch(config):
    assert compute_hours(_present("08:00", "17:00"), config) == Decimal("8.00")


def test_lunch_outside_work_window_is_not_subtracted(config):
    assert compute_hours(_present("08:00", "12:00"), config) == Decimal("4.00")


def test_zero_length_window_is_zero(config):
    assert compute_hours(_present("09:00", "09:00", None, None), config) == 0


def test_out_before_in_is_zero(config):
    assert compute_hours(_present("17:00", "08:00"), config) == 0


@pytest.mark.parametrize(
    "time_in,time_out,expected",
    [
        ("12:30", "17:00", Decimal("4.00")),  # starts inside lunch
        ("08:00", "12:30", Decimal("4.00")),  # ends inside lunch
        ("12:15", "12:45", Decimal("0.00")),  # entirely inside lunch
        ("13:00", "17:00", Decimal("4.00")),  # starts at lunch end
    ],
)
def test_partial_lunch_overlap(config, time_in, time_out, expected):
    assert compute_hours(_present(time_in, time_out), config) == expected


def test_absent_ignores_clock_fields(config):
    rec = DayRecord(log_date=DAY, status=Absent(), hours_rendered=Decimal("8"))
    assert compute_hours(rec, config) == 0


def test_half_day_is_always_four_hours(config):
    rec = DayRecord(log_date=DAY, status=HalfDay(HalfDaySession.PM))
    assert compute_hours(rec, config) == Decimal("4.00")


def test_missing_or_malformed_times_render_zero(config):
    assert compute_hours(_present(None, "17:00"), config) == 0
    assert compute_hours(_present("8am", "17:00"), config) == 0
    assert compute_hours(_present("08:00", "25:99"), config) == 0


def test_day_lunch_falls_back_to_config_window():
    cfg = StudentConfig(lunch_start="11:30", lunch_end="12:00")
    assert compute_hours(_present("08:00", "17:00", None, None), cfg) == Decimal("8.50")


def test_malformed_day_lunch_falls_back_to_config_window(config):
    assert compute_hours(_present("08:00", "17:00", "noon", "13:00"), config) == Decimal("8.00")


def test_day_specific_lunch_overrides_config(config):
    assert compute_hours(_present("08:00", "17:00", "12:00", "12:30"), config) == Decimal("8.50")


def test_rounds_half_up_to_two_places(config):
    # 8h01m = 8.01666.. -> 8.02
    assert compute_hours(_present("08:00", "17:01"), config) == Decimal("8.02")
    # 5 minutes = 0.08333.. -> 0.08
    assert compute_hours(_present("08:00", "08:05"), config) == Decimal("0.08")


def test_accepts_time_and_timedelta_values(config):
    rec = _present(time(8, 0), timedelta(hours=17), time(12, 0), timedelta(hours=13))
    assert compute_hours(rec, config) == Decimal("8.00")


def test_compute_is_deterministic(config):
    rec = _present("07:45", "16:20")
    calc = StandardHoursCalculator()
    results = {calc.compute_hours(rec, config) for _ in range(5)}
    assert len(results) == 1
