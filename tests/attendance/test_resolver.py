from __future__ import annotations

from datetime import date

from org_availability.absences.model import AbsenceRecord
from org_availability.attendance.resolver import resolve_all, resolve_daily_status
from org_availability.core.enums import AbsenceCategory, AvailabilityStatus, EmployeeStatus
from org_availability.employees.model import Employee, WorkSchedule
from org_availability.holidays.model import PublicHoliday

MON_FRI = WorkSchedule((480, 480, 480, 480, 480, 0, 0))
# Tuesday unspecified, Wednesday explicitly zero
SHORT_WEEK = WorkSchedule((480, None, 0, 480, 480, 0, 0))


def employee(schedule=None, state=None, employee_id=7) -> Employee:
    return Employee(
        employee_id=employee_id,
        first_name="Erika",
        last_name="Muster",
        status=EmployeeStatus.ACTIVE,
        work_schedule=schedule,
        holiday_state=state,
    )


def absence(start, end, category=AbsenceCategory.VACATION, type_name="Paid Vacation", employee_id=7, **half):
    return AbsenceRecord(employee_id, start, end, category, type_name, **half)


def test_plain_working_day_is_available():
    s = resolve_daily_status(employee(MON_FRI), date(2026, 1, 14), [], [])

    assert s.status == AvailabilityStatus.AVAILABLE
    assert s.label == "Available"
    assert not s.is_half_day


def test_saturday_with_zero_hours_is_weekend():
    s = resolve_daily_status(employee(MON_FRI), date(2026, 1, 17), [], [])

    assert s.status == AvailabilityStatus.NON_WORKING_DAY
    assert s.label == "Weekend"


def test_weekday_without_hours_is_off_day():
    assert resolve_daily_status(employee(SHORT_WEEK), date(2026, 1, 13), [], []).label == "Off Day"
    assert resolve_daily_status(employee(SHORT_WEEK), date(2026, 1, 14), [], []).label == "Off Day"


def test_missing_schedule_never_marks_non_working():
    s = resolve_daily_status(employee(None), date(2026, 1, 17), [], [])

    assert s.status == AvailabilityStatus.AVAILABLE


def test_global_holiday_uses_holiday_name():
    holidays = [PublicHoliday("2026-01-01", "New Year's Day")]

    s = resolve_daily_status(employee(MON_FRI), date(2026, 1, 1), holidays, [])

    assert s.status == AvailabilityStatus.NON_WORKING_DAY
    assert s.label == "New Year's Day"


def test_regional_holiday_only_for_matching_state():
    holidays = [PublicHoliday("2026-01-06", "Epiphany", is_global=False, counties=("DE-BY", "DE-BW"))]
    on = date(2026, 1, 6)

    assert resolve_daily_status(employee(MON_FRI, "Bayern"), on, holidays, []).label == "Epiphany"
    assert resolve_daily_status(employee(MON_FRI, "Berlin"), on, holidays, []).label == "Available"
    assert resolve_daily_status(employee(MON_FRI, "Atlantis"), on, holidays, []).label == "Available"
    assert resolve_daily_status(employee(MON_FRI, None), on, holidays, []).label == "Available"


def test_multi_day_vacation_in_the_middle():
    s = resolve_daily_status(employee(), date(2026, 1, 11), [], [absence("2026-01-10", "2026-01-12")])

    assert s.am_status == AvailabilityStatus.ABSENT
    assert s.pm_status == AvailabilityStatus.ABSENT
    assert s.label == "Absent (10.01.-12.01.)"


def test_single_day_sick_leave_label():
    s = resolve_daily_status(
        employee(MON_FRI),
        date(2026, 1, 15),
        [],
        [absence("2026-01-15", "2026-01-15", AbsenceCategory.SICK_LEAVE, "Sick Leave")],
    )

    assert s.status == AvailabilityStatus.SICK
    assert s.label == "Sick (15.01.)"


def test_sick_detected_from_type_name():
    s = resolve_daily_status(
        employee(),
        date(2026, 2, 3),
        [],
        [absence("2026-02-02", "2026-02-04", AbsenceCategory.OTHER, "Child ILLNESS")],
    )

    assert s.status == AvailabilityStatus.SICK


def test_absent_beats_sick_on_the_same_segment():
    records = [
        absence("2026-01-19", "2026-01-21", AbsenceCategory.SICK_LEAVE, "Sick Leave"),
        absence("2026-01-20", "2026-01-20"),
    ]

    s = resolve_daily_status(employee(MON_FRI), date(2026, 1, 20), [], records)

    assert s.am_status == AvailabilityStatus.ABSENT
    assert s.pm_status == AvailabilityStatus.ABSENT
    # label comes from the first matching record
    assert s.label == "Absent (19.01.-21.01.)"


def test_absence_overrides_holiday():
    holidays = [PublicHoliday("2026-01-01", "New Year's Day")]

    s = resolve_daily_status(employee(MON_FRI), date(2026, 1, 1), holidays, [absence("2025-12-29", "2026-01-02")])

    assert s.status == AvailabilityStatus.ABSENT
    assert s.label == "Absent (29.12.-02.01.)"


def test_half_day_start_affects_exactly_one_segment():
    s = resolve_daily_status(
        employee(MON_FRI), date(2026, 1, 20), [], [absence("2026-01-20", "2026-01-20", half_day_start=True)]
    )

    assert s.am_status == AvailabilityStatus.ABSENT
    assert s.pm_status == AvailabilityStatus.AVAILABLE
    assert s.is_half_day
    assert s.status == AvailabilityStatus.ABSENT
    assert s.label.startswith("½")
    assert s.label == "½ Absent"


def test_half_day_flag_only_applies_on_its_boundary_day():
    record = absence("2026-01-20", "2026-01-22", half_day_start=True, half_day_end=True)

    middle = resolve_daily_status(employee(MON_FRI), date(2026, 1, 21), [], [record])
    end = resolve_daily_status(employee(MON_FRI), date(2026, 1, 22), [], [record])

    assert (middle.am_status, middle.pm_status) == (AvailabilityStatus.ABSENT, AvailabilityStatus.ABSENT)
    assert (end.am_status, end.pm_status) == (AvailabilityStatus.AVAILABLE, AvailabilityStatus.ABSENT)


def test_half_sick_label():
    s = resolve_daily_status(
        employee(MON_FRI),
        date(2026, 1, 20),
        [],
        [absence("2026-01-19", "2026-01-20", AbsenceCategory.SICK_LEAVE, "Sick Leave", half_day_end=True)],
    )

    assert s.am_status == AvailabilityStatus.AVAILABLE
    assert s.pm_status == AvailabilityStatus.SICK
    assert s.label == "½ Sick"


def test_mixed_halves_prefer_absent_label():
    records = [
        absence("2026-01-20", "2026-01-20", half_day_start=True),
        absence("2026-01-19", "2026-01-20", AbsenceCategory.SICK_LEAVE, "Sick Leave", half_day_end=True),
    ]

    s = resolve_daily_status(employee(MON_FRI), date(2026, 1, 20), [], records)

    assert (s.am_status, s.pm_status) == (AvailabilityStatus.ABSENT, AvailabilityStatus.SICK)
    assert s.label == "½ Absent"
    assert s.status == AvailabilityStatus.ABSENT


def test_records_without_dates_and_other_employees_are_ignored():
    records = [
        absence(None, "2026-01-20"),
        absence("2026-01-20", None),
        absence("2026-01-20", "2026-01-20", employee_id=8),
    ]

    s = resolve_daily_status(employee(MON_FRI), date(2026, 1, 20), [], records)

    assert s.status == AvailabilityStatus.AVAILABLE


def test_resolution_is_deterministic():
    args = (employee(MON_FRI, "Bayern"), date(2026, 1, 20), [], [absence("2026-01-20", "2026-01-21", half_day_start=True)])

    assert resolve_daily_status(*args) == resolve_daily_status(*args)


def test_resolve_all_matches_single_resolution():
    people = [employee(MON_FRI, employee_id=1), employee(None, employee_id=2)]
    records = [absence("2026-01-20", "2026-01-20", employee_id=2), absence("2026-01-01", "2026-01-02", employee_id=1)]
    on = date(2026, 1, 20)

    result = resolve_all(people, on, [], records)

    assert result == {p.employee_id: resolve_daily_status(p, on, [], records) for p in people}
