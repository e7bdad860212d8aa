from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional, Sequence

from ..absences.model import AbsenceRecord
from ..common.datetime_utils import day_month
from ..core.constants import AVAILABLE_LABEL, OFF_DAY_LABEL, WEEKEND_LABEL
from ..core.enums import AvailabilityStatus
from ..employees.model import Employee
from ..holidays.calendar import find_holiday, region_code_for
from ..holidays.model import PublicHoliday
from .conventions.base import HalfDayConvention
from .conventions.morning_convention import MorningConvention
from .model import DailyStatus


def base_status(
    employee: Employee,
    on: date,
    holidays: Iterable[PublicHoliday],
) -> tuple[AvailabilityStatus, str]:
    """Status before absences: public holiday, then the work schedule."""
    holiday = find_holiday(holidays, on.isoformat(), region_code_for(employee))
    if holiday:
        return AvailabilityStatus.NON_WORKING_DAY, holiday.name

    schedule = employee.work_schedule
    if schedule is not None and not schedule.works_on(on):
        label = WEEKEND_LABEL if on.weekday() >= 5 else OFF_DAY_LABEL
        return AvailabilityStatus.NON_WORKING_DAY, label

    return AvailabilityStatus.AVAILABLE, AVAILABLE_LABEL


def matching_absences(employee_id: int, on: date, absences: Iterable[AbsenceRecord]) -> list[AbsenceRecord]:
    key = on.isoformat()
    return [a for a in absences if a.employee_id == employee_id and a.covers(key)]


def resolve_daily_status(
    employee: Employee,
    on: date,
    holidays: Sequence[PublicHoliday],
    absences: Iterable[AbsenceRecord],
    *,
    convention: Optional[HalfDayConvention] = None,
) -> DailyStatus:
    """Resolve the AM/PM status pair and display label of one employee on one date.

    ``absences`` may hold records of other employees; only the employee's own
    records covering ``on`` are considered. The function is pure.
    """
    convention = convention or MorningConvention()
    key = on.isoformat()

    base, base_label = base_status(employee, on, holidays)
    am = pm = base

    relevant = matching_absences(employee.employee_id, on, absences)
    for absence in relevant:
        incoming = AvailabilityStatus.SICK if absence.is_sick else AvailabilityStatus.ABSENT
        segments = convention.segments_for(absence, key)
        if segments.am and incoming.precedence < am.precedence:
            am = incoming
        if segments.pm and incoming.precedence < pm.precedence:
            pm = incoming

    if am == pm and am != base:
        label = f"{'Sick' if am == AvailabilityStatus.SICK else 'Absent'} {_range_label(relevant[0])}"
    elif am != pm:
        absent = AvailabilityStatus.ABSENT in (am, pm)
        label = f"½ {'Absent' if absent else 'Sick'}"
    else:
        label = base_label

    return DailyStatus(am_status=am, pm_status=pm, label=label)


def resolve_all(
    employees: Iterable[Employee],
    on: date,
    holidays: Sequence[PublicHoliday],
    absences: Iterable[AbsenceRecord],
    *,
    convention: Optional[HalfDayConvention] = None,
) -> dict[int, DailyStatus]:
    """``resolve_daily_status`` for many employees, indexing absences once."""
    key = on.isoformat()
    by_employee: dict[int, list[AbsenceRecord]] = defaultdict(list)
    for absence in absences:
        if absence.covers(key):
            by_employee[absence.employee_id].append(absence)

    return {
        emp.employee_id: resolve_daily_status(
            emp, on, holidays, by_employee.get(emp.employee_id, ()), convention=convention
        )
        for emp in employees
    }


def _range_label(absence: AbsenceRecord) -> str:
    start = day_month(absence.start_date)
    end = day_month(absence.end_date)
    return f"({start})" if start == end else f"({start}-{end})"
