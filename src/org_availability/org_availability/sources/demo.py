"""Demo data source used when no HR export is configured.

A small fictional company; absences are generated relative to the requested
month so every month shows a vacation, a sick day and both half-day variants.
"""

from __future__ import annotations

from datetime import date
from typing import Sequence

from ..absences.model import AbsenceRecord
from ..core.enums import AbsenceCategory, EmployeeStatus
from ..employees.model import Employee, WorkSchedule
from ..holidays.model import PublicHoliday
from .memory import InMemoryAbsences

FULL_TIME = WorkSchedule((480, 480, 480, 480, 480, 0, 0))
PART_TIME = WorkSchedule((480, 480, 480, 0, 0, 0, 0))

DEMO_EMPLOYEES = (
    Employee(101, "Alice", "CEO", EmployeeStatus.ACTIVE, "Chief Executive Officer", "alice@example.com",
             work_schedule=FULL_TIME, holiday_state="Berlin"),
    Employee(201, "Bob", "Manager", EmployeeStatus.ACTIVE, "Engineering Manager", supervisor_id=101,
             work_schedule=FULL_TIME, holiday_state="Berlin"),
    Employee(202, "Charlie", "Manager", EmployeeStatus.ACTIVE, "Product Manager", supervisor_id=101,
             work_schedule=FULL_TIME, holiday_state="Bayern"),
    Employee(301, "Dave", "Developer", EmployeeStatus.ACTIVE, "Frontend Developer", supervisor_id=201,
             work_schedule=FULL_TIME, holiday_state="Berlin"),
    Employee(302, "Eve", "Developer", EmployeeStatus.ONBOARDING, "Backend Developer", supervisor_id=201,
             work_schedule=PART_TIME, holiday_state="NRW"),
    Employee(303, "Frank", "Designer", EmployeeStatus.ACTIVE, "UX Designer", "frank@example.com",
             supervisor_id=202, work_schedule=FULL_TIME, holiday_state="Bayern"),
    Employee(304, "Grace", "Former", EmployeeStatus.FORMER, "QA Engineer", supervisor_id=201),
)

_TYPES = {
    AbsenceCategory.VACATION: "Paid Vacation",
    AbsenceCategory.SICK_LEAVE: "Sick Leave",
}


def demo_absences_for(year: int, month: int) -> list[AbsenceRecord]:
    def day(d: int) -> str:
        return date(year, month, d).isoformat()

    def record(emp: int, start: int, end: int, category: AbsenceCategory, **half) -> AbsenceRecord:
        return AbsenceRecord(emp, day(start), day(end), category, _TYPES[category], **half)

    return [
        record(301, 10, 12, AbsenceCategory.VACATION),
        record(302, 15, 15, AbsenceCategory.SICK_LEAVE),
        record(303, 20, 21, AbsenceCategory.VACATION, half_day_start=True),
        record(201, 5, 5, AbsenceCategory.VACATION, half_day_end=True),
    ]


class DemoEmployees:
    def list_all(self) -> Sequence[Employee]:
        return list(DEMO_EMPLOYEES)


class DemoAbsences:
    def list_range(self, *, start: date, end: date) -> Sequence[AbsenceRecord]:
        records: list[AbsenceRecord] = []
        year, month = start.year, start.month
        while (year, month) <= (end.year, end.month):
            records.extend(demo_absences_for(year, month))
            year, month = (year + 1, 1) if month == 12 else (year, month + 1)
        return InMemoryAbsences(records).list_range(start=start, end=end)


class DemoHolidays:
    def list_for_year(self, year: int) -> Sequence[PublicHoliday]:
        return [
            PublicHoliday(f"{year}-01-01", "New Year's Day"),
            PublicHoliday(f"{year}-01-06", "Epiphany", is_global=False, counties=("DE-BW", "DE-BY", "DE-ST")),
            PublicHoliday(f"{year}-03-08", "International Women's Day", is_global=False, counties=("DE-BE", "DE-MV")),
            PublicHoliday(f"{year}-05-01", "Labour Day"),
            PublicHoliday(f"{year}-10-03", "German Unity Day"),
            PublicHoliday(f"{year}-12-25", "Christmas Day"),
            PublicHoliday(f"{year}-12-26", "St. Stephen's Day"),
        ]
