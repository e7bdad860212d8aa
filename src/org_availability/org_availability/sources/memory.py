from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from ..absences.model import AbsenceRecord
from ..employees.model import Employee
from ..holidays.model import PublicHoliday


@dataclass
class InMemoryEmployees:
    employees: list[Employee] = field(default_factory=list)

    def list_all(self) -> Sequence[Employee]:
        return list(self.employees)


@dataclass
class InMemoryAbsences:
    absences: list[AbsenceRecord] = field(default_factory=list)

    def list_range(self, *, start: date, end: date) -> Sequence[AbsenceRecord]:
        lo, hi = start.isoformat(), end.isoformat()
        return [
            a
            for a in self.absences
            if a.start_date and a.end_date and a.start_date <= hi and a.end_date >= lo
        ]


@dataclass
class InMemoryHolidays:
    holidays: list[PublicHoliday] = field(default_factory=list)

    def list_for_year(self, year: int) -> Sequence[PublicHoliday]:
        prefix = f"{year:04d}-"
        return [h for h in self.holidays if h.date.startswith(prefix)]
