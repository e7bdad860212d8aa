from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class WorkSchedule:
    """Scheduled minutes per weekday, Monday first.

    ``None`` means the weekday is not specified; ``0`` means explicitly not working.
    """

    minutes: tuple[Optional[int], ...]

    def __post_init__(self):
        if len(self.minutes) != 7:
            raise ValueError("WorkSchedule needs exactly 7 weekday entries")

    def minutes_for(self, day: date) -> Optional[int]:
        return self.minutes[day.weekday()]

    def works_on(self, day: date) -> bool:
        return bool(self.minutes_for(day))

    @property
    def weekly_hours(self) -> float:
        return sum(m for m in self.minutes if m) / 60


@dataclass(frozen=True)
class Employee:
    """Domain entity: one employee record, normalized from the upstream shape."""

    employee_id: int
    first_name: str
    last_name: str
    status: EmployeeStatus
    position: str = ""
    email: str = ""
    supervisor_id: Optional[int] = None
    work_schedule: Optional[WorkSchedule] = None
    holiday_state: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def participates(self) -> bool:
        return self.status.participates

    @property
    def weekly_hours(self) -> float:
        return self.work_schedule.weekly_hours if self.work_schedule else 0.0
