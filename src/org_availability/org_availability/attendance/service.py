from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..absences.repository import AbsenceRepository
from ..core.exceptions import EmployeeNotFoundError
from ..employees.repository import EmployeeRepository
from ..holidays.repository import HolidayRepository
from .conventions.base import HalfDayConvention
from .factory import HalfDayConventionFactory
from .model import DailyStatus
from .resolver import resolve_daily_status

logger = logging.getLogger(__name__)


class AvailabilityService:
    """Use case: availability of a single employee on a given date."""

    def __init__(
        self,
        employees: EmployeeRepository,
        absences: AbsenceRepository,
        holidays: HolidayRepository,
        *,
        convention: Optional[HalfDayConvention] = None,
    ):
        self._employees = employees
        self._absences = absences
        self._holidays = holidays
        self._convention = convention or HalfDayConventionFactory().for_name()

    def resolve_status(self, employee_id: int, on: date) -> DailyStatus:
        employee = next((e for e in self._employees.list_all() if e.employee_id == employee_id), None)
        if employee is None or not employee.participates:
            raise EmployeeNotFoundError(f"Employee {employee_id} not found")

        absences = self._absences.list_range(start=on, end=on)
        holidays = self._holidays.list_for_year(on.year)
        logger.debug("Resolving %s on %s (%d absences in range)", employee_id, on.isoformat(), len(absences))
        return resolve_daily_status(employee, on, holidays, absences, convention=self._convention)
