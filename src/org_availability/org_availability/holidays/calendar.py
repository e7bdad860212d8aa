from __future__ import annotations

from typing import Iterable, Optional

from ..core.constants import STATE_TO_REGION_CODE
from ..employees.model import Employee
from .model import PublicHoliday


def region_code_for(employee: Employee) -> Optional[str]:
    """Region code of the employee's holiday calendar, ``None`` when unmapped."""
    if not employee.holiday_state:
        return None
    return STATE_TO_REGION_CODE.get(employee.holiday_state)


def find_holiday(holidays: Iterable[PublicHoliday], day_key: str, region_code: Optional[str]) -> Optional[PublicHoliday]:
    for holiday in holidays:
        if holiday.date == day_key and holiday.applies_to(region_code):
            return holiday
    return None
