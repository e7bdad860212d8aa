from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AbsenceCategory


@dataclass(frozen=True)
class AbsenceRecord:
    """Domain entity: a time-off period.

    Dates are ``YYYY-MM-DD`` keys (inclusive) so range checks are plain string
    comparisons; ``None`` marks a record the upstream system sent without a date.
    """

    employee_id: int
    start_date: Optional[str]
    end_date: Optional[str]
    category: AbsenceCategory = AbsenceCategory.OTHER
    type_name: str = ""
    half_day_start: bool = False
    half_day_end: bool = False

    def covers(self, day_key: str) -> bool:
        if not self.start_date or not self.end_date:
            return False
        return self.start_date <= day_key <= self.end_date

    @property
    def is_sick(self) -> bool:
        name = self.type_name.lower()
        return self.category == AbsenceCategory.SICK_LEAVE or "sick" in name or "illness" in name
