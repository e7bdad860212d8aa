from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..absences.repository import AbsenceRepository
from ..attendance.conventions.base import HalfDayConvention
from ..attendance.factory import HalfDayConventionFactory
from ..common.datetime_utils import month_bounds
from ..core.constants import DEFAULT_AGGREGATION_MODE, DEFAULT_ORGANIZATION_NAME
from ..core.enums import AggregationMode
from ..employees.repository import EmployeeRepository
from ..holidays.repository import HolidayRepository
from .assembler import build_tree
from .cache import NodeCache
from .model import ChartNode

logger = logging.getLogger(__name__)


class OrgChartService:
    """Use case: org chart with availability for a selected date."""

    def __init__(
        self,
        employees: EmployeeRepository,
        absences: AbsenceRepository,
        holidays: HolidayRepository,
        *,
        organization_name: str = DEFAULT_ORGANIZATION_NAME,
        default_mode: AggregationMode | str = DEFAULT_AGGREGATION_MODE,
        convention: Optional[HalfDayConvention] = None,
        cache: Optional[NodeCache] = None,
    ):
        self._employees = employees
        self._absences = absences
        self._holidays = holidays
        self._organization_name = organization_name
        self._default_mode = AggregationMode.parse(default_mode)
        self._convention = convention or HalfDayConventionFactory().for_name()
        self._cache = cache

    @property
    def default_mode(self) -> AggregationMode:
        return self._default_mode

    def build_tree(self, on: date, mode: AggregationMode | str | None = None) -> list[ChartNode]:
        mode = AggregationMode.parse(mode) if mode else self._default_mode

        # whole month around ``on``
        start, end = month_bounds(on)
        employees = list(self._employees.list_all())
        absences = list(self._absences.list_range(start=start, end=end))
        holidays = list(self._holidays.list_for_year(on.year))
        logger.info(
            "Building org chart for %s: %d employees, %d absences, %d holidays",
            on.isoformat(),
            len(employees),
            len(absences),
            len(holidays),
        )

        return build_tree(
            employees,
            absences,
            holidays,
            mode,
            on,
            organization_name=self._organization_name,
            convention=self._convention,
            cache=self._cache,
        )
