from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .absences.repository import AbsenceRepository
from .attendance.factory import HalfDayConventionFactory
from .attendance.service import AvailabilityService
from .core.constants import DEFAULT_AGGREGATION_MODE, DEFAULT_HALF_DAY_CONVENTION, DEFAULT_ORGANIZATION_NAME
from .core.exceptions import ValidationError
from .employees.repository import EmployeeRepository
from .holidays.repository import HolidayRepository
from .orgchart.service import OrgChartService
from .sources.demo import DemoAbsences, DemoEmployees, DemoHolidays
from .sources.json_snapshot import JsonSnapshotAbsences, JsonSnapshotEmployees, JsonSnapshotHolidays


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    absences_repo: AbsenceRepository
    holidays_repo: HolidayRepository

    availability_service: AvailabilityService
    org_chart_service: OrgChartService


def build_repositories(*, data_source: str, data_dir: str | Path) -> tuple:
    if data_source == "demo":
        return DemoEmployees(), DemoAbsences(), DemoHolidays()
    if data_source == "json":
        data_dir = Path(data_dir)
        return JsonSnapshotEmployees(data_dir), JsonSnapshotAbsences(data_dir), JsonSnapshotHolidays(data_dir)
    raise ValidationError(f"Unknown data source {data_source!r}")


def build_container(
    *,
    data_source: str = "demo",
    data_dir: str | Path = "data",
    organization_name: str = DEFAULT_ORGANIZATION_NAME,
    default_mode: str = DEFAULT_AGGREGATION_MODE,
    half_day_convention: str = DEFAULT_HALF_DAY_CONVENTION,
) -> Container:
    employees_repo, absences_repo, holidays_repo = build_repositories(data_source=data_source, data_dir=data_dir)
    convention = HalfDayConventionFactory().for_name(half_day_convention)

    availability_service = AvailabilityService(
        employees_repo,
        absences_repo,
        holidays_repo,
        convention=convention,
    )
    org_chart_service = OrgChartService(
        employees_repo,
        absences_repo,
        holidays_repo,
        organization_name=organization_name,
        default_mode=default_mode,
        convention=convention,
    )

    return Container(
        employees_repo=employees_repo,
        absences_repo=absences_repo,
        holidays_repo=holidays_repo,
        availability_service=availability_service,
        org_chart_service=org_chart_service,
    )
