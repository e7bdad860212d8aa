"""Normalization of upstream payloads into domain records.

Employees and time-offs arrive in the Personio v1 shape, where every attribute
is wrapped as ``{"value": ...}``; public holidays arrive in the Nager.Date shape.
This is the only place that knows about those shapes.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..absences.model import AbsenceRecord
from ..common.datetime_utils import date_key
from ..common.validators import require_mapping, require_sequence
from ..core.constants import WEEKDAY_NAMES
from ..core.enums import AbsenceCategory, EmployeeStatus
from ..core.exceptions import ValidationError
from ..employees.model import Employee, WorkSchedule
from ..holidays.model import PublicHoliday

logger = logging.getLogger(__name__)


def _value(attrs: dict, name: str, default: Any = None) -> Any:
    wrapped = attrs.get(name)
    if isinstance(wrapped, dict):
        value = wrapped.get("value")
        return default if value is None else value
    return default


def _nested_id(node: Any) -> Optional[int]:
    """``{"attributes": {"id": {"value": 7}}}`` -> 7"""
    if not isinstance(node, dict):
        return None
    attrs = node.get("attributes")
    if not isinstance(attrs, dict):
        return None
    return _to_int(_value(attrs, "id"))


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def parse_duration(value: Any) -> Optional[int]:
    """``"08:30"`` -> 510 minutes; numbers are taken as hours; blanks are ``None``."""
    if value is None or value == "":
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(round(value * 60))
    text = str(value).strip()
    if ":" in text:
        hours, _, minutes = text.partition(":")
        try:
            return int(hours) * 60 + int(minutes[:2] or 0)
        except ValueError:
            return None
    try:
        return int(round(float(text) * 60))
    except ValueError:
        return None


def _work_schedule(attrs: dict) -> Optional[WorkSchedule]:
    schedule = _value(attrs, "work_schedule")
    if not isinstance(schedule, dict) or not isinstance(schedule.get("attributes"), dict):
        return None
    days = schedule["attributes"]
    return WorkSchedule(tuple(parse_duration(days.get(name)) for name in WEEKDAY_NAMES))


def _holiday_state(attrs: dict) -> Optional[str]:
    calendar = _value(attrs, "holiday_calendar")
    if not isinstance(calendar, dict) or not isinstance(calendar.get("attributes"), dict):
        return None
    return calendar["attributes"].get("state") or None


def normalize_employee(raw: dict) -> Employee:
    require_mapping(raw, "employee")
    attrs = raw.get("attributes") or {}
    employee_id = _to_int(_value(attrs, "id"))
    if employee_id is None:
        raise ValidationError("Employee record without id")

    raw_status = str(_value(attrs, "status", "")).strip().lower()
    try:
        status = EmployeeStatus(raw_status)
    except ValueError:
        logger.warning("Employee %s has unknown status %r - treating as former", employee_id, raw_status)
        status = EmployeeStatus.FORMER

    return Employee(
        employee_id=employee_id,
        first_name=str(_value(attrs, "first_name", "")),
        last_name=str(_value(attrs, "last_name", "")),
        status=status,
        position=str(_value(attrs, "position", "")),
        email=str(_value(attrs, "email", "")),
        supervisor_id=_nested_id(_value(attrs, "supervisor")),
        work_schedule=_work_schedule(attrs),
        holiday_state=_holiday_state(attrs),
    )


def normalize_absence(raw: dict) -> Optional[AbsenceRecord]:
    """Time-off record, or ``None`` when it names no employee."""
    require_mapping(raw, "absence")
    attrs = raw.get("attributes") or {}
    employee_id = _nested_id(attrs.get("employee"))
    if employee_id is None:
        logger.warning("Skipping absence without employee reference")
        return None

    time_off_type = (attrs.get("time_off_type") or {}).get("attributes") or {}
    return AbsenceRecord(
        employee_id=employee_id,
        start_date=date_key(attrs.get("start_date")),
        end_date=date_key(attrs.get("end_date")),
        category=AbsenceCategory.parse(time_off_type.get("category")),
        type_name=str(time_off_type.get("name") or ""),
        half_day_start=bool(attrs.get("half_day_start")),
        half_day_end=bool(attrs.get("half_day_end")),
    )


def normalize_holiday(raw: dict) -> PublicHoliday:
    require_mapping(raw, "holiday")
    day = date_key(raw.get("date"))
    if not day:
        raise ValidationError("Public holiday without date")
    return PublicHoliday(
        date=day,
        name=str(raw.get("name") or raw.get("localName") or ""),
        is_global=bool(raw.get("global", True)),
        counties=tuple(raw.get("counties") or ()),
    )


def normalize_employees(payload) -> list[Employee]:
    return [normalize_employee(raw) for raw in require_sequence(_unwrap(payload), "employees")]


def normalize_absences(payload) -> list[AbsenceRecord]:
    records = (normalize_absence(raw) for raw in require_sequence(_unwrap(payload), "absences"))
    return [r for r in records if r is not None]


def normalize_holidays(payload) -> list[PublicHoliday]:
    return [normalize_holiday(raw) for raw in require_sequence(payload, "holidays")]


def _unwrap(payload):
    """Accept both the bare list and the ``{"success": ..., "data": [...]}`` envelope."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload
