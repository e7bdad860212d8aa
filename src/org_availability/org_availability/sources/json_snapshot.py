from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Sequence

from ..absences.model import AbsenceRecord
from ..employees.model import Employee
from ..holidays.model import PublicHoliday
from .memory import InMemoryAbsences, InMemoryHolidays
from .personio import normalize_absences, normalize_employees, normalize_holidays

logger = logging.getLogger(__name__)

EMPLOYEES_FILE = "employees.json"
ABSENCES_FILE = "absences.json"
HOLIDAYS_FILE = "holidays.json"


def _load(path: Path, default):
    if not path.exists():
        logger.warning("Snapshot file %s not found - using empty data", path)
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class JsonSnapshotEmployees:
    """Employees from an exported ``employees.json`` (Personio shape)."""

    def __init__(self, data_dir: Path):
        self._path = Path(data_dir) / EMPLOYEES_FILE

    def list_all(self) -> Sequence[Employee]:
        employees = normalize_employees(_load(self._path, []))
        logger.info("Loaded %d employees from %s", len(employees), self._path)
        return employees


class JsonSnapshotAbsences:
    def __init__(self, data_dir: Path):
        self._path = Path(data_dir) / ABSENCES_FILE

    def list_range(self, *, start: date, end: date) -> Sequence[AbsenceRecord]:
        records = normalize_absences(_load(self._path, []))
        return InMemoryAbsences(records).list_range(start=start, end=end)


class JsonSnapshotHolidays:
    """Public holidays from ``holidays.json`` (Nager.Date shape, any number of years)."""

    def __init__(self, data_dir: Path):
        self._path = Path(data_dir) / HOLIDAYS_FILE

    def list_for_year(self, year: int) -> Sequence[PublicHoliday]:
        holidays = normalize_holidays(_load(self._path, []))
        return InMemoryHolidays(holidays).list_for_year(year)
