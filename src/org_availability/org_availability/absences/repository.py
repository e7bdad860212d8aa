from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AbsenceRecord


class AbsenceRepository(Protocol):
    """Source of time-off records; services depend on this, never on a concrete source."""

    def list_range(self, *, start: date, end: date) -> Sequence[AbsenceRecord]:
        """Absences overlapping the inclusive range [start, end]."""

        raise NotImplementedError
