from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...absences.model import AbsenceRecord


@dataclass(frozen=True)
class Segments:
    am: bool = True
    pm: bool = True


class HalfDayConvention(ABC):
    """Strategy Pattern: decide which half-day segments an absence covers on a given day."""

    name: str = ""

    def segments_for(self, absence: AbsenceRecord, day_key: str) -> Segments:
        start_half = absence.half_day_start and day_key == absence.start_date
        end_half = absence.half_day_end and day_key == absence.end_date
        if start_half:
            # Start-day rule wins on single-day records carrying both flags.
            return self.start_day_segments()
        if end_half:
            return self.end_day_segments()
        return Segments()

    @abstractmethod
    def start_day_segments(self) -> Segments:
        raise NotImplementedError

    @abstractmethod
    def end_day_segments(self) -> Segments:
        raise NotImplementedError
