from __future__ import annotations

from typing import Protocol, Sequence

from .model import PublicHoliday


class HolidayRepository(Protocol):
    """Source of public holidays; services depend on this, never on a concrete source."""

    def list_for_year(self, year: int) -> Sequence[PublicHoliday]:
        """Every public holiday of ``year``, global and regional."""

        raise NotImplementedError
