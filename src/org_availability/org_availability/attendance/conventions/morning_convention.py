from __future__ import annotations

from .base import HalfDayConvention, Segments


class MorningConvention(HalfDayConvention):
    """``half_day_start`` keeps only the morning of the start day; ``half_day_end`` only the afternoon of the end day."""

    name = "morning"

    def start_day_segments(self) -> Segments:
        return Segments(am=True, pm=False)

    def end_day_segments(self) -> Segments:
        return Segments(am=False, pm=True)
