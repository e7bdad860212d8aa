from __future__ import annotations

from .base import HalfDayConvention, Segments


class AfternoonConvention(HalfDayConvention):
    """``half_day_start`` means the absence begins at noon; ``half_day_end`` that it ends at noon."""

    name = "afternoon"

    def start_day_segments(self) -> Segments:
        return Segments(am=False, pm=True)

    def end_day_segments(self) -> Segments:
        return Segments(am=True, pm=False)
