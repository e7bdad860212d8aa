from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AvailabilityStatus


@dataclass(frozen=True)
class DailyStatus:
    """Read-model: resolved availability of one employee on one day."""

    am_status: AvailabilityStatus
    pm_status: AvailabilityStatus
    label: str

    @property
    def status(self) -> AvailabilityStatus:
        """Combined status: the half with the lower precedence number, ties to AM."""
        if self.am_status.precedence <= self.pm_status.precedence:
            return self.am_status
        return self.pm_status

    @property
    def is_half_day(self) -> bool:
        return self.am_status != self.pm_status

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "label": self.label,
            "am_status": self.am_status.value,
            "pm_status": self.pm_status.value,
            "is_half_day": self.is_half_day,
        }
