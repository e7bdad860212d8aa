from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.enums import AvailabilityStatus

Weight = Union[int, float]


@dataclass(frozen=True)
class SubordinateSummary:
    """Read-model: status distribution of a manager's subordinates for one mode."""

    available: Weight = 0
    absent: Weight = 0
    sick: Weight = 0
    non_working: Weight = 0

    @property
    def total(self) -> Weight:
        return self.available + self.absent + self.sick + self.non_working

    def share(self, status: AvailabilityStatus) -> float:
        """Fraction of the total in one bucket, 0.0 for an empty summary."""
        total = self.total
        if not total:
            return 0.0
        return self._bucket(status) / total

    def _bucket(self, status: AvailabilityStatus) -> Weight:
        return {
            AvailabilityStatus.AVAILABLE: self.available,
            AvailabilityStatus.ABSENT: self.absent,
            AvailabilityStatus.SICK: self.sick,
            AvailabilityStatus.NON_WORKING_DAY: self.non_working,
        }[status]

    def __add__(self, other: SubordinateSummary) -> SubordinateSummary:
        return SubordinateSummary(
            available=self.available + other.available,
            absent=self.absent + other.absent,
            sick=self.sick + other.sick,
            non_working=self.non_working + other.non_working,
        )

    def to_dict(self) -> dict:
        return {
            "available": self.available,
            "absent": self.absent,
            "sick": self.sick,
            "nonWorking": self.non_working,
            "total": self.total,
        }
