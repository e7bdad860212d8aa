from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class EmployeeStatus(str, Enum):
    """Employment status as delivered by the HR system."""

    ACTIVE = "active"
    ONBOARDING = "onboarding"
    PAUSED = "paused"
    FORMER = "former"

    @property
    def participates(self) -> bool:
        return self in (EmployeeStatus.ACTIVE, EmployeeStatus.ONBOARDING)


class AvailabilityStatus(str, Enum):
    """Resolved status of one half-day segment (or of a whole day)."""

    ABSENT = "absent"
    SICK = "sick"
    NON_WORKING_DAY = "non-working-day"
    AVAILABLE = "available"

    @property
    def precedence(self) -> int:
        """Lower wins when two sources disagree about the same segment."""
        return _PRECEDENCE[self]


_PRECEDENCE = {
    AvailabilityStatus.ABSENT: 1,
    AvailabilityStatus.SICK: 2,
    AvailabilityStatus.NON_WORKING_DAY: 3,
    AvailabilityStatus.AVAILABLE: 4,
}


class AbsenceCategory(str, Enum):
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"
    UNPAID_VACATION = "unpaid_vacation"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str | None) -> "AbsenceCategory":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.OTHER


class AggregationMode(str, Enum):
    """Which subordinates are counted, and how each one is weighted."""

    DIRECT_COUNT = "direct-count"
    DIRECT_HOURS = "direct-hours"
    ALL_COUNT = "all-count"
    ALL_HOURS = "all-hours"

    @property
    def all_descendants(self) -> bool:
        return self in (AggregationMode.ALL_COUNT, AggregationMode.ALL_HOURS)

    @property
    def hour_weighted(self) -> bool:
        return self in (AggregationMode.DIRECT_HOURS, AggregationMode.ALL_HOURS)

    @classmethod
    def parse(cls, value: "str | AggregationMode") -> "AggregationMode":
        if isinstance(value, AggregationMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ValidationError(f"Unknown aggregation mode {value!r} (expected one of: {allowed})") from None
