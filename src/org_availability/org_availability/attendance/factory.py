from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_HALF_DAY_CONVENTION
from ..core.exceptions import ValidationError
from .conventions.afternoon_convention import AfternoonConvention
from .conventions.base import HalfDayConvention
from .conventions.morning_convention import MorningConvention


@dataclass
class HalfDayConventionFactory:
    """Factory Pattern: choose the half-day convention configured for the deployment."""

    def for_name(self, name: str | None = None) -> HalfDayConvention:
        key = (name or DEFAULT_HALF_DAY_CONVENTION).strip().lower()
        if key == MorningConvention.name:
            return MorningConvention()
        if key == AfternoonConvention.name:
            return AfternoonConvention()
        raise ValidationError(f"Unknown half-day convention {name!r}")
