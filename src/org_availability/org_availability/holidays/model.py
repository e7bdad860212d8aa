from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PublicHoliday:
    date: str
    name: str
    is_global: bool = True
    counties: tuple[str, ...] = ()

    def applies_to(self, region_code: Optional[str]) -> bool:
        if self.is_global:
            return True
        return bool(region_code) and region_code in self.counties
