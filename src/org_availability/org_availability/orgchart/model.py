from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..aggregation.model import SubordinateSummary
from ..core.enums import AggregationMode, AvailabilityStatus


@dataclass(frozen=True)
class ChartNode:
    """Read-model: one box of the org chart.

    Never changed after ``build_tree`` returns it; a ``NodeCache`` only hands
    back an earlier node when it is equal to the freshly assembled one.
    """

    node_id: str
    parent_id: str
    name: str
    first_name: str = ""
    last_name: str = ""
    position: str = ""
    email: str = ""
    is_virtual: bool = False
    status: Optional[AvailabilityStatus] = None
    label: str = ""
    am_status: Optional[AvailabilityStatus] = None
    pm_status: Optional[AvailabilityStatus] = None
    descendant_count: int = 0
    direct_reports: list[str] = field(default_factory=list)
    summaries: dict[AggregationMode, SubordinateSummary] = field(default_factory=dict)
    summary: Optional[SubordinateSummary] = None

    @property
    def is_half_day(self) -> bool:
        return self.am_status is not None and self.am_status != self.pm_status

    def to_dict(self) -> dict:
        return {
            "id": self.node_id,
            "parentId": self.parent_id,
            "name": self.name,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "position": self.position,
            "email": self.email,
            "isVirtual": self.is_virtual,
            "status": self.status.value if self.status else None,
            "statusLabel": self.label,
            "amStatus": self.am_status.value if self.am_status else None,
            "pmStatus": self.pm_status.value if self.pm_status else None,
            "isHalfDay": self.is_half_day,
            "descendantCount": self.descendant_count,
            "directReports": list(self.direct_reports),
            "subordinateStatuses": {mode.value: s.to_dict() for mode, s in self.summaries.items()} or None,
            "summary": self.summary.to_dict() if self.summary else None,
        }
