from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Source of employee snapshots; services depend on this, never on a concrete source."""

    def list_all(self) -> Sequence[Employee]:
        """Every employee in the snapshot, including paused and former ones."""

        raise NotImplementedError
