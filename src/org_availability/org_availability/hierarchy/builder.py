from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..common.validators import require_sequence
from ..core.exceptions import ValidationError
from ..employees.model import Employee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hierarchy:
    """Reporting structure of the participating employees.

    Nodes live in an arena: ``employees[i]`` is node ``i``, ``children[i]`` holds
    child indexes and ``parents[i]`` the parent index (``None`` for roots). Edges
    only ever connect two participating employees and every node gets at most one
    parent, so walking ``children`` can never revisit a node.
    """

    employees: tuple[Employee, ...]
    index: dict[int, int]
    parents: tuple[Optional[int], ...]
    children: tuple[tuple[int, ...], ...]
    standard_roots: tuple[int, ...]
    invalid_roots: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.employees)

    def __contains__(self, employee_id: int) -> bool:
        return employee_id in self.index

    @property
    def root_count(self) -> int:
        return len(self.standard_roots) + len(self.invalid_roots)

    def get(self, employee_id: int) -> Optional[Employee]:
        i = self.index.get(employee_id)
        return self.employees[i] if i is not None else None

    def parent_of(self, employee_id: int) -> Optional[int]:
        p = self.parents[self.index[employee_id]]
        return self.employees[p].employee_id if p is not None else None

    def children_of(self, employee_id: int) -> list[int]:
        i = self.index.get(employee_id)
        if i is None:
            return []
        return [self.employees[c].employee_id for c in self.children[i]]

    def adjacency(self) -> dict[int, list[int]]:
        """parent id -> ordered child ids, only for employees with children."""
        return {
            self.employees[i].employee_id: [self.employees[c].employee_id for c in kids]
            for i, kids in enumerate(self.children)
            if kids
        }

    def iter_descendants(self, employee_id: int) -> Iterator[int]:
        """Depth-first, pre-order, children in input order."""
        i = self.index.get(employee_id)
        if i is None:
            return
        stack = list(reversed(self.children[i]))
        while stack:
            node = stack.pop()
            yield self.employees[node].employee_id
            stack.extend(reversed(self.children[node]))

    def descendant_count(self, employee_id: int) -> int:
        return sum(1 for _ in self.iter_descendants(employee_id))

    def bottom_up(self) -> list[int]:
        """Employee ids ordered so every child comes before its parent."""
        return [self.employees[i].employee_id for i in reversed(self._preorder())]

    def descendant_counts(self) -> dict[int, int]:
        """Subtree sizes for every node, computed bottom-up in one pass."""
        counts = [0] * len(self.employees)
        for node in reversed(self._preorder()):
            for child in self.children[node]:
                counts[node] += 1 + counts[child]
        return {e.employee_id: counts[i] for i, e in enumerate(self.employees)}

    def _preorder(self) -> list[int]:
        order: list[int] = []
        seen = [False] * len(self.employees)
        for root in (*self.standard_roots, *self.invalid_roots):
            stack = [self.index[root]]
            while stack:
                node = stack.pop()
                if seen[node]:
                    continue
                seen[node] = True
                order.append(node)
                stack.extend(reversed(self.children[node]))
        return order


def build_hierarchy(employees: Sequence[Employee]) -> Hierarchy:
    """Turn a flat employee snapshot into a single-parent hierarchy.

    Only ``active``/``onboarding`` employees participate. A supervisor reference
    that is missing, points to a non-participating employee, or points to the
    employee itself turns the employee into an *invalid root* instead of
    dropping it.
    """
    require_sequence(employees, "employees")

    members: list[Employee] = []
    index: dict[int, int] = {}
    for emp in employees:
        if not isinstance(emp, Employee):
            raise ValidationError(f"Expected Employee, got {type(emp).__name__}")
        if not emp.participates:
            continue
        if emp.employee_id in index:
            logger.warning("Duplicate employee id %s ignored", emp.employee_id)
            continue
        index[emp.employee_id] = len(members)
        members.append(emp)

    parents: list[Optional[int]] = [None] * len(members)
    children: list[list[int]] = [[] for _ in members]
    standard_roots: list[int] = []
    invalid_roots: list[int] = []

    for i, emp in enumerate(members):
        sup = emp.supervisor_id
        if sup is None:
            standard_roots.append(emp.employee_id)
            continue

        parent = index.get(sup)
        if parent is None or parent == i:
            reason = "is the employee itself" if parent == i else "is not an active employee"
            logger.warning(
                "Employee %s (%s) has invalid supervisor id %s (%s) - treating as root",
                emp.full_name,
                emp.employee_id,
                sup,
                reason,
            )
            invalid_roots.append(emp.employee_id)
            continue

        parents[i] = parent
        children[parent].append(i)

    for i in _cycle_members(parents, standard_roots, invalid_roots, index):
        emp = members[i]
        logger.warning(
            "Employee %s (%s) is part of a supervisor cycle - treating as root",
            emp.full_name,
            emp.employee_id,
        )
        children[parents[i]].remove(i)
        parents[i] = None
        invalid_roots.append(emp.employee_id)

    logger.debug(
        "Hierarchy built: %d participating of %d employees, %d standard roots, %d invalid roots",
        len(members),
        len(employees),
        len(standard_roots),
        len(invalid_roots),
    )

    return Hierarchy(
        employees=tuple(members),
        index=index,
        parents=tuple(parents),
        children=tuple(tuple(c) for c in children),
        standard_roots=tuple(standard_roots),
        invalid_roots=tuple(invalid_roots),
    )


def _cycle_members(
    parents: list[Optional[int]],
    standard_roots: list[int],
    invalid_roots: list[int],
    index: dict[int, int],
) -> list[int]:
    """One node per multi-hop supervisor cycle, picked deterministically.

    A node is only unreachable from every root if walking its parent chain ends
    in a loop; the first node of that loop met on the walk is returned so the
    caller can cut the edge to its parent.
    """
    reached = [False] * len(parents)
    for root in (*standard_roots, *invalid_roots):
        reached[index[root]] = True

    def settle(node: int) -> bool:
        chain = []
        while parents[node] is not None and not reached[node]:
            chain.append(node)
            node = parents[node]
            if node in chain:
                return False
        ok = reached[node]
        for n in chain:
            reached[n] = ok
        return ok

    cut: list[int] = []
    for i in range(len(parents)):
        if reached[i] or settle(i):
            continue
        node, walk = i, []
        while node not in walk:
            walk.append(node)
            node = parents[node]
        cut.append(node)
        reached[node] = True
        for n in walk:
            settle(n)
    return cut
