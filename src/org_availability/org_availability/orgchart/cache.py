from __future__ import annotations

from .model import ChartNode


class NodeCache:
    """Caller-owned identity map from node id to the last ``ChartNode`` handed out.

    Keeps node objects stable across repeated ``build_tree`` calls with unchanged
    inputs so a renderer can hold on to per-node UI state. Nodes are immutable;
    any difference (date, absences, mode, employee record) yields a new object
    and earlier results stay untouched.
    """

    def __init__(self):
        self._nodes: dict[str, ChartNode] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def reuse(self, node: ChartNode) -> ChartNode:
        """The cached node if it equals ``node``, otherwise ``node`` (now cached)."""
        cached = self._nodes.get(node.node_id)
        if cached is not None and cached == node:
            return cached
        self._nodes[node.node_id] = node
        return node

    def retain(self, node_ids) -> None:
        """Forget nodes of employees that left the snapshot."""
        keep = set(node_ids)
        for node_id in [k for k in self._nodes if k not in keep]:
            del self._nodes[node_id]

    def clear(self) -> None:
        self._nodes.clear()
