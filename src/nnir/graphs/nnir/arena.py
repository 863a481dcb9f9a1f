#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from collections.abc import Iterable, Iterator
import logging
import threading
import numpy as np

from .entry import NodeEntry
from .node import NNIRNode
from .utils import NNIRGraphUtils, HeadType
from .exceptions import InvalidOutputIndexError

__all__ = [
    "NNIRNodeArena",
]

logger = logging.getLogger(__name__)


class NNIRNodeArena:
    """A graph level table owning nodes by slot.

    Nodes are referred to by their integer slot id. Released slots are
    cleared and not reused until the arena is cleared, such that ids stay
    stable. On request, releasing a node also clears its inputs and control
    dependencies, which breaks reference cycles formed through control
    dependencies. Edges are kept by default as released nodes may still be
    shared with other graphs.
    """

    def __init__(self) -> None:
        self._slots: list[NNIRNode | None] = []
        self._ids: dict[NNIRNode, int] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_heads(cls, heads: Iterable[HeadType]) -> "NNIRNodeArena":
        """Index all nodes reachable from heads, producers first."""
        arena = cls()
        NNIRGraphUtils.dfs_visit(heads, arena.add)
        return arena

    def add(self, node: NNIRNode) -> int:
        with self._lock:
            node_id = self._ids.get(node)
            if node_id is None:
                node_id = len(self._slots)
                self._slots.append(node)
                self._ids[node] = node_id
        return node_id

    def node_id(self, node: NNIRNode) -> int:
        node_id = self._ids.get(node)
        if node_id is None:
            raise KeyError(f"node not found in arena: {node}")
        return node_id

    def __getitem__(self, node_id: int) -> NNIRNode:
        node = self._slots[node_id]
        if node is None:
            raise KeyError(f"access to released node id: {node_id}")
        return node

    def __contains__(self, node: object) -> bool:
        return node in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[NNIRNode]:
        return iter(self.nodes)

    @property
    def nodes(self) -> list[NNIRNode]:
        return [node for node in self._slots if node is not None]

    def _entry_offsets(self) -> list[int]:
        offsets = [0]
        for node in self._slots:
            offsets.append(offsets[-1] + (node.num_outputs() if node is not None else 0))
        return offsets

    @property
    def num_node_entries(self) -> int:
        return self._entry_offsets()[-1]

    def entry_id(self, entry: NodeEntry) -> int:
        """
        Return the flattened id of the entry output among
        all outputs of the arena nodes.
        Raise InvalidOutputIndexError when the index is out of range.
        """
        NNIRGraphUtils.check_entry(entry)
        node_id = self.node_id(entry.node)
        offsets = self._entry_offsets()
        return offsets[node_id] + entry.index

    def entry(self, entry_id: int) -> NodeEntry:
        offsets = self._entry_offsets()
        if not 0 <= entry_id < offsets[-1]:
            raise InvalidOutputIndexError(
                f"invalid entry id {entry_id}, arena has {offsets[-1]} entries"
            )
        node_id = int(np.searchsorted(offsets, entry_id, side="right")) - 1
        return NodeEntry(self[node_id], entry_id - offsets[node_id])

    def _release(self, node_id: int, break_edges: bool) -> None:
        node = self._slots[node_id]
        assert node is not None
        if break_edges:
            node.inputs = []
            node.control_deps = []
        self._slots[node_id] = None
        del self._ids[node]

    def collect(self, roots: Iterable[HeadType], break_edges: bool = False) -> int:
        """
        Release all nodes of the arena not reachable from roots.
        Return the number of released nodes.
        With break_edges, edges of released nodes are cleared, which must
        not be used when released nodes are still shared with another graph.
        """
        with self._lock:
            marks = np.zeros(len(self._slots), dtype=bool)

            def mark(node: NNIRNode) -> None:
                node_id = self._ids.get(node)
                if node_id is not None:
                    marks[node_id] = True

            NNIRGraphUtils.dfs_visit(roots, mark)
            live = np.array([node is not None for node in self._slots], dtype=bool)
            dead = np.flatnonzero(live & ~marks)
            for node_id in dead:
                self._release(int(node_id), break_edges)
        logger.debug("arena collect: released %d nodes, %d live", len(dead), len(self))
        return len(dead)

    def clear(self, break_edges: bool = False) -> None:
        with self._lock:
            for node_id, node in enumerate(self._slots):
                if node is not None:
                    self._release(node_id, break_edges)
            self._slots = []
