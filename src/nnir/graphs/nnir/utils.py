#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from collections.abc import Callable, Iterable, Iterator
from typing import TypeAlias

from .entry import NodeEntry
from .node import NNIRNode
from .exceptions import InvalidOutputIndexError


__all__ = [
    "NNIRGraphUtils",
]


HeadType: TypeAlias = NodeEntry | NNIRNode


class NNIRGraphUtils:
    @staticmethod
    def node_deps(node: NNIRNode) -> list[NNIRNode]:
        """Data producers of the node followed by its control dependencies."""
        return [inp.node for inp in node.inputs] + list(node.control_deps)

    @staticmethod
    def dfs_visit(heads: Iterable[HeadType], fvisit: Callable[[NNIRNode], None]) -> None:
        """
        Post-order depth first visit of all nodes reachable from heads,
        following inputs then control dependencies.
        Each node is visited once, compared by identity.
        """
        seen: set[NNIRNode] = set()
        for head in heads:
            root = head.node if isinstance(head, NodeEntry) else head
            if root in seen:
                continue
            seen.add(root)
            stack: list[tuple[NNIRNode, Iterator[NNIRNode]]] = [
                (root, iter(NNIRGraphUtils.node_deps(root)))
            ]
            while stack:
                node, deps = stack[-1]
                for dep in deps:
                    if dep not in seen:
                        seen.add(dep)
                        stack.append((dep, iter(NNIRGraphUtils.node_deps(dep))))
                        break
                else:
                    stack.pop()
                    fvisit(node)

    @staticmethod
    def get_nodes_topological(heads: Iterable[HeadType]) -> list[NNIRNode]:
        rwalk: list[NNIRNode] = []
        NNIRGraphUtils.dfs_visit(heads, rwalk.append)
        return rwalk

    @staticmethod
    def get_nodes_consumers(
        nodes: list[NNIRNode],
    ) -> dict[NNIRNode, list[NNIRNode]]:
        consumers: dict[NNIRNode, list[NNIRNode]] = {node: [] for node in nodes}
        for node in nodes:
            for inp in node.inputs:
                users = consumers.setdefault(inp.node, [])
                if node not in users:
                    users.append(node)
        return consumers

    @staticmethod
    def check_entry(entry: NodeEntry) -> NodeEntry:
        num_outputs = entry.node.num_outputs()
        if not 0 <= entry.index < num_outputs:
            raise InvalidOutputIndexError(
                f"invalid output index {entry.index} for node {entry.node.attrs.name!r} "
                f"with {num_outputs} outputs"
            )
        return entry
