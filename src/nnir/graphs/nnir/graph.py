#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from typing_extensions import override
from collections.abc import Iterable

from nnir.itf.graph import Graph

from .entry import NodeEntry
from .node import NNIRNode
from .arena import NNIRNodeArena
from .utils import NNIRGraphUtils, HeadType

__all__ = [
    "NNIRGraph",
]


class NNIRGraph(Graph):
    def __init__(self, outputs: Iterable[NodeEntry], name: str | None = None) -> None:
        self._outputs: list[NodeEntry] = list(outputs)
        self._name = name
        self._indexed: NNIRNodeArena | None = None

    @property
    @override
    def name(self) -> str:
        return "" if self._name is None else self._name

    @property
    @override
    def outputs(self) -> list[NodeEntry]:
        return self._outputs

    def set_outputs(self, outputs: Iterable[NodeEntry]) -> None:
        self._outputs = list(outputs)
        self._indexed = None

    @property
    @override
    def nodes(self) -> list[NNIRNode]:
        return NNIRGraphUtils.get_nodes_topological(self._outputs)

    @property
    @override
    def inputs(self) -> list[NNIRNode]:
        return [node for node in self.nodes if node.is_variable()]

    @property
    def indexed(self) -> NNIRNodeArena:
        """Arena indexing the graph nodes, built on first access."""
        if self._indexed is None:
            self._indexed = NNIRNodeArena.from_heads(self._outputs)
        return self._indexed

    def reindex(self) -> NNIRNodeArena:
        self._indexed = None
        return self.indexed

    def release(
        self, break_edges: bool = False, keep: Iterable[HeadType] = ()
    ) -> None:
        """
        Drop the root set and the graph nodes table.
        With break_edges, edges of the graph nodes not reachable from
        keep are cleared, which breaks control dependencies cycles.
        The root sets of all other graphs sharing nodes with this one
        must be passed in keep.
        """
        if break_edges:
            self.indexed.collect(keep, break_edges=True)
        if self._indexed is not None:
            self._indexed.clear()
        self._indexed = None
        self._outputs = []

    @override
    def __str__(self) -> str:
        nodes = self.nodes
        graph_str = "graph:\n"
        if self.name != "":
            graph_str += f"  name: {self._name}\n"
        inputs = [node for node in nodes if node.is_variable()]
        if len(inputs) > 0:
            graph_str += "  inputs:\n"
            for node in inputs:
                graph_str += f"  - %{node.attrs.name}\n"
        else:
            graph_str += "  inputs: []\n"
        if len(self._outputs) > 0:
            graph_str += "  outputs:\n"
            for entry in self._outputs:
                graph_str += f"  - {entry}\n"
        else:
            graph_str += "  outputs: []\n"
        ops = [node for node in nodes if not node.is_variable()]
        if len(ops) > 0:
            graph_str += "  nodes:\n"
            for node in ops:
                graph_str += f"    {node}\n"
        else:
            graph_str += "  nodes: []\n"
        return graph_str
