#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from .node import Node

if TYPE_CHECKING:
    from nnir.graphs.nnir.entry import NodeEntry


class Graph(ABC):
    """An abstract representation of a dataflow graph.

    A Graph is defined by its root set, the list of output entries. All nodes
    of the graph are those reachable from the outputs through data inputs and
    control dependencies. Nodes are shared, hence several graphs may hold the
    same subgraph while owning independent root sets.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Returns the name of this graph.

        Returns:
            The graph's name, possibly empty
        """
        ...

    @property
    @abstractmethod
    def outputs(self) -> list["NodeEntry"]:
        """Returns the root entries of the graph.

        Returns:
            List of output entries
        """
        ...

    @property
    @abstractmethod
    def nodes(self) -> list[Node]:
        """Returns all nodes reachable from the outputs in topological order.

        Returns:
            List of nodes, producers before consumers
        """
        ...

    @property
    @abstractmethod
    def inputs(self) -> list[Node]:
        """Returns the placeholder variable nodes of the graph.

        Returns:
            List of variable nodes in topological order
        """
        ...
