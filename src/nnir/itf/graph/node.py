#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING
from ..operator.operator import Operator

if TYPE_CHECKING:
    from nnir.graphs.nnir.attrs import NodeAttrs
    from nnir.graphs.nnir.entry import NodeEntry


class Node(ABC):
    """An abstract representation of a node in a dataflow graph.

    A Node is either an operation instance, in which case it refers to an
    Operator, or a placeholder variable supplying an externally provided
    value, in which case it has no operator.

    Data dependencies are stored as NodeEntry inputs, each referring to one
    output of a producer node. Control dependencies are plain references to
    nodes that must be executed before this one and carry no value.

    Nodes are shared: the same producer may be referenced by any number of
    consumers and graphs.
    """

    @property
    @abstractmethod
    def op(self) -> Operator | None:
        """Returns the operator of this node.

        Returns:
            The operator, or None for a placeholder variable
        """
        ...

    @property
    @abstractmethod
    def inputs(self) -> list["NodeEntry"]:
        """Returns the ordered data inputs of this node.

        Returns:
            List of entries, positional arguments of the operation
        """
        ...

    @property
    @abstractmethod
    def control_deps(self) -> list["Node"]:
        """Returns the nodes that must be performed before this one.

        Returns:
            List of nodes
        """
        ...

    @property
    @abstractmethod
    def attrs(self) -> "NodeAttrs":
        """Returns the attributes owned by this node.

        Returns:
            The node attributes
        """
        ...

    @abstractmethod
    def is_variable(self) -> bool:
        """Returns whether the node is a placeholder variable.

        Returns:
            True iff no operator is set
        """
        ...

    @abstractmethod
    def num_inputs(self) -> int:
        """Returns the effective number of inputs given the current attributes.

        Returns:
            The number of inputs, 1 for a variable
        """
        ...

    @abstractmethod
    def num_outputs(self) -> int:
        """Returns the effective number of outputs given the current attributes.

        Returns:
            The number of outputs, 1 for a variable
        """
        ...
