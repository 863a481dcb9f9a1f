#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from nnir.graphs.nnir.attrs import NodeAttrs


class Operator(ABC):
    """An abstract representation of an operator descriptor.

    An Operator is the registry-owned description of an operation kind. Nodes
    only hold a non-owning reference to it. It provides the arity of the
    operation, possibly as a function of the node attributes, and an optional
    hook that turns the textual attributes of a node into a structured object.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Returns the unique identifier for this operator type.

        Returns:
            The operator's name
        """
        ...

    @abstractmethod
    def get_num_inputs(self, attrs: "NodeAttrs") -> int:
        """Returns the number of inputs of a node using this operator.

        Args:
            attrs: The attributes of the node

        Returns:
            The effective number of inputs
        """
        ...

    @abstractmethod
    def get_num_outputs(self, attrs: "NodeAttrs") -> int:
        """Returns the number of outputs of a node using this operator.

        Args:
            attrs: The attributes of the node

        Returns:
            The effective number of outputs
        """
        ...

    @abstractmethod
    def parse_attrs(self, attrs: "NodeAttrs") -> Any:
        """Populates the parsed slot of the given attributes.

        Args:
            attrs: The attributes to parse

        Returns:
            The parsed object, or None if the operator has no parser
        """
        ...
