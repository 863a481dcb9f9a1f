#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from typing_extensions import override
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import NNIRNode

__all__ = [
    "NodeEntry",
]


@dataclass(frozen=True)
class NodeEntry:
    """A reference to one output of a node.

    Stored in the inputs of a consumer node, an entry is a data edge.
    The version field can only be nonzero when node is a variable, it is
    increased by one each time the variable is written by a mutating
    operation, which gives an order to successive mutations.
    Entries compare and hash by node identity, index and version.
    """

    node: "NNIRNode"
    index: int = 0
    version: int = 0

    @override
    def __str__(self) -> str:
        name = self.node.attrs.name or f"@{id(self.node):x}"
        out = f"%{name}"
        if self.node.num_outputs() > 1:
            out += f"[{self.index}]"
        if self.version != 0:
            out += f".v{self.version}"
        return out
