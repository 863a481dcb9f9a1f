#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from typing_extensions import override
from typing import TypeAlias

from nnir.itf.graph import Node

from .attrs import NodeAttrs
from .entry import NodeEntry
from .operators import NNIROperator

__all__ = [
    "NNIRNode",
    "NodePtr",
]


class NNIRNode(Node):
    """An operation instance or placeholder variable of the graph IR.

    References to nodes are plain shared Python references: a node stays
    alive as long as one entry, control dependency or graph refers to it.
    """

    def __init__(self) -> None:
        self._op: NNIROperator | None = None
        self._inputs: list[NodeEntry] = []
        self._control_deps: list[NNIRNode] = []
        self._attrs = NodeAttrs()

    @classmethod
    def create(cls) -> "NNIRNode":
        """Return a new empty node, usable as a variable."""
        return cls()

    @property
    @override
    def op(self) -> NNIROperator | None:
        return self._op

    @op.setter
    def op(self, op: NNIROperator | None) -> None:
        self._op = op

    @property
    @override
    def inputs(self) -> list[NodeEntry]:
        return self._inputs

    @inputs.setter
    def inputs(self, inputs: list[NodeEntry]) -> None:
        self._inputs = list(inputs)

    @property
    @override
    def control_deps(self) -> list["NNIRNode"]:
        return self._control_deps

    @control_deps.setter
    def control_deps(self, control_deps: list["NNIRNode"]) -> None:
        self._control_deps = list(control_deps)

    @property
    @override
    def attrs(self) -> NodeAttrs:
        return self._attrs

    @attrs.setter
    def attrs(self, attrs: NodeAttrs) -> None:
        self._attrs = attrs

    @override
    def is_variable(self) -> bool:
        return self._op is None

    @override
    def num_outputs(self) -> int:
        if self._op is None:
            return 1
        return self._op.get_num_outputs(self._attrs)

    @override
    def num_inputs(self) -> int:
        if self._op is None:
            return 1
        return self._op.get_num_inputs(self._attrs)

    @override
    def __str__(self) -> str:
        name = self._attrs.name or f"@{id(self):x}"
        if self._op is None:
            return f"%{name} = variable()"
        args = ", ".join([str(inp) for inp in self._inputs])
        node_str = f"%{name} = {self._op.name}({args})"
        if self._control_deps:
            deps = ", ".join(
                [f"%{dep.attrs.name or f'@{id(dep):x}'}" for dep in self._control_deps]
            )
            node_str += f" after({deps})"
        return node_str


NodePtr: TypeAlias = NNIRNode
