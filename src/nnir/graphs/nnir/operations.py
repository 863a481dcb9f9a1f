#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from collections.abc import Iterable
from typing import Any

from .attrs import NodeAttrs
from .entry import NodeEntry
from .node import NNIRNode
from .operators import NNIROperator
from .registry import get_operator
from .utils import NNIRGraphUtils

__all__ = [
    "variable",
    "apply",
    "mutate",
    "mutated_inputs",
]


def variable(name: str, **attrs: str) -> NodeEntry:
    node = NNIRNode.create()
    node.attrs = NodeAttrs(name=name, dict=attrs)
    return NodeEntry(node, 0, 0)


def apply(
    op: str | NNIROperator,
    *inputs: NodeEntry,
    name: str | None = None,
    scalars: Iterable[float] = (),
    control_deps: Iterable[NNIRNode | NodeEntry] = (),
    **attrs: Any,
) -> list[NodeEntry]:
    """
    Create a node applying op on inputs and return
    the entries of all its outputs.
    Dict attributes values are converted to their textual form.
    The operator attribute parser, if any, is run on the new node.
    """
    if isinstance(op, str):
        op = get_operator(op)
    node = NNIRNode.create()
    node.op = op
    node.attrs = NodeAttrs(
        name=op.name if name is None else name,
        scalars=scalars,
        dict={key: str(value) for key, value in attrs.items()},
    )
    node.inputs = [NNIRGraphUtils.check_entry(inp) for inp in inputs]
    node.control_deps = [
        dep.node if isinstance(dep, NodeEntry) else dep for dep in control_deps
    ]
    op.parse_attrs(node.attrs)
    return [NodeEntry(node, idx, 0) for idx in range(node.num_outputs())]


def mutate(entry: NodeEntry) -> NodeEntry:
    """Return the entry for the next written state of a variable."""
    if not entry.node.is_variable():
        raise ValueError(
            f"only variable entries can be mutated, got node: {entry.node}"
        )
    return NodeEntry(entry.node, entry.index, entry.version + 1)


def mutated_inputs(node: NNIRNode) -> list[NodeEntry]:
    """
    Return the next state entries of the variables written by node,
    as declared by the mutate_inputs attribute of its operator.
    """
    if node.op is None:
        return []
    fmutate = node.op.get_attr("mutate_inputs")
    if fmutate is None:
        return []
    positions = fmutate(node.attrs) if callable(fmutate) else fmutate
    return [
        mutate(node.inputs[pos])
        for pos in positions
        if node.inputs[pos].node.is_variable()
    ]
