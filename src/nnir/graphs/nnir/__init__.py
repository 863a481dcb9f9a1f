#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from .attrs import NodeAttrs  # type: ignore
from .entry import NodeEntry  # type: ignore
from .node import NNIRNode, NodePtr  # type: ignore
from .arity import Arity, FixedArity, AttrsArity, as_arity  # type: ignore
from .operators import NNIROperator  # type: ignore
from .registry import (  # type: ignore
    register_operator,
    unregister_operator,
    get_operator,
    has_operator,
    list_operators,
)
from .exceptions import (  # type: ignore
    OperatorRegistrationError,
    OperatorNotFoundError,
    AttributeParseError,
    InvalidOutputIndexError,
    InvalidArityError,
)
from .utils import NNIRGraphUtils  # type: ignore
from .arena import NNIRNodeArena  # type: ignore
from .graph import NNIRGraph  # type: ignore
from . import operations  # type: ignore
