#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
import logging
import threading
from typing import Any

from nnir.utils.tools import get_strict_registry

from .arity import ArityLike
from .exceptions import OperatorNotFoundError, OperatorRegistrationError
from .operators import AttrParser, NNIROperator

_OPERATOR_REGISTRY: dict[str, NNIROperator] = {}
_REGISTRY_LOCK = threading.Lock()

__all__ = [
    "register_operator",
    "unregister_operator",
    "get_operator",
    "has_operator",
    "list_operators",
]

logger = logging.getLogger(__name__)


def register_operator(
    name: str,
    num_inputs: ArityLike | None = 1,
    num_outputs: ArityLike | None = 1,
    attr_parser: AttrParser | None = None,
    description: str = "",
    support_level: int = 10,
    strict: bool | None = None,
    **attrs: Any,
) -> NNIROperator:
    if num_inputs is None:
        raise OperatorRegistrationError(
            f"operator {name} declares neither a number of inputs nor an arity function"
        )
    if num_outputs is None:
        raise OperatorRegistrationError(
            f"operator {name} declares neither a number of outputs nor an arity function"
        )
    op = NNIROperator(
        name,
        num_inputs=num_inputs,
        num_outputs=num_outputs,
        attr_parser=attr_parser,
        description=description,
        support_level=support_level,
        **attrs,
    )
    with _REGISTRY_LOCK:
        if name in _OPERATOR_REGISTRY:
            if get_strict_registry(strict):
                raise OperatorRegistrationError(f"operator {name} is already registered")
            logger.warning(f"operator {name} is already registered, replacing it")
        _OPERATOR_REGISTRY[name] = op
    return op


def unregister_operator(name: str) -> None:
    with _REGISTRY_LOCK:
        if name not in _OPERATOR_REGISTRY:
            raise OperatorNotFoundError(f"operator {name} not registered in operator registry")
        del _OPERATOR_REGISTRY[name]


def get_operator(name: str) -> NNIROperator:
    with _REGISTRY_LOCK:
        op = _OPERATOR_REGISTRY.get(name)
    if op is None:
        raise OperatorNotFoundError(f"operator {name} not registered in operator registry")
    return op


def has_operator(name: str) -> bool:
    try:
        get_operator(name)
    except OperatorNotFoundError:
        return False
    return True


def list_operators() -> list[str]:
    with _REGISTRY_LOCK:
        return sorted(_OPERATOR_REGISTRY.keys())
