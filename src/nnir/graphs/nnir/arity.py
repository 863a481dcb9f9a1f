#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from abc import ABC, abstractmethod
from typing_extensions import override
from collections.abc import Callable
from typing import TypeAlias, Any

from .attrs import NodeAttrs
from .exceptions import OperatorRegistrationError, InvalidArityError

__all__ = [
    "Arity",
    "FixedArity",
    "AttrsArity",
    "ArityFunc",
    "ArityLike",
    "as_arity",
]


ArityFunc: TypeAlias = Callable[[NodeAttrs], int]


class Arity(ABC):
    """The source of an operator inputs or outputs count."""

    @abstractmethod
    def resolve(self, attrs: NodeAttrs) -> int: ...

    @property
    def is_dynamic(self) -> bool:
        return False


class FixedArity(Arity):
    def __init__(self, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise OperatorRegistrationError(
                f"fixed arity must be a non negative integer: {count!r}"
            )
        self._count = count

    @property
    def count(self) -> int:
        return self._count

    @override
    def resolve(self, attrs: NodeAttrs) -> int:
        return self._count

    @override
    def __repr__(self) -> str:
        return f"FixedArity({self._count})"


class AttrsArity(Arity):
    """Arity computed from the node attributes on each query.

    The function must only read attrs.dict and attrs.scalars, the parsed
    slot may be stale or absent.
    """

    def __init__(self, func: ArityFunc) -> None:
        self._func = func

    @property
    def func(self) -> ArityFunc:
        return self._func

    @property
    @override
    def is_dynamic(self) -> bool:
        return True

    @override
    def resolve(self, attrs: NodeAttrs) -> int:
        count = int(self._func(attrs))
        if count < 0:
            name = getattr(self._func, "__name__", repr(self._func))
            raise InvalidArityError(
                f"arity function {name} returned a negative count {count} for node {attrs.name!r}"
            )
        return count

    @override
    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"AttrsArity({name})"


ArityLike: TypeAlias = Arity | int | ArityFunc


def as_arity(value: Any) -> Arity:
    if isinstance(value, Arity):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return FixedArity(value)
    if callable(value):
        return AttrsArity(value)
    raise OperatorRegistrationError(
        f"arity must be an integer count or a function of the node attributes: {value!r}"
    )
