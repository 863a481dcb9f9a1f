#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from typing_extensions import override
from collections.abc import Callable
from typing import TypeAlias, Any
from types import SimpleNamespace as NS
import logging

from nnir.itf.operator import Operator

from .attrs import NodeAttrs
from .arity import Arity, ArityLike, as_arity
from .exceptions import AttributeParseError

__all__ = [
    "NNIROperator",
]

logger = logging.getLogger(__name__)


AttrParser: TypeAlias = Callable[[NodeAttrs], Any]
NNIROperatorAttr: TypeAlias = Any
NNIROperatorAttrs: TypeAlias = NS


class NNIROperator(Operator):
    def __init__(
        self,
        name: str,
        num_inputs: ArityLike = 1,
        num_outputs: ArityLike = 1,
        attr_parser: AttrParser | None = None,
        description: str = "",
        support_level: int = 10,
        **attrs: NNIROperatorAttr,
    ) -> None:
        self._name = name
        self._num_inputs: Arity = as_arity(num_inputs)
        self._num_outputs: Arity = as_arity(num_outputs)
        self._attr_parser = attr_parser
        self._description = description
        self._support_level = support_level
        self._attrs = NS(**attrs)

    @property
    @override
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def support_level(self) -> int:
        return self._support_level

    @property
    def num_inputs(self) -> Arity:
        return self._num_inputs

    @property
    def num_outputs(self) -> Arity:
        return self._num_outputs

    @property
    def attr_parser(self) -> AttrParser | None:
        return self._attr_parser

    @property
    def attrs(self) -> NNIROperatorAttrs:
        return self._attrs

    def set_attr(self, key: str, value: NNIROperatorAttr) -> "NNIROperator":
        setattr(self._attrs, key, value)
        return self

    def get_attr(self, key: str, default: NNIROperatorAttr = None) -> NNIROperatorAttr:
        return getattr(self._attrs, key, default)

    def has_attr(self, key: str) -> bool:
        return hasattr(self._attrs, key)

    @override
    def get_num_inputs(self, attrs: NodeAttrs) -> int:
        return self._num_inputs.resolve(attrs)

    @override
    def get_num_outputs(self, attrs: NodeAttrs) -> int:
        return self._num_outputs.resolve(attrs)

    @override
    def parse_attrs(self, attrs: NodeAttrs) -> Any:
        if self._attr_parser is None:
            return None
        logger.debug("parsing attributes for %s node: %s", self._name, attrs.name)
        try:
            parsed = self._attr_parser(attrs)
        except Exception as e:
            raise AttributeParseError(
                f"attribute parser of operator {self._name} failed for node {attrs.name!r}: {e}"
            ) from e
        with attrs.lock:
            attrs.parsed = parsed
        return parsed

    def parsed_attrs(self, attrs: NodeAttrs) -> Any:
        """
        Return the parsed attributes, running the parser
        on first access. Population is serialized by the attributes lock
        such that concurrent readers observe a single parse.
        """
        if self._attr_parser is None:
            return None
        with attrs.lock:
            if attrs.parsed is None:
                try:
                    attrs.parsed = self._attr_parser(attrs)
                except Exception as e:
                    raise AttributeParseError(
                        f"attribute parser of operator {self._name} failed for node {attrs.name!r}: {e}"
                    ) from e
            return attrs.parsed

    @override
    def __repr__(self) -> str:
        return (
            f"NNIROperator({self._name!r}, num_inputs={self._num_inputs!r}, "
            f"num_outputs={self._num_outputs!r})"
        )
