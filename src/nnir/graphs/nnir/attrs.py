#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from typing_extensions import override
from collections.abc import Iterable, Mapping
from typing import Any
import threading

__all__ = [
    "NodeAttrs",
]


class NodeAttrs:
    """The static configuration of a node.

    The scalars and dict fields are the source of truth. The parsed field
    is a cache set by the operator attribute parser, it may be absent and
    must be invalidated when scalars or dict are modified.
    """

    def __init__(
        self,
        name: str = "",
        scalars: Iterable[float] = (),
        dict: Mapping[str, str] | None = None,
    ) -> None:
        self.name = name
        self.scalars: list[float] = [float(x) for x in scalars]
        self.dict: dict[str, str] = {} if dict is None else {**dict}
        self.parsed: Any = None
        self._lock = threading.Lock()

    @property
    def lock(self) -> threading.Lock:
        """Lock guarding lazy population of the parsed slot"""
        return self._lock

    @property
    def is_parsed(self) -> bool:
        return self.parsed is not None

    def invalidate(self) -> None:
        with self._lock:
            self.parsed = None

    @override
    def __repr__(self) -> str:
        return (
            f"NodeAttrs(name={self.name!r}, scalars={self.scalars}, "
            f"dict={self.dict}, parsed={self.parsed!r})"
        )
