#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
import os

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def get_strict_registry(strict: bool | None = None) -> bool:
    """
    Return whether the operator registry rejects
    re-registration of an existing operator name.
    Raise on invalid setting.
    Defined in order as:
    - passed strict if not None
    - env var NNIR_STRICT_REGISTRY
    - False
    """
    if strict is not None:
        return bool(strict)
    strict_var = os.environ.get("NNIR_STRICT_REGISTRY")
    if strict_var is None:
        return False
    value = strict_var.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise RuntimeError(f"invalid value for NNIR_STRICT_REGISTRY: {strict_var}")
