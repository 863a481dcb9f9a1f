#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from . import (
    operator,  # type: ignore
    graph,  # type: ignore
)
