#
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024-2026 The NNIR Project Authors
#
from .graph import Graph  # type: ignore
from .node import Node  # type: ignore
