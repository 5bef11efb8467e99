# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Versioned API check handlers."""

from proxy_regression.handlers.common import CommonHandler
from proxy_regression.handlers.node_v1_0 import NodeV1_0Handler

__all__ = ["CommonHandler", "NodeV1_0Handler"]
