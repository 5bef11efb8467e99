# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""HTTP client package for talking to the proxy."""

from proxy_regression.http.client import HttpRequestHandler

__all__ = ["HttpRequestHandler"]
