# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

from proxy_regression.cli.main import app

__all__ = ["app"]
