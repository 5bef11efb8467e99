# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""HTML reporting for proxy-regression checks.

This package contains the error formatter and the error renderer used by
the check handlers, and the Jinja2 template helpers behind both.
"""

from proxy_regression.reporting.errors import err_html
from proxy_regression.reporting.renders import REPORT_FILENAME, ErrorRenderer

__all__ = ["ErrorRenderer", "REPORT_FILENAME", "err_html"]
