# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""HTTP status code constants shared across the proxy-regression checks.

This module provides standardized HTTP status code values and range
boundaries used for phase assertions and error classification.
"""

HTTP_STATUS_OK: int = 200

# HTTP status code range boundaries - single source of truth
HTTP_STATUS_CLIENT_ERROR_MIN: int = 400
HTTP_STATUS_CLIENT_ERROR_MAX: int = 499
HTTP_STATUS_SERVER_ERROR_MIN: int = 500
HTTP_STATUS_SERVER_ERROR_MAX: int = 599

# Service unavailable status codes (treat as unreachable)
HTTP_SERVICE_UNAVAILABLE_CODES: tuple[int, ...] = (408, 429, 502, 503, 504)
