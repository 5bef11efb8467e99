# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Error classification utilities for HTTP and network errors.

This module converts raw exceptions raised while talking to the proxy into
structured ErrorKind classifications. The classification only enriches the
diagnostics shown in the error report; every kind is treated as a failed
request by the check handlers.
"""

import json
import re

import httpx

from proxy_regression.core.http_constants import (
    HTTP_SERVICE_UNAVAILABLE_CODES,
    HTTP_STATUS_CLIENT_ERROR_MAX,
    HTTP_STATUS_CLIENT_ERROR_MIN,
    HTTP_STATUS_SERVER_ERROR_MAX,
    HTTP_STATUS_SERVER_ERROR_MIN,
)
from proxy_regression.core.types import ErrorKind

# Matches 3-digit HTTP status codes (100-599) with word boundaries
_HTTP_STATUS_CODE_PATTERN: re.Pattern[str] = re.compile(r"\b([1-5]\d{2})\b")

# Network-level error indicators for unreachable classification
_UNREACHABLE_INDICATORS: tuple[str, ...] = (
    "timed out",
    "timeout",
    "connection refused",
    "unreachable",
    "connect error",
    "could not connect",
    "network is unreachable",
    "no route to host",
    "name or service not known",
    "getaddrinfo failed",
    "temporary failure in name resolution",
)


def _classify_http_status(status_code: int) -> tuple[ErrorKind, str]:
    """Classify an HTTP error status code.

    Args:
        status_code: The HTTP status code to classify.

    Returns:
        A tuple of (ErrorKind, detail_string).
    """
    if status_code in HTTP_SERVICE_UNAVAILABLE_CODES:
        return (
            ErrorKind.UNREACHABLE,
            f"HTTP {status_code}: Service temporarily unavailable",
        )

    if HTTP_STATUS_CLIENT_ERROR_MIN <= status_code <= HTTP_STATUS_CLIENT_ERROR_MAX:
        return ErrorKind.HTTP_STATUS, f"HTTP {status_code}: Client error"

    if HTTP_STATUS_SERVER_ERROR_MIN <= status_code <= HTTP_STATUS_SERVER_ERROR_MAX:
        return ErrorKind.HTTP_STATUS, f"HTTP {status_code}: Server error"

    return ErrorKind.HTTP_STATUS, f"HTTP {status_code}: Unknown status"


def classify_request_error(error: BaseException) -> tuple[ErrorKind, str]:
    """Classify an error raised while requesting a proxy endpoint.

    httpx exception types are checked first. For foreign exceptions the
    message is inspected using a two-tier strategy:
    1. Check for network-level failures (timeouts, connection refused, DNS)
    2. Then extract HTTP status codes for HTTP-level failures

    Network indicators are checked first to avoid false positives from port
    numbers being matched as status codes (e.g., "port 443" matching as HTTP 443).

    Args:
        error: The exception raised during the request.

    Returns:
        A tuple of (ErrorKind, detail_string).
    """
    if isinstance(error, httpx.HTTPStatusError):
        return _classify_http_status(error.response.status_code)

    if isinstance(error, (httpx.TimeoutException, httpx.TransportError)):
        return ErrorKind.UNREACHABLE, str(error) or type(error).__name__

    if isinstance(error, (json.JSONDecodeError, httpx.DecodingError)):
        return ErrorKind.INVALID_RESPONSE, str(error)

    error_msg = str(error)
    error_msg_lower = error_msg.lower()

    # Tier 1: Check for network-level unreachable indicators first
    if any(indicator in error_msg_lower for indicator in _UNREACHABLE_INDICATORS):
        return ErrorKind.UNREACHABLE, error_msg

    # Tier 2: Check for HTTP status codes
    status_match = _HTTP_STATUS_CODE_PATTERN.search(error_msg)
    if status_match:
        return _classify_http_status(int(status_match.group(1)))

    return ErrorKind.UNEXPECTED, error_msg or type(error).__name__
