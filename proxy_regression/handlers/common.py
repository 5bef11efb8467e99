# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Shared context for the versioned API check handlers."""

import logging
from dataclasses import dataclass, field

import httpx

from proxy_regression.core.types import TestPhase
from proxy_regression.http.client import HttpRequestHandler
from proxy_regression.reporting.renders import ErrorRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommonHandler:
    """Configuration context passed to every API check handler.

    Handlers read from the context but never mutate it.

    Attributes:
        proxy_url: Base address of the proxy, used as given.
        http_request_handler: Shared HTTP request handler.
        error_renderer: Receives an error display for every failed check.
    """

    proxy_url: str
    http_request_handler: HttpRequestHandler
    error_renderer: ErrorRenderer = field(default_factory=ErrorRenderer)

    def build_url(self, path: str) -> str:
        """Append an endpoint path to the proxy URL, unnormalised."""
        return self.proxy_url + path

    def run_basic_test_phase_ok(
        self, response: httpx.Response, expected_status_code: int
    ) -> TestPhase:
        """Check that a response carries the expected status code.

        Args:
            response: The response returned by the proxy.
            expected_status_code: The status code the endpoint should answer with.

        Returns:
            TestPhase that passed iff the status codes match.
        """
        actual = response.status_code
        passed = actual == expected_status_code
        if passed:
            message = f"Status code {actual} as expected"
        else:
            message = f"Expected status code {expected_status_code}, got {actual}"
            logger.warning("Basic phase failed: %s", message)

        return TestPhase(
            name="status code",
            passed=passed,
            expected=expected_status_code,
            actual=actual,
            message=message,
        )
