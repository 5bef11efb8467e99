# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Shared fixtures for unit tests."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from proxy_regression.core.types import RequestResult
from proxy_regression.handlers.common import CommonHandler
from proxy_regression.http.client import HttpRequestHandler
from proxy_regression.reporting.renders import ErrorRenderer

PROXY_URL = "http://localhost:7950"
HEARTBEAT_URL = "http://localhost:7950/node/heartbeatstatus"


def make_response(
    status_code: int = 200,
    json: Any = None,
    url: str = HEARTBEAT_URL,
) -> httpx.Response:
    """Build an httpx.Response bound to a GET request for the given URL."""
    if json is None:
        json = {"data": {"heartbeats": []}, "error": "", "code": "successful"}
    return httpx.Response(status_code, json=json, request=httpx.Request("GET", url))


def make_mock_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> httpx.AsyncClient:
    """Build an AsyncClient that answers every request with the given handler."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture()
def error_renderer() -> MagicMock:
    """Error renderer double that records display_err_response calls."""
    return MagicMock(spec=ErrorRenderer)


@pytest.fixture()
def request_handler() -> MagicMock:
    """HTTP request handler double with an async do_get_request."""
    handler = MagicMock(spec=HttpRequestHandler)
    handler.do_get_request = AsyncMock()
    return handler


@pytest.fixture()
def common_handler(
    request_handler: MagicMock, error_renderer: MagicMock
) -> CommonHandler:
    """CommonHandler wired to the request handler and error renderer doubles."""
    return CommonHandler(
        proxy_url=PROXY_URL,
        http_request_handler=request_handler,
        error_renderer=error_renderer,
    )


def set_request_result(request_handler: MagicMock, result: RequestResult) -> None:
    """Make the request handler double return the given result."""
    request_handler.do_get_request.return_value = result
