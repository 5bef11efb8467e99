# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Async HTTP request handler used by the API check handlers.

The handler wraps a single httpx.AsyncClient and returns typed
RequestResult values instead of raising, so check handlers branch on the
outcome rather than intercepting exceptions.

Non-2xx responses are reported as failures: the proxy is expected to
answer every v1.0 endpoint with a 2xx status, and anything else is a
failed request as far as the checks are concerned.
"""

import logging
import time
from typing import Any

import httpx

from proxy_regression.core.constants import DEFAULT_HTTP_TIMEOUT_SECONDS
from proxy_regression.core.error_classification import classify_request_error
from proxy_regression.core.types import (
    RequestFailure,
    RequestResult,
    RequestSuccess,
)

logger = logging.getLogger(__name__)


class HttpRequestHandler:
    """Performs requests against proxy endpoints.

    The handler can wrap an existing httpx.AsyncClient (it is then not
    closed by the handler) or create its own on first use. It adds no
    locking; concurrent use is as safe as httpx.AsyncClient itself.

    Example:
        async with HttpRequestHandler(timeout=10.0) as handler:
            result = await handler.do_get_request(
                "http://localhost:7950/node/heartbeatstatus"
            )
    """

    def __init__(
        self,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        verify: bool = True,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the request handler.

        Args:
            timeout: Timeout in seconds applied by the underlying client.
            verify: SSL verification flag. Set to False to skip verification.
            client: Optional pre-configured client to use instead of creating one.
        """
        self._timeout = timeout
        self._verify = verify
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """The underlying httpx client, created lazily."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                verify=self._verify,
            )
        return self._client

    async def __aenter__(self) -> "HttpRequestHandler":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this handler created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def do_get_request(self, url: str) -> RequestResult:
        """Perform one GET request.

        Args:
            url: Absolute URL of the endpoint.

        Returns:
            RequestSuccess carrying the response for 2xx answers, otherwise
            RequestFailure carrying the error and its classification.
        """
        start_time = time.time()
        logger.debug("GET %s", url)
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except Exception as e:
            kind, detail = classify_request_error(e)
            logger.debug(
                "GET %s failed after %.3fs: %s (%s)",
                url,
                time.time() - start_time,
                detail,
                kind.value,
            )
            return RequestFailure(url=url, error=e, kind=kind, detail=detail)

        logger.debug(
            "GET %s -> %s in %.3fs", url, response.status_code, time.time() - start_time
        )
        return RequestSuccess(response=response)
