# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Node API checks for the proxy API v1.0."""

import logging

from proxy_regression.core.constants import (
    API_VERSION_V1_0,
    HEARTBEAT_ERROR_LABEL,
    HEARTBEAT_STATUS_PATH,
)
from proxy_regression.core.error_classification import classify_request_error
from proxy_regression.core.http_constants import HTTP_STATUS_OK
from proxy_regression.core.types import (
    RequestFailure,
    TestPhase,
    TestStatus,
    TestSuite,
)
from proxy_regression.handlers.common import CommonHandler
from proxy_regression.reporting.errors import err_html

logger = logging.getLogger(__name__)


class NodeV1_0Handler:
    """Handles the node API calls for the API v1.0."""

    def __init__(self, common_handler: CommonHandler) -> None:
        self.common_handler = common_handler

    async def handle_heartbeat(self) -> TestSuite:
        """Check the node heartbeat status endpoint.

        Performs one GET against <proxy_url>/node/heartbeatstatus and
        checks for a 200 answer. Failures never propagate: the error is
        handed to the error renderer and an UNSUCCESSFUL suite without
        phases or response is returned instead.

        The suite stays SUCCESSFUL when the request succeeded but the
        status code phase failed; callers inspect the phases for that.

        Returns:
            TestSuite labelled "v1.0".
        """
        test_phases: list[TestPhase] = []
        url = self.common_handler.build_url(HEARTBEAT_STATUS_PATH)

        try:
            result = await self.common_handler.http_request_handler.do_get_request(
                url
            )
            if isinstance(result, RequestFailure):
                failure = result
            else:
                test_phases.append(
                    self.common_handler.run_basic_test_phase_ok(
                        result.response, HTTP_STATUS_OK
                    )
                )
                logger.info("Heartbeat check against %s completed", url)
                return TestSuite(
                    API_VERSION_V1_0,
                    test_phases,
                    TestStatus.SUCCESSFUL,
                    result.response,
                )
        except Exception as e:
            kind, detail = classify_request_error(e)
            failure = RequestFailure(url=url, error=e, kind=kind, detail=detail)

        self._display_failure(failure)
        return TestSuite(API_VERSION_V1_0, test_phases, TestStatus.UNSUCCESSFUL, None)

    def _display_failure(self, failure: RequestFailure) -> None:
        try:
            self.common_handler.error_renderer.display_err_response(
                HEARTBEAT_ERROR_LABEL, failure.url, err_html(failure)
            )
        except Exception:
            logger.exception(
                "Could not render error display for %s (%s)",
                failure.url,
                failure.detail,
            )
