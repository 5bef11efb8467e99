"""Core components shared across the proxy-regression checks."""

from proxy_regression.core.constants import (
    API_VERSION_V1_0,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_PROXY_URL,
    HEARTBEAT_ERROR_LABEL,
    HEARTBEAT_STATUS_PATH,
)
from proxy_regression.core.types import (
    ErrorKind,
    RequestFailure,
    RequestResult,
    RequestSuccess,
    TestPhase,
    TestStatus,
    TestSuite,
)

__all__ = [
    # Constants
    "API_VERSION_V1_0",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "DEFAULT_PROXY_URL",
    "HEARTBEAT_ERROR_LABEL",
    "HEARTBEAT_STATUS_PATH",
    # Types
    "ErrorKind",
    "RequestFailure",
    "RequestResult",
    "RequestSuccess",
    "TestPhase",
    "TestStatus",
    "TestSuite",
]
