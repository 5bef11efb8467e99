# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core constants shared across the proxy-regression checks."""

# Proxy defaults
DEFAULT_PROXY_URL = "http://localhost:7950"

# HTTP client timeout (enforced by the client, not by the check handlers)
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0

# API version label attached to every v1.0 result record
API_VERSION_V1_0 = "v1.0"

# Node endpoints
HEARTBEAT_STATUS_PATH = "/node/heartbeatstatus"

# Labels passed to the error renderer
HEARTBEAT_ERROR_LABEL = "LoadHeartBeatOutput"

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
