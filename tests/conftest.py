# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Global pytest fixtures shared across all test modules.

- Environment cleanup (proxy-regression configuration variables)
- Proxy bypass for localhost
"""

import os
import re
from collections.abc import Generator

import pytest


@pytest.fixture(scope="session", autouse=True)
def clear_proxy_regression_env() -> None:
    """Clear any proxy-regression settings from the environment.

    CLI options fall back to PROXY_REGRESSION_* environment variables, so
    values from the caller's shell would change the defaults under test.
    """
    pattern = re.compile(r"^PROXY_REGRESSION_[A-Z_]+$")
    keys_to_remove = [key for key in os.environ.keys() if pattern.match(key)]
    for key in keys_to_remove:
        del os.environ[key]


@pytest.fixture(scope="session", autouse=True)
def bypass_proxy_for_localhost() -> Generator[None, None, None]:
    """Ensure localhost is in no_proxy so httpx never routes through a proxy."""
    original_no_proxy = os.environ.get("no_proxy")
    hosts = [h for h in (original_no_proxy or "").split(",") if h]
    for host in ("127.0.0.1", "localhost"):
        if host not in hosts:
            hosts.append(host)
    os.environ["no_proxy"] = ",".join(hosts)

    yield

    if original_no_proxy is not None:
        os.environ["no_proxy"] = original_no_proxy
    else:
        del os.environ["no_proxy"]
