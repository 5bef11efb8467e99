# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Core types for proxy-regression checks.

Result records produced by the API handlers and the typed outcome
returned by the HTTP request handler.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx


class TestStatus(str, Enum):
    """Overall status of a result record.

    SUCCESSFUL: The request and the basic phase check ran without error
    UNSUCCESSFUL: The request or the check raised an error
    """

    SUCCESSFUL = "successful"
    UNSUCCESSFUL = "unsuccessful"


@dataclass(frozen=True)
class TestPhase:
    """One discrete assertion within a check.

    Attributes:
        name: Short description of what was asserted
        passed: Whether the assertion held
        expected: The expected value (e.g. the expected status code)
        actual: The observed value
        message: Human-readable outcome of the assertion
    """

    name: str
    passed: bool
    expected: Any = None
    actual: Any = None
    message: str = ""


@dataclass(frozen=True)
class TestSuite:
    """Aggregate outcome of one check invocation.

    Created once per invocation and never mutated afterwards. A suite with
    status UNSUCCESSFUL carries no phases and no response.

    Note: status only reflects whether an error occurred. A suite can be
    SUCCESSFUL while one of its phases failed, e.g. when the proxy answers
    with a 2xx status other than the expected one.

    Attributes:
        version: Label identifying the API version that was checked
        phases: Ordered phase records (zero or more)
        status: Overall status of the check
        response: The raw response the phases were evaluated against
    """

    version: str
    phases: tuple[TestPhase, ...] = ()
    status: TestStatus = TestStatus.SUCCESSFUL
    response: Any = None

    def __post_init__(self) -> None:
        # Accept any iterable of phases but always store an immutable tuple
        object.__setattr__(self, "phases", tuple(self.phases))

    @property
    def is_successful(self) -> bool:
        """Check if the check completed without error."""
        return self.status == TestStatus.SUCCESSFUL

    @property
    def passed_phases(self) -> list[TestPhase]:
        """Phases whose assertion held."""
        return [phase for phase in self.phases if phase.passed]

    @property
    def failed_phases(self) -> list[TestPhase]:
        """Phases whose assertion did not hold."""
        return [phase for phase in self.phases if not phase.passed]

    def __str__(self) -> str:
        """Concise string: TestSuite(v1.0, successful, 1/1 phases passed)."""
        return (
            f"TestSuite({self.version}, {self.status.value}, "
            f"{len(self.passed_phases)}/{len(self.phases)} phases passed)"
        )


class ErrorKind(str, Enum):
    """Classification of a failed request, used for diagnostics only.

    UNREACHABLE: Transport-level failure (timeout, refused, DNS, 5xx gateway)
    HTTP_STATUS: The proxy answered with an error status code
    INVALID_RESPONSE: The response could not be decoded
    UNEXPECTED: Anything else
    """

    UNREACHABLE = "unreachable"
    HTTP_STATUS = "http_status"
    INVALID_RESPONSE = "invalid_response"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class RequestSuccess:
    """A request that produced a response."""

    response: httpx.Response


@dataclass(frozen=True)
class RequestFailure:
    """A request that failed before a usable response was available.

    Attributes:
        url: The URL that was requested
        error: The exception raised while performing the request
        kind: Classification of the failure
        detail: Human-readable detail (e.g. "HTTP 503: Service Unavailable")
    """

    url: str
    error: BaseException
    kind: ErrorKind = ErrorKind.UNEXPECTED
    detail: str = field(default="")


RequestResult = RequestSuccess | RequestFailure
