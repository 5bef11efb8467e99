# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

import asyncio
import logging
from pathlib import Path
from typing import Optional

import errorhandler
import typer
from typing_extensions import Annotated

import proxy_regression
from proxy_regression.core.constants import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_PROXY_URL,
    EXIT_FAILURE,
    EXIT_SUCCESS,
)
from proxy_regression.core.types import TestSuite
from proxy_regression.handlers import CommonHandler, NodeV1_0Handler
from proxy_regression.http import HttpRequestHandler
from proxy_regression.reporting import ErrorRenderer
from proxy_regression.utils.logging import VerbosityLevel, configure_logging
from proxy_regression.utils.terminal import terminal

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)

error_handler = errorhandler.ErrorHandler()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"proxy-regression, version {proxy_regression.__version__}")
        raise typer.Exit()


Verbosity = Annotated[
    VerbosityLevel,
    typer.Option(
        "-v",
        "--verbosity",
        help="Verbosity level.",
        envvar="PROXY_REGRESSION_VERBOSITY",
        is_eager=True,
    ),
]


ProxyUrl = Annotated[
    str,
    typer.Option(
        "-p",
        "--proxy-url",
        help="Base URL of the proxy under test.",
        envvar="PROXY_REGRESSION_PROXY_URL",
    ),
]


Output = Annotated[
    Optional[Path],
    typer.Option(
        "-o",
        "--output",
        exists=False,
        dir_okay=True,
        file_okay=False,
        help="Path to output directory for the HTML report.",
        envvar="PROXY_REGRESSION_OUTPUT",
    ),
]


Timeout = Annotated[
    float,
    typer.Option(
        "--timeout",
        help="HTTP client timeout in seconds.",
        envvar="PROXY_REGRESSION_TIMEOUT",
        min=0.1,
    ),
]


Insecure = Annotated[
    bool,
    typer.Option(
        "--insecure",
        help="Skip TLS certificate verification.",
        envvar="PROXY_REGRESSION_INSECURE",
    ),
]


Version = Annotated[
    bool,
    typer.Option(
        "--version",
        callback=version_callback,
        help="Display version number.",
        is_eager=True,
    ),
]


async def run_heartbeat_check(
    proxy_url: str, timeout: float, verify: bool, error_renderer: ErrorRenderer
) -> TestSuite:
    """Run the v1.0 heartbeat check against a proxy."""
    async with HttpRequestHandler(timeout=timeout, verify=verify) as request_handler:
        common_handler = CommonHandler(
            proxy_url=proxy_url,
            http_request_handler=request_handler,
            error_renderer=error_renderer,
        )
        return await NodeV1_0Handler(common_handler).handle_heartbeat()


@app.command()
def main(
    proxy_url: ProxyUrl = DEFAULT_PROXY_URL,
    output: Output = None,
    timeout: Timeout = DEFAULT_HTTP_TIMEOUT_SECONDS,
    insecure: Insecure = False,
    verbosity: Verbosity = VerbosityLevel.WARNING,
    version: Version = False,
) -> None:
    """A CLI tool to run regression checks against a node proxy."""
    configure_logging(verbosity, error_handler)

    error_renderer = ErrorRenderer()
    suite = asyncio.run(
        run_heartbeat_check(proxy_url, timeout, not insecure, error_renderer)
    )

    typer.echo(terminal.format_suite_summary("heartbeat", suite))

    if output is not None:
        report_path = error_renderer.write_report([suite], output)
        typer.echo(f"Report: {report_path}")

    exit(suite)


def exit(suite: TestSuite) -> None:
    if error_handler.fired or not suite.is_successful or suite.failed_phases:
        raise typer.Exit(EXIT_FAILURE)
    else:
        raise typer.Exit(EXIT_SUCCESS)
