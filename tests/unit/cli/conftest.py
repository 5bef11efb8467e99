# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
from collections.abc import Generator
from unittest.mock import Mock, patch

import pytest
from click.testing import Result
from typer.testing import CliRunner

from proxy_regression.cli.main import app, error_handler

runner = CliRunner()


def run_cli(args: list[str] | None = None) -> Result:
    """Run the CLI with the given arguments."""
    return runner.invoke(app, args or [])


@pytest.fixture(autouse=True)
def isolated_logging() -> Generator[Mock, None, None]:
    """Keep the CLI from reconfiguring the root logger during tests.

    The error handler is reset instead, so ERROR records logged by earlier
    tests do not leak into the exit code.
    """
    with patch("proxy_regression.cli.main.configure_logging") as mock_configure:
        mock_configure.side_effect = lambda level, handler: handler.reset()
        error_handler.reset()
        yield mock_configure
