# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""HTML error rendering for failed checks.

The ErrorRenderer receives one call per failed request, renders an HTML
fragment for it and keeps the fragment until the report is written. The
report is a single HTML file so CI/CD artifact collection always finds
one, whether or not the checks passed.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from markupsafe import Markup

from proxy_regression.core.types import TestSuite
from proxy_regression.reporting.templates import render_template

logger = logging.getLogger(__name__)

# Output filename for the check report
REPORT_FILENAME = "heartbeat_report.html"


@dataclass(frozen=True)
class ErrorResponse:
    """One rendered error display.

    Attributes:
        label: Identifies which output failed to load (e.g. "LoadHeartBeatOutput").
        url: The URL that was requested.
        html: The rendered HTML fragment.
    """

    label: str
    url: str
    html: str


class ErrorRenderer:
    """Collects HTML error displays for failed checks."""

    def __init__(self) -> None:
        self.responses: list[ErrorResponse] = []

    @property
    def fragments(self) -> list[str]:
        """Rendered HTML fragments in the order they were displayed."""
        return [response.html for response in self.responses]

    def display_err_response(self, label: str, url: str, error_html: str) -> None:
        """Render and record an error display.

        Args:
            label: Identifies which output failed to load.
            url: The URL that was requested.
            error_html: Pre-formatted HTML describing the error. It is
                embedded without further escaping.
        """
        logger.error("%s: request to %s failed", label, url)
        html = render_template(
            "err_response.html.j2",
            label=label,
            url=url,
            error_html=Markup(error_html),
        )
        self.responses.append(ErrorResponse(label=label, url=url, html=html))

    def write_report(self, suites: Iterable[TestSuite], output_dir: Path) -> Path:
        """Write the HTML report for a set of result records.

        Creates the output directory if needed.

        Args:
            suites: The result records to summarize.
            output_dir: The output directory path.

        Returns:
            The path to the generated HTML report file.
        """
        output_dir.mkdir(parents=True, exist_ok=True)

        html_content = render_template(
            "report.html.j2",
            suites=list(suites),
            error_fragments=[Markup(fragment) for fragment in self.fragments],
            timestamp=datetime.now(),
        )

        report_path = output_dir / REPORT_FILENAME
        report_path.write_text(html_content, encoding="utf-8")

        logger.info("Check report written to: %s", report_path)
        return report_path
