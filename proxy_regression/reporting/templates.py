# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Utility functions for working with Jinja2 templates.

This module provides Jinja2 environment configuration and custom filters
for rendering the HTML error fragments and check reports.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from proxy_regression.core.types import TestStatus

# Get the absolute path to the templates directory
TEMPLATES_DIR = Path(__file__).parent / "templates"


def format_datetime(dt_str: str | datetime) -> str:
    """Format an ISO datetime string to a human-readable format.

    Args:
        dt_str: Either an ISO format datetime string or a datetime object.

    Returns:
        Formatted datetime string in "YYYY-MM-DD HH:MM:SS" format.

    Example:
        >>> format_datetime("2024-01-15T14:30:45.123456")
        '2024-01-15 14:30:45'
    """
    if isinstance(dt_str, str):
        dt = datetime.fromisoformat(dt_str)
    else:
        dt = dt_str
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def get_status_style(status: TestStatus | bool | str) -> dict[str, str]:
    """Get the CSS class and display text for a suite status or phase outcome.

    Args:
        status: A TestStatus value, its string form, or a phase's passed flag.

    Returns:
        Dictionary with keys:
            - css_class: CSS class name for styling (e.g., "pass-status")
            - display_text: Human-readable status text (e.g., "SUCCESSFUL")

    Example:
        >>> get_status_style(TestStatus.SUCCESSFUL)
        {'css_class': 'pass-status', 'display_text': 'SUCCESSFUL'}
    """
    if isinstance(status, bool):
        if status:
            return {"css_class": "pass-status", "display_text": "PASSED"}
        return {"css_class": "fail-status", "display_text": "FAILED"}

    if isinstance(status, str) and not isinstance(status, TestStatus):
        try:
            status = TestStatus(status)
        except ValueError:
            return {"css_class": "neutral-status", "display_text": status}

    if status == TestStatus.SUCCESSFUL:
        return {"css_class": "pass-status", "display_text": "SUCCESSFUL"}
    return {"css_class": "fail-status", "display_text": "UNSUCCESSFUL"}


def get_jinja_environment(directory: str | Path = TEMPLATES_DIR) -> Environment:
    """Create a Jinja2 environment for rendering templates.

    Args:
        directory: Directory containing the templates.

    Returns:
        Configured Jinja2 Environment instance with:
            - Custom filters registered (format_datetime, status_style)
            - Strict undefined handling
            - Whitespace trimming enabled
            - HTML autoescaping
    """
    environment = Environment(
        loader=FileSystemLoader(str(directory)),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        autoescape=True,
    )
    environment.filters["format_datetime"] = format_datetime
    environment.filters["status_style"] = get_status_style

    return environment


def render_template(template_path: str, **context: Any) -> str:
    """Render a template file with the given context.

    Args:
        template_path: Path to the template relative to the templates directory
                      (e.g., "err_response.html.j2").
        **context: Keyword arguments passed as variables to the template.

    Returns:
        Rendered template as a string.
    """
    env = get_jinja_environment(TEMPLATES_DIR)
    template = env.get_template(template_path)
    return template.render(**context)
