# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Unit tests for the error renderer and the HTML check report.

These tests verify that error displays are rendered and recorded, and
that the report written to disk contains the expected content.
"""

from pathlib import Path

import pytest

from proxy_regression.core.types import TestPhase, TestStatus, TestSuite
from proxy_regression.reporting.renders import REPORT_FILENAME, ErrorRenderer
from proxy_regression.reporting.templates import format_datetime, get_status_style
from tests.unit.conftest import HEARTBEAT_URL

ERROR_HTML = '<ul class="error-chain"><li><code>ConnectError</code>: refused</li></ul>'


class TestDisplayErrResponse:
    """Tests for ErrorRenderer.display_err_response()."""

    def test_records_rendered_fragment(self) -> None:
        renderer = ErrorRenderer()

        renderer.display_err_response("LoadHeartBeatOutput", HEARTBEAT_URL, ERROR_HTML)

        assert len(renderer.responses) == 1
        response = renderer.responses[0]
        assert response.label == "LoadHeartBeatOutput"
        assert response.url == HEARTBEAT_URL
        assert "<h3>LoadHeartBeatOutput</h3>" in response.html
        assert HEARTBEAT_URL in response.html
        assert renderer.fragments == [response.html]

    def test_error_html_is_embedded_verbatim(self) -> None:
        renderer = ErrorRenderer()

        renderer.display_err_response("LoadHeartBeatOutput", HEARTBEAT_URL, ERROR_HTML)

        assert ERROR_HTML in renderer.fragments[0]

    def test_label_is_escaped(self) -> None:
        renderer = ErrorRenderer()

        renderer.display_err_response("<script>", HEARTBEAT_URL, ERROR_HTML)

        assert "<script>" not in renderer.fragments[0]
        assert "&lt;script&gt;" in renderer.fragments[0]

    def test_logs_error(self, caplog: pytest.LogCaptureFixture) -> None:
        renderer = ErrorRenderer()

        with caplog.at_level("ERROR"):
            renderer.display_err_response(
                "LoadHeartBeatOutput", HEARTBEAT_URL, ERROR_HTML
            )

        assert "LoadHeartBeatOutput" in caplog.text
        assert HEARTBEAT_URL in caplog.text

    def test_keeps_display_order(self) -> None:
        renderer = ErrorRenderer()

        renderer.display_err_response("First", HEARTBEAT_URL, ERROR_HTML)
        renderer.display_err_response("Second", HEARTBEAT_URL, ERROR_HTML)

        assert [r.label for r in renderer.responses] == ["First", "Second"]


class TestWriteReport:
    """Tests for ErrorRenderer.write_report()."""

    def test_creates_html_file(self, tmp_path: Path) -> None:
        renderer = ErrorRenderer()
        suite = TestSuite("v1.0", [], TestStatus.UNSUCCESSFUL, None)

        report_path = renderer.write_report([suite], tmp_path)

        assert report_path.exists()
        assert report_path.name == REPORT_FILENAME
        assert report_path.parent == tmp_path

    def test_creates_output_directory_if_missing(self, tmp_path: Path) -> None:
        output_dir = tmp_path / "nested" / "output"

        report_path = ErrorRenderer().write_report([], output_dir)

        assert output_dir.is_dir()
        assert report_path.exists()

    def test_successful_suite_content(self, tmp_path: Path) -> None:
        phase = TestPhase(
            name="status code",
            passed=True,
            expected=200,
            actual=200,
            message="Status code 200 as expected",
        )
        suite = TestSuite("v1.0", [phase], TestStatus.SUCCESSFUL, None)

        content = ErrorRenderer().write_report([suite], tmp_path).read_text()

        assert "v1.0" in content
        assert "SUCCESSFUL" in content
        assert "Status code 200 as expected" in content
        assert "<h2>Errors</h2>" not in content

    def test_failed_suite_includes_error_fragments(self, tmp_path: Path) -> None:
        renderer = ErrorRenderer()
        renderer.display_err_response("LoadHeartBeatOutput", HEARTBEAT_URL, ERROR_HTML)
        suite = TestSuite("v1.0", [], TestStatus.UNSUCCESSFUL, None)

        content = renderer.write_report([suite], tmp_path).read_text()

        assert "UNSUCCESSFUL" in content
        assert "no phases" in content
        assert "<h2>Errors</h2>" in content
        assert ERROR_HTML in content


class TestTemplateFilters:
    """Tests for the custom Jinja2 filters."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            (TestStatus.SUCCESSFUL, {"css_class": "pass-status", "display_text": "SUCCESSFUL"}),
            (TestStatus.UNSUCCESSFUL, {"css_class": "fail-status", "display_text": "UNSUCCESSFUL"}),
            ("successful", {"css_class": "pass-status", "display_text": "SUCCESSFUL"}),
            (True, {"css_class": "pass-status", "display_text": "PASSED"}),
            (False, {"css_class": "fail-status", "display_text": "FAILED"}),
            ("weird", {"css_class": "neutral-status", "display_text": "weird"}),
        ],
    )
    def test_status_style(self, status: object, expected: dict[str, str]) -> None:
        assert get_status_style(status) == expected  # type: ignore[arg-type]

    def test_format_datetime(self) -> None:
        assert format_datetime("2024-01-15T14:30:45.123456") == "2024-01-15 14:30:45"
