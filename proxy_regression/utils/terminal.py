# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Centralized terminal formatting utilities for proxy-regression."""

import os
import re

from colorama import Fore, Style, init

from proxy_regression.core.types import TestSuite

# autoreset=True means colors reset after each print
init(autoreset=True)


class TerminalColors:
    """Centralized color scheme for consistent terminal output."""

    # Semantic color mapping for different message types
    ERROR = Fore.RED
    WARNING = Fore.YELLOW
    SUCCESS = Fore.GREEN
    INFO = Fore.CYAN
    RESET = Style.RESET_ALL

    BOLD = Style.BRIGHT

    # Check if colors should be disabled (for CI/CD environments)
    NO_COLOR = os.environ.get("NO_COLOR") is not None

    # Regex pattern to match ANSI escape sequences
    ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

    @classmethod
    def strip_ansi(cls, text: str) -> str:
        """Remove all ANSI escape sequences from text."""
        return cls.ANSI_ESCAPE_PATTERN.sub("", text)

    @classmethod
    def error(cls, text: str) -> str:
        """Format error text in red."""
        if cls.NO_COLOR:
            return text
        return f"{cls.ERROR}{text}{cls.RESET}"

    @classmethod
    def warning(cls, text: str) -> str:
        """Format warning text in yellow."""
        if cls.NO_COLOR:
            return text
        return f"{cls.WARNING}{text}{cls.RESET}"

    @classmethod
    def success(cls, text: str) -> str:
        """Format success text in green."""
        if cls.NO_COLOR:
            return text
        return f"{cls.SUCCESS}{text}{cls.RESET}"

    @classmethod
    def info(cls, text: str) -> str:
        """Format info text in cyan."""
        if cls.NO_COLOR:
            return text
        return f"{cls.INFO}{text}{cls.RESET}"

    @classmethod
    def bold(cls, text: str) -> str:
        """Format text in bold."""
        if cls.NO_COLOR:
            return text
        return f"{cls.BOLD}{text}{cls.RESET}"

    @classmethod
    def format_suite_summary(cls, name: str, suite: TestSuite) -> str:
        """Format a one-block summary of a result record.

        Args:
            name: Name of the check (e.g. "heartbeat").
            suite: The result record to summarize.

        Returns:
            Multi-line summary with the suite status and one line per phase.
        """
        if not suite.is_successful:
            status = cls.error("UNSUCCESSFUL")
        elif suite.failed_phases:
            status = cls.warning("SUCCESSFUL (with failed phases)")
        else:
            status = cls.success("SUCCESSFUL")

        lines = [f"{cls.bold(name)} [{suite.version}]: {status}"]
        for phase in suite.phases:
            marker = cls.success("PASS") if phase.passed else cls.error("FAIL")
            lines.append(f"  {marker} {phase.name}: {phase.message}")
        return "\n".join(lines)


terminal = TerminalColors
