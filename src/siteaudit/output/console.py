"""
Console output for a validation run.

Prints suite headers, per-page groupings and one marker line per check while
the engine runs, followed by a summary banner.
"""

import sys
from typing import Optional, TextIO

from siteaudit.model import CheckResult, Report
from siteaudit.dom.core import SuiteDefinition


class ConsoleReporter:
    """
    Line-oriented reporter used as the QNGINE listener.

    Uses ANSI escape codes for the pass/fail markers in terminal environments.
    Falls back to plain text when not in a TTY.
    """

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "dim": "\033[2m",
        "green": "\033[32m",
        "red": "\033[31m",
    }

    BANNER_WIDTH = 50

    def __init__(self, stream: Optional[TextIO] = None, use_colors: bool = True):
        self.stream = stream or sys.stdout
        self.use_colors = use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()

    def _c(self, color: str, text: str) -> str:
        if self.use_colors:
            return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"
        return text

    def _print(self, line: str = "") -> None:
        print(line, file=self.stream)

    # --- Listener protocol ---

    def __call__(self, kind: str, payload: object) -> None:
        if kind == "suite":
            self.suite_started(payload)
        elif kind == "page":
            self.page_started(payload)
        elif kind == "result":
            self.check_finished(payload)

    def suite_started(self, suite: SuiteDefinition) -> None:
        self._print(f"\n{suite.title}")

    def page_started(self, page_name: str) -> None:
        self._print(f"\n  [{page_name}]")

    def check_finished(self, res: CheckResult) -> None:
        if res.passed:
            self._print(f"  {self._c('green', '✓')} {res.name}")
            return
        self._print(f"  {self._c('red', '✗')} {res.name}")
        if res.message:
            self._print(f"    → {res.message}")

    # --- Framing ---

    def header(self, site_name: str) -> None:
        self._print("═" * self.BANNER_WIDTH)
        self._print(f"  {site_name} - Test Suite")
        self._print("═" * self.BANNER_WIDTH)

    def summary(self, report: Report) -> None:
        self._print("\n" + "═" * self.BANNER_WIDTH)
        self._print(f"  Results: {report.passed} passed, {report.failed} failed")
        self._print("═" * self.BANNER_WIDTH)

        if report.ok:
            self._print("\n✅ All tests passed!\n")
            return

        self._print("\n❌ Some tests failed:\n")
        for res in report.failures:
            where = f" ({res.page})" if res.page else ""
            self._print(f"  • {res.name}{where}")
            if res.message:
                self._print(f"    {res.message}")
