"""Report orchestrator: format → report → exit code.

run_check() is the whole one-shot pipeline used by the CLI:

    banner → invoke checker → postprocess → report → exit code
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from rich.markup import escape

from themereport.application.reporters.console import ConsoleReporter
from themereport.application.services.formatter import postprocess
from themereport.application.services.invoker import CheckerInvoker
from themereport.domain.exceptions import CheckerInvocationError
from themereport.domain.model.enums import ExitCode

if TYPE_CHECKING:
    from themereport.domain.model.check_configuration import CheckConfiguration
    from themereport.domain.model.theme_result import ThemeResult
    from themereport.domain.ports.checker import ThemeChecker
    from themereport.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

BANNER = "Checking theme compatibility..."
FATAL_BANNER = "Checking theme compatibility (fatal issues only)..."


def exit_code_for(result: ThemeResult) -> ExitCode:
    """ERRORS if any error finding, else OK. Other severities never fail."""
    return ExitCode.ERRORS if result.error_count > 0 else ExitCode.OK


class ReportOrchestrator:
    """Formats a theme result, writes the report, picks the exit code.

    Composition-based: checker supplies the format step, reporter turns
    the formatted result into text.
    """

    def __init__(
        self,
        checker: ThemeChecker,
        reporter: ReporterProtocol | None = None,
        output: TextIO | None = None,
    ) -> None:
        """Initialize orchestrator.

        Args:
            checker: Checker whose format step post-processes results
            reporter: Report formatter (default: ConsoleReporter)
            output: Report destination (default: sys.stdout at write time)
        """
        self._checker = checker
        self._reporter = reporter or ConsoleReporter()
        self._output = output

    async def render(self, result: ThemeResult, config: CheckConfiguration) -> ExitCode:
        """Write the report for result and return the exit code.

        The exit code is computed from the post-formatting result.
        """
        formatted = await postprocess(self._checker, result, config)
        self.write(self._reporter.report(formatted, config))
        code = exit_code_for(formatted)
        logger.debug("Report rendered: %d errors, exit code %d", formatted.error_count, code)
        return code

    def write(self, text: str) -> None:
        """Write text to the configured output."""
        output = self._output if self._output is not None else sys.stdout
        output.write(text)
        output.flush()


async def run_check(
    checker: ThemeChecker,
    path: str,
    as_zip: bool,
    config: CheckConfiguration,
    *,
    reporter: ConsoleReporter | None = None,
    output: TextIO | None = None,
) -> ExitCode:
    """Run the full check pipeline once.

    On checker failure writes the error (and hint, if any) instead of a
    report and returns INVOCATION_FAILED.
    """
    reporter = reporter or ConsoleReporter()
    orchestrator = ReportOrchestrator(checker, reporter, output)

    banner = FATAL_BANNER if config.only_fatal_errors else BANNER
    orchestrator.write(reporter.render_lines(["", f"[bold]{banner}[/bold]"]))

    try:
        result = await CheckerInvoker(checker).invoke(path, as_zip, config)
    except CheckerInvocationError as err:
        logger.debug("Checker failed on %s: %s", path, err.kind.name)
        lines = [escape(err.message)]
        if err.hint:
            lines.append(escape(err.hint))
        orchestrator.write(reporter.render_lines(lines))
        return ExitCode.INVOCATION_FAILED

    return await orchestrator.render(result, config)
