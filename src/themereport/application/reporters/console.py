"""Console reporter: ThemeResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from types import MappingProxyType
from typing import TYPE_CHECKING

from rich.console import Console

from themereport.application.reporters.finding import render_finding
from themereport.application.reporters.palette import styled
from themereport.application.reporters.summary import render_summary
from themereport.domain.model.enums import Severity

if TYPE_CHECKING:
    from themereport.domain.model.check_configuration import CheckConfiguration
    from themereport.domain.model.theme_result import ThemeResult

# FEATURE findings are never listed.
RENDERED_SEVERITIES: tuple[Severity, ...] = (
    Severity.ERROR,
    Severity.WARNING,
    Severity.RECOMMENDATION,
)

SECTION_STYLES = MappingProxyType(
    {
        Severity.ERROR: "bold red",
        Severity.WARNING: "bold yellow",
        Severity.RECOMMENDATION: "bold yellow",
    }
)

SECTION_SUBTITLES = MappingProxyType(
    {
        Severity.ERROR: "Important to fix, functionality may be degraded.",
    }
)

DOCS_URL = "https://ghost.org/docs/api/handlebars-themes/"
ONLINE_CHECKER_URL = "https://gscan.ghost.org/"
LINK_STYLE = "cyan underline"


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width. None = 120.
        no_color: Emit plain text without ANSI styling.
        force_terminal: Style output even when not writing to a TTY.
        color_system: Rich color system ("auto", "standard", "256", "truecolor").
    """

    width: int | None = None
    no_color: bool = False
    force_terminal: bool = True
    color_system: str = "auto"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width is not None and self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")


class ConsoleReporter:
    """Console reporter: summary, severity sections, footer links.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def make_console(self, output: StringIO) -> Console:
        """Console writing into output, styled unless no_color."""
        width = self._config.width or 120
        if self._config.no_color:
            return Console(
                file=output,
                force_terminal=False,
                color_system=None,
                width=width,
                highlight=False,
                emoji=False,
            )
        return Console(
            file=output,
            force_terminal=self._config.force_terminal,
            color_system=self._config.color_system,
            width=width,
            highlight=False,
            emoji=False,
        )

    def report(self, result: ThemeResult, config: CheckConfiguration) -> str:
        """Format theme result as rich formatted string.

        Args:
            result: Post-formatting theme result.
            config: Resolved check configuration.

        Returns:
            Report text with styling (unless no_color).
        """
        output = StringIO()
        console = self.make_console(output)

        self._render_summary(console, result, config)
        for severity in RENDERED_SEVERITIES:
            findings = result.findings(severity)
            if findings:
                self._render_section(console, severity)
                for finding in findings:
                    for line in render_finding(finding, config):
                        console.print(line, soft_wrap=True)
        self._render_footer(console)

        return output.getvalue()

    def render_lines(self, lines: list[str]) -> str:
        """Render markup lines with this reporter's console settings."""
        output = StringIO()
        console = self.make_console(output)
        for line in lines:
            console.print(line, soft_wrap=True)
        return output.getvalue()

    def _render_summary(self, console: Console, result: ThemeResult, config: CheckConfiguration) -> None:
        """Render blank line and summary."""
        console.print()
        console.print(render_summary(result, config), soft_wrap=True)

    def _render_section(self, console: Console, severity: Severity) -> None:
        """Render section header, underline and optional subtitle."""
        style = SECTION_STYLES[severity]
        header = severity.plural

        console.print()
        console.print(styled(header, style))
        console.print(styled("-" * len(header), style))

        subtitle = SECTION_SUBTITLES.get(severity)
        if subtitle:
            console.print(styled(subtitle, style.removeprefix("bold ")))
            console.print()

    def _render_footer(self, console: Console) -> None:
        """Render help links."""
        console.print()
        docs = styled(DOCS_URL, LINK_STYLE)
        online = styled(ONLINE_CHECKER_URL, LINK_STYLE)
        console.print(f"Get more help at {docs}", soft_wrap=True)
        console.print(f"You can also check theme compatibility at {online}", soft_wrap=True)
