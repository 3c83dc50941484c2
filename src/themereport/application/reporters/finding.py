"""Finding renderer: compact or verbose lines for one finding."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from themereport.application.reporters.palette import style_for, styled

if TYPE_CHECKING:
    from themereport.domain.model.check_configuration import CheckConfiguration
    from themereport.domain.model.finding import Finding


def render_finding(finding: Finding, config: CheckConfiguration) -> list[str]:
    """Render a finding as rich markup lines.

    Compact mode lists failing refs on one line. Verbose mode adds the
    details and one "<ref> - <message>" line per failure.
    Always ends with a blank line.
    """
    label = styled(f"- {finding.level.label}:", style_for(finding.level))
    lines = [f"{label} {escape(finding.rule)}"]

    if config.verbose:
        lines.append("")
        lines.append(f"[bold]Details:[/bold] {escape(finding.details)}")

    if finding.failures:
        if config.verbose:
            lines.append("")
            lines.append("[bold]Files:[/bold]")
            lines.extend(f"{escape(f.ref)} - {escape(f.message)}" for f in finding.failures)
        else:
            lines.append(f"[bold]Files:[/bold] {escape(','.join(finding.refs))}")

    lines.append("")
    return lines
