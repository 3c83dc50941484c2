"""Summary line: one sentence about error and warning counts.

The underline under a problem summary is as wide as the summary's visible
text. Markup tags are measured away by rendering through rich, so wording
or style changes never need an offset adjustment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.text import Text

from themereport.application.reporters.palette import styled

if TYPE_CHECKING:
    from themereport.domain.model.check_configuration import CheckConfiguration
    from themereport.domain.model.theme_result import ThemeResult

CHECK_SYMBOL = "✓"
ERROR_COUNT_STYLE = "bold red"
WARNING_COUNT_STYLE = "bold yellow"


def pluralize(word: str, count: int) -> str:
    """Format count with word, e.g. "1 error", "3 errors"."""
    suffix = "" if count == 1 else "s"
    return f"{count} {word}{suffix}"


def visible_width(markup: str) -> int:
    """Terminal cell width of markup once styling is applied."""
    return Text.from_markup(markup).cell_len


def underline(markup: str, char: str = "-") -> str:
    """Row of char matching the visible width of markup."""
    return char * visible_width(markup)


def render_summary(result: ThemeResult, config: CheckConfiguration) -> str:
    """Render the compatibility summary as rich markup.

    Success: one line with a check mark and the checked version.
    Otherwise: "Your theme has N errors and M warnings!" plus underline.
    """
    error_count = result.error_count
    warning_count = result.warning_count
    version = escape(result.checked_version)

    if error_count == 0 and warning_count == 0:
        mark = styled(CHECK_SYMBOL, "green")
        if config.only_fatal_errors:
            return f"{mark} Your theme has no fatal compatibility issues with Ghost {version}"
        return f"{mark} Your theme is compatible with Ghost {version}"

    summary = "Your theme has"
    if error_count:
        summary += styled(f" {pluralize('error', error_count)}", ERROR_COUNT_STYLE)
    if error_count and warning_count:
        summary += " and"
    if warning_count:
        summary += styled(f" {pluralize('warning', warning_count)}", WARNING_COUNT_STYLE)
    summary += "!"

    return f"{summary}\n{underline(summary)}"
