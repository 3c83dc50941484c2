"""Reporter protocol for output formatting.

NOT rich-specific - reporters can produce any text format.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from themereport.domain.model.check_configuration import CheckConfiguration
    from themereport.domain.model.theme_result import ThemeResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Output is str, not print(). Caller decides destination.
    themereport provides ConsoleReporter as the default.
    """

    def report(self, result: ThemeResult, config: CheckConfiguration) -> str:
        """Format a theme result.

        Args:
            result: Post-formatting theme result
            config: Resolved check configuration

        Returns:
            Report text.
        """
        ...
