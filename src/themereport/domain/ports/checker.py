"""Theme checker port.

The checking engine is external. It is reached through three entry points
and may return either a ThemeResult or a raw JSON-shaped mapping.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Mapping

    from themereport.domain.model.theme_result import ThemeResult


@runtime_checkable
class ThemeChecker(Protocol):
    """Contract for theme checking engines.

    Options passed to every entry point have the shape
    {"checkVersion": str, "verbose": bool, "onlyFatalErrors": bool}.

    Example:
        class MyChecker:
            async def check(self, path, options):
                return {"checkedVersion": "5.x", "results": {...}}

            async def check_zip(self, path, options):
                ...

            def format(self, result, options):
                return result
    """

    async def check(self, path: str, options: Mapping[str, Any]) -> ThemeResult | Mapping[str, Any]:
        """Check a theme directory."""
        ...

    async def check_zip(self, path: str, options: Mapping[str, Any]) -> ThemeResult | Mapping[str, Any]:
        """Check a zipped theme."""
        ...

    def format(
        self,
        result: ThemeResult,
        options: Mapping[str, Any],
    ) -> ThemeResult | Mapping[str, Any] | Awaitable[ThemeResult | Mapping[str, Any]]:
        """Normalize a raw result. Sync or async; may raise."""
        ...
