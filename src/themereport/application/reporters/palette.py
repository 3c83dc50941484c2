"""Severity palette: severity → rich style."""

from __future__ import annotations

from types import MappingProxyType

from themereport.domain.model.enums import Severity

SEVERITY_STYLES = MappingProxyType(
    {
        Severity.ERROR: "red",
        Severity.WARNING: "yellow",
        Severity.RECOMMENDATION: "yellow",
        Severity.FEATURE: "green",
    }
)


def style_for(severity: Severity) -> str:
    """Rich style name for a severity."""
    return SEVERITY_STYLES[severity]


def styled(text: str, style: str) -> str:
    """Wrap already-escaped text in rich markup for style."""
    return f"[{style}]{text}[/{style}]"
