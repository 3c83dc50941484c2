"""Reporters for theme check results.

ConsoleReporter renders the full report; summary and finding renderers
produce rich markup and can be reused by custom reporters.
"""

from themereport.application.reporters.console import ConsoleConfig, ConsoleReporter
from themereport.application.reporters.finding import render_finding
from themereport.application.reporters.palette import SEVERITY_STYLES, style_for
from themereport.application.reporters.summary import pluralize, render_summary, visible_width

__all__ = [
    "SEVERITY_STYLES",
    "ConsoleConfig",
    "ConsoleReporter",
    "pluralize",
    "render_finding",
    "render_summary",
    "style_for",
    "visible_width",
]
