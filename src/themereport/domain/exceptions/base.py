"""Base exceptions for themereport domain."""


class ThemeReportError(Exception):
    """Root exception for all themereport errors.

    All domain exceptions inherit from this.
    Allows catching all themereport-specific errors.
    """
