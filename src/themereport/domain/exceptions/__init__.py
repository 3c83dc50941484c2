"""Domain exceptions."""

from themereport.domain.exceptions.base import ThemeReportError
from themereport.domain.exceptions.checker import (
    CheckerInvocationError,
    CheckerLoadError,
    CheckerNotFoundError,
    InvocationErrorKind,
)
from themereport.domain.exceptions.result import ResultFormatError, UnknownSeverityError

__all__ = [
    "ThemeReportError",
    "CheckerInvocationError",
    "CheckerLoadError",
    "CheckerNotFoundError",
    "InvocationErrorKind",
    "ResultFormatError",
    "UnknownSeverityError",
]
