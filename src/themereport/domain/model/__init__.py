"""Domain model."""

from themereport.domain.model.check_configuration import CheckConfiguration
from themereport.domain.model.enums import CheckVersion, ExitCode, Severity
from themereport.domain.model.finding import FailureRef, Finding
from themereport.domain.model.theme_result import ThemeResult

__all__ = [
    "CheckConfiguration",
    "CheckVersion",
    "ExitCode",
    "FailureRef",
    "Finding",
    "Severity",
    "ThemeResult",
]
