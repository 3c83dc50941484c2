"""Domain enumerations."""

from __future__ import annotations

from enum import Enum, IntEnum

from themereport.domain.exceptions.result import UnknownSeverityError


class Severity(Enum):
    """Finding severity, ordered from most to least blocking.

    Values are the keys used by the checker in its results mapping.
    """

    ERROR = "error"  # fails the run
    WARNING = "warning"
    RECOMMENDATION = "recommendation"
    FEATURE = "feature"  # never rendered in the report body

    @property
    def label(self) -> str:
        """Capitalized singular name, e.g. "Error"."""
        return self.value.capitalize()

    @property
    def plural(self) -> str:
        """Capitalized plural name, e.g. "Errors"."""
        return f"{self.label}s"

    @classmethod
    def parse(cls, value: str) -> Severity:
        """Map a checker severity string to a member.

        Raises:
            UnknownSeverityError: If value names no severity.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownSeverityError(value) from None


class CheckVersion(Enum):
    """Ghost version a theme is checked against."""

    V1 = "v1"
    V2 = "v2"
    V3 = "v3"
    V4 = "v4"  # reserved, no visible CLI flag
    LATEST = "latest"
    CANARY = "canary"


class ExitCode(IntEnum):
    """Process exit codes."""

    OK = 0
    ERRORS = 1  # at least one error finding
    INVOCATION_FAILED = 2  # checker could not run
