"""Result shape exceptions."""

from themereport.domain.exceptions.base import ThemeReportError


class UnknownSeverityError(ThemeReportError):
    """Severity string not recognized.

    Attributes:
        value: The unrecognized severity
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown severity: {value!r}")


class ResultFormatError(ThemeReportError):
    """Raw checker result does not have the expected shape.

    Attributes:
        reason: What is wrong (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Malformed theme result: {reason}")
