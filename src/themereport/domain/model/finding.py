"""Finding entity: one reported compatibility issue."""

from __future__ import annotations

from dataclasses import dataclass

from themereport.domain.model.enums import Severity


@dataclass(frozen=True, slots=True)
class FailureRef:
    """A location where a rule failed.

    Attributes:
        ref: File or location identifier
        message: What failed there
    """

    ref: str
    message: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.ref:
            raise ValueError("ref must not be empty")


@dataclass(frozen=True, slots=True)
class Finding:
    """Compatibility finding produced by the checker.

    Attributes:
        rule: Rule name or description
        level: Severity of the finding
        details: Long-form explanation (shown in verbose mode)
        failures: Failing locations, in checker order (may be empty)
    """

    rule: str
    level: Severity
    details: str = ""
    failures: tuple[FailureRef, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule:
            raise ValueError("rule must not be empty")
        if not isinstance(self.level, Severity):
            raise TypeError(f"level must be Severity, got {type(self.level).__name__}")

    @property
    def refs(self) -> tuple[str, ...]:
        """Failure refs in order."""
        return tuple(failure.ref for failure in self.failures)
