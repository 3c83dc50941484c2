"""Theme result aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from themereport.domain.model.enums import Severity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from themereport.domain.model.finding import Finding


@dataclass(frozen=True, slots=True)
class ThemeResult:
    """Findings of one theme check, bucketed by severity.

    Every severity key is present after construction (missing buckets
    become empty tuples). The mapping is read-only.

    Attributes:
        checked_version: Ghost version the theme was checked against
        results: Findings per severity, in checker order
    """

    checked_version: str
    results: Mapping[Severity, tuple[Finding, ...]]

    def __post_init__(self) -> None:
        """Normalize buckets and validate invariants. FAIL-FIRST."""
        buckets: dict[Severity, tuple[Finding, ...]] = {}
        for severity in Severity:
            findings = tuple(self.results.get(severity, ()))
            for finding in findings:
                if finding.level is not severity:
                    raise ValueError(
                        f"finding {finding.rule!r} has level {finding.level.value} "
                        f"but is in the {severity.value} bucket"
                    )
            buckets[severity] = findings
        unknown = set(self.results) - set(Severity)
        if unknown:
            raise ValueError(f"unknown result buckets: {sorted(map(str, unknown))}")
        object.__setattr__(self, "results", MappingProxyType(buckets))

    def findings(self, severity: Severity) -> tuple[Finding, ...]:
        """Findings of one severity."""
        return self.results[severity]

    @property
    def error_count(self) -> int:
        """Number of ERROR findings."""
        return len(self.results[Severity.ERROR])

    @property
    def warning_count(self) -> int:
        """Number of WARNING findings."""
        return len(self.results[Severity.WARNING])

    @classmethod
    def empty(cls, checked_version: str = "latest") -> ThemeResult:
        """Create a result with no findings."""
        return cls(checked_version=checked_version, results={})
