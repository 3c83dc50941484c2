"""Check configuration value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from themereport.domain.model.enums import CheckVersion


@dataclass(frozen=True, slots=True)
class CheckConfiguration:
    """Resolved options for one check run.

    Built once per invocation and passed to every stage.

    Attributes:
        check_version: Ghost version to check against
        verbose: Render finding details and full failure lists
        only_fatal_errors: Restrict the check to fatal issues
    """

    check_version: CheckVersion = CheckVersion.LATEST
    verbose: bool = False
    only_fatal_errors: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.check_version, CheckVersion):
            raise TypeError(f"check_version must be CheckVersion, got {type(self.check_version).__name__}")

    def as_options(self) -> dict[str, Any]:
        """Options mapping in the shape the checker expects."""
        return {
            "checkVersion": self.check_version.value,
            "verbose": self.verbose,
            "onlyFatalErrors": self.only_fatal_errors,
        }
