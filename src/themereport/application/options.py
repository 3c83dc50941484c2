"""Option resolver: CLI flags → CheckConfiguration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from themereport.domain.model.check_configuration import CheckConfiguration
from themereport.domain.model.enums import CheckVersion

# First match wins.
VERSION_PRECEDENCE: tuple[tuple[str, CheckVersion], ...] = (
    ("v1", CheckVersion.V1),
    ("v2", CheckVersion.V2),
    ("v3", CheckVersion.V3),
    ("v4", CheckVersion.V4),
    ("canary", CheckVersion.CANARY),
)


@dataclass(frozen=True, slots=True)
class CheckFlags:
    """Parsed boolean flags, for callers without an argparse.Namespace."""

    v1: bool = False
    v2: bool = False
    v3: bool = False
    v4: bool = False
    canary: bool = False
    verbose: bool = False
    fatal: bool = False


def resolve_version(flags: Any) -> CheckVersion:
    """Pick the check version from mutually exclusive flags.

    Missing attributes count as unset. Defaults to LATEST.
    """
    for attr, version in VERSION_PRECEDENCE:
        if getattr(flags, attr, False):
            return version
    return CheckVersion.LATEST


def resolve_options(flags: Any) -> CheckConfiguration:
    """Build the check configuration for one invocation.

    Args:
        flags: Object with boolean attributes v1, v2, v3, v4, canary,
            verbose, fatal (argparse.Namespace or CheckFlags).

    Returns:
        Immutable configuration. Never raises.
    """
    return CheckConfiguration(
        check_version=resolve_version(flags),
        verbose=bool(getattr(flags, "verbose", False)),
        only_fatal_errors=bool(getattr(flags, "fatal", False)),
    )
