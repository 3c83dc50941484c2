"""Raw checker output → ThemeResult.

Checkers may answer with JSON-shaped mappings:

    {
        "checkedVersion": "5.x",
        "results": {
            "error": [{"rule": ..., "level": "error", "details": ...,
                       "failures": [{"ref": ..., "message": ...}]}],
            "warning": [...],
            ...
        }
    }

Only the four severity buckets are read; other keys under "results"
(e.g. "pass", "hasFatalErrors") are ignored. Findings keep the bucket
they arrived in; a finding whose own "level" disagrees with its bucket
is rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from themereport.domain.exceptions import ResultFormatError
from themereport.domain.model.enums import Severity
from themereport.domain.model.finding import FailureRef, Finding
from themereport.domain.model.theme_result import ThemeResult

logger = logging.getLogger(__name__)

SEVERITY_KEYS = frozenset(s.value for s in Severity)


def to_theme_result(raw: ThemeResult | Mapping[str, Any]) -> ThemeResult:
    """Convert raw checker output. ThemeResult passes through unchanged.

    Raises:
        ResultFormatError: If the mapping is malformed.
        UnknownSeverityError: If a finding level names no severity.
    """
    if isinstance(raw, ThemeResult):
        return raw
    if not isinstance(raw, Mapping):
        raise ResultFormatError(f"expected a mapping, got {type(raw).__name__}")

    results = raw.get("results")
    if not isinstance(results, Mapping):
        raise ResultFormatError("'results' must be a mapping of severity to findings")

    ignored = sorted(str(key) for key in results if key not in SEVERITY_KEYS)
    if ignored:
        logger.debug("Ignoring non-severity result keys: %s", ", ".join(ignored))

    buckets: dict[Severity, tuple[Finding, ...]] = {}
    for severity in Severity:
        items = results.get(severity.value) or ()
        if not isinstance(items, Sequence) or isinstance(items, str):
            raise ResultFormatError(f"'results.{severity.value}' must be a list")
        buckets[severity] = tuple(_to_finding(item, severity) for item in items)

    return ThemeResult(
        checked_version=str(raw.get("checkedVersion", "")),
        results=buckets,
    )


def _to_finding(item: Any, bucket: Severity) -> Finding:
    """Convert one raw finding in bucket."""
    if isinstance(item, Finding):
        return item
    if not isinstance(item, Mapping):
        raise ResultFormatError(f"finding must be a mapping, got {type(item).__name__}")

    level = Severity.parse(item["level"]) if item.get("level") else bucket
    if level is not bucket:
        raise ResultFormatError(f"finding {item.get('rule')!r} has level {level.value} in {bucket.value} bucket")

    rule = item.get("rule")
    if not rule:
        raise ResultFormatError("finding is missing 'rule'")

    return Finding(
        rule=str(rule),
        level=level,
        details=str(item.get("details") or ""),
        failures=tuple(_to_failure(f) for f in item.get("failures") or ()),
    )


def _to_failure(item: Any) -> FailureRef:
    if isinstance(item, FailureRef):
        return item
    if not isinstance(item, Mapping) or not item.get("ref"):
        raise ResultFormatError(f"failure must be a mapping with 'ref', got {item!r}")
    return FailureRef(ref=str(item["ref"]), message=str(item.get("message") or ""))
