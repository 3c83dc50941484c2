"""Checker discovery via installed entry points.

Checker packages register a factory (or instance) under the
"themereport.checkers" group:

    [project.entry-points."themereport.checkers"]
    gscan = "gscan_py:GScanChecker"

A class or zero-argument callable is called to get the checker.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points

from themereport.domain.exceptions import CheckerLoadError, CheckerNotFoundError
from themereport.domain.ports.checker import ThemeChecker

logger = logging.getLogger(__name__)

CHECKER_GROUP = "themereport.checkers"


def available_checkers() -> tuple[str, ...]:
    """Names of installed checkers, sorted."""
    return tuple(sorted(ep.name for ep in entry_points(group=CHECKER_GROUP)))


def load_checker(name: str) -> ThemeChecker:
    """Load the checker registered as name.

    Raises:
        CheckerNotFoundError: If no checker is registered under name.
        CheckerLoadError: If the entry point fails to import or does not
            yield a ThemeChecker.
    """
    matches = entry_points(group=CHECKER_GROUP, name=name)
    if not matches:
        raise CheckerNotFoundError(name, available_checkers())

    entry_point = next(iter(matches))
    try:
        target = entry_point.load()
    except (ImportError, AttributeError) as exc:
        raise CheckerLoadError(name, str(exc) or type(exc).__name__) from exc
    logger.debug("Loaded checker %r from %s", name, entry_point.value)

    checker = target
    if isinstance(target, type) or (callable(target) and not isinstance(target, ThemeChecker)):
        checker = target()
    if not isinstance(checker, ThemeChecker):
        raise CheckerLoadError(name, f"{entry_point.value} does not implement check/check_zip/format")
    return checker
