"""Checker invoker: run the external checker once, classify failures."""

from __future__ import annotations

import errno
import logging
from typing import TYPE_CHECKING

from themereport.domain.exceptions import CheckerInvocationError, InvocationErrorKind
from themereport.infrastructure.adapters.result_mapper import to_theme_result

if TYPE_CHECKING:
    from themereport.domain.model.check_configuration import CheckConfiguration
    from themereport.domain.model.theme_result import ThemeResult
    from themereport.domain.ports.checker import ThemeChecker

logger = logging.getLogger(__name__)

ZIP_HINT = "Did you mean to add the -z flag to read a zip file?"


def classify_failure(exc: BaseException) -> InvocationErrorKind:
    """Tag a checker failure by kind."""
    if isinstance(exc, NotADirectoryError) or getattr(exc, "errno", None) == errno.ENOTDIR:
        return InvocationErrorKind.NOT_A_DIRECTORY
    # Node-style bridges carry the symbolic code as a string.
    if getattr(exc, "code", None) == "ENOTDIR":
        return InvocationErrorKind.NOT_A_DIRECTORY
    return InvocationErrorKind.OTHER


class CheckerInvoker:
    """Calls the checker in directory or zip mode.

    Single attempt, no retries. Every failure is re-raised as
    CheckerInvocationError; a directory-mode call on a file gets a hint
    to pass the zip flag.
    """

    def __init__(self, checker: ThemeChecker) -> None:
        self._checker = checker

    async def invoke(self, path: str, as_zip: bool, config: CheckConfiguration) -> ThemeResult:
        """Check the theme at path.

        Args:
            path: Theme directory or zip file.
            as_zip: Use the zip entry point.
            config: Resolved check configuration.

        Returns:
            Theme result as produced by the checker.

        Raises:
            CheckerInvocationError: If the checker fails.
        """
        options = config.as_options()
        logger.debug("Checking %s (zip=%s, options=%s)", path, as_zip, options)
        try:
            if as_zip:
                raw = await self._checker.check_zip(path, options)
            else:
                raw = await self._checker.check(path, options)
            return to_theme_result(raw)
        except Exception as exc:
            raise self._translate(exc, path, as_zip) from exc

    def _translate(self, exc: Exception, path: str, as_zip: bool) -> CheckerInvocationError:
        kind = classify_failure(exc)
        message = str(exc) or type(exc).__name__
        match kind, as_zip:
            case InvocationErrorKind.NOT_A_DIRECTORY, False:
                return CheckerInvocationError(path, kind, message, hint=ZIP_HINT)
            case _:
                return CheckerInvocationError(path, kind, message)
