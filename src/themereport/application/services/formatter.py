"""Result formatter bridge: tolerant call into the checker's format step."""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

from themereport.infrastructure.adapters.result_mapper import to_theme_result

if TYPE_CHECKING:
    from themereport.domain.model.check_configuration import CheckConfiguration
    from themereport.domain.model.theme_result import ThemeResult
    from themereport.domain.ports.checker import ThemeChecker

logger = logging.getLogger(__name__)

FORMAT_FAILURE_MESSAGE = "Error formatting result, some results may be missing."


async def postprocess(checker: ThemeChecker, result: ThemeResult, config: CheckConfiguration) -> ThemeResult:
    """Run the checker's format step over result.

    A failing format step is logged and the unformatted result is
    returned, so a report is always produced.
    """
    try:
        formatted = checker.format(result, config.as_options())
        if inspect.isawaitable(formatted):
            formatted = await formatted
        return to_theme_result(formatted)
    except Exception as exc:
        logger.error(FORMAT_FAILURE_MESSAGE)
        logger.error("%s", exc, exc_info=exc)
        return result
