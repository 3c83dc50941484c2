"""Adapters between external checkers and the domain model."""

from themereport.infrastructure.adapters.entry_points import (
    CHECKER_GROUP,
    available_checkers,
    load_checker,
)
from themereport.infrastructure.adapters.result_mapper import to_theme_result

__all__ = ["CHECKER_GROUP", "available_checkers", "load_checker", "to_theme_result"]
