"""Domain ports (interfaces) for external collaborators."""

from themereport.domain.ports.checker import ThemeChecker
from themereport.domain.ports.reporter import ReporterProtocol

__all__ = ["ThemeChecker", "ReporterProtocol"]
