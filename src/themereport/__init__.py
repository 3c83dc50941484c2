"""themereport - severity-grouped reports for theme compatibility checks."""

__version__ = "0.1.0"

from themereport.application.options import resolve_options
from themereport.application.services.orchestrator import ReportOrchestrator, run_check

__all__ = ["ReportOrchestrator", "resolve_options", "run_check", "__version__"]
