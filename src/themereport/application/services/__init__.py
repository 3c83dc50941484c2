"""Application services: checker invocation, result formatting, report orchestration."""

from themereport.application.services.formatter import FORMAT_FAILURE_MESSAGE, postprocess
from themereport.application.services.invoker import ZIP_HINT, CheckerInvoker, classify_failure
from themereport.application.services.orchestrator import ReportOrchestrator, run_check

__all__ = [
    "FORMAT_FAILURE_MESSAGE",
    "ZIP_HINT",
    "CheckerInvoker",
    "ReportOrchestrator",
    "classify_failure",
    "postprocess",
    "run_check",
]
