"""Run execution domain exports."""

from .drift_check_use_case import RunExecutionError, evaluate_checks, execute_drift_check_run
from .run_contracts import RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunExecutionError",
    "evaluate_checks",
    "execute_drift_check_run",
]
