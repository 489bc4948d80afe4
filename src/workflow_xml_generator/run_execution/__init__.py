"""Run execution domain exports."""

from .generation_run_use_case import (
    RunExecutionError,
    execute_workflow_generation_run,
    process_requirement_row,
)
from .run_contracts import RowOutcome, RowStatus, RunOutcome, SkipReason

__all__ = [
    "RowOutcome",
    "RowStatus",
    "RunOutcome",
    "SkipReason",
    "RunExecutionError",
    "execute_workflow_generation_run",
    "process_requirement_row",
]
