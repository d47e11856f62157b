"""Rename planning and execution.

- RenamePlanner: YYYYMMDD-prefixed targets from resolved dates
- BatchRenamer: sequential execution with per-file outcomes
"""

from dateprefix.core.rename.data_classes import (
    ExecutionItem,
    ExecutionResult,
    PlanEntry,
    RenamePlan,
)
from dateprefix.core.rename.execution_manager import BatchRenamer
from dateprefix.core.rename.planner import RenamePlanner

__all__ = [
    "BatchRenamer",
    "ExecutionItem",
    "ExecutionResult",
    "PlanEntry",
    "RenamePlan",
    "RenamePlanner",
]
