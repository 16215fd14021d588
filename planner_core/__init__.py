"""Planner configuration and statistics contract."""

__version__ = "0.1.0"

from .arguments import LIBRARY_DEFAULTS, Argument, PlannerDefaults, default_arguments
from .config import PlannerConfig
from .planner import Planner, SearchPlanner, SearchResult, run_search
from .statistics import Statistics
from .trace import TraceEvent, TraceRecorder

__all__ = [
    "Argument",
    "PlannerDefaults",
    "LIBRARY_DEFAULTS",
    "default_arguments",
    "PlannerConfig",
    "Statistics",
    "Planner",
    "SearchPlanner",
    "SearchResult",
    "run_search",
    "TraceEvent",
    "TraceRecorder",
]
