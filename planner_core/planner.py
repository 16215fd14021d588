"""Planner composition: a configuration plus a search callable."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

from .config import PlannerConfig
from .statistics import Statistics
from .trace import TraceEvent, TraceRecorder

logger = logging.getLogger(__name__)

SearchFn = Callable[[Any, PlannerConfig], Any]


@dataclass
class SearchResult:
    """Outcome of one solve attempt. ``statistics`` is the owning config's record."""

    statistics: Statistics
    plan: Any = None
    timed_out: bool = False
    elapsed_ms: int = 0
    trace: list[TraceEvent] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.plan is not None


class Planner(Protocol):
    """Anything that solves problems under a PlannerConfig."""

    config: PlannerConfig

    def solve(self, problem: Any) -> SearchResult:
        ...


def run_search(
    config: PlannerConfig,
    search: SearchFn,
    problem: Any,
    *,
    trace: Optional[TraceRecorder] = None,
) -> SearchResult:
    """
    Run ``search(problem, config)`` and report how it went.

    The timeout is advisory: the search is never interrupted, the result is
    only flagged ``timed_out`` when it ran longer than the configured number
    of seconds. Elapsed time is added to the config's statistics only when
    statistics are retained. Exceptions from the search propagate.
    """
    if trace is None:
        trace = TraceRecorder.for_config(config)

    timeout_ms = config.get_timeout() * 1000
    trace.log("SEARCH_STARTED", {"timeout_ms": timeout_ms})
    start = time.perf_counter()
    try:
        plan = search(problem, config)
    except Exception as e:
        trace.log("SEARCH_FAILED", {"error": str(e)})
        logger.error(f"Search failed: {e}")
        raise
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    timed_out = timeout_ms > 0 and elapsed_ms > timeout_ms
    if timed_out:
        logger.warning(f"Search took {elapsed_ms}ms, over the {timeout_ms}ms budget")
        trace.log("TIMEOUT_EXCEEDED", {"elapsed_ms": elapsed_ms, "timeout_ms": timeout_ms})

    statistics = config.get_statistics()
    if config.is_retain_statistics():
        statistics.time_to_search_ms += elapsed_ms
        trace.log("STATISTICS_RECORDED", statistics.to_dict(), level=2)

    trace.log(
        "SEARCH_FINISHED",
        {"elapsed_ms": elapsed_ms, "found_plan": plan is not None},
    )
    logger.debug(f"Search finished in {elapsed_ms}ms")

    return SearchResult(
        plan=plan,
        timed_out=timed_out,
        elapsed_ms=elapsed_ms,
        statistics=statistics,
        trace=list(trace.events),
    )


class SearchPlanner:
    """
    Planner built by composition.

    Holds a PlannerConfig and a search callable instead of inheriting
    configuration state. Settings are reached through ``planner.config``.
    """

    def __init__(
        self,
        search: SearchFn,
        config: Optional[PlannerConfig] = None,
        *,
        name: Optional[str] = None,
    ) -> None:
        self.search = search
        self.config = config or PlannerConfig()
        self.name = name or getattr(search, "__name__", "search")
        self.trace = TraceRecorder.for_config(self.config)

    def solve(self, problem: Any) -> SearchResult:
        # Trace level may have changed since the last run
        self.trace.trace_level = self.config.get_trace_level()
        self.trace.clear()
        self.get_logger().info(f"Solving with timeout {self.config.get_timeout()}s")
        return run_search(self.config, self.search, problem, trace=self.trace)

    def get_statistics(self) -> Statistics:
        return self.config.get_statistics()

    def get_logger(self) -> logging.Logger:
        return logging.getLogger(f"{__name__}.{self.name}")
