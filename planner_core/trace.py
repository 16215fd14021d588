"""Trace events gated by the planner trace level."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import PlannerConfig


@dataclass
class TraceEvent:
    """Single trace event capturing planner activity."""

    event_type: str
    timestamp_ms: int
    data: dict[str, Any] = field(default_factory=dict)
    level: int = 1


class TraceRecorder:
    """Records trace events up to a given trace level."""

    def __init__(self, trace_level: int = 1) -> None:
        self.trace_level = trace_level
        self.events: list[TraceEvent] = []

    @classmethod
    def for_config(cls, config: "PlannerConfig") -> TraceRecorder:
        return cls(trace_level=config.get_trace_level())

    def enabled(self, level: int = 1) -> bool:
        """Whether events of this level are recorded."""
        return 0 < level <= self.trace_level

    def log(self, event_type: str, data: dict[str, Any], *, level: int = 1) -> bool:
        """Log a trace event. Returns False when the level is filtered out."""
        if not self.enabled(level):
            return False
        self.events.append(
            TraceEvent(
                event_type=event_type,
                timestamp_ms=int(time.time() * 1000),
                data=data,
                level=level,
            )
        )
        return True

    def clear(self) -> None:
        """Clear all recorded events."""
        self.events.clear()

    def export_json(self, indent: int = 2) -> str:
        """Export trace as JSON string."""
        return json.dumps(
            [
                {
                    "event_type": e.event_type,
                    "timestamp_ms": e.timestamp_ms,
                    "data": e.data,
                    "level": e.level,
                }
                for e in self.events
            ],
            indent=indent,
        )

    def filter_by_type(self, event_type: str) -> list[TraceEvent]:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]
