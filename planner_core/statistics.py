"""Statistics recorded for a solve attempt."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class Statistics:
    """Resource usage of one solve attempt. Every field starts at zero."""

    time_to_parse_ms: int = 0
    time_to_encode_ms: int = 0
    time_to_search_ms: int = 0
    memory_for_problem_bytes: int = 0
    memory_for_search_bytes: int = 0
    nodes_explored: int = 0
    nodes_created: int = 0

    @property
    def total_time_ms(self) -> int:
        return self.time_to_parse_ms + self.time_to_encode_ms + self.time_to_search_ms

    @property
    def total_memory_bytes(self) -> int:
        return self.memory_for_problem_bytes + self.memory_for_search_bytes

    def is_empty(self) -> bool:
        """True when nothing has been recorded yet."""
        return all(getattr(self, f.name) == 0 for f in fields(self))

    def reset(self) -> None:
        """Zero every field in place."""
        for f in fields(self):
            setattr(self, f.name, 0)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
