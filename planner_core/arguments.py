"""Planner argument keys and library-wide defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Argument(Enum):
    """Named arguments shared by every planner."""

    PLANNER = auto()
    DOMAIN = auto()
    PROBLEM = auto()
    TIMEOUT = auto()  # milliseconds in argument mappings
    TRACE_LEVEL = auto()
    STATISTICS = auto()

    @classmethod
    def from_name(cls, name: str) -> Argument:
        """Look up an argument by name, e.g. ``"trace-level"`` or ``"TRACE_LEVEL"``."""
        key = name.strip().upper().replace("-", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown planner argument: {name!r}") from None


@dataclass(frozen=True)
class PlannerDefaults:
    """Default settings used to initialize a planner configuration."""

    timeout: int = 600  # seconds
    trace_level: int = 1
    statistics: bool = True

    @property
    def timeout_ms(self) -> int:
        return self.timeout * 1000


LIBRARY_DEFAULTS = PlannerDefaults()


def default_arguments(defaults: PlannerDefaults = LIBRARY_DEFAULTS) -> dict[Argument, Any]:
    """
    Return the default arguments of a planner.

    A new dict is built on every call, so callers may use it as a seed and
    mutate it freely. The timeout is expressed in milliseconds.
    """
    return {
        Argument.TIMEOUT: defaults.timeout_ms,
        Argument.TRACE_LEVEL: defaults.trace_level,
        Argument.STATISTICS: defaults.statistics,
    }


_ARGUMENT_TYPES: dict[Argument, type] = {
    Argument.PLANNER: str,
    Argument.DOMAIN: str,
    Argument.PROBLEM: str,
    Argument.TIMEOUT: int,
    Argument.TRACE_LEVEL: int,
    Argument.STATISTICS: bool,
}


def check_argument_value(argument: Argument, value: Any) -> None:
    """
    Raise ValueError if ``value`` does not have the type ``argument`` expects.

    Only types are checked, not ranges. Booleans are not accepted where an
    integer is expected.
    """
    expected = _ARGUMENT_TYPES[argument]
    if isinstance(value, bool) and expected is not bool:
        valid = False
    else:
        valid = isinstance(value, expected)
    if not valid:
        raise ValueError(
            f"Invalid value for {argument.name}: expected {expected.__name__}, got {value!r}"
        )
