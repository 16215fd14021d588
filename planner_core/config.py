"""Run configuration shared by planner implementations."""

from __future__ import annotations

from typing import Any, Mapping

from .arguments import LIBRARY_DEFAULTS, Argument, PlannerDefaults, default_arguments
from .statistics import Statistics


class PlannerConfig:
    """
    Timeout, trace level and statistics settings of a planner.

    A planner holds one of these for its whole lifetime. The statistics
    record is created here and never replaced; search code mutates it in
    place. Setters store values as given: callers are responsible for
    passing a positive timeout and a sensible trace level.
    """

    def __init__(self, defaults: PlannerDefaults = LIBRARY_DEFAULTS) -> None:
        self._timeout = defaults.timeout
        self._trace_level = defaults.trace_level
        self._retain_statistics = defaults.statistics
        self._statistics = Statistics()

    @classmethod
    def from_arguments(
        cls,
        arguments: Mapping[Argument, Any],
        defaults: PlannerDefaults = LIBRARY_DEFAULTS,
    ) -> PlannerConfig:
        """
        Build a configuration from an arguments mapping.

        ``Argument.TIMEOUT`` is read in milliseconds and rounded up to whole
        seconds, so a sub-second budget never becomes zero. Keys that are
        missing keep their default value. Values are not checked.
        """
        config = cls(defaults)
        if Argument.TIMEOUT in arguments:
            config.set_timeout(-(-arguments[Argument.TIMEOUT] // 1000))
        if Argument.TRACE_LEVEL in arguments:
            config.set_trace_level(arguments[Argument.TRACE_LEVEL])
        if Argument.STATISTICS in arguments:
            config.set_retain_statistics(arguments[Argument.STATISTICS])
        return config

    @staticmethod
    def default_arguments(defaults: PlannerDefaults = LIBRARY_DEFAULTS) -> dict[Argument, Any]:
        """Library-wide default arguments. Never reflects instance state."""
        return default_arguments(defaults)

    def get_statistics(self) -> Statistics:
        return self._statistics

    def set_timeout(self, timeout: int) -> None:
        """Set the time allocated to the search, in seconds."""
        self._timeout = timeout

    def get_timeout(self) -> int:
        return self._timeout

    def set_trace_level(self, level: int) -> None:
        self._trace_level = level

    def get_trace_level(self) -> int:
        return self._trace_level

    def set_retain_statistics(self, retain: bool) -> None:
        self._retain_statistics = retain

    def is_retain_statistics(self) -> bool:
        return self._retain_statistics

    def to_arguments(self) -> dict[Argument, Any]:
        """Current settings as an arguments mapping (timeout in milliseconds)."""
        return {
            Argument.TIMEOUT: self._timeout * 1000,
            Argument.TRACE_LEVEL: self._trace_level,
            Argument.STATISTICS: self._retain_statistics,
        }

    def __repr__(self) -> str:
        return (
            f"PlannerConfig(timeout={self._timeout}, trace_level={self._trace_level}, "
            f"retain_statistics={self._retain_statistics})"
        )
