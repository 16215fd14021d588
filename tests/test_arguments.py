"""Tests for argument keys and default arguments."""

import pytest

from planner_core.arguments import (
    LIBRARY_DEFAULTS,
    Argument,
    PlannerDefaults,
    check_argument_value,
    default_arguments,
)


class TestArgument:
    def test_closed_key_set(self):
        assert [a.name for a in Argument] == [
            "PLANNER",
            "DOMAIN",
            "PROBLEM",
            "TIMEOUT",
            "TRACE_LEVEL",
            "STATISTICS",
        ]

    @pytest.mark.parametrize("name", ["TRACE_LEVEL", "trace_level", "trace-level", " Trace-Level "])
    def test_from_name_spellings(self, name):
        assert Argument.from_name(name) is Argument.TRACE_LEVEL

    def test_from_name_unknown(self):
        with pytest.raises(ValueError, match="Unknown planner argument"):
            Argument.from_name("heuristic")


class TestDefaultArguments:
    def test_keys(self):
        assert set(default_arguments()) == {
            Argument.TIMEOUT,
            Argument.TRACE_LEVEL,
            Argument.STATISTICS,
        }

    def test_timeout_in_milliseconds(self):
        assert default_arguments()[Argument.TIMEOUT] == LIBRARY_DEFAULTS.timeout * 1000

    def test_deterministic(self):
        assert default_arguments() == default_arguments()

    def test_fresh_mapping_each_call(self):
        """Mutating one result does not leak into the next."""
        first = default_arguments()
        first[Argument.TIMEOUT] = 1
        first[Argument.PLANNER] = "ff"

        second = default_arguments()
        assert first is not second
        assert second[Argument.TIMEOUT] == 600_000
        assert Argument.PLANNER not in second

    def test_custom_defaults(self):
        args = default_arguments(PlannerDefaults(timeout=2, trace_level=7, statistics=False))

        assert args == {
            Argument.TIMEOUT: 2000,
            Argument.TRACE_LEVEL: 7,
            Argument.STATISTICS: False,
        }

    def test_defaults_are_frozen(self):
        with pytest.raises(AttributeError):
            LIBRARY_DEFAULTS.timeout = 1


class TestCheckArgumentValue:
    @pytest.mark.parametrize(
        "argument, value",
        [
            (Argument.PLANNER, "hsp"),
            (Argument.DOMAIN, "domain.pddl"),
            (Argument.TIMEOUT, 1000),
            (Argument.TIMEOUT, -5),
            (Argument.TRACE_LEVEL, 0),
            (Argument.STATISTICS, False),
        ],
    )
    def test_accepts_expected_types(self, argument, value):
        check_argument_value(argument, value)

    @pytest.mark.parametrize(
        "argument, value",
        [
            (Argument.TIMEOUT, "abc"),
            (Argument.TIMEOUT, None),
            (Argument.TIMEOUT, True),
            (Argument.TRACE_LEVEL, 2.0),
            (Argument.STATISTICS, "false"),
            (Argument.STATISTICS, 0),
            (Argument.PROBLEM, None),
        ],
    )
    def test_rejects_other_types(self, argument, value):
        with pytest.raises(ValueError, match=f"Invalid value for {argument.name}"):
            check_argument_value(argument, value)
