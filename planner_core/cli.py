"""Command line entry-point resolving planner arguments."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, TextIO

import click

from .arguments import Argument
from .utils.config import ConfigManager
from .utils.logging import setup_logging

logger = logging.getLogger("planner_core.cli")


def _format_output(manager: ConfigManager) -> dict:
    """Format resolved arguments and the resulting configuration for JSON output."""
    config = manager.build_config()
    return {
        "arguments": manager.to_dict(),
        "config": {
            "timeout": config.get_timeout(),
            "trace_level": config.get_trace_level(),
            "retain_statistics": config.is_retain_statistics(),
        },
        "statistics": config.get_statistics().to_dict(),
    }


@click.command()
@click.option("--planner", "-p", help="Planner to use")
@click.option("--domain", "-d", help="Planning domain file")
@click.option("--problem", help="Planning problem file")
@click.option("--timeout", "-t", type=click.IntRange(min=1), help="Time allocated to the search in seconds")
@click.option("--trace-level", "-l", type=click.IntRange(min=0), help="Trace level")
@click.option("--statistics/--no-statistics", default=None, help="Retain search statistics")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML arguments file",
)
@click.option("--output", "-o", type=click.File("w"), default="-", help="Output destination (defaults to stdout)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def main(
    planner: Optional[str],
    domain: Optional[str],
    problem: Optional[str],
    timeout: Optional[int],
    trace_level: Optional[int],
    statistics: Optional[bool],
    config_path: Optional[Path],
    output: TextIO,
    verbose: bool,
) -> None:
    """Resolve planner arguments from defaults, a config file and options."""

    setup_logging(
        verbose=verbose,
        format_string="%(levelname)s: %(message)s",
        trace_level=trace_level,
    )

    # Explicit options override the file
    overrides = {
        Argument.PLANNER: planner,
        Argument.DOMAIN: domain,
        Argument.PROBLEM: problem,
        Argument.TIMEOUT: timeout * 1000 if timeout is not None else None,
        Argument.TRACE_LEVEL: trace_level,
        Argument.STATISTICS: statistics,
    }

    try:
        manager = ConfigManager(config_path)
        manager.update({key: value for key, value in overrides.items() if value is not None})
        result = _format_output(manager)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    # The file may have changed the trace level
    if not verbose:
        setup_logging(
            format_string="%(levelname)s: %(message)s",
            trace_level=manager.get(Argument.TRACE_LEVEL),
        )
    logger.debug(f"Resolved arguments: {manager.to_dict()}")

    json.dump(result, output, indent=2)
    output.write("\n")


if __name__ == "__main__":  # pragma: no cover
    main()
