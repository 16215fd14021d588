"""
Planner arguments file management
"""

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..arguments import (
    LIBRARY_DEFAULTS,
    Argument,
    PlannerDefaults,
    check_argument_value,
    default_arguments,
)
from ..config import PlannerConfig

logger = logging.getLogger(__name__)

ArgumentKey = Union[Argument, str]


def _as_argument(key: ArgumentKey) -> Argument:
    if isinstance(key, Argument):
        return key
    return Argument.from_name(key)


class ConfigManager:
    """Manages the arguments used to configure a planner"""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        *,
        defaults: PlannerDefaults = LIBRARY_DEFAULTS,
    ):
        """
        Initialize configuration manager

        Args:
            config_path: Path to a YAML arguments file. If None, uses defaults.
            defaults: Defaults seeding the arguments before the file is read
        """
        self.defaults = defaults
        self.arguments: Dict[Argument, Any] = default_arguments(defaults)

        if config_path and config_path.exists():
            self.load_config(config_path)
        elif config_path:
            logger.warning(f"Config file not found: {config_path}, using defaults")

    def load_config(self, config_path: Path) -> None:
        """
        Load arguments from a YAML file.

        Keys are argument names; TIMEOUT is in milliseconds.
        Raises ValueError if the file is not a mapping of known arguments
        with values of the expected types.
        """
        with open(config_path, "r") as f:
            try:
                file_config = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if file_config is None:
            file_config = {}
        if not isinstance(file_config, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping of arguments")

        self.update(file_config)
        logger.info(f"Loaded configuration from {config_path}")

    def get(self, key: ArgumentKey, default: Any = None) -> Any:
        """
        Get an argument value.

        Args:
            key: Argument or argument name like 'trace-level'
            default: Default value if the argument is not set

        Returns:
            Argument value or default
        """
        return self.arguments.get(_as_argument(key), default)

    def set(self, key: ArgumentKey, value: Any) -> None:
        """Set an argument value. Raises ValueError for a value of the wrong type."""
        argument = _as_argument(key)
        check_argument_value(argument, value)
        self.arguments[argument] = value

    def update(self, values: Mapping[ArgumentKey, Any]) -> None:
        """Set several arguments at once. Unknown names or bad values raise before anything is changed."""
        resolved = {_as_argument(key): value for key, value in values.items()}
        for argument, value in resolved.items():
            check_argument_value(argument, value)
        self.arguments.update(resolved)

    def save_config(self, config_path: Path) -> None:
        """Save current arguments to a YAML file."""
        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, indent=2)
        logger.info(f"Saved configuration to {config_path}")

    def to_dict(self) -> Dict[str, Any]:
        """Return arguments as a dictionary keyed by argument name."""
        return {argument.name: value for argument, value in self.arguments.items()}

    def build_config(self) -> PlannerConfig:
        """Create a PlannerConfig from the current arguments."""
        return PlannerConfig.from_arguments(self.arguments, self.defaults)
