"""Console logging setup for the command-line entry point."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from .config import ObservabilityConfig
from .domain.errors import ConfigurationError


def setup_logging(
    level: Union[int, str, None] = None,
    config: Optional[ObservabilityConfig] = None,
) -> None:
    """Configure the root logger to write to stderr.

    ``level`` overrides the configured level when given.

    Raises:
        ConfigurationError: If the level name is unknown.
    """
    config = config or ObservabilityConfig()
    chosen = level if level is not None else config.level
    if isinstance(chosen, str):
        name = chosen.upper()
        chosen = logging.getLevelName(name)
        if not isinstance(chosen, int):
            raise ConfigurationError(
                f"Unknown logging level {name!r}", setting_name="level"
            )

    root_logger = logging.getLogger()
    root_logger.setLevel(chosen)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(chosen)
    handler.setFormatter(logging.Formatter(config.format))
    root_logger.addHandler(handler)
