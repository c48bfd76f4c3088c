"""
CLI context for spec-bridge.

This module provides the context object that is passed to all CLI commands,
holding the options given to the command group and the lazily loaded
configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path

from spec_bridge.config import BridgeConfig, load_config_from_yaml
from spec_bridge.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class BridgeContext:
    """
    Context object for CLI commands.

    Attributes:
        config_path: Path to configuration file
        log_level: Console logging level
        log_file: Optional log file path
        config: Loaded configuration (environment and defaults when no file is given)
    """

    config_path: Path | None = None
    log_level: str = "ERROR"
    log_file: Path | None = None

    _config: BridgeConfig | None = field(default=None, init=False, repr=False)

    @property
    def config(self) -> BridgeConfig:
        """Get or load the configuration."""
        if self._config is None:
            if self.config_path is None:
                logger.debug("config_defaults_used")
                self._config = BridgeConfig()
            else:
                logger.debug("config_loading", config_path=str(self.config_path))
                self._config = load_config_from_yaml(self.config_path)
                logger.debug("config_loaded")

        return self._config
