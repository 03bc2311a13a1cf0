#!/usr/bin/env python3
"""
Configuration Management for the Combination Console
Supports environment variables, a JSON config file and development defaults
"""

import os
import json
import logging
from typing import Dict, Optional, Any
from pathlib import Path
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent.parent / 'console_config.json'

LOGGING = {
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


@dataclass
class ConsoleConfig:
    """Console configuration with validation"""
    api_base: str = 'http://localhost:8080/api'
    api_timeout: float = 30.0
    host: str = '127.0.0.1'
    port: int = 8001
    log_level: str = 'INFO'
    notification_seconds: float = 4.0

    def __post_init__(self):
        """Validate configuration after initialization"""
        if not self.api_base or not self.api_base.strip():
            raise ValueError("API base URL is required")
        self.api_base = self.api_base.rstrip('/')
        if self.api_timeout <= 0:
            raise ValueError("API timeout must be positive")
        if not (1 <= self.port <= 65535):
            raise ValueError("Console port must be between 1 and 65535")
        if self.notification_seconds <= 0:
            raise ValueError("Notification duration must be positive")
        self.log_level = self.log_level.upper()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def with_overrides(self, **overrides) -> 'ConsoleConfig':
        """Return a copy with the non-None overrides applied"""
        values = self.to_dict()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ConsoleConfig(**values)


class ConfigLoader:
    """Loads console configuration from the available sources"""

    ENV_VARS = {
        'VNEST_API_BASE': ('api_base', str),
        'VNEST_API_TIMEOUT': ('api_timeout', float),
        'VNEST_HOST': ('host', str),
        'VNEST_PORT': ('port', int),
        'VNEST_LOG_LEVEL': ('log_level', str),
        'VNEST_NOTIFICATION_SECONDS': ('notification_seconds', float),
    }

    def __init__(self, config_file: Optional[Path] = None):
        env_file = os.getenv('VNEST_CONFIG_FILE')
        if config_file is not None:
            self._config_file = Path(config_file)
        elif env_file:
            self._config_file = Path(env_file)
        else:
            self._config_file = DEFAULT_CONFIG_FILE

    def load(self) -> ConsoleConfig:
        """
        Build the configuration from multiple sources in priority order:
        1. Environment variables
        2. JSON config file ("console" section)
        3. Defaults (development)
        """
        values: Dict[str, Any] = {}

        if self._config_file.exists():
            logger.info(f"Loading console config from {self._config_file}")
            values.update(self._load_from_file())
        else:
            logger.debug(f"No config file at {self._config_file}, using defaults")

        env_values = self._load_from_environment()
        if env_values:
            logger.info("Applying console config from environment variables")
            values.update(env_values)

        return ConsoleConfig(**values)

    def _load_from_environment(self) -> Dict[str, Any]:
        values = {}
        for var, (field_name, cast) in self.ENV_VARS.items():
            raw = os.getenv(var)
            if raw is None or raw == '':
                continue
            try:
                values[field_name] = cast(raw)
            except ValueError:
                raise ValueError(f"Invalid value for {var}: {raw!r}")
        return values

    def _load_from_file(self) -> Dict[str, Any]:
        with open(self._config_file, 'r') as f:
            config_data = json.load(f)

        section = config_data.get('console', {})
        known = set(ConsoleConfig.__dataclass_fields__)
        unknown = set(section) - known
        if unknown:
            logger.warning(f"Ignoring unknown console config keys: {', '.join(sorted(unknown))}")
        return {k: v for k, v in section.items() if k in known}


def get_console_config(config_file: Optional[Path] = None) -> ConsoleConfig:
    """Get console configuration"""
    return ConfigLoader(config_file).load()


def setup_logging(config: ConsoleConfig) -> None:
    """Configure root logging for the console process"""
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO),
                        format=LOGGING['format'])
