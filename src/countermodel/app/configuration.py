"""
Configuration Management for CounterModel

Dataclass-based configuration with per-environment defaults, loadable from
a dict, a JSON/YAML file or COUNTERMODEL_* environment variables.
"""

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.state import DEFAULT_INTERVAL_MS


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class CounterConfig:
    """Counter store defaults"""
    default_interval_ms: int = DEFAULT_INTERVAL_MS


@dataclass
class UIConfig:
    """Counter screen configuration"""
    title: str = "Counter++"
    slider_min_seconds: int = 1
    slider_max_seconds: int = 8


@dataclass
class WebConfig:
    """Web server configuration"""
    host: str = "localhost"
    port: int = 5001
    debug: bool = False
    secret_key: Optional[str] = None


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class ApplicationConfig:
    """Complete application configuration"""
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False

    counter: CounterConfig = field(default_factory=CounterConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ApplicationConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.debug = True
            config.web.debug = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.debug = False
            config.web.debug = False
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        if "debug" in config_dict:
            config.debug = config_dict["debug"]

        # Update nested configs, ignoring unknown keys
        for section in ("counter", "ui", "web", "logging"):
            target = getattr(config, section)
            for key, value in config_dict.get(section, {}).items():
                if hasattr(target, key):
                    setattr(target, key, value)

        return config

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> 'ApplicationConfig':
        """Load configuration from a JSON or YAML file"""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        if config_path.suffix == '.json':
            with open(config_path) as f:
                config_dict = json.load(f)
        elif config_path.suffix in ('.yml', '.yaml'):
            try:
                import yaml
            except ImportError:
                raise ImportError("PyYAML is required for YAML configuration files")
            with open(config_path) as f:
                config_dict = yaml.safe_load(f) or {}
        else:
            raise ValueError(f"Unsupported configuration file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    @classmethod
    def from_environment(cls) -> 'ApplicationConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('COUNTERMODEL_ENV', 'development')
        config = cls.for_environment(Environment(env_name))

        if os.getenv('COUNTERMODEL_DEBUG'):
            config.debug = os.getenv('COUNTERMODEL_DEBUG').lower() == 'true'
            config.web.debug = config.debug

        if os.getenv('COUNTERMODEL_HOST'):
            config.web.host = os.getenv('COUNTERMODEL_HOST')

        if os.getenv('COUNTERMODEL_PORT'):
            config.web.port = int(os.getenv('COUNTERMODEL_PORT'))

        if os.getenv('COUNTERMODEL_INTERVAL_MS'):
            config.counter.default_interval_ms = int(os.getenv('COUNTERMODEL_INTERVAL_MS'))

        if os.getenv('COUNTERMODEL_LOG_LEVEL'):
            config.logging.level = os.getenv('COUNTERMODEL_LOG_LEVEL').upper()

        return config

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot drive a counter screen"""
        if self.counter.default_interval_ms <= 0:
            raise ValueError(
                f"counter.default_interval_ms must be positive, got {self.counter.default_interval_ms}"
            )
        if self.ui.slider_min_seconds <= 0:
            raise ValueError(
                f"ui.slider_min_seconds must be positive, got {self.ui.slider_min_seconds}"
            )
        if self.ui.slider_min_seconds > self.ui.slider_max_seconds:
            raise ValueError(
                f"ui slider range is empty: {self.ui.slider_min_seconds}..{self.ui.slider_max_seconds}"
            )
        # The settings slider must be able to show the default interval
        seconds, remainder = divmod(self.counter.default_interval_ms, 1000)
        if remainder:
            raise ValueError(
                f"counter.default_interval_ms must be a whole number of seconds, "
                f"got {self.counter.default_interval_ms}"
            )
        if not self.ui.slider_min_seconds <= seconds <= self.ui.slider_max_seconds:
            raise ValueError(
                f"counter.default_interval_ms ({self.counter.default_interval_ms}) is outside the slider range "
                f"{self.ui.slider_min_seconds}..{self.ui.slider_max_seconds} seconds"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "debug": self.debug,
            "counter": {
                "default_interval_ms": self.counter.default_interval_ms,
            },
            "ui": {
                "title": self.ui.title,
                "slider_min_seconds": self.ui.slider_min_seconds,
                "slider_max_seconds": self.ui.slider_max_seconds,
            },
            "web": {
                "host": self.web.host,
                "port": self.web.port,
                "debug": self.web.debug,
                "secret_key": self.web.secret_key,
            },
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
                "file_path": self.logging.file_path,
                "max_file_size": self.logging.max_file_size,
                "backup_count": self.logging.backup_count,
            },
        }
