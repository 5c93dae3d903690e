#!/usr/bin/env python3
"""
Configuration Management for centwise

Handles environment-based configuration for the command-line tools: display
defaults for formatted amounts and logging setup. The Money type itself never
reads this configuration; it only sees the MoneySettings it is given.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from dotenv import load_dotenv

from .settings import DEFAULT_SETTINGS, MoneySettings

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class DisplayConfig:
    """Default display settings for formatted amounts."""

    symbol: str = DEFAULT_SETTINGS.symbol
    separator: str = DEFAULT_SETTINGS.separator
    decimal: str = DEFAULT_SETTINGS.decimal
    precision: int = DEFAULT_SETTINGS.precision
    use_vedic: bool = DEFAULT_SETTINGS.use_vedic
    pattern: str = DEFAULT_SETTINGS.pattern
    negative_pattern: str = DEFAULT_SETTINGS.negative_pattern


@dataclass
class Config:
    """
    Main configuration class for the centwise command-line tools.

    Loads configuration from environment variables with defaults matching
    the library's DEFAULT_SETTINGS.
    """

    environment: Environment
    display: DisplayConfig = field(default_factory=DisplayConfig)

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("CENTWISE_ENV", "development"))

        display = DisplayConfig(
            symbol=os.getenv("CENTWISE_SYMBOL", DEFAULT_SETTINGS.symbol),
            separator=os.getenv("CENTWISE_SEPARATOR", DEFAULT_SETTINGS.separator),
            decimal=os.getenv("CENTWISE_DECIMAL", DEFAULT_SETTINGS.decimal),
            precision=_parse_int(os.getenv("CENTWISE_PRECISION"), DEFAULT_SETTINGS.precision),
            use_vedic=_parse_bool(os.getenv("CENTWISE_USE_VEDIC", "false")),
            pattern=os.getenv("CENTWISE_PATTERN", DEFAULT_SETTINGS.pattern),
            negative_pattern=os.getenv("CENTWISE_NEGATIVE_PATTERN", DEFAULT_SETTINGS.negative_pattern),
        )

        return cls(
            environment=env,
            display=display,
            debug=_parse_bool(os.getenv("DEBUG", "false")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        precision = self.display.precision
        if isinstance(precision, bool) or not isinstance(precision, int):
            errors.append(f"CENTWISE_PRECISION must be an integer: {precision!r}")
        elif precision < 0:
            errors.append(f"CENTWISE_PRECISION must be non-negative: {precision}")

        if not self.display.decimal:
            errors.append("CENTWISE_DECIMAL must not be empty")

        for name, pattern in [
            ("CENTWISE_PATTERN", self.display.pattern),
            ("CENTWISE_NEGATIVE_PATTERN", self.display.negative_pattern),
        ]:
            if "#" not in pattern:
                errors.append(f"{name} must contain the '#' amount placeholder: {pattern!r}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_settings(self, **overrides: Any) -> MoneySettings:
        """
        Build MoneySettings from the display configuration.

        Args:
            **overrides: Settings that take precedence over the configuration;
                None values are ignored

        Returns:
            MoneySettings for formatting and parsing
        """
        values = dict(self.display.__dict__)
        values.update({key: value for key, value in overrides.items() if value is not None})
        return DEFAULT_SETTINGS.merge(values)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "display": dict(self.display.__dict__),
            "debug": self.debug,
            "log_level": self.log_level,
        }


def _parse_bool(value: str) -> bool:
    """Parse a boolean environment value."""
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_int(value: str | None, default: int) -> Any:
    """Parse an integer environment value, keeping the raw string if it is not one."""
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return value


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            _config = None
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
