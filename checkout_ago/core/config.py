"""Configuration management for checkout-ago."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .interfaces import IConfigManager


logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class GitConfig:
    """How git is invoked."""
    executable: str = "git"
    reference: str = "HEAD"


@dataclass
class BehaviorConfig:
    """Default command-line behavior."""
    print_only: bool = False


@dataclass
class LoggingConfig:
    """Diagnostic logging configuration."""
    level: str = "WARNING"


@dataclass
class CheckoutAgoConfig:
    """Complete configuration for checkout-ago."""
    git: GitConfig
    behavior: BehaviorConfig
    logging: LoggingConfig

    def __init__(self):
        self.git = GitConfig()
        self.behavior = BehaviorConfig()
        self.logging = LoggingConfig()


class ConfigManager(IConfigManager):
    """Manages configuration loading and validation."""

    DEFAULT_CONFIG_NAME = ".checkout-ago.yml"

    def __init__(self, project_root: Optional[Path] = None):
        self.project_root = project_root or Path.cwd()
        self.config_path = self.project_root / self.DEFAULT_CONFIG_NAME

    def load_config(self, config_path: Optional[Path] = None) -> Dict[str, Any]:
        """Load configuration from a YAML file, merged over the defaults.

        A missing, unreadable or unparsable file yields the defaults.
        """
        path = config_path or self.config_path

        if not path.exists():
            return self.get_default_config()

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {path}: {describe_load_error(e)}")
            return self.get_default_config()

        if not isinstance(config_data, dict):
            logger.warning(f"Ignoring config {path}: top level must be a mapping")
            return self.get_default_config()

        logger.debug(f"Loaded configuration from {path}")
        return self._merge_configs(self.get_default_config(), config_data)

    def get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values."""
        default_config = CheckoutAgoConfig()
        return {
            'git': asdict(default_config.git),
            'behavior': asdict(default_config.behavior),
            'logging': asdict(default_config.logging),
        }

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate configuration and return any errors."""
        errors = []

        for section in ('git', 'behavior', 'logging'):
            if not isinstance(config.get(section, {}), dict):
                errors.append(f"{section} must be a mapping")
        if errors:
            return errors

        git_config = config.get('git', {})
        for key in ('executable', 'reference'):
            value = git_config.get(key, 'git')
            if not isinstance(value, str) or not value.strip():
                errors.append(f"git.{key} must be a non-empty string")

        behavior = config.get('behavior', {})
        if not isinstance(behavior.get('print_only', False), bool):
            errors.append("behavior.print_only must be true or false")

        logging_config = config.get('logging', {})
        level = logging_config.get('level', 'WARNING')
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            errors.append(f"logging.level must be one of {', '.join(LOG_LEVELS)}")

        return errors

    def _merge_configs(self, default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge user config with default config."""
        result = default.copy()

        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result


def describe_load_error(error: Exception) -> str:
    """Summarize a config load failure on a single line."""
    if isinstance(error, yaml.MarkedYAMLError) and error.problem_mark is not None:
        problem = error.problem or "invalid YAML"
        return f"{problem} at line {error.problem_mark.line + 1}"

    text = str(error).strip()
    return text.splitlines()[0] if text else type(error).__name__
