"""
fzyscore Configuration Loader

Loads matching configuration from YAML files with environment variable fallback.
Supports precedence order: environment variables -> current directory -> user home directory.
"""

import os
import logging
from pathlib import Path
from typing import Dict, Any, List
import yaml
from dataclasses import dataclass

from fzyscore.matching.configuration import MatchConfiguration, create_configuration, InvalidConfiguration

logger = logging.getLogger(__name__)


@dataclass
class ConfigSource:
    """Represents a configuration source with its path and priority."""
    path: Path
    priority: int
    exists: bool = False


class ConfigLoader:
    """Loads and processes fzyscore configuration from YAML files."""

    CONFIG_FILENAMES = ["config.yaml", "config.yml"]
    HOME_CONFIG_DIR = ".fzyscore"

    # Environment variable mapping from YAML keys to env var names
    ENV_VAR_MAPPING = {
        'matching.case_sensitive': 'FZYSCORE_CASE_SENSITIVE',
        'matching.max_match_length': 'FZYSCORE_MAX_MATCH_LENGTH',

        # Score weights
        'matching.scores.consecutive': 'FZYSCORE_CONSECUTIVE_MATCH_SCORE',
        'matching.scores.gap_leading': 'FZYSCORE_GAP_LEADING_SCORE',
        'matching.scores.gap_inner': 'FZYSCORE_GAP_INNER_SCORE',
        'matching.scores.gap_trailing': 'FZYSCORE_GAP_TRAILING_SCORE',
        'matching.scores.slash': 'FZYSCORE_SLASH_MATCH_SCORE',
        'matching.scores.word': 'FZYSCORE_WORD_MATCH_SCORE',
        'matching.scores.capital': 'FZYSCORE_CAPITAL_MATCH_SCORE',
        'matching.scores.dot': 'FZYSCORE_DOT_MATCH_SCORE',

        # Environment
        'environment': 'environment',
        'debug': 'DEBUG',
    }

    # Environment variable -> MatchConfiguration field
    CONFIGURATION_FIELDS = {
        'FZYSCORE_CASE_SENSITIVE': 'case_sensitive',
        'FZYSCORE_MAX_MATCH_LENGTH': 'max_match_length',
        'FZYSCORE_CONSECUTIVE_MATCH_SCORE': 'consecutive_match_score',
        'FZYSCORE_GAP_LEADING_SCORE': 'gap_leading_score',
        'FZYSCORE_GAP_INNER_SCORE': 'gap_inner_score',
        'FZYSCORE_GAP_TRAILING_SCORE': 'gap_trailing_score',
        'FZYSCORE_SLASH_MATCH_SCORE': 'slash_match_score',
        'FZYSCORE_WORD_MATCH_SCORE': 'word_match_score',
        'FZYSCORE_CAPITAL_MATCH_SCORE': 'capital_match_score',
        'FZYSCORE_DOT_MATCH_SCORE': 'dot_match_score',
    }

    TRUE_VALUES = {'true', '1', 'yes', 'on'}
    FALSE_VALUES = {'false', '0', 'no', 'off'}

    def __init__(self):
        self.config_sources = self._discover_config_sources()
        self.loaded_config = {}
        self.env_vars_set = 0

    def _discover_config_sources(self) -> List[ConfigSource]:
        """Discover available configuration sources in precedence order."""
        sources = []

        # 1. Current working directory .fzyscore subdirectory (highest priority)
        for i, filename in enumerate(self.CONFIG_FILENAMES):
            cwd_config = Path.cwd() / self.HOME_CONFIG_DIR / filename
            sources.append(ConfigSource(cwd_config, i + 1, cwd_config.exists()))

        # 2. User home directory .fzyscore (lowest priority)
        for i, filename in enumerate(self.CONFIG_FILENAMES):
            home_config = Path.home() / self.HOME_CONFIG_DIR / filename
            sources.append(ConfigSource(home_config, i + 3, home_config.exists()))

        return sources

    def _get_nested_value(self, data: Dict[str, Any], key_path: str) -> Any:
        """Get value from nested dictionary using dot notation."""
        value = data
        for key in key_path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return None
        return value

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration from file."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
                logger.debug(f"Loaded config from {file_path}")
                return config
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {file_path}: {e}")
            return {}

    def _merge_configs(self, base_config: Dict[str, Any], new_config: Dict[str, Any]) -> Dict[str, Any]:
        """Merge two configuration dictionaries recursively."""
        result = base_config.copy()

        for key, value in new_config.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _format_env_value(self, value: Any) -> str:
        # YAML booleans become 'true'/'false' rather than Python's 'True'/'False'
        if isinstance(value, bool):
            return 'true' if value else 'false'
        return str(value)

    def _set_environment_variables(self, config: Dict[str, Any]) -> int:
        """Set environment variables from configuration.

        Only sets environment variables that are not already set, preserving
        the precedence order: env vars > YAML config > defaults.
        """
        env_vars_set = 0

        for yaml_key, env_var in self.ENV_VAR_MAPPING.items():
            value = self._get_nested_value(config, yaml_key)
            if value is None:
                continue

            if env_var not in os.environ:
                os.environ[env_var] = self._format_env_value(value)
                env_vars_set += 1
                logger.debug(f"Set {env_var} from config")
            else:
                logger.debug(f"Skipped {env_var} - already set in environment")

        return env_vars_set

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from all sources and set environment variables."""
        merged_config = {}
        config_files_loaded = []

        # Lowest priority first so that higher priority files override
        for source in sorted(self.config_sources, key=lambda x: x.priority, reverse=True):
            if source.exists:
                file_config = self._load_yaml_file(source.path)
                merged_config = self._merge_configs(merged_config, file_config)
                config_files_loaded.append(str(source.path))

        self.loaded_config = merged_config
        self.env_vars_set = self._set_environment_variables(merged_config)

        if config_files_loaded:
            logger.debug(
                f"Loaded fzyscore configuration from {len(config_files_loaded)} file(s): "
                f"{', '.join(config_files_loaded)} - Set {self.env_vars_set} environment variables"
            )
        else:
            logger.debug("No fzyscore configuration files found - using environment variables only")

        return self.loaded_config

    def get_config_value(self, key_path: str, default: Any = None) -> Any:
        """Get a configuration value by key path."""
        value = self._get_nested_value(self.loaded_config, key_path)
        return default if value is None else value

    def get_available_sources(self) -> List[str]:
        """Get list of available configuration sources."""
        return [str(source.path) for source in self.config_sources if source.exists]

    def _coerce_env_value(self, env_var: str, field_name: str, raw: str) -> Any:
        text = raw.strip()
        if field_name == 'case_sensitive':
            if text.lower() in self.TRUE_VALUES:
                return True
            if text.lower() in self.FALSE_VALUES:
                return False
            raise InvalidConfiguration(f"{env_var} must be a boolean, got {raw!r}")
        try:
            if field_name == 'max_match_length':
                return int(text)
            return float(text)
        except ValueError as e:
            raise InvalidConfiguration(f"{env_var} must be a number, got {raw!r}") from e

    def configuration_overrides(self) -> Dict[str, Any]:
        """Collect MatchConfiguration overrides from FZYSCORE_* environment variables."""
        overrides = {}
        for env_var, field_name in self.CONFIGURATION_FIELDS.items():
            raw = os.environ.get(env_var)
            if raw is None or raw.strip() == '':
                continue
            overrides[field_name] = self._coerce_env_value(env_var, field_name, raw)
        return overrides


def load_config() -> Dict[str, Any]:
    """Convenience function to load fzyscore configuration."""
    loader = ConfigLoader()
    return loader.load_config()


def configuration_from_environment(**overrides) -> MatchConfiguration:
    """
    Build a MatchConfiguration from FZYSCORE_* environment variables.

    Call ``load_config`` first to have YAML files populate those variables.
    Keyword overrides win over the environment.
    """
    values = ConfigLoader().configuration_overrides()
    values.update({key: value for key, value in overrides.items() if value is not None})
    return create_configuration(values)
