"""
Config Manager

Loads the animation configuration from YAML with include system support,
falls back to factory defaults when the main file cannot be read, and
validates the result into an AnimationConfig.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from pydantic import ValidationError
from models.config import AnimationConfig
from models.errors import ConfigError
from models.schemas import ConfigSchema
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Relative paths resolve against src/.

    Example:
        config = ConfigManager()
        config.load()

        animation = config.animation_config   # AnimationConfig
        fps = animation.gif.fps
    """

    def __init__(self, config_path="config/config.yaml", defaults_path="config/factory_defaults.yaml"):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/ or absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = Path(config_path)
        self.factory_defaults_path = Path(defaults_path)
        self.data: Dict[str, Any] = {}
        self.used_defaults = False
        self._config: Optional[AnimationConfig] = None

    def load(self) -> Dict[str, Any]:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory_defaults.yaml on failure
        5. Validate into AnimationConfig

        Returns:
            Merged config data dict

        Raises:
            ConfigError: values fail validation, or neither file can be read
        """
        src_dir = Path(__file__).parent.parent
        full_path = src_dir / self.config_path

        try:
            main_config = self._read_yaml(full_path)

            if 'include' in main_config:
                log.info("Using include-based configuration")
                includes = main_config.pop('include')
                self.data = self._load_with_includes(includes, full_path.parent)
                # Keys in the main file override included ones
                self.data.update(main_config)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config
            self.used_defaults = False

        except (OSError, yaml.YAMLError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")

            try:
                self.data = self._read_yaml(src_dir / self.factory_defaults_path)
            except (OSError, yaml.YAMLError) as defaults_ex:
                raise ConfigError(f"Factory defaults unavailable: {defaults_ex}") from defaults_ex
            self.used_defaults = True

        self._config = self.validate(self.data)
        return self.data

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise yaml.YAMLError(f"{path.name}: top level must be a mapping")
        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict[str, Any]:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["animation.yaml", "gif.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged: Dict[str, Any] = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._read_yaml(filepath)
                if file_data:
                    merged.update(file_data)
                    log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except yaml.YAMLError as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    @staticmethod
    def validate(data: Dict[str, Any]) -> AnimationConfig:
        """
        Validate a raw config dict into the domain model

        Raises:
            ConfigError: wraps the pydantic ValidationError
        """
        try:
            return ConfigSchema.model_validate(data).to_domain()
        except ValidationError as ex:
            log.error("Invalid configuration", errors=ex.error_count())
            raise ConfigError(str(ex)) from ex

    @property
    def animation_config(self) -> AnimationConfig:
        if self._config is None:
            raise ConfigError("Configuration not loaded, call load() first")
        return self._config
