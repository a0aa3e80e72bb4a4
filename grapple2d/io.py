"""
Configuration loading for the playground.
"""

from typing import Dict, Any
import json
import logging
import os
import yaml
from .config import PlaygroundConfig
from .engine import Session

logger = logging.getLogger(__name__)

DEFAULT_VIEWPORT = (1280, 720)


class ConfigLoader:
    """Load playground configuration from JSON/YAML files."""

    @staticmethod
    def load_config(config_path: str) -> Dict[str, Any]:
        """
        Load configuration from file.

        Args:
            config_path: Path to configuration file (.json, .yaml or .yml)

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If file format is unsupported or the top level is not a mapping
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        ext = os.path.splitext(config_path)[1].lower()

        with open(config_path, 'r') as f:
            if ext == '.json':
                config = json.load(f)
            elif ext in ['.yaml', '.yml']:
                config = yaml.safe_load(f) or {}
            else:
                raise ValueError(f"Unsupported config format: {ext}")

        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(config).__name__}")

        logger.info(f"Loaded configuration from {config_path}")
        return config

    @staticmethod
    def create_config(config: Dict[str, Any]) -> PlaygroundConfig:
        """Build the tuned constants from the 'physics' section."""
        return PlaygroundConfig.from_dict(config.get('physics', {}))

    @staticmethod
    def create_session_from_config(config: Dict[str, Any]) -> Session:
        """
        Create a session from configuration.

        Args:
            config: Configuration dictionary with optional 'physics' and
                'viewport' ({'width': ..., 'height': ...}) sections

        Returns:
            Session on the stock level
        """
        viewport_config = config.get('viewport', {})
        viewport = (viewport_config.get('width', DEFAULT_VIEWPORT[0]),
                    viewport_config.get('height', DEFAULT_VIEWPORT[1]))

        session = Session(ConfigLoader.create_config(config), viewport)
        logger.info("Created session from configuration")
        return session
