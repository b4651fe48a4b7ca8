"""Configuration loader for YAML and environment variables."""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from .logger import get_logger

logger = get_logger('config_loader')


DEFAULT_CONFIG: Dict[str, Any] = {
    'analysis': {
        'type_sample_rows': 10,
    },
    'loader': {
        'delimiter': ',',
        'encoding': 'utf-8',
    },
    'reporting': {
        'output_dir': './reports',
        'formats': [],
        'precision': 3,
    },
}


class ConfigLoader:
    """Loads and manages configuration from YAML and environment variables."""

    def __init__(self, config_path: Optional[str] = None, env_path: Optional[str] = None):
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML config file (default: config/config.yaml)
            env_path: Path to .env file (default: .env in project root)
        """
        # Load environment variables
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()  # Load from default .env location

        if config_path is not None and not Path(config_path).exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        if config_path is None:
            config_path = self._find_config_file()

        self.config = copy.deepcopy(DEFAULT_CONFIG)
        if config_path:
            self._merge(self.config, self._load_yaml(config_path))
            logger.debug(f"Loaded configuration from {config_path}")
        else:
            logger.debug("No config.yaml found, using built-in defaults")

        self._merge_env_overrides()

    def _find_config_file(self) -> Optional[str]:
        """Find config.yaml in project structure."""
        possible_paths = [
            Path(__file__).parent.parent.parent.parent / 'config' / 'config.yaml',
            Path('config/config.yaml'),
        ]

        for path in possible_paths:
            if path.exists():
                return str(path)

        return None

    def _load_yaml(self, path: str) -> Dict[str, Any]:
        """Load YAML configuration file."""
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def _merge(cls, base: Dict[str, Any], override: Dict[str, Any]):
        """Recursively merge override into base."""
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(base.get(key), dict):
                cls._merge(base[key], value)
            else:
                base[key] = value

    def _merge_env_overrides(self):
        """Override config values with environment variables if present."""
        # Type inference override
        if os.getenv('TYPE_SAMPLE_ROWS'):
            self.config.setdefault('analysis', {})['type_sample_rows'] = int(os.getenv('TYPE_SAMPLE_ROWS'))

        # Loader overrides
        if os.getenv('CSV_DELIMITER'):
            self.config.setdefault('loader', {})['delimiter'] = os.getenv('CSV_DELIMITER')

        if os.getenv('CSV_ENCODING'):
            self.config.setdefault('loader', {})['encoding'] = os.getenv('CSV_ENCODING')

        # Reporting overrides
        if os.getenv('REPORT_PRECISION'):
            self.config.setdefault('reporting', {})['precision'] = int(os.getenv('REPORT_PRECISION'))

        if os.getenv('REPORT_OUTPUT_DIR'):
            self.config.setdefault('reporting', {})['output_dir'] = os.getenv('REPORT_OUTPUT_DIR')

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Example: config.get('analysis.type_sample_rows')
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default

            if value is None:
                return default

        return value

    def get_all(self) -> Dict[str, Any]:
        """Get entire configuration dictionary."""
        return self.config

    def get_analysis_config(self) -> Dict[str, Any]:
        """Get type inference settings."""
        return {
            'sample_rows': int(self.get('analysis.type_sample_rows', 10)),
        }

    def get_loader_config(self) -> Dict[str, Any]:
        """Get CSV loader settings."""
        return {
            'delimiter': self.get('loader.delimiter', ','),
            'encoding': self.get('loader.encoding', 'utf-8'),
        }

    def get_reporting_config(self) -> Dict[str, Any]:
        """Get report generator settings."""
        return {
            'output_dir': self.get('reporting.output_dir', './reports'),
            'formats': list(self.get('reporting.formats', [])),
            'precision': int(self.get('reporting.precision', 3)),
        }
