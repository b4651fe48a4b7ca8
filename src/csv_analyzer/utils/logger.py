"""Logging setup for the CSV analyzer."""

import logging
import logging.config
import os
import yaml
from pathlib import Path
from typing import Optional

ROOT_LOGGER = 'csv_analyzer'


def _find_logging_config() -> Optional[Path]:
    """Locate logging.yaml: $LOG_CONFIG, then the project config/ directory."""
    if os.getenv('LOG_CONFIG'):
        return Path(os.getenv('LOG_CONFIG'))

    for path in (
        Path(__file__).parent.parent.parent.parent / 'config' / 'logging.yaml',
        Path('config/logging.yaml'),
    ):
        if path.exists():
            return path
    return None


def _ensure_log_dirs(config: dict):
    """Create parent directories for every file handler in a dictConfig."""
    for handler in config.get('handlers', {}).values():
        filename = handler.get('filename')
        if filename:
            Path(filename).parent.mkdir(parents=True, exist_ok=True)


def setup_logging(
    config_path: Optional[str] = None,
    default_level: int = logging.INFO,
    verbose: bool = False
) -> logging.Logger:
    """
    Setup logging configuration.

    Args:
        config_path: Path to logging YAML config (default: $LOG_CONFIG or config/logging.yaml)
        default_level: Level for the csv_analyzer logger when not verbose
        verbose: Log at DEBUG, as requested by the CLI --verbose flag

    Returns:
        The csv_analyzer logger
    """
    path = Path(config_path) if config_path else _find_logging_config()

    if path and path.exists():
        with open(path, 'r') as f:
            config = yaml.safe_load(f)
        _ensure_log_dirs(config)
        logging.config.dictConfig(config)
    else:
        logging.basicConfig(
            level=default_level,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else default_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')
