"""
utils.py - Utility Functions and Helpers
=========================================
Common utility functions used throughout the tree trip planner.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import numpy as np


logger = logging.getLogger(__name__)


# ============================================================================
# FILE OPERATIONS
# ============================================================================

def ensure_directory(path: Union[str, Path]) -> Path:
    """Ensure directory exists, create if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _json_default(value: Any) -> Any:
    # numpy scalars and arrays are not JSON serializable on their own
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    return str(value)


def save_json(data: Dict, filepath: Union[str, Path], indent: int = 2):
    """Save data to JSON file."""
    filepath = Path(filepath)
    ensure_directory(filepath.parent)

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=indent, default=_json_default)

    logger.debug(f"Saved JSON to {filepath}")


def load_json(filepath: Union[str, Path]) -> Dict:
    """Load data from JSON file."""
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"JSON file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    logger.debug(f"Loaded JSON from {filepath}")
    return data


def load_yaml(filepath: Union[str, Path]) -> Dict:
    """Load data from YAML file."""
    import yaml

    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"YAML file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = yaml.safe_load(f)

    logger.debug(f"Loaded YAML from {filepath}")
    return data


# ============================================================================
# LOGGING
# ============================================================================

def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    from config import Config

    log_config = Config.LOGGING

    # Set log level
    level = getattr(logging, log_level.upper(), logging.INFO)

    # Create formatter
    formatter = logging.Formatter(
        log_config['format'],
        datefmt=log_config['date_format']
    )

    # Setup handlers
    handlers = []

    # Console handler
    if log_config.get('console_output', True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # File handler
    if log_file or log_config.get('file'):
        file_path = log_file or log_config['file']
        ensure_directory(Path(file_path).parent)

        from logging.handlers import RotatingFileHandler
        file_handler = RotatingFileHandler(
            file_path,
            maxBytes=log_config.get('max_bytes', 10*1024*1024),
            backupCount=log_config.get('backup_count', 5)
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Configure root logger
    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True
    )

    logger.info(f"Logging configured: level={log_level}")


# ============================================================================
# VALIDATION AND ERROR HANDLING
# ============================================================================

class ValidationError(Exception):
    """Custom exception for validation errors."""
    pass


def validate_max_cities(k: int) -> int:
    """Check the city budget K and return it as a plain int."""
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise ValidationError(f"K must be an integer, got {type(k).__name__}")
    if k < 1:
        raise ValidationError(f"K must be at least 1, got {k}")
    return int(k)
