"""
config.py - System Configuration Settings
==========================================
Central configuration for the tree trip planner.
"""

from typing import Dict, Any


class Config:
    """System-wide configuration settings."""

    # ============================================================================
    # SEARCH CONFIGURATION
    # ============================================================================

    SEARCH = {
        'progress_interval': 10000,  # log a progress line every N proposals
        'default_max_cities': 5,
    }

    # ============================================================================
    # GENERATOR CONFIGURATION
    # ============================================================================

    GENERATORS = {
        'default_size': 8,
        'uniform_attractiveness': 4,
        'low_root_attractiveness': 0,
        'elevated_attractiveness': 9,
        'random_attractiveness_range': [1, 5],  # inclusive
        'seed': None,
    }

    # ============================================================================
    # DEMO INSTANCE
    # ============================================================================

    DEMO = {
        'K': 5,
        'C': [1, 3, 0, 3, 2, 4, 4],
        'D': [6, 2, 7, 5, 6, 5, 2],
    }

    # ============================================================================
    # LOGGING CONFIGURATION
    # ============================================================================

    LOGGING = {
        'level': 'INFO',
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'date_format': '%Y-%m-%d %H:%M:%S',
        'file': None,
        'max_bytes': 10 * 1024 * 1024,  # 10 MB
        'backup_count': 5,
        'console_output': True
    }

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key."""
        keys = key.split('.')
        value = cls

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            elif not isinstance(value, dict) and hasattr(value, k):
                value = getattr(value, k)
            else:
                return default

        return value

    @classmethod
    def to_dict(cls) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        result = {}

        for attr in dir(cls):
            if not attr.startswith('_') and attr.isupper():
                value = getattr(cls, attr)
                if not callable(value):
                    result[attr] = value

        return result

    @classmethod
    def from_file(cls, filepath: str):
        """Load configuration from JSON or YAML file."""
        import json

        with open(filepath, 'r') as f:
            if filepath.endswith('.json'):
                config_data = json.load(f)
            elif filepath.endswith(('.yml', '.yaml')):
                import yaml
                config_data = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported config file format: {filepath}")

        for key, value in config_data.items():
            if hasattr(cls, key):
                current = getattr(cls, key)
                # merge sections so partial files keep the other defaults
                if isinstance(current, dict) and isinstance(value, dict):
                    current.update(value)
                else:
                    setattr(cls, key, value)

    @classmethod
    def save_to_file(cls, filepath: str):
        """Save configuration to JSON or YAML file."""
        import json

        config_data = cls.to_dict()

        with open(filepath, 'w') as f:
            if filepath.endswith('.json'):
                json.dump(config_data, f, indent=2, default=str)
            elif filepath.endswith(('.yml', '.yaml')):
                import yaml
                yaml.safe_dump(config_data, f, default_flow_style=False)
            else:
                raise ValueError(f"Unsupported config file format: {filepath}")
