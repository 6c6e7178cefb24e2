"""
config.py - System Configuration Settings
==========================================
Central configuration for the wall snapping helpers.
"""

from typing import Dict, Any


class Config:
    """System-wide configuration settings."""

    # ============================================================================
    # SNAPPING CONFIGURATION
    # ============================================================================

    # All distances are in pixels
    SNAPPING = {
        'intersection_distance': 10,  # vertex -> wall intersection
        'alignment_distance': 10,     # secondary alignment of other vertices
        'line_distance': 5            # single coordinate / rectangle edge -> wall line
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
            if isinstance(value, dict):
                if k not in value:
                    return default
                value = value[k]
            elif hasattr(value, k):
                value = getattr(value, k)
            else:
                return default

        return value

    @classmethod
    def set(cls, key: str, value: Any):
        """Set configuration value by dot-notation key."""
        keys = key.split('.')
        target = cls

        for k in keys[:-1]:
            if isinstance(target, dict) and k in target:
                target = target[k]
            elif not isinstance(target, dict) and hasattr(target, k):
                target = getattr(target, k)
            else:
                raise KeyError(f"Configuration key not found: {key}")

        final_key = keys[-1]
        if isinstance(target, dict):
            if final_key not in target:
                raise KeyError(f"Configuration key not found: {key}")
            target[final_key] = value
        elif hasattr(target, final_key):
            setattr(target, final_key, value)
        else:
            raise KeyError(f"Cannot set configuration key: {key}")

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
        """Load configuration from JSON or YAML file.

        Dict sections are merged key by key so a file only needs to list
        the values it overrides.
        """
        import json

        filepath = str(filepath)
        with open(filepath, 'r') as f:
            if filepath.endswith('.json'):
                config_data = json.load(f)
            elif filepath.endswith(('.yml', '.yaml')):
                import yaml
                config_data = yaml.safe_load(f) or {}
            else:
                raise ValueError(f"Unsupported config file format: {filepath}")

        for key, value in config_data.items():
            if not hasattr(cls, key):
                continue
            current = getattr(cls, key)
            if isinstance(current, dict) and isinstance(value, dict):
                current.update(value)
            else:
                setattr(cls, key, value)

    @classmethod
    def save_to_file(cls, filepath: str):
        """Save configuration to JSON or YAML file."""
        import json

        filepath = str(filepath)
        config_data = cls.to_dict()

        if filepath.endswith('.json'):
            with open(filepath, 'w') as f:
                json.dump(config_data, f, indent=2, default=str)
        elif filepath.endswith(('.yml', '.yaml')):
            import yaml
            with open(filepath, 'w') as f:
                yaml.safe_dump(config_data, f, default_flow_style=False)
        else:
            raise ValueError(f"Unsupported config file format: {filepath}")
