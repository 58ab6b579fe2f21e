"""
Configuration Loader

Loads YAML configuration files for catalog storage and display settings.
Secrets (API keys, tokens) come from the environment instead of YAML.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

SETTINGS_FILE = 'settings.yaml'

DEFAULT_SETTINGS: Dict[str, Any] = {
    'storage': {
        'backend': 'json',
        'json_path': 'data/catalog.json',
        'firestore': {
            'project_id': '',
            'database': '(default)',
            'timeout': 30,
        },
    },
    'display': {
        'currency_symbol': '€',
    },
}

# Environment variable -> key in the storage.firestore section
FIRESTORE_ENV_OVERRIDES = {
    'FIRESTORE_PROJECT_ID': 'project_id',
    'FIRESTORE_API_KEY': 'api_key',
    'FIRESTORE_ID_TOKEN': 'id_token',
}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'settings.yaml')

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_settings(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two settings dictionaries.

    Args:
        base: Default values
        override: Values that win over the defaults

    Returns:
        New merged dictionary (inputs are not modified)
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_settings(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(filename: str = SETTINGS_FILE) -> Dict[str, Any]:
    """
    Load application settings merged over the built-in defaults.

    A missing settings file is not an error: the defaults apply.

    Returns:
        Settings dictionary with 'storage' and 'display' sections
    """
    try:
        overrides = load_config(filename)
    except FileNotFoundError:
        overrides = {}
    return merge_settings(DEFAULT_SETTINGS, overrides)


def get_storage_settings(
    settings: Optional[Dict[str, Any]] = None,
    environ: Optional[Dict[str, str]] = None,
) -> Dict[str, Any]:
    """
    Get the storage section with Firestore secrets taken from the environment.

    Args:
        settings: Settings dict (if None, loads from config)
        environ: Environment mapping (if None, uses os.environ)

    Returns:
        Storage settings dictionary

    Example:
        {
            'backend': 'firestore',
            'json_path': 'data/catalog.json',
            'firestore': {'project_id': 'my-app', 'api_key': '...', ...},
        }
    """
    if settings is None:
        settings = load_settings()
    if environ is None:
        environ = os.environ

    storage = merge_settings(DEFAULT_SETTINGS['storage'], settings.get('storage') or {})
    firestore = dict(storage.get('firestore') or {})
    for env_name, key in FIRESTORE_ENV_OVERRIDES.items():
        if environ.get(env_name):
            firestore[key] = environ[env_name]
    storage['firestore'] = firestore
    return storage


def get_currency_symbol(settings: Optional[Dict[str, Any]] = None) -> str:
    """Get the currency symbol used when formatting prices."""
    if settings is None:
        settings = load_settings()
    display = settings.get('display') or {}
    return display.get('currency_symbol', DEFAULT_SETTINGS['display']['currency_symbol'])
