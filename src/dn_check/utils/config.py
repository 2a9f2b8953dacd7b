"""Configuration defaults and YAML loading."""

import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..exceptions import ConfigError, InputError
from .names import split_tlds

DEFAULT_CONFIG_PATH = "config/config.yaml"

DEFAULTS: Dict[str, Any] = {
    'tlds': ['com'],
    'dns': {
        'timeout': 3.0,
        'max_concurrent': 20,
        'nameservers': None,
        'record_type': 'A'
    }
}


def _deep_merge(base: Dict, override: Dict) -> Dict:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration, falling back to DEFAULTS.

    An explicit ``config_path`` must exist. Without one, the default path
    is read when present.
    """
    config = copy.deepcopy(DEFAULTS)
    if config_path is None:
        config_file = Path(DEFAULT_CONFIG_PATH)
        if not config_file.exists():
            return config
    else:
        config_file = Path(config_path)
        if not config_file.exists():
            raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_file) as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot load config {config_file}: {e}") from e

    if user_config is None:
        return config
    if not isinstance(user_config, dict):
        raise ConfigError(f"Config {config_file} must be a mapping")

    # An empty section keeps its defaults
    user_config = {k: v for k, v in user_config.items() if v is not None}
    return _validate(_deep_merge(config, user_config), config_file)


def _validate(config: Dict[str, Any], config_file: Path) -> Dict[str, Any]:
    if not isinstance(config['dns'], dict):
        raise ConfigError(f"Config {config_file}: 'dns' must be a mapping")

    tlds = config['tlds']
    if isinstance(tlds, str):
        tlds = [tlds]
    if not isinstance(tlds, list) or not all(isinstance(t, str) for t in tlds):
        raise ConfigError(f"Config {config_file}: 'tlds' must be a list of strings")
    try:
        config['tlds'] = split_tlds(",".join(tlds))
    except InputError as e:
        raise ConfigError(f"Config {config_file}: {e}") from e
    return config
