"""Lightweight configuration loader for git-rename-branch.

Reads optional settings from ~/.git-rename-branch/config.yaml with safe defaults.

Supported keys:
- color: 'auto' (bold only on a terminal), 'always' or 'never' (default: 'auto')
- log_dir: directory for the run log; unset disables file logging (default: None)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import yaml

_CONFIG_CACHE: Optional[Dict[str, Any]] = None

COLOR_CHOICES = ('auto', 'always', 'never')


def _defaults() -> Dict[str, Any]:
    return {
        'color': 'auto',
        'log_dir': None,
    }


def get_config_path() -> Path:
    return Path.home() / '.git-rename-branch' / 'config.yaml'


def get_config() -> Dict[str, Any]:
    """Load config.yaml once and cache the result."""
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    cfg_path = get_config_path()
    data: Dict[str, Any] = {}
    if cfg_path.exists():
        try:
            loaded = yaml.safe_load(cfg_path.read_text())
            if isinstance(loaded, dict):
                data = loaded
        except (OSError, yaml.YAMLError):
            # Ignore unreadable or malformed configs; fall back to defaults
            data = {}

    merged = {**_defaults(), **data}
    _CONFIG_CACHE = merged
    return merged


def get_color_mode() -> str:
    """
    Get color mode from config.

    Returns:
        'auto', 'always' or 'never' - unknown values fall back to 'auto'
    """
    mode = str(get_config().get('color', _defaults()['color'])).lower()
    return mode if mode in COLOR_CHOICES else 'auto'


def resolve_color(is_tty: bool) -> bool:
    """
    Decide whether output gets bold styling.

    Args:
        is_tty: Whether stdout is a terminal

    Returns:
        True if styling should be emitted
    """
    mode = get_color_mode()
    if mode == 'always':
        return True
    if mode == 'never':
        return False
    return is_tty


def get_log_dir() -> Optional[Path]:
    """Get run log directory, or None when file logging is disabled."""
    log_dir = get_config().get('log_dir')
    if not log_dir:
        return None
    return Path(str(log_dir)).expanduser()
