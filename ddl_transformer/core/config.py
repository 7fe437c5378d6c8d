"""
Загрузка конфигурации из JSON-файла.

Конфигурация — обычный dict; отсутствующие ключи дополняются
значениями из DEFAULT_CONFIG каждым компонентом самостоятельно.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .constants import DEFAULT_CONFIG
from .exceptions import ConfigurationError


def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    config: Dict[str, Any] = {}

    if path:
        try:
            with open(Path(path), encoding="utf-8") as f:
                loaded = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"cannot read config file {path}: {e}", config_key="config") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"invalid JSON in config file {path}: {e}", config_key="config") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError("config file must contain a JSON object", config_key="config")

        unknown = sorted(set(loaded) - set(DEFAULT_CONFIG))
        if unknown:
            raise ConfigurationError(
                f"unknown config keys: {', '.join(unknown)}",
                config_key=unknown[0],
            )
        config.update(loaded)

    if overrides:
        config.update({k: v for k, v in overrides.items() if v is not None})

    for k, v in DEFAULT_CONFIG.items():
        config.setdefault(k, v)
    return config
