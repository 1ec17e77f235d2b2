import copy
import logging
import os
from typing import Any

import yaml

from arbgen.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "paths": {
        "values_folder": "res/values",
        "output_file": "lib/generated/i18n.dart",
    },
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_folder: str) -> dict[str, Any]:
    config_file_path = os.path.join(os.path.abspath(config_folder), CONFIG_FILE)

    config: dict[str, Any] = {}
    try:
        with open(config_file_path, "r") as file:
            config = yaml.safe_load(file) or {}
    except FileNotFoundError:
        logger.error(f"File not found: {config_file_path}, using defaults.")
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid {CONFIG_FILE}: {exc}") from exc

    if not isinstance(config, dict):
        raise ConfigError(f"{CONFIG_FILE} must contain a mapping")
    return _merge(DEFAULT_CONFIG, config)


def configure_logging(config: dict[str, Any]) -> None:
    logging.basicConfig(
        level=logging.getLevelName(config["logging"]["level"]),
        format=config["logging"]["format"],
        datefmt=config["logging"]["datefmt"],
    )
