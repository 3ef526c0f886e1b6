"""
Configuration loading for FocusFlow.

Settings live in args/focusflow.yaml. Anything missing from the file falls
back to DEFAULT_CONFIG, so a partial file only needs the keys it changes.
A handful of environment variables (loaded from .env when present) override
the file for deployment-specific values.

Usage:
    from focusflow.config import load_config

    config = load_config()
    timeout = config["ai"]["text"]["timeout_seconds"]
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from focusflow import CONFIG_PATH

# Load .env file before reading any overrides
load_dotenv()


DEFAULT_CONFIG: dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": 8080,
        "allowed_origins": ["*"],
    },
    "ai": {
        "text": {
            "model": "claude-3-5-haiku-latest",
            "max_tokens": 1024,
            "timeout_seconds": 20.0,
        },
        "image": {
            "endpoint": None,
            "timeout_seconds": 30.0,
            "max_prompt_chars": 700,
            "default_size": 1024,
            "min_size": 64,
            "max_size": 2048,
        },
    },
    "breakdown": {
        "max_steps": 8,
    },
    "coach": {
        "max_sentences": 3,
        "max_message_chars": 2000,
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from YAML, merged over the defaults."""
    config_path = path or CONFIG_PATH
    file_config: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            file_config = yaml.safe_load(f) or {}

    config = _deep_merge(DEFAULT_CONFIG, file_config)

    # Environment overrides
    if os.environ.get("PORT"):
        config["server"]["port"] = int(os.environ["PORT"])
    if os.environ.get("FOCUSFLOW_IMAGE_ENDPOINT"):
        config["ai"]["image"]["endpoint"] = os.environ["FOCUSFLOW_IMAGE_ENDPOINT"]
    if os.environ.get("FOCUSFLOW_TEXT_MODEL"):
        config["ai"]["text"]["model"] = os.environ["FOCUSFLOW_TEXT_MODEL"]

    return config


__all__ = ["DEFAULT_CONFIG", "load_config"]
