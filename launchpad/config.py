"""Launchpad settings: config.yaml merged over built-in defaults, read once at import."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

# .env lives in the project root, next to pyproject.toml
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# LAUNCHPAD_CONFIG points at an alternative YAML file
CONFIG_PATH = Path(
    os.environ.get("LAUNCHPAD_CONFIG") or Path(__file__).resolve().parent / "config.yaml"
)

DEFAULTS = {
    "llm_provider": "google",
    "fast_model": "gemini-3-flash-preview",
    "pro_model": "gemini-3-pro-preview",
    "request_timeout": 120,
    "llm_max_retries": 0,
    "output_language": "Thai",
    "default_niche": "General Mass Market",
    "comment_char_limit": 15000,
    "storage_dir": "./.launchpad",
    "storage_key": "vibeLaunchpadState",
    "output_path": "./output/blueprint.md",
    "hitl_enabled": True,
}

_config = {**DEFAULTS, **(yaml.safe_load(CONFIG_PATH.read_text(encoding="utf-8")) or {})}


def get_config() -> dict:
    """Return the loaded config dictionary."""
    return _config
