"""Tests for config loading."""

from launchpad import config
from launchpad.config import DEFAULTS, get_config


def test_shipped_yaml_covers_every_setting():
    loaded = get_config()
    for key in DEFAULTS:
        assert key in loaded


def test_shipped_storage_key_matches_wire_name():
    assert get_config()["storage_key"] == "vibeLaunchpadState"


def test_get_config_returns_patched_singleton(mock_config):
    assert config.get_config() is mock_config
