"""Shared fixtures for the Launchpad test suite."""

import pytest
from unittest.mock import patch

from launchpad.state import initial_state
from launchpad.store import StateStore


@pytest.fixture
def base_state():
    """All-default ProjectState."""
    return initial_state()


@pytest.fixture
def populated_state():
    """ProjectState with every field filled in."""
    return {
        "idea": "flashcard app",
        "niche": "students",
        "d3_analysis": "- Demonstrable: yes\n- Desirable: yes\nScore: 8/10",
        "video_script": "Scene 1: a student drowning in notes...",
        "demand_data": {
            "comments": 120,
            "wants": 15,
            "feedback": "several asked where to download",
        },
        "demand_analysis": "Real demand, 12.5% high intent. Decision: GO",
        "is_go": True,
        "mvp_specs": "Plan...\n\n```html\n<html><body>Cards</body></html>\n```",
    }


@pytest.fixture
def store(tmp_path):
    """StateStore writing into a per-test directory."""
    return StateStore(storage_dir=tmp_path, key="testState")


@pytest.fixture
def mock_config(tmp_path):
    """Patch the config singleton with test-friendly values."""
    test_config = {
        "llm_provider": "google",
        "fast_model": "fast-model",
        "pro_model": "pro-model",
        "request_timeout": 30,
        "llm_max_retries": 0,
        "output_language": "Thai",
        "default_niche": "General Mass Market",
        "comment_char_limit": 15000,
        "storage_dir": str(tmp_path / "storage"),
        "storage_key": "vibeLaunchpadState",
        "output_path": str(tmp_path / "output" / "blueprint.md"),
        "hitl_enabled": False,
    }
    with patch("launchpad.config._config", test_config):
        yield test_config
