"""Tests for formatter: render_blueprint, write_blueprint, high_intent_rate."""

from launchpad.utils.formatter import high_intent_rate, render_blueprint, write_blueprint


# --- render_blueprint (pure function) ---

class TestRenderBlueprint:
    def test_all_sections_present(self, populated_state):
        md = render_blueprint(populated_state)
        assert md.startswith("# Startup Validation Blueprint")
        assert "**Current phase:** MVP build" in md
        assert "## Niche\n\nstudents" in md
        assert "## Idea\n\nflashcard app" in md
        assert "## D3 Analysis" in md
        assert "## Fake Demo Script" in md
        assert "## MVP Plan & Prototype" in md

    def test_demand_table(self, populated_state):
        md = render_blueprint(populated_state)
        assert "| Total comments | 120 |" in md
        assert "| High-intent comments | 15 |" in md
        assert "| High-intent rate | 12% |" in md
        assert "**Feedback:** several asked where to download" in md

    def test_verdict_heading_reflects_gate(self, populated_state):
        assert "## Demand Verdict — GO" in render_blueprint(populated_state)
        populated_state["is_go"] = False
        assert "## Demand Verdict — NO GO" in render_blueprint(populated_state)

    def test_empty_state_gracefully(self, base_state):
        md = render_blueprint(base_state)
        assert "**Current phase:** Idea & D3 check" in md
        assert "## Idea" not in md
        assert "## Demand Signal" not in md

    def test_rate_omitted_without_comments(self, base_state):
        base_state["demand_data"]["wants"] = 4
        md = render_blueprint(base_state)
        assert "| High-intent comments | 4 |" in md
        assert "High-intent rate" not in md


class TestHighIntentRate:
    def test_rate(self):
        assert high_intent_rate(200, 20) == 0.1

    def test_zero_comments(self):
        assert high_intent_rate(0, 5) is None

    def test_wants_above_comments_not_clamped(self):
        assert high_intent_rate(2, 4) == 2.0


# --- write_blueprint ---

class TestWriteBlueprint:
    def test_writes_to_configured_path(self, populated_state, mock_config):
        path = write_blueprint(populated_state)
        assert str(path) == mock_config["output_path"]
        assert path.read_text(encoding="utf-8") == render_blueprint(populated_state)

    def test_explicit_path_and_overwrite(self, populated_state, base_state, tmp_path, mock_config):
        target = tmp_path / "nested" / "plan.md"
        write_blueprint(populated_state, target)
        write_blueprint(base_state, target)
        assert "flashcard app" not in target.read_text(encoding="utf-8")
