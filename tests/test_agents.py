"""Tests for the gateway agents with a mocked model call."""

import json
from unittest.mock import patch

import httpx

from launchpad.agents import content, demand, ideation, mvp
from launchpad.agents.demand import (
    METRICS_DONE_FEEDBACK,
    METRICS_FALLBACK_FEEDBACK,
    VERDICT_FALLBACK,
    analyze_demand,
    extract_comment_metrics,
    is_go_verdict,
)


# ---------------------------------------------------------------------------
# is_go_verdict
# ---------------------------------------------------------------------------


class TestIsGoVerdict:
    def test_go_decision(self):
        assert is_go_verdict("This is a GO decision") is True

    def test_no_go_decision(self):
        assert is_go_verdict("This is a NO GO decision") is False

    def test_neither_token(self):
        assert is_go_verdict("Weak signal, pivot to a new niche.") is False

    def test_case_insensitive(self):
        assert is_go_verdict("decision: go") is True
        assert is_go_verdict("decision: no go") is False

    def test_no_go_anywhere_wins(self):
        assert is_go_verdict("GO for the niche, but overall NO GO.") is False

    def test_substring_heuristic_matches_inside_words(self):
        # Known weakness of the heuristic: "good" contains "go".
        assert is_go_verdict("Looks good") is True

    def test_empty_and_none(self):
        assert is_go_verdict("") is False
        assert is_go_verdict(None) is False


# ---------------------------------------------------------------------------
# extract_comment_metrics
# ---------------------------------------------------------------------------


class TestExtractCommentMetrics:
    @patch("launchpad.agents.demand.ask")
    def test_decodes_json(self, mock_ask, mock_config):
        mock_ask.return_value = json.dumps({
            "estimated_total_comments": 42,
            "high_intent_count": 7,
            "summary": "Many want a download link.",
        })
        result = extract_comment_metrics("link please\nwhere to buy")
        assert result == {"comments": 42, "wants": 7, "feedback": "Many want a download link."}

    @patch("launchpad.agents.demand.ask")
    def test_requests_json_mode_on_fast_tier(self, mock_ask, mock_config):
        mock_ask.return_value = "{}"
        extract_comment_metrics("text")
        _, kwargs = mock_ask.call_args
        assert kwargs == {"tier": "fast", "json_mode": True}

    @patch("launchpad.agents.demand.ask")
    def test_fenced_json_is_accepted(self, mock_ask, mock_config):
        mock_ask.return_value = '```json\n{"estimated_total_comments": 3, "high_intent_count": 1, "summary": "ok"}\n```'
        assert extract_comment_metrics("x") == {"comments": 3, "wants": 1, "feedback": "ok"}

    @patch("launchpad.agents.demand.ask", return_value="Sorry, I can't count these.")
    def test_malformed_output_yields_zeroed_record(self, _ask, mock_config, capsys):
        result = extract_comment_metrics("comments")
        assert result == {"comments": 0, "wants": 0, "feedback": METRICS_FALLBACK_FEEDBACK}
        assert "Comment metrics extraction failed" in capsys.readouterr().err

    @patch("launchpad.agents.demand.ask", return_value="[1, 2]")
    def test_non_object_json_yields_zeroed_record(self, _ask, mock_config):
        result = extract_comment_metrics("comments")
        assert result == {"comments": 0, "wants": 0, "feedback": METRICS_FALLBACK_FEEDBACK}

    @patch("launchpad.agents.demand.ask", return_value="{}")
    def test_missing_keys_default_to_zero(self, _ask, mock_config):
        result = extract_comment_metrics("comments")
        assert result == {"comments": 0, "wants": 0, "feedback": METRICS_DONE_FEEDBACK}

    @patch("launchpad.agents.demand.ask", return_value="")
    def test_empty_response_defaults(self, _ask, mock_config):
        assert extract_comment_metrics("comments")["comments"] == 0

    @patch("launchpad.agents.demand.ask", side_effect=httpx.ConnectError("down"))
    def test_call_failure_yields_zeroed_record(self, _ask, mock_config):
        result = extract_comment_metrics("comments")
        assert result == {"comments": 0, "wants": 0, "feedback": METRICS_FALLBACK_FEEDBACK}

    @patch("launchpad.agents.demand.ask", return_value="{}")
    def test_dump_is_truncated(self, mock_ask, mock_config):
        mock_config["comment_char_limit"] = 10
        extract_comment_metrics("A" * 10 + "B" * 50)
        prompt = mock_ask.call_args[0][0]
        assert '"' + "A" * 10 + '"' in prompt
        assert "B" not in prompt.split("Raw Data:")[1].split("Output JSON")[0]

    @patch("launchpad.agents.demand.ask")
    def test_wants_above_comments_passes_through(self, mock_ask, mock_config):
        mock_ask.return_value = json.dumps({"estimated_total_comments": 2, "high_intent_count": 9})
        result = extract_comment_metrics("x")
        assert result["comments"] == 2
        assert result["wants"] == 9


# ---------------------------------------------------------------------------
# analyze_demand
# ---------------------------------------------------------------------------


class TestAnalyzeDemand:
    @patch("launchpad.agents.demand.ask", return_value="12.5% high intent. Decision: GO")
    def test_go(self, mock_ask, mock_config):
        result = analyze_demand(120, 15, "several asked where to download")
        assert result == {"analysis": "12.5% high intent. Decision: GO", "is_go": True}
        prompt = mock_ask.call_args[0][0]
        assert "Total Comments: 120" in prompt
        assert '"I want this" requests: 15' in prompt
        assert "several asked where to download" in prompt

    @patch("launchpad.agents.demand.ask", return_value="Vanity metrics only. NO GO. Pivot.")
    def test_no_go(self, _ask, mock_config):
        assert analyze_demand(500, 3, "nice video")["is_go"] is False

    @patch("launchpad.agents.demand.ask", side_effect=RuntimeError("quota"))
    def test_failure_returns_fallback(self, _ask, mock_config, capsys):
        assert analyze_demand(1, 1, "") == {"analysis": VERDICT_FALLBACK, "is_go": False}
        assert "Demand analysis failed" in capsys.readouterr().err

    @patch("launchpad.agents.demand.ask", return_value="")
    def test_empty_response_is_not_go(self, _ask, mock_config):
        result = analyze_demand(1, 1, "")
        assert result["is_go"] is False
        assert result["analysis"] == VERDICT_FALLBACK


# ---------------------------------------------------------------------------
# Text agents
# ---------------------------------------------------------------------------


class TestIdeation:
    @patch("launchpad.agents.ideation.ask", return_value="1. **Cards**")
    def test_generate_ideas_uses_niche(self, mock_ask, mock_config):
        assert ideation.generate_ideas("students") == "1. **Cards**"
        prompt = mock_ask.call_args[0][0]
        assert 'niche: "students"' in prompt
        assert "IN THAI LANGUAGE" in prompt

    @patch("launchpad.agents.ideation.ask", return_value="ideas")
    def test_empty_niche_defaults(self, mock_ask, mock_config):
        ideation.generate_ideas("")
        assert 'niche: "General Mass Market"' in mock_ask.call_args[0][0]

    @patch("launchpad.agents.ideation.ask", return_value="- D1: yes\nScore: 7/10")
    def test_analyze_idea_passes_text_through(self, mock_ask, mock_config):
        assert ideation.analyze_idea("flashcard app", "students") == "- D1: yes\nScore: 7/10"
        prompt = mock_ask.call_args[0][0]
        assert "Idea: flashcard app" in prompt
        assert "Niche: students" in prompt
        assert "Demonstrable" in prompt
        assert mock_ask.call_args[1] == {"tier": "fast"}

    @patch("launchpad.agents.ideation.ask", side_effect=httpx.ConnectError("offline"))
    def test_analyze_idea_failure_fallback(self, _ask, mock_config):
        assert ideation.analyze_idea("a", "b") == ideation.CONNECTION_FALLBACK

    @patch("launchpad.agents.ideation.ask", return_value="")
    def test_empty_response_fallbacks(self, _ask, mock_config):
        assert ideation.analyze_idea("a", "b") == ideation.ANALYSIS_FALLBACK
        assert ideation.generate_ideas("b") == ideation.IDEAS_FALLBACK


class TestContent:
    @patch("launchpad.agents.content.ask", return_value="Scene 1: hook")
    def test_script(self, mock_ask, mock_config):
        assert content.generate_demo_script("flashcard app") == "Scene 1: hook"
        assert "Product Idea: flashcard app" in mock_ask.call_args[0][0]

    @patch("launchpad.agents.content.ask", side_effect=ValueError("bad"))
    def test_failure(self, _ask, mock_config):
        assert content.generate_demo_script("x") == content.SCRIPT_FALLBACK


class TestMvp:
    @patch("launchpad.agents.mvp.ask")
    def test_uses_pro_tier_and_passes_through(self, mock_ask, mock_config):
        mock_ask.return_value = "Plan\n```html\n<html></html>\n```"
        assert mvp.generate_mvp_plan("flashcard app", "GO") == "Plan\n```html\n<html></html>\n```"
        assert mock_ask.call_args[1] == {"tier": "pro"}
        prompt = mock_ask.call_args[0][0]
        assert "Idea: flashcard app" in prompt
        assert "Context/Validation: GO" in prompt
        assert "```html" in prompt

    @patch("launchpad.agents.mvp.ask", side_effect=RuntimeError("timeout"))
    def test_failure(self, _ask, mock_config, capsys):
        assert mvp.generate_mvp_plan("x", "y") == mvp.MVP_FALLBACK
        assert "MVP plan generation failed" in capsys.readouterr().err


def test_language_follows_config(mock_config):
    mock_config["output_language"] = "English"
    with patch("launchpad.agents.demand.ask", return_value="GO") as mock_ask:
        demand.analyze_demand(1, 1, "")
    prompt = mock_ask.call_args[0][0]
    assert "IN ENGLISH LANGUAGE" in prompt
    assert "suggest a pivot in English" in prompt
