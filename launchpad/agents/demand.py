"""Demand agents — comment metrics extraction and the GO / NO GO verdict.

Required metrics output schema:
{
  "estimated_total_comments": "integer",
  "high_intent_count": "integer",
  "summary": "string"
}
"""

import json
import sys
from typing import TypedDict

from launchpad.config import get_config
from launchpad.state import DemandData
from launchpad.utils.llm import ask
from launchpad.utils.parsing import strip_fences
from launchpad.utils.validator import parse_count

METRICS_DONE_FEEDBACK = "AI analysis complete."
METRICS_FALLBACK_FEEDBACK = "Something went wrong while processing the comment text."
VERDICT_FALLBACK = "Something went wrong while analyzing demand."

DEFAULT_COMMENT_CHAR_LIMIT = 15_000

METRICS_PROMPT = """\
Role: You are a Sentiment Data Analyst.
Task: Analyze the following raw comment dump (or description of comments) from a video.

Raw Data:
"{raw_text}"

Output JSON ONLY:
{{
    "estimated_total_comments": number (count the lines or estimates based on text),
    "high_intent_count": number (count comments saying "I want this", "Download link?", "Need", "Take my money" or equivalents in other languages, e.g. Thai "ขอวาร์ป", "อยากได้", "ซื้อที่ไหน"),
    "summary": "string summary of the feedback in {language} language, max 2 sentences"
}}
"""

VERDICT_PROMPT = """\
Role: You are a Data Analyst Agent.
Task: Analyze the market response to a fake demo video.

Metrics:
- Total Comments: {comments}
- "I want this" requests: {wants}
- Qualitative Feedback Summary: {feedback}

Gate Criteria:
- Must have meaningful engagement, not just likes.
- >10% of comments should be high intent ("Build it!", "Take my money").

Output:
1. Analysis of the sentiment (Vanity metrics vs Real Demand) **IN {language} LANGUAGE**.
2. A clear "GO" or "NO GO" decision.
3. If NO GO, suggest a pivot in {language_title}.
"""


class DemandVerdict(TypedDict):
    analysis: str
    is_go: bool


def is_go_verdict(analysis: str) -> bool:
    """Decide the demand gate from the verdict narrative.

    True iff the text mentions "GO" and never "NO GO", case-insensitively.
    This is a substring heuristic: any word containing "go" counts.
    """
    text = (analysis or "").upper()
    return "GO" in text and "NO GO" not in text


def _fallback_metrics() -> DemandData:
    return {"comments": 0, "wants": 0, "feedback": METRICS_FALLBACK_FEEDBACK}


def _decode_metrics(text: str) -> DemandData:
    """Decode the metrics JSON. Raises ValueError if it is not a JSON object."""
    data = json.loads(strip_fences(text or "{}"))
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}.")
    return {
        "comments": parse_count(data.get("estimated_total_comments") or 0),
        "wants": parse_count(data.get("high_intent_count") or 0),
        "feedback": str(data.get("summary") or METRICS_DONE_FEEDBACK),
    }


def extract_comment_metrics(raw_text: str) -> DemandData:
    """Estimate comment counts and summarize a raw comment dump.

    The dump is truncated to ``comment_char_limit`` characters. Any failure,
    including a response that is not a JSON object, yields zero counts and a
    fallback feedback string.
    """
    config = get_config()
    limit = config.get("comment_char_limit", DEFAULT_COMMENT_CHAR_LIMIT)
    prompt = METRICS_PROMPT.format(
        raw_text=raw_text[:limit],
        language=config.get("output_language", "English"),
    )
    try:
        text = ask(prompt, tier="fast", json_mode=True)
        return _decode_metrics(text)
    except Exception as exc:
        print(f"[Launchpad] Comment metrics extraction failed: {exc!r}", file=sys.stderr)
        return _fallback_metrics()


def analyze_demand(comments: int, wants: int, feedback: str) -> DemandVerdict:
    """Judge the demand signal and return the narrative plus the gate decision."""
    language = get_config().get("output_language", "English")
    prompt = VERDICT_PROMPT.format(
        comments=comments,
        wants=wants,
        feedback=feedback,
        language=language.upper(),
        language_title=language,
    )
    try:
        text = ask(prompt, tier="fast")
    except Exception as exc:
        print(f"[Launchpad] Demand analysis failed: {exc!r}", file=sys.stderr)
        return {"analysis": VERDICT_FALLBACK, "is_go": False}

    return {"analysis": text or VERDICT_FALLBACK, "is_go": is_go_verdict(text)}
