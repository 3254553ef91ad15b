"""Ideation agents — idea generation and the D3 critique.

Both calls return the model's text as-is; on any failure the user sees a
fallback message instead of an exception.
"""

import sys

from launchpad.config import get_config
from launchpad.utils.llm import ask

CONNECTION_FALLBACK = "Could not reach the AI service. Please try again."
IDEAS_FALLBACK = "Something went wrong while generating ideas."
ANALYSIS_FALLBACK = "Something went wrong while analyzing the idea."

# Shared by the generator and the critic so both judge ideas the same way.
D3_RUBRIC = """\
1. D1 - Demonstrable: Can it be understood instantly in a video without explanation?
2. D2 - Desirable: Does it touch a core human instinct (addiction, fear of missing out, control, improvement)?
3. D3 - Debatable: Will it cause people to comment (agree/disagree/want)?"""

IDEAS_PROMPT = """\
Role: You are a Viral Idea Generator.
Task: Generate 3 "Content-First" startup ideas for the niche: "{niche}".

Criteria:
- Must follow D3 (Demonstrable, Desirable, Debatable).
{rubric}
- Must be solvable with a simple MVP (3 screens max).
- Focus on "Painkiller" or "Addiction" apps.

Output format:
Provide 3 distinct ideas **IN {language} LANGUAGE**. Use **Bold** for titles.
"""

ANALYSIS_PROMPT = """\
Role: You are a ruthless startup validator using the "D3 Formula" (Demonstrable, Desirable, Debatable).
Task: Analyze the following startup idea for a niche market.

Idea: {idea}
Niche: {niche}

Criteria:
{rubric}

Output: Provide a bulleted critique **IN {language} LANGUAGE**. End with a score (0-10) on potential virality.
"""


def _language() -> str:
    return get_config().get("output_language", "English").upper()


def generate_ideas(niche: str) -> str:
    """Suggest three D3-compliant startup ideas for a niche.

    An empty niche falls back to ``default_niche`` from config.
    """
    config = get_config()
    prompt = IDEAS_PROMPT.format(
        niche=niche or config.get("default_niche", "General Mass Market"),
        rubric=D3_RUBRIC,
        language=_language(),
    )
    try:
        text = ask(prompt, tier="fast")
    except Exception as exc:
        print(f"[Launchpad] Idea generation failed: {exc!r}", file=sys.stderr)
        return CONNECTION_FALLBACK
    return text or IDEAS_FALLBACK


def analyze_idea(idea: str, niche: str) -> str:
    """Critique an idea against the D3 formula and score its virality.

    The caller is responsible for passing a non-empty idea and niche.
    """
    prompt = ANALYSIS_PROMPT.format(
        idea=idea,
        niche=niche,
        rubric=D3_RUBRIC,
        language=_language(),
    )
    try:
        text = ask(prompt, tier="fast")
    except Exception as exc:
        print(f"[Launchpad] D3 analysis failed: {exc!r}", file=sys.stderr)
        return CONNECTION_FALLBACK
    return text or ANALYSIS_FALLBACK
