"""Content agent — writes the fake-demo video script."""

import sys

from launchpad.config import get_config
from launchpad.utils.llm import ask

SCRIPT_FALLBACK = "Something went wrong while generating the script."

SCRIPT_PROMPT = """\
Role: You are a Viral Content Agent.
Task: Create a "Fake Demo" video script (Shorts/Reels/TikTok) to validate demand for this product.

Product Idea: {idea}

Guidelines:
- Hook: First 3 seconds must be visually arresting or controversial.
- Structure: Problem -> Agitation -> Solution (The "Fake" UI/Demo) -> Call to Action (Should we build this?).
- Vibe: Raw, authentic, not "salesy".
- Goal: Get comments like "I need this" or debates.

Output: A scene-by-scene script with visual cues and voiceover text **IN {language} LANGUAGE**.
Also include a brief "Story Board" description for the creator.
"""


def generate_demo_script(idea: str) -> str:
    """Return a scene-by-scene fake-demo script for the idea."""
    language = get_config().get("output_language", "English").upper()
    prompt = SCRIPT_PROMPT.format(idea=idea, language=language)
    try:
        text = ask(prompt, tier="fast")
    except Exception as exc:
        print(f"[Launchpad] Script generation failed: {exc!r}", file=sys.stderr)
        return SCRIPT_FALLBACK
    return text or SCRIPT_FALLBACK
