"""MVP agent — the "shameful but sellable" plan plus a single-file prototype.

Runs on the pro tier. The embedded HTML is returned inside the text untouched;
utils.parsing.extract_code_block can pull it out for download.
"""

import sys

from launchpad.config import get_config
from launchpad.utils.llm import ask

MVP_FALLBACK = "Something went wrong while generating the MVP plan."

MVP_PROMPT = """\
Role: You are an MVP Architect & Monetization Strategist.
Task: Define the "Shameful but Sellable" MVP for this validated idea.

Idea: {idea}
Context/Validation: {analysis}

Requirements:
1. Core Loop: Define the SINGLE feature that delivers value. Max 3 screens.
2. Paywall Strategy: How to charge from Day 1.
3. Tech Stack: HTML/Tailwind/JS.

IMPORTANT:
After the plan (Write the plan **IN {language} LANGUAGE**), provide a SINGLE-FILE HTML CODE BLOCK that implements a functional prototype of this MVP.
The code should be a complete 'index.html' with embedded CSS/JS.
The UI text inside the code should be in **{language} LANGUAGE**.
It should look modern (use Tailwind via CDN) and demonstrate the core interaction.

Format:
[Strategy Text in {language_title}]

```html
[Code Here]
```
"""


def generate_mvp_plan(idea: str, analysis: str) -> str:
    """Return the MVP strategy followed by one ```html prototype block."""
    language = get_config().get("output_language", "English")
    prompt = MVP_PROMPT.format(
        idea=idea,
        analysis=analysis,
        language=language.upper(),
        language_title=language,
    )
    try:
        text = ask(prompt, tier="pro")
    except Exception as exc:
        print(f"[Launchpad] MVP plan generation failed: {exc!r}", file=sys.stderr)
        return MVP_FALLBACK
    return text or MVP_FALLBACK
