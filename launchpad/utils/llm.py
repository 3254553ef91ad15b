"""Chat model construction for the two model tiers.

The fast tier handles critiques, scripts and comment analysis; the pro tier
is reserved for the MVP code-generation call.
"""

from typing import Literal

from langchain_anthropic import ChatAnthropic
from langchain_google_genai import ChatGoogleGenerativeAI

from launchpad.config import get_config
from launchpad.utils.parsing import invoke_with_retry, response_text

Tier = Literal["fast", "pro"]

VALID_PROVIDERS = {"google", "anthropic"}


def build_llm(tier: Tier = "fast", json_mode: bool = False):
    """Return a LangChain chat model for the configured provider and tier.

    The client's own retry loop is disabled; retries, if any, are driven by
    invoke_with_retry so they stay under ``llm_max_retries``.
    """
    config = get_config()
    provider = config.get("llm_provider", "google")
    model_name = config["pro_model"] if tier == "pro" else config["fast_model"]
    timeout = config.get("request_timeout")

    if provider == "google":
        kwargs = {"model": model_name, "timeout": timeout, "max_retries": 0}
        if json_mode:
            kwargs["response_mime_type"] = "application/json"
        return ChatGoogleGenerativeAI(**kwargs)

    if provider == "anthropic":
        # No native JSON mode; the prompt alone asks for JSON.
        return ChatAnthropic(model=model_name, timeout=timeout, max_retries=0)

    raise ValueError(
        f"Unknown llm_provider '{provider}'. Must be one of: {VALID_PROVIDERS}"
    )


def ask(prompt: str, tier: Tier = "fast", json_mode: bool = False) -> str:
    """Send a single user prompt and return the response text.

    Errors propagate; the agents decide what the user sees on failure.
    """
    llm = build_llm(tier=tier, json_mode=json_mode)
    response = invoke_with_retry(llm, [{"role": "user", "content": prompt}])
    return response_text(response)
