"""Shared parsing and LLM utilities for agent responses."""

import re
import sys

import httpx
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception

_FENCE_RE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL)
_CODE_BLOCK_RE = re.compile(r"```([\w+-]*)[^\n]*\n(.*?)\n?\s*```", re.DOTALL)


def strip_fences(text: str) -> str:
    """Strip markdown code fences from LLM output if present."""
    match = _FENCE_RE.search(text)
    return match.group(1).strip() if match else text.strip()


def extract_code_block(text: str, language: str | None = "html") -> str | None:
    """Return the body of the first fenced code block tagged ``language``.

    With ``language=None`` the first fenced block of any language is returned.
    Returns None when the text has no matching block.
    """
    if not text:
        return None
    for match in _CODE_BLOCK_RE.finditer(text):
        tag, body = match.group(1).lower(), match.group(2)
        if language is None or tag == language.lower():
            return body.strip()
    return None


def response_text(response) -> str:
    """Return the text of a chat model response.

    Some models return content as a list of parts (strings or dicts with a
    "text" key) instead of a plain string; the text parts are concatenated.
    """
    content = getattr(response, "content", response)
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def _is_transient(exc: BaseException) -> bool:
    """Return True if the exception is a transient HTTP/network error worth retrying."""
    if isinstance(exc, httpx.TimeoutException):
        return True
    if isinstance(exc, httpx.ConnectError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code in (429, 500, 502, 503)
    return False


def invoke_with_retry(llm, messages, max_retries: int = 0):
    """Call llm.invoke(messages), retrying transient errors only when configured.

    ``llm_max_retries`` in config.yaml overrides ``max_retries``. At 0 (the
    default) the call is made exactly once. Non-transient errors (auth
    failures, bad requests) are always raised immediately.
    """
    from launchpad.config import get_config

    config = get_config()
    retries = config.get("llm_max_retries", max_retries)

    @retry(
        stop=stop_after_attempt(retries + 1),  # +1 because first attempt counts
        wait=wait_exponential(multiplier=1, min=2, max=16),
        retry=retry_if_exception(_is_transient),
        reraise=True,
        before_sleep=lambda state: print(
            f"[Launchpad] Transient error: {state.outcome.exception()!r}. "
            f"Retrying in {state.next_action.sleep:.0f}s "
            f"(attempt {state.attempt_number}/{retries})...",
            file=sys.stderr,
        ),
    )
    def _invoke():
        return llm.invoke(messages)

    return _invoke()
