"""Input validation for the wizard's form fields.

The gateway never validates; these checks run at the UI and CLI edges only.
"""

import math
import re

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def validate_input(text: str, field: str = "idea") -> str:
    """Validate that a form field is a non-empty string.

    Returns the stripped input on success.
    Raises ValueError if input is empty or whitespace-only.
    """
    if not isinstance(text, str) or not text.strip():
        raise ValueError(f"{field.capitalize()} must be a non-empty string.")
    return text.strip()


def parse_count(value) -> int:
    """Coerce a numeric form value to an int the way a number field does.

    A leading integer is kept ("12 comments" -> 12, "-3" -> -3); anything
    unparseable becomes 0. Negative values are not rejected.
    """
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT_RE.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else 0
