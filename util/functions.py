# util/functions.py
from util.constants import ELLIPSIS, MAX_CONTEXT_CHARS


def clip_chars(text: str, max_chars: int = MAX_CONTEXT_CHARS) -> str:
    """
    - Trim `text` to at most `max_chars` characters, marker included.
    - Adds an ellipsis when trimming occurs.
    """
    if len(text) <= max_chars:
        return text
    return text[: max(0, max_chars - len(ELLIPSIS))] + ELLIPSIS


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding ``` / ```json fence from a model reply."""
    raw = (raw or "").strip()
    if raw.startswith("```"):
        raw = raw.strip("`").strip()
        if raw.lower().startswith("json"):
            raw = raw[4:].strip()
    return raw
