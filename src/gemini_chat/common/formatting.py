"""Terminal rendering helpers for model replies."""
from __future__ import annotations

FENCE = "```"
FENCE_ESCAPE = "'''"

def escape_fences(text: str) -> str:
    """
    Replace markdown code fences so they don't break terminal rendering.

    Args:
        text: Raw model text.
    """
    return text.replace(FENCE, FENCE_ESCAPE)

def render_reply(text: str) -> str:
    """
    Render a reply for printing.

    Args:
        text: Raw model text.

    Returns:
        Escaped text wrapped in one leading and one trailing newline.
    """
    return "\n" + escape_fences(text) + "\n"
