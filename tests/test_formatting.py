from __future__ import annotations

from gemini_chat.common.formatting import escape_fences, render_reply


def test_escape_fences_replaces_every_fence() -> None:
    text = "```python\nprint(1)\n```"
    assert escape_fences(text) == "'''python\nprint(1)\n'''"


def test_escape_fences_leaves_single_backticks() -> None:
    assert escape_fences("use `x` and ``y``") == "use `x` and ``y``"


def test_render_reply_wraps_in_newlines() -> None:
    assert render_reply("hi ```") == "\nhi '''\n"
    assert render_reply("") == "\n\n"
