"""Markdown code-fence removal for model answers."""

from __future__ import annotations

import re

# Opening ```json (with its newline) and any bare ``` anywhere in the text.
_FENCE_RE = re.compile(r"```json\n?|```")


def strip_code_fences(text: str) -> str:
    """Return *text* without Markdown fence markers, trimmed.

    Models sometimes wrap JSON in ```json ... ``` despite being told to
    answer with bare JSON.
    """
    return _FENCE_RE.sub("", text).strip()
