from __future__ import annotations

import re

_THINK_TAG_RE = re.compile(r"<think>.*?</think>", flags=re.IGNORECASE | re.DOTALL)


def clean_generated_text(text: str | None) -> str:
    """
    Cleanup for text-generation outputs:
    - Remove <think>...</think> blocks (Qwen reasoning mode)
    - Trim surrounding whitespace
    """
    if not text:
        return ""

    return _THINK_TAG_RE.sub("", text).strip()
