"""
Text normalization for field comparison.

Field values arrive as arbitrary JSON scalars (or nested values) and are
canonicalized into lower-case strings of letters, numbers and single spaces
before any similarity metric is applied.
"""

from __future__ import annotations

import json
import re
from typing import Any

_WHITESPACE_RE = re.compile(r"\s+")


def coerce_text(value: Any) -> str:
    """
    Coerce a field value to text.

    Strings pass through unchanged. Everything else is rendered as JSON,
    so booleans become "true"/"false" and None becomes "null".
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def _is_kept(char: str) -> bool:
    # Letters of any script (Han, Hiragana and Katakana included), numbers, whitespace
    return char.isalpha() or char.isnumeric() or char.isspace()


def normalize_text(value: Any) -> str:
    """
    Normalize a field value for comparison.

    Lower-cases, strips punctuation and symbols, and collapses whitespace.

    Example:
        >>> normalize_text("  John   SMITH, Jr. ")
        'john smith jr'
        >>> normalize_text("東京都・新宿区")
        '東京都新宿区'
    """
    text = coerce_text(value).lower()
    text = "".join(ch for ch in text if _is_kept(ch))
    return _WHITESPACE_RE.sub(" ", text).strip()
